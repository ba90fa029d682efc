"""Adyen checkout API (v41) request and response models.

Field names follow Adyen's documented JSON schema. Serialise with
``to_json()`` so optional fields that are not set are left out entirely.

@link https://docs.adyen.com/api-explorer/#/PaymentSetupAndVerificationService/v41/payments
@link https://docs.adyen.com/api-explorer/#/PaymentSetupAndVerificationService/v41/paymentSession
"""

import enum
from typing import Optional, Dict, Any, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AdyenModel(BaseModel):
    """Base for Adyen schema objects: camelCase on the wire, nulls omitted."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ResultCode(str, enum.Enum):
    AUTHORISED = "Authorised"
    CANCELLED = "Cancelled"
    ERROR = "Error"
    PENDING = "Pending"
    RECEIVED = "Received"
    REDIRECT_SHOPPER = "RedirectShopper"
    REFUSED = "Refused"


class Integration(str, enum.Enum):
    """Which Adyen integration a payment request targets."""
    API = "api"
    SESSION = "session"


class Amount(AdyenModel):
    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=0, description="Amount in minor units")
    currency: str = Field(..., min_length=3, max_length=3)


class Address(AdyenModel):
    model_config = ConfigDict(frozen=True)

    country: str
    city: Optional[str] = None
    house_number_or_name: Optional[str] = None
    postal_code: Optional[str] = None
    state_or_province: Optional[str] = None
    street: Optional[str] = None


class ShopperName(AdyenModel):
    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    infix: Optional[str] = None
    gender: Optional[str] = None


class DetailItem(AdyenModel):
    id: str
    name: str


class PaymentMethodDetail(AdyenModel):
    key: str
    type: str
    optional: Optional[bool] = None
    items: Optional[List[DetailItem]] = None


class PaymentMethod(AdyenModel):
    """Payment method as listed by ``paymentMethods`` or sent with ``payments``."""
    type: str
    name: Optional[str] = None
    details: Optional[List[PaymentMethodDetail]] = None


class PaymentMethodIDeal(PaymentMethod):
    """iDEAL payment method carrying the selected issuer id."""
    issuer: Optional[str] = None


class PaymentRequest(AdyenModel):
    """Request for the ``payments`` or ``paymentSession`` endpoint.

    Use ``PaymentRequest.api`` for the redirect (API) integration and
    ``PaymentRequest.session`` for the session (SDK) integration.
    """
    model_config = ConfigDict(frozen=True)

    integration: Integration = Field(..., exclude=True)

    amount: Amount
    merchant_account: str = Field(..., min_length=1)
    reference: str = Field(..., min_length=1, max_length=80)
    return_url: str = Field(..., min_length=1)

    billing_address: Optional[Address] = None
    channel: Optional[str] = None
    country_code: Optional[str] = None
    shopper_ip: Optional[str] = Field(default=None, alias="shopperIP")
    shopper_locale: Optional[str] = None
    shopper_name: Optional[ShopperName] = None
    shopper_reference: Optional[str] = None
    shopper_statement: Optional[str] = None
    telephone_number: Optional[str] = None

    # API integration
    payment_method: Optional[PaymentMethod] = None

    # Session integration
    origin: Optional[str] = None
    sdk_version: Optional[str] = None
    allowed_payment_methods: Optional[List[str]] = None

    @classmethod
    def api(
        cls,
        amount: Amount,
        merchant_account: str,
        reference: str,
        return_url: str,
        payment_method: PaymentMethod,
        **optional: Any,
    ) -> "PaymentRequest":
        return cls(
            integration=Integration.API,
            amount=amount,
            merchant_account=merchant_account,
            reference=reference,
            return_url=return_url,
            payment_method=payment_method,
            **optional,
        )

    @classmethod
    def session(
        cls,
        amount: Amount,
        merchant_account: str,
        reference: str,
        return_url: str,
        country_code: Optional[str] = None,
        **optional: Any,
    ) -> "PaymentRequest":
        return cls(
            integration=Integration.SESSION,
            amount=amount,
            merchant_account=merchant_account,
            reference=reference,
            return_url=return_url,
            country_code=country_code,
            **optional,
        )

    def to_json(self) -> Dict[str, Any]:
        # Subclass fields (e.g. the iDEAL issuer) are dumped as their own type.
        return self.model_dump(
            by_alias=True, exclude_none=True, mode="json", serialize_as_any=True
        )


class Redirect(AdyenModel):
    url: str
    method: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


class PaymentResponse(AdyenModel):
    psp_reference: str
    result_code: Optional[str] = None
    redirect: Optional[Redirect] = None


class PaymentSessionResponse(AdyenModel):
    payment_session: str = Field(..., min_length=1)


class PaymentResultRequest(AdyenModel):
    payload: str = Field(..., min_length=1)


class PaymentResultResponse(AdyenModel):
    result_code: str
    psp_reference: Optional[str] = None
    merchant_reference: Optional[str] = None
    payment_method: Optional[str] = None
    shopper_locale: Optional[str] = None


class PaymentMethodsRequest(AdyenModel):
    merchant_account: str
    country_code: Optional[str] = None
    amount: Optional[Amount] = None
    channel: Optional[str] = None


class PaymentMethodsResponse(AdyenModel):
    payment_methods: List[PaymentMethod] = Field(default_factory=list)


class ErrorResponse(AdyenModel):
    status: int
    error_code: str
    message: str
    error_type: Optional[str] = None
    psp_reference: Optional[str] = None
