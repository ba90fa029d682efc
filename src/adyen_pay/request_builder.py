"""Build Adyen payment requests from host payments."""

import logging
import re
from typing import Optional, Dict, Any

from pydantic import ValidationError

from . import amount as amount_transformer
from . import payment_method_type
from .config import AdyenConfig
from .errors import InvalidRequest
from .host import Payment, LocaleProvider, SiteUrls, StaticLocale, StaticSite
from .models import (
    Address,
    PaymentMethod,
    PaymentMethodIDeal,
    PaymentRequest,
    ShopperName,
)

logger = logging.getLogger(__name__)

# Adyen checkout web SDK release used for session payments.
# @link https://docs.adyen.com/developers/checkout/web-sdk/release-notes-web-sdk
SDK_VERSION = "1.9.2"

CHANNEL_WEB = "Web"

_REGION = re.compile(r"^(?:[A-Za-z]{2}|\d{3})$")
_SCRIPT = re.compile(r"^[A-Za-z]{4}$")


def get_region(locale: Optional[str]) -> Optional[str]:
    """Return the region subtag of a locale (``nl_NL`` -> ``NL``).

    Returns None when the locale is empty or carries no region.
    """
    if not locale:
        return None
    # Drop encoding and modifier parts, e.g. ``de_DE.UTF-8@euro``.
    locale = re.split(r"[.@]", locale, maxsplit=1)[0]
    subtags = re.split(r"[-_]", locale)
    for subtag in subtags[1:3]:
        if _SCRIPT.match(subtag):
            continue
        if _REGION.match(subtag):
            return subtag.upper()
        break
    return None


def complement(payment: Payment) -> Dict[str, Any]:
    """Optional shopper fields available on the host payment.

    Only fields that are present are returned.
    """
    fields: Dict[str, Any] = {"channel": CHANNEL_WEB}

    if payment.description:
        fields["shopper_statement"] = payment.description

    customer = payment.customer
    if customer is not None:
        if customer.ip_address:
            fields["shopper_ip"] = customer.ip_address
        if customer.locale:
            fields["shopper_locale"] = customer.locale
        if customer.user_id:
            fields["shopper_reference"] = customer.user_id
        if customer.phone:
            fields["telephone_number"] = customer.phone
        if customer.first_name and customer.last_name:
            fields["shopper_name"] = ShopperName(
                first_name=customer.first_name,
                last_name=customer.last_name,
            )

    address = payment.billing_address
    if address is not None and address.country_code:
        fields["billing_address"] = Address(
            country=address.country_code,
            city=address.city,
            house_number_or_name=address.house_number,
            postal_code=address.postal_code,
            state_or_province=address.region,
            street=address.street,
        )

    return fields


class RequestBuilder:
    """Select the integration for a payment and build the matching request."""

    def __init__(
        self,
        config: AdyenConfig,
        locale_provider: Optional[LocaleProvider] = None,
        site_urls: Optional[SiteUrls] = None,
        sdk_version: str = SDK_VERSION,
    ):
        self.config = config
        self.locale_provider = locale_provider or StaticLocale(config.default_locale)
        self.site_urls = site_urls or StaticSite(config.site_url)
        self.sdk_version = sdk_version

    def get_country_code(self, payment: Payment) -> Optional[str]:
        if payment.customer is not None:
            locale = payment.customer.locale
        else:
            locale = self.locale_provider.current_locale()
        return get_region(locale)

    def build(self, payment: Payment) -> PaymentRequest:
        """Build the ``payments`` or ``paymentSession`` request for a payment.

        Raises:
            InvalidAmount: If the total amount cannot be converted.
            InvalidRequest: If the payment breaks Adyen's field constraints,
                e.g. a reference longer than 80 characters.
        """
        amount = amount_transformer.transform(payment.total_amount)
        method_type = payment_method_type.transform(payment.method)
        country_code = self.get_country_code(payment)
        optional = complement(payment)

        try:
            if payment_method_type.is_api_integration(method_type):
                if method_type == payment_method_type.IDEAL:
                    payment_method: PaymentMethod = PaymentMethodIDeal(
                        type=method_type, issuer=payment.issuer
                    )
                else:
                    payment_method = PaymentMethod(type=method_type)

                logger.info(f"Building API payment request for payment {payment.id} ({method_type})")
                return PaymentRequest.api(
                    amount,
                    self.config.merchant_account,
                    str(payment.id),
                    payment.return_url,
                    payment_method,
                    country_code=country_code,
                    **optional,
                )

            logger.info(f"Building payment session request for payment {payment.id}")
            return PaymentRequest.session(
                amount,
                self.config.merchant_account,
                str(payment.id),
                payment.return_url,
                country_code,
                origin=self.site_urls.home_url(),
                sdk_version=self.sdk_version,
                allowed_payment_methods=[method_type] if method_type is not None else None,
                **optional,
            )
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            logger.error(f"Invalid Adyen request for payment {payment.id}: {fields}")
            raise InvalidRequest(f"Payment {payment.id} is not a valid Adyen request: {fields}") from e
