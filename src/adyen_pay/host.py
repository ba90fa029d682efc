"""Host-side payment records and capabilities consumed by the adapter.

The host framework owns the payment lifecycle and persistence. The adapter
receives a ``Payment`` by value and answers with a ``PaymentPatch`` that the
host applies to its own record.
"""

import enum
from decimal import Decimal
from typing import Optional, Dict, Any, List, Protocol

from pydantic import BaseModel, ConfigDict, Field


class PaymentStatus(str, enum.Enum):
    """Host payment statuses."""
    PENDING = "pending"
    AUTHORIZED = "authorized"
    REFUSED = "refused"
    CANCELLED = "cancelled"
    ERROR = "error"


TERMINAL_STATUSES = frozenset([
    PaymentStatus.AUTHORIZED,
    PaymentStatus.REFUSED,
    PaymentStatus.CANCELLED,
    PaymentStatus.ERROR,
])


class CoreMethod(str, enum.Enum):
    """Host payment method identifiers."""
    BANCONTACT = "bancontact"
    CREDIT_CARD = "credit_card"
    DIRECT_DEBIT = "direct_debit"
    GIROPAY = "giropay"
    IDEAL = "ideal"
    MAESTRO = "maestro"
    SOFORT = "sofort"


class Money(BaseModel):
    """Amount in major units, e.g. ``Decimal("10.00")`` EUR."""
    model_config = ConfigDict(frozen=True)

    value: Decimal
    currency: str


class Customer(BaseModel):
    model_config = ConfigDict(frozen=True)

    locale: Optional[str] = None
    ip_address: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    user_id: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class HostAddress(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: Optional[str] = None
    house_number: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    country_code: Optional[str] = None


class Payment(BaseModel):
    """Snapshot of the host's payment record."""
    model_config = ConfigDict(frozen=True)

    id: str
    total_amount: Money
    return_url: str
    method: Optional[str] = None
    issuer: Optional[str] = None
    description: Optional[str] = None
    customer: Optional[Customer] = None
    billing_address: Optional[HostAddress] = None
    pay_redirect_url: Optional[str] = None
    transaction_id: Optional[str] = None
    action_url: Optional[str] = None
    status: PaymentStatus = PaymentStatus.PENDING
    meta: Dict[str, Any] = Field(default_factory=dict)


class PaymentPatch(BaseModel):
    """Changes the adapter asks the host to apply to a payment.

    Unset fields mean "leave as is" and ``meta`` entries are merged.
    ``notes`` are messages for the host to record on its payment;
    ``apply`` does not store them since ``Payment`` has no notes.
    """
    transaction_id: Optional[str] = None
    action_url: Optional[str] = None
    status: Optional[PaymentStatus] = None
    meta: Dict[str, Any] = Field(default_factory=dict)
    notes: List[str] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return (
            self.transaction_id is None
            and self.action_url is None
            and self.status is None
            and not self.meta
            and not self.notes
        )

    def apply(self, payment: Payment) -> Payment:
        """Return a copy of ``payment`` with this patch applied."""
        update: Dict[str, Any] = {}
        if self.transaction_id is not None:
            update["transaction_id"] = self.transaction_id
        if self.action_url is not None:
            update["action_url"] = self.action_url
        if self.status is not None:
            update["status"] = self.status
        if self.meta:
            update["meta"] = {**payment.meta, **self.meta}
        return payment.model_copy(update=update)


class LocaleProvider(Protocol):
    def current_locale(self) -> str:
        ...


class SiteUrls(Protocol):
    def home_url(self) -> str:
        ...

    def rest_url(self, path: str) -> str:
        ...


class StaticLocale:
    """LocaleProvider returning a fixed site locale."""

    def __init__(self, locale: str):
        self._locale = locale

    def current_locale(self) -> str:
        return self._locale


class StaticSite:
    """SiteUrls rooted at a fixed base URL."""

    def __init__(self, base_url: str, rest_prefix: str = ""):
        self._base_url = base_url.rstrip("/")
        prefix = rest_prefix.strip("/")
        self._rest_prefix = f"/{prefix}" if prefix else ""

    def home_url(self) -> str:
        return self._base_url

    def rest_url(self, path: str) -> str:
        return f"{self._base_url}{self._rest_prefix}/{path.lstrip('/')}"
