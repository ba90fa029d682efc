# adyen_pay package
__version__ = "0.1.0"

from .config import AdyenConfig, Mode
from .errors import (
    AdyenError,
    ApiError,
    ConfigurationError,
    DecodeError,
    InvalidAmount,
    InvalidRequest,
    TransportError,
)
from .host import (
    Customer,
    HostAddress,
    Money,
    Payment,
    PaymentPatch,
    PaymentStatus,
    StaticLocale,
    StaticSite,
)
from .client import AdyenClient
from .request_builder import RequestBuilder
from .reconciler import ResultReconciler, PaymentState
from .connectors import AdyenGateway, GatewayBase
