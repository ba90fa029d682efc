"""Payment gateways."""

from .base import GatewayBase
from .adyen import AdyenGateway

__all__ = [
    "GatewayBase",
    "AdyenGateway",
]
