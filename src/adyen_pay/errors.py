"""Exceptions raised by the Adyen adapter."""

from typing import Optional


class AdyenError(Exception):
    """Base class for all adapter errors reported to the host."""


class ConfigurationError(AdyenError, ValueError):
    """Missing or invalid gateway configuration."""


class InvalidAmount(AdyenError, ValueError):
    """The payment amount cannot be expressed in Adyen minor units."""


class InvalidRequest(AdyenError, ValueError):
    """The payment cannot be expressed as a valid Adyen request."""


class TransportError(AdyenError):
    """Network failure or timeout while talking to Adyen."""


class DecodeError(AdyenError):
    """Adyen answered with a body that does not match the expected schema."""


class ApiError(AdyenError):
    """Adyen rejected the request.

    Attributes:
        status: HTTP status code of the response.
        code: Adyen ``errorCode`` (or the HTTP status when none was sent).
        message: Adyen error message.
        error_type: Adyen ``errorType``, e.g. ``validation`` or ``security``.
    """

    def __init__(
        self,
        status: int,
        code: str,
        message: str,
        error_type: Optional[str] = None,
    ):
        super().__init__(f"{code}: {message}")
        self.status = status
        self.code = code
        self.message = message
        self.error_type = error_type
