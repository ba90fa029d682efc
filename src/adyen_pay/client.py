"""HTTP client for the Adyen checkout API."""

import logging
from typing import Optional, Dict, Any, List, Type, TypeVar

import httpx
from pydantic import ValidationError

from .config import AdyenConfig
from .errors import ApiError, DecodeError, TransportError
from .models import (
    AdyenModel,
    ErrorResponse,
    Integration,
    PaymentMethod,
    PaymentMethodsRequest,
    PaymentMethodsResponse,
    PaymentRequest,
    PaymentResponse,
    PaymentResultRequest,
    PaymentResultResponse,
    PaymentSessionResponse,
)

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=AdyenModel)


class AdyenClient:
    """
    Thin client for the ``payments``, ``paymentSession``, ``payments/result``
    and ``paymentMethods`` endpoints. No retries are performed; a failed call
    raises and leaves retry policy to the caller.

    The underlying ``httpx.Client`` is safe to share between threads, so one
    ``AdyenClient`` can serve concurrent payments.
    """

    # Keys that never end up in debug logs
    SENSITIVE_FIELDS = frozenset([
        "billingAddress",
        "paymentSession",
        "payload",
        "shopperIP",
        "shopperName",
        "telephoneNumber",
    ])

    def __init__(self, config: AdyenConfig, http_client: Optional[httpx.Client] = None):
        self.config = config
        self._owns_http_client = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=config.timeout)

    def __enter__(self) -> "AdyenClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def _sanitize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        sanitized = {}
        for key, value in data.items():
            if key in self.SENSITIVE_FIELDS:
                sanitized[key] = "***"
            elif isinstance(value, dict):
                sanitized[key] = self._sanitize(value)
            else:
                sanitized[key] = value
        return sanitized

    def _raise_api_error(self, response: httpx.Response) -> None:
        try:
            error = ErrorResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            raise ApiError(
                status=response.status_code,
                code=str(response.status_code),
                message=response.text or response.reason_phrase,
            ) from None
        raise ApiError(
            status=response.status_code,
            code=error.error_code,
            message=error.message,
            error_type=error.error_type,
        )

    def _post(self, endpoint: str, data: Dict[str, Any], response_model: Type[ResponseT]) -> ResponseT:
        """POST ``data`` to an endpoint and decode the response.

        Raises:
            TransportError: Network failure or timeout.
            ApiError: Adyen answered with a non-2xx status.
            DecodeError: The response body does not match ``response_model``.
        """
        url = self.config.get_api_url(endpoint)
        logger.debug(f"Adyen request {endpoint}: {self._sanitize(data)}")

        try:
            response = self._http.post(
                url,
                json=data,
                headers={
                    "X-API-Key": self.config.api_key,
                    "Content-Type": "application/json",
                },
            )
        except httpx.HTTPError as e:
            logger.error(f"Adyen request {endpoint} failed: {e}")
            raise TransportError(f"Could not reach Adyen endpoint '{endpoint}': {e}") from e

        if not response.is_success:
            logger.error(f"Adyen endpoint {endpoint} returned HTTP {response.status_code}")
            self._raise_api_error(response)

        try:
            return response_model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            # ValidationError is a ValueError; both cover invalid JSON and schema mismatch
            logger.error(f"Could not decode Adyen {endpoint} response: {e}")
            raise DecodeError(f"Unexpected response from Adyen endpoint '{endpoint}'") from e

    def create_payment(self, request: PaymentRequest) -> PaymentResponse:
        """Create a payment through the API integration."""
        if request.integration != Integration.API:
            raise ValueError("create_payment requires an API integration request")
        return self._post("payments", request.to_json(), PaymentResponse)

    def create_payment_session(self, request: PaymentRequest) -> PaymentSessionResponse:
        """Create a payment session for the checkout SDK."""
        if request.integration != Integration.SESSION:
            raise ValueError("create_payment_session requires a session integration request")
        return self._post("paymentSession", request.to_json(), PaymentSessionResponse)

    def get_payment_result(self, request: PaymentResultRequest) -> PaymentResultResponse:
        """Decode the ``payload`` returned to the merchant after a payment."""
        return self._post("payments/result", request.to_json(), PaymentResultResponse)

    def get_payment_methods(self) -> List[PaymentMethod]:
        """List the payment methods enabled for the merchant account."""
        request = PaymentMethodsRequest(merchant_account=self.config.merchant_account)
        response = self._post("paymentMethods", request.to_json(), PaymentMethodsResponse)
        return response.payment_methods
