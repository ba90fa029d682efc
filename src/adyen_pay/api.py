"""Reference HTTP API exposing the Adyen gateway to a host application.

The host keeps its own payment records: it posts a payment snapshot and
applies the returned patch.
"""

import logging
from functools import lru_cache
from typing import Optional, Dict, List

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from .auth import limiter, verify_api_key
from .checkout import CheckoutPage
from .config import AdyenConfig
from .connectors import AdyenGateway
from .errors import AdyenError, ApiError, DecodeError, InvalidAmount, InvalidRequest, TransportError
from .host import Payment, PaymentPatch, StaticSite
from .models import PaymentResultRequest, PaymentResultResponse

logger = logging.getLogger(__name__)

app = FastAPI(title="Adyen Gateway - Reference API")
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


@lru_cache(maxsize=1)
def get_gateway() -> AdyenGateway:
    config = AdyenConfig.from_env()
    return AdyenGateway(config, site_urls=StaticSite(config.site_url))


@app.exception_handler(AdyenError)
async def adyen_error_handler(request: Request, exc: AdyenError) -> JSONResponse:
    if isinstance(exc, InvalidAmount):
        status_code = 400
        detail = {"error": "invalid_amount", "message": str(exc)}
    elif isinstance(exc, InvalidRequest):
        status_code = 400
        detail = {"error": "invalid_request", "message": str(exc)}
    elif isinstance(exc, ApiError):
        status_code = 502
        detail = {"error": "adyen_error", "code": exc.code, "message": exc.message}
    elif isinstance(exc, TransportError):
        status_code = 504
        detail = {"error": "adyen_unreachable", "message": str(exc)}
    elif isinstance(exc, DecodeError):
        status_code = 502
        detail = {"error": "adyen_invalid_response", "message": str(exc)}
    else:
        status_code = 500
        detail = {"error": "adyen_error", "message": str(exc)}
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": detail})


class PaymentResultBody(BaseModel):
    payload: str = Field(..., min_length=1)


@app.get("/health")
def health() -> Dict[str, bool]:
    return {"ok": True}


@app.post("/payments/start", response_model=PaymentPatch)
def start_payment(
    payment: Payment,
    gateway: AdyenGateway = Depends(get_gateway),
    api_key: str = Depends(verify_api_key),
):
    """Start a payment; the patch carries the action URL to send the buyer to."""
    return gateway.start(payment)


@app.post("/payments/return", response_model=PaymentPatch)
def payment_return(
    payment: Payment,
    payload: Optional[str] = Query(None),
    gateway: AdyenGateway = Depends(get_gateway),
    api_key: str = Depends(verify_api_key),
):
    """Reconcile a payment with the ``payload`` the buyer returned with."""
    return gateway.update_status(payment, payload)


@app.post("/payments/checkout", response_model=CheckoutPage)
def checkout_page(
    payment: Payment,
    gateway: AdyenGateway = Depends(get_gateway),
    api_key: str = Depends(verify_api_key),
):
    """Script URL and configuration for rendering a session payment."""
    page = gateway.payment_redirect(payment)
    if page is None:
        raise HTTPException(status_code=404, detail="Payment has no Adyen payment session")
    return page


@app.post("/adyen/v1/payments/result", response_model=PaymentResultResponse)
def payment_result(
    body: PaymentResultBody,
    gateway: AdyenGateway = Depends(get_gateway),
):
    """Decode a result payload posted by the checkout script."""
    return gateway.client.get_payment_result(PaymentResultRequest(payload=body.payload))


@app.get("/payment-methods", response_model=List[str])
def payment_methods(
    gateway: AdyenGateway = Depends(get_gateway),
    api_key: str = Depends(verify_api_key),
):
    return gateway.get_available_payment_methods()


@app.get("/issuers")
def issuers(
    gateway: AdyenGateway = Depends(get_gateway),
    api_key: str = Depends(verify_api_key),
):
    return gateway.get_issuers()
