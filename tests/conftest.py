"""Shared test fixtures and configuration."""

import json
import os
from decimal import Decimal
from typing import Any, Callable, Dict, List

import httpx
import pytest

# Set up test environment variables before importing modules
os.environ.setdefault("API_KEY", "test_api_key_12345")
os.environ.setdefault("RATE_LIMIT", "1000/minute")
os.environ.setdefault("ADYEN_API_KEY", "AQE_test_key")
os.environ.setdefault("ADYEN_MERCHANT_ACCOUNT", "TestMerchant")

from adyen_pay.client import AdyenClient
from adyen_pay.config import AdyenConfig
from adyen_pay.connectors import AdyenGateway
from adyen_pay.host import Customer, HostAddress, Money, Payment, StaticLocale, StaticSite


class RecordingTransport:
    """httpx mock transport answering from a table of endpoint -> response."""

    def __init__(self, responses: Dict[str, Any]):
        self.responses = responses
        self.requests: List[httpx.Request] = []

    def endpoint(self, request: httpx.Request) -> str:
        return request.url.path.split("/v41/", 1)[1]

    def calls(self, endpoint: str) -> List[Dict[str, Any]]:
        return [
            json.loads(r.content)
            for r in self.requests
            if self.endpoint(r) == endpoint
        ]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses[self.endpoint(request)]
        if isinstance(response, Exception):
            raise response
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, json=response)


@pytest.fixture
def config() -> AdyenConfig:
    return AdyenConfig(
        api_key="AQE_test_key",
        merchant_account="TestMerchant",
        site_url="https://shop.example.com",
    )


@pytest.fixture
def make_transport() -> Callable[[Dict[str, Any]], RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def make_client(config) -> Callable[[RecordingTransport], AdyenClient]:
    def factory(transport: RecordingTransport) -> AdyenClient:
        return AdyenClient(config, http_client=httpx.Client(transport=httpx.MockTransport(transport)))
    return factory


@pytest.fixture
def make_gateway(config, make_client):
    def factory(transport: RecordingTransport) -> AdyenGateway:
        return AdyenGateway(
            config,
            client=make_client(transport),
            locale_provider=StaticLocale("nl_NL"),
            site_urls=StaticSite("https://shop.example.com", rest_prefix="wp-json"),
        )
    return factory


@pytest.fixture
def customer() -> Customer:
    return Customer(
        locale="nl_NL",
        ip_address="192.0.2.10",
        first_name="Jan",
        last_name="Jansen",
        user_id="42",
        phone="+31201234567",
        email="jan@example.com",
    )


@pytest.fixture
def make_payment(customer) -> Callable[..., Payment]:
    def factory(**overrides: Any) -> Payment:
        data: Dict[str, Any] = {
            "id": "1001",
            "total_amount": Money(value=Decimal("10.00"), currency="EUR"),
            "return_url": "https://shop.example.com/return/1001",
            "description": "Order 1001",
            "customer": customer,
            "billing_address": HostAddress(
                street="Keizersgracht",
                house_number="1",
                postal_code="1015 CJ",
                city="Amsterdam",
                country_code="NL",
            ),
            "pay_redirect_url": "https://shop.example.com/pay/1001",
        }
        data.update(overrides)
        return Payment(**data)
    return factory


@pytest.fixture
def payment_methods_response() -> Dict[str, Any]:
    """paymentMethods response with an iDEAL issuer list."""
    return {
        "paymentMethods": [
            {
                "type": "ideal",
                "name": "iDEAL",
                "details": [
                    {
                        "key": "issuer",
                        "type": "select",
                        "items": [{"id": "1121", "name": "Test Bank"}],
                    }
                ],
            },
            {"type": "scheme", "name": "Credit Card"},
            {"type": "directEbanking", "name": "SofortÜberweisung"},
            {"type": "paypal", "name": "PayPal"},
        ]
    }
