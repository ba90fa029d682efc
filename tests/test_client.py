"""Tests for the Adyen HTTP client."""

import httpx
import pytest

from adyen_pay.client import AdyenClient
from adyen_pay.config import AdyenConfig, Mode
from adyen_pay.errors import ApiError, DecodeError, TransportError
from adyen_pay.models import (
    Amount,
    PaymentMethod,
    PaymentRequest,
    PaymentResultRequest,
)


@pytest.fixture
def api_request():
    return PaymentRequest.api(
        Amount(value=1000, currency="EUR"),
        "TestMerchant",
        "1001",
        "https://shop.example.com/return",
        PaymentMethod(type="directEbanking"),
    )


@pytest.fixture
def session_request():
    return PaymentRequest.session(
        Amount(value=1000, currency="EUR"),
        "TestMerchant",
        "1001",
        "https://shop.example.com/return",
        "NL",
        sdk_version="1.9.2",
    )


class TestRequests:
    """Tests for outgoing requests."""

    def test_create_payment(self, make_transport, make_client, api_request):
        transport = make_transport({
            "payments": {
                "pspReference": "8515131751004933",
                "resultCode": "RedirectShopper",
                "redirect": {"url": "https://test.adyen.com/hpp/redirect"},
            }
        })
        response = make_client(transport).create_payment(api_request)

        assert response.psp_reference == "8515131751004933"
        assert response.redirect.url == "https://test.adyen.com/hpp/redirect"

        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://checkout-test.adyen.com/v41/payments"
        assert request.headers["X-API-Key"] == "AQE_test_key"
        assert transport.calls("payments") == [api_request.to_json()]

    def test_create_payment_session(self, make_transport, make_client, session_request):
        transport = make_transport({"paymentSession": {"paymentSession": "eyJjaGVja291dFNo..."}})
        response = make_client(transport).create_payment_session(session_request)

        assert response.payment_session == "eyJjaGVja291dFNo..."
        assert transport.calls("paymentSession")[0]["countryCode"] == "NL"

    def test_get_payment_result(self, make_transport, make_client):
        transport = make_transport({
            "payments/result": {
                "pspReference": "8515131751004933",
                "resultCode": "Authorised",
                "merchantReference": "1001",
            }
        })
        result = make_client(transport).get_payment_result(PaymentResultRequest(payload="Ab02b4c0"))

        assert result.result_code == "Authorised"
        assert transport.calls("payments/result") == [{"payload": "Ab02b4c0"}]

    def test_get_payment_methods(self, make_transport, make_client, payment_methods_response):
        transport = make_transport({"paymentMethods": payment_methods_response})
        methods = make_client(transport).get_payment_methods()

        assert [m.type for m in methods] == ["ideal", "scheme", "directEbanking", "paypal"]
        assert methods[0].details[0].items[0].id == "1121"
        assert transport.calls("paymentMethods") == [{"merchantAccount": "TestMerchant"}]

    def test_wrong_request_shape(self, make_transport, make_client, api_request, session_request):
        client = make_client(make_transport({}))
        with pytest.raises(ValueError):
            client.create_payment(session_request)
        with pytest.raises(ValueError):
            client.create_payment_session(api_request)


class TestErrors:
    """Tests for the error taxonomy."""

    def test_network_failure(self, make_transport, make_client, api_request):
        transport = make_transport({"payments": httpx.ConnectError("connection refused")})
        with pytest.raises(TransportError) as exc_info:
            make_client(transport).create_payment(api_request)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout(self, make_transport, make_client, api_request):
        transport = make_transport({"payments": httpx.ReadTimeout("timed out")})
        with pytest.raises(TransportError):
            make_client(transport).create_payment(api_request)

    def test_api_error(self, make_transport, make_client, api_request):
        transport = make_transport({
            "payments": httpx.Response(422, json={
                "status": 422,
                "errorCode": "14_030",
                "message": "Return URL is missing.",
                "errorType": "validation",
            })
        })
        with pytest.raises(ApiError) as exc_info:
            make_client(transport).create_payment(api_request)

        error = exc_info.value
        assert error.status == 422
        assert error.code == "14_030"
        assert error.message == "Return URL is missing."
        assert error.error_type == "validation"

    def test_api_error_without_json_body(self, make_transport, make_client, api_request):
        transport = make_transport({"payments": httpx.Response(503, text="Service Unavailable")})
        with pytest.raises(ApiError) as exc_info:
            make_client(transport).create_payment(api_request)
        assert exc_info.value.code == "503"
        assert exc_info.value.message == "Service Unavailable"

    def test_decode_error_invalid_json(self, make_transport, make_client, api_request):
        transport = make_transport({"payments": httpx.Response(200, text="<html>")})
        with pytest.raises(DecodeError):
            make_client(transport).create_payment(api_request)

    def test_decode_error_schema_mismatch(self, make_transport, make_client, session_request):
        transport = make_transport({"paymentSession": {"unexpected": True}})
        with pytest.raises(DecodeError):
            make_client(transport).create_payment_session(session_request)

    def test_no_retries(self, make_transport, make_client, api_request):
        transport = make_transport({"payments": httpx.ConnectError("connection refused")})
        with pytest.raises(TransportError):
            make_client(transport).create_payment(api_request)
        assert len(transport.requests) == 1


class TestLifecycle:
    """Tests for client setup and teardown."""

    def test_live_endpoint(self, make_transport, api_request):
        config = AdyenConfig(
            api_key="AQE_live", merchant_account="LiveMerchant",
            mode=Mode.LIVE, api_live_url_prefix="1797a841fbb37ca7-AdyenDemo",
        )
        transport = make_transport({"payments": {"pspReference": "1"}})
        client = AdyenClient(config, http_client=httpx.Client(transport=httpx.MockTransport(transport)))
        client.create_payment(api_request)

        # httpx normalizes the host to lowercase
        assert transport.requests[0].url == httpx.URL(
            "https://1797a841fbb37ca7-AdyenDemo-checkout-live.adyenpayments.com/checkout/v41/payments"
        )

    def test_context_manager_closes_own_client(self, config):
        with AdyenClient(config) as client:
            http = client._http
        assert http.is_closed

    def test_injected_client_is_not_closed(self, config):
        http = httpx.Client()
        AdyenClient(config, http_client=http).close()
        assert not http.is_closed
        http.close()

    def test_sanitize_redacts_sensitive_fields(self, config):
        client = AdyenClient(config, http_client=httpx.Client())
        sanitized = client._sanitize({
            "reference": "1001",
            "shopperIP": "192.0.2.10",
            "nested": {"payload": "secret"},
        })
        assert sanitized == {"reference": "1001", "shopperIP": "***", "nested": {"payload": "***"}}
