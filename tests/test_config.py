"""Tests for configuration and checkout helpers."""

import os
from unittest.mock import patch

import pytest

from adyen_pay.checkout import get_context, script_url
from adyen_pay.config import AdyenConfig, Mode
from adyen_pay.errors import ConfigurationError


class TestAdyenConfig:
    """Tests for AdyenConfig."""

    def test_from_env(self):
        env = {
            "ADYEN_API_KEY": "AQE_env",
            "ADYEN_MERCHANT_ACCOUNT": "EnvMerchant",
            "ADYEN_MODE": "LIVE",
            "ADYEN_API_LIVE_URL_PREFIX": "abc-Demo",
            "ADYEN_TIMEOUT": "12.5",
            "ADYEN_SITE_URL": "https://shop.example.com",
        }
        with patch.dict(os.environ, env):
            config = AdyenConfig.from_env()

        assert config.api_key == "AQE_env"
        assert config.merchant_account == "EnvMerchant"
        assert config.mode == Mode.LIVE
        assert config.timeout == 12.5
        assert not config.is_test

    def test_missing_api_key(self):
        with patch.dict(os.environ, {"ADYEN_API_KEY": "", "ADYEN_MERCHANT_ACCOUNT": "M"}):
            with pytest.raises(ConfigurationError) as exc_info:
                AdyenConfig.from_env()
        assert "API key" in str(exc_info.value)

    def test_missing_merchant_account(self):
        with pytest.raises(ConfigurationError):
            AdyenConfig(api_key="key", merchant_account="")

    def test_live_requires_prefix(self):
        with pytest.raises(ConfigurationError):
            AdyenConfig(api_key="key", merchant_account="M", mode=Mode.LIVE)

    def test_unknown_mode(self):
        with patch.dict(os.environ, {"ADYEN_MODE": "staging"}):
            with pytest.raises(ConfigurationError):
                AdyenConfig.from_env()

    def test_invalid_timeout(self):
        with patch.dict(os.environ, {"ADYEN_TIMEOUT": "soon"}):
            with pytest.raises(ConfigurationError):
                AdyenConfig.from_env()

    def test_test_api_url(self, config):
        assert config.get_api_url("payments/result") == "https://checkout-test.adyen.com/v41/payments/result"


class TestCheckoutHelpers:
    """Tests for checkout script helpers."""

    def test_context(self):
        assert get_context(Mode.TEST) == "test"
        assert get_context(Mode.LIVE) == "live"

    def test_live_script_url(self):
        assert script_url(Mode.LIVE, "1.9.2") == (
            "https://checkoutshopper-live.adyen.com/checkoutshopper/assets/js/sdk/checkoutSDK.1.9.2.min.js"
        )
