"""Adyen gateway configuration."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import ConfigurationError

API_VERSION = "v41"


class Mode(str, Enum):
    """Adyen environment."""
    TEST = "test"
    LIVE = "live"


@dataclass(frozen=True)
class AdyenConfig:
    """Credentials and endpoints for one Adyen merchant account."""
    api_key: str
    merchant_account: str
    mode: Mode = Mode.TEST
    api_live_url_prefix: Optional[str] = None
    timeout: float = 30.0
    site_url: str = "http://localhost"
    default_locale: str = "en_US"

    def __post_init__(self):
        if not self.api_key:
            raise ConfigurationError("Adyen API key must be configured")
        if not self.merchant_account:
            raise ConfigurationError("Adyen merchant account must be configured")
        if self.mode == Mode.LIVE and not self.api_live_url_prefix:
            raise ConfigurationError("Live mode requires an API live URL prefix")

    @property
    def is_test(self) -> bool:
        return self.mode == Mode.TEST

    def get_api_url(self, endpoint: str) -> str:
        """Return the checkout API URL for an endpoint, e.g. ``payments/result``.

        Live endpoints are merchant specific:
        https://docs.adyen.com/development-resources/live-endpoints
        """
        if self.mode == Mode.LIVE:
            base = (
                f"https://{self.api_live_url_prefix}-checkout-live.adyenpayments.com"
                f"/checkout/{API_VERSION}/"
            )
        else:
            base = f"https://checkout-test.adyen.com/{API_VERSION}/"
        return base + endpoint.lstrip("/")

    @classmethod
    def from_env(cls) -> "AdyenConfig":
        """Build a configuration from ``ADYEN_*`` environment variables.

        Raises:
            ConfigurationError: If credentials are missing or the mode is unknown.
        """
        mode_value = os.getenv("ADYEN_MODE", Mode.TEST.value).lower()
        try:
            mode = Mode(mode_value)
        except ValueError as e:
            raise ConfigurationError(f"Unknown Adyen mode '{mode_value}'") from e

        timeout_value = os.getenv("ADYEN_TIMEOUT", "30")
        try:
            timeout = float(timeout_value)
        except ValueError as e:
            raise ConfigurationError(f"Invalid ADYEN_TIMEOUT '{timeout_value}'") from e

        return cls(
            api_key=os.getenv("ADYEN_API_KEY", ""),
            merchant_account=os.getenv("ADYEN_MERCHANT_ACCOUNT", ""),
            mode=mode,
            api_live_url_prefix=os.getenv("ADYEN_API_LIVE_URL_PREFIX") or None,
            timeout=timeout,
            site_url=os.getenv("ADYEN_SITE_URL", "http://localhost"),
            default_locale=os.getenv("ADYEN_DEFAULT_LOCALE", "en_US"),
        )
