"""Configuration handed to the browser-side Adyen checkout SDK."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .config import Mode

SCRIPT_URL = "https://checkoutshopper-{context}.adyen.com/checkoutshopper/assets/js/sdk/checkoutSDK.{version}.min.js"

# Path of the result endpoint below the site's REST root.
RESULT_PATH = "adyen/v1/payments/result"


def get_context(mode: Mode) -> str:
    return "test" if mode == Mode.TEST else "live"


def script_url(mode: Mode, sdk_version: str) -> str:
    """URL of the checkout SDK script for a mode and SDK version."""
    return SCRIPT_URL.format(context=get_context(mode), version=sdk_version)


class CheckoutModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConfigObject(CheckoutModel):
    context: str


class CheckoutConfig(CheckoutModel):
    """Object the checkout script reads to render the payment form."""
    payments_result_url: str
    payment_return_url: str
    payment_session: str
    config_object: ConfigObject


class CheckoutPage(CheckoutModel):
    script_url: str
    config: CheckoutConfig
