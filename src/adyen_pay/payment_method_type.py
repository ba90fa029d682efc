"""Mapping between host payment methods and Adyen payment method types.

@link https://docs.adyen.com/developers/payment-methods/payment-methods-overview
"""

from typing import Dict, Optional

from .host import CoreMethod

BANCONTACT = "bcmc"
DIRECT_DEBIT = "sepadirectdebit"
DIRECT_EBANKING = "directEbanking"
GIROPAY = "giropay"
IDEAL = "ideal"
MAESTRO = "maestro"
SCHEME = "scheme"

_CORE_TO_ADYEN: Dict[str, str] = {
    CoreMethod.BANCONTACT.value: BANCONTACT,
    CoreMethod.CREDIT_CARD.value: SCHEME,
    CoreMethod.DIRECT_DEBIT.value: DIRECT_DEBIT,
    CoreMethod.GIROPAY.value: GIROPAY,
    CoreMethod.IDEAL.value: IDEAL,
    CoreMethod.MAESTRO.value: MAESTRO,
    CoreMethod.SOFORT.value: DIRECT_EBANKING,
}

_ADYEN_TO_CORE: Dict[str, str] = {v: k for k, v in _CORE_TO_ADYEN.items()}

# Types paid through the ``payments`` endpoint with a redirect, everything
# else goes through a payment session and the checkout SDK.
API_INTEGRATION_TYPES = frozenset([IDEAL, DIRECT_EBANKING])


def transform(method: Optional[str]) -> Optional[str]:
    """Return the Adyen type for a host method, or None when there is none."""
    if method is None:
        return None
    if isinstance(method, CoreMethod):
        method = method.value
    return _CORE_TO_ADYEN.get(method)


def to_core(adyen_type: Optional[str]) -> Optional[str]:
    """Return the host method for an Adyen type, or None when unknown."""
    if adyen_type is None:
        return None
    return _ADYEN_TO_CORE.get(adyen_type)


def is_api_integration(adyen_type: Optional[str]) -> bool:
    return adyen_type in API_INTEGRATION_TYPES
