"""Conversion of host amounts into Adyen minor-unit amounts.

@link https://docs.adyen.com/development-resources/currency-codes
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Dict

from .errors import InvalidAmount
from .host import Money
from .models import Amount

# Adyen amounts are Java longs.
MAX_MINOR_UNITS = 2 ** 63 - 1

_ZERO_DECIMAL = (
    "CVE", "DJF", "GNF", "IDR", "JPY", "KMF", "KRW", "PYG", "RWF", "UGX",
    "VND", "VUV", "XAF", "XOF", "XPF",
)

_THREE_DECIMAL = ("BHD", "IQD", "JOD", "KWD", "LYD", "OMR", "TND")

_TWO_DECIMAL = (
    "AED", "AFN", "ALL", "AMD", "ANG", "AOA", "ARS", "AUD", "AWG", "AZN",
    "BAM", "BBD", "BDT", "BGN", "BMD", "BND", "BOB", "BRL", "BSD", "BTN",
    "BWP", "BYN", "BZD", "CAD", "CHF", "CLP", "CNY", "COP", "CRC", "CUP",
    "CZK", "DKK", "DOP", "DZD", "EGP", "ETB", "EUR", "FJD", "FKP", "GBP",
    "GEL", "GHS", "GIP", "GMD", "GTQ", "GYD", "HKD", "HNL", "HTG", "HUF",
    "ILS", "INR", "ISK", "JMD", "KES", "KGS", "KHR", "KYD", "KZT", "LAK",
    "LBP", "LKR", "LRD", "LSL", "MAD", "MDL", "MKD", "MMK", "MNT", "MOP",
    "MRU", "MUR", "MVR", "MWK", "MXN", "MYR", "MZN", "NAD", "NGN", "NIO",
    "NOK", "NPR", "NZD", "PAB", "PEN", "PGK", "PHP", "PKR", "PLN", "QAR",
    "RON", "RSD", "RUB", "SAR", "SBD", "SCR", "SEK", "SGD", "SHP", "SLE",
    "SOS", "SRD", "STN", "SVC", "SZL", "THB", "TOP", "TRY", "TTD", "TWD",
    "TZS", "UAH", "USD", "UYU", "UZS", "VES", "WST", "XCD", "YER", "ZAR",
    "ZMW",
)

MINOR_UNITS: Dict[str, int] = {
    **{code: 0 for code in _ZERO_DECIMAL},
    **{code: 2 for code in _TWO_DECIMAL},
    **{code: 3 for code in _THREE_DECIMAL},
}


def get_minor_units(currency: str) -> int:
    """Return the number of decimals Adyen uses for ``currency``.

    Raises:
        InvalidAmount: If the currency is not a known ISO 4217 code.
    """
    try:
        return MINOR_UNITS[currency.upper()]
    except KeyError:
        raise InvalidAmount(f"Unsupported currency '{currency}'") from None


def transform(money: Money) -> Amount:
    """Convert a host amount in major units to an Adyen ``Amount``.

    Values are rounded half-up to the currency's minor unit.

    Raises:
        InvalidAmount: Unknown currency, negative value or a value that
            overflows Adyen's 64-bit amount.
    """
    exponent = get_minor_units(money.currency)

    try:
        minor = (Decimal(money.value) * (Decimal(10) ** exponent)).quantize(
            Decimal(1), rounding=ROUND_HALF_UP
        )
    except InvalidOperation as e:
        raise InvalidAmount(f"Invalid amount '{money.value}'") from e

    if not minor.is_finite() or minor < 0:
        raise InvalidAmount(f"Invalid amount '{money.value}'")
    if minor > MAX_MINOR_UNITS:
        raise InvalidAmount(
            f"Amount {money.value} {money.currency} exceeds the maximum Adyen amount"
        )

    return Amount(value=int(minor), currency=money.currency.upper())
