"""Domain constants for validation.

The supported set is fixed at import time; membership is an exact,
case-sensitive test.
"""

from typing import FrozenSet

SUPPORTED_CURRENCIES: FrozenSet[str] = frozenset(
    {
        "USD", "EUR", "GBP", "MXN", "JPY", "CAD", "AUD", "CHF", "CNY", "INR",
        "BRL", "CLP", "COP", "PEN", "VES", "RUB", "TRY", "ZAR", "SEK", "NOK",
        "DKK", "NZD", "SGD", "HKD", "KRW", "THB", "MYR", "IDR", "PHP", "SAR",
        "AED", "QAR", "KWD", "EGP", "NGN", "PLN", "CZK", "HUF", "ILS", "PKR",
        "BDT", "LKR", "VND", "KZT", "UAH", "BYN", "RSD", "HRK", "RON", "BGN",
    }
)

ORIGIN = "origin"
DESTINATION = "destination"
