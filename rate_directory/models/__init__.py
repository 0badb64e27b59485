"""Pydantic domain models for the rate directory."""

from .constants import SUPPORTED_CURRENCIES, ORIGIN, DESTINATION  # re-export
from .rates import (
    RatePair,
    ExchangeRate,
    RateCreateIn,
    RateUpdateIn,
    RateOut,
    RateCreatedOut,
    RateChangedOut,
    ConversionOut,
)

__all__ = [
    "SUPPORTED_CURRENCIES",
    "ORIGIN",
    "DESTINATION",
    "RatePair",
    "ExchangeRate",
    "RateCreateIn",
    "RateUpdateIn",
    "RateOut",
    "RateCreatedOut",
    "RateChangedOut",
    "ConversionOut",
]
