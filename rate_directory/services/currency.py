"""Currency validation.

``ensure_supported`` is a pure membership test reported in origin-then-
destination order. ``valid_pair`` wraps it as a FastAPI dependency so routes
with ``{origin}/{destination}`` path parameters reject unsupported codes before
the directory (and the store) is ever reached.
"""

from __future__ import annotations

from typing import AbstractSet

from fastapi import Path

from rate_directory.core.errors import InvalidCurrency
from rate_directory.models.constants import DESTINATION, ORIGIN, SUPPORTED_CURRENCIES
from rate_directory.models.rates import RatePair


def is_supported(code: object, supported: AbstractSet[str] = SUPPORTED_CURRENCIES) -> bool:
    return isinstance(code, str) and code in supported


def ensure_supported(
    origin: object,
    destination: object,
    supported: AbstractSet[str] = SUPPORTED_CURRENCIES,
) -> RatePair:
    if not is_supported(origin, supported):
        raise InvalidCurrency(ORIGIN, origin)
    if not is_supported(destination, supported):
        raise InvalidCurrency(DESTINATION, destination)
    return RatePair(origin=origin, destination=destination)  # type: ignore[arg-type]


def valid_pair(
    origin: str = Path(..., description="Origin currency code (e.g. USD)"),
    destination: str = Path(..., description="Destination currency code (e.g. EUR)"),
) -> RatePair:
    return ensure_supported(origin, destination)
