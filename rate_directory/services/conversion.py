from __future__ import annotations

from dataclasses import dataclass
import logging

from rate_directory.services.money import format_2dp, parse_amount

from .directory import RateDirectory

"""Amount conversion over the rate directory.

Responsibilities:
    - Parse the raw amount before touching the store (InvalidAmount on failure).
    - Fetch the direct rate via RateDirectory.get_rate (RateNotFound if absent).
    - Format the result once, to exactly two decimals, in a single place.
"""

logger = logging.getLogger("rate_directory.conversion")


@dataclass(frozen=True)
class ConversionResult:
    origin: str
    destination: str
    amount: float
    rate: float
    result: str


def convert(
    directory: RateDirectory, origin: str, destination: str, raw_amount: str
) -> ConversionResult:
    amount = parse_amount(raw_amount)
    rate = directory.get_rate(origin, destination).rate
    result = format_2dp(amount * rate)
    logger.debug("converted %s %s -> %s %s", amount, origin, result, destination)
    return ConversionResult(
        origin=origin,
        destination=destination,
        amount=amount,
        rate=rate,
        result=result,
    )
