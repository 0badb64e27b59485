from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field


@dataclass(frozen=True)
class RatePair:
    """Ordered (origin, destination) pair that already passed validation."""

    origin: str
    destination: str


class ExchangeRate(BaseModel):
    id: int
    origin: str
    destination: str
    rate: float
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row) -> "ExchangeRate":
        return cls(**dict(row))


class RateCreateIn(BaseModel):
    """Body for POST /api/tasas; legacy ``divisa_*`` field names are accepted."""

    # Untyped and optional: missing or non-string codes reach the directory,
    # which answers invalid_currency (400) rather than a schema error.
    origin: Any = Field(
        None, validation_alias=AliasChoices("origin", "divisa_origen")
    )
    destination: Any = Field(
        None, validation_alias=AliasChoices("destination", "divisa_destino")
    )
    rate: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("rate", "tasa_cambio"),
        description="Destination units per 1 unit of origin",
    )


class RateUpdateIn(BaseModel):
    rate: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("rate", "tasa_cambio"),
    )


class RateOut(BaseModel):
    origin: str
    destination: str
    rate: float


class RateCreatedOut(BaseModel):
    status: str = "ok"
    message: str
    rate: ExchangeRate


class RateChangedOut(BaseModel):
    status: str = "ok"
    message: str
    affected: int


class ConversionOut(BaseModel):
    origin: str
    destination: str
    amount: float
    result: str
