from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Request

from rate_directory.models.rates import (
    ExchangeRate,
    RateChangedOut,
    RateCreatedOut,
    RateCreateIn,
    RateOut,
    RatePair,
    RateUpdateIn,
)
from rate_directory.services.currency import valid_pair
from rate_directory.services.directory import RateDirectory

"""Rates router: CRUD over directed exchange-rate records.

Endpoints:
    - GET    /api/tasas                          -> list every record
    - GET    /api/tasas/{origin}/{destination}   -> single rate
    - POST   /api/tasas                          -> create {origin, destination, rate}
    - PUT    /api/tasas/{origin}/{destination}   -> replace rate {rate}
    - DELETE /api/tasas/{origin}/{destination}   -> remove the pair

Path-parameter routes validate both codes through ``valid_pair`` before the
directory is called. Domain errors propagate to the handlers in core.errors.
"""

router = APIRouter(prefix="/api/tasas", tags=["rates"])


def get_directory(request: Request) -> RateDirectory:
    return request.app.state.directory


@router.get("", response_model=List[ExchangeRate], summary="List all exchange rates")
def list_rates(directory: RateDirectory = Depends(get_directory)):
    return directory.list_rates()


@router.get(
    "/{origin}/{destination}",
    response_model=RateOut,
    summary="Get the exchange rate for a directed pair",
)
def get_rate(
    pair: RatePair = Depends(valid_pair),
    directory: RateDirectory = Depends(get_directory),
):
    record = directory.get_rate(pair.origin, pair.destination)
    return RateOut(origin=record.origin, destination=record.destination, rate=record.rate)


@router.post("", response_model=RateCreatedOut, summary="Add an exchange rate")
def create_rate(
    payload: RateCreateIn,
    directory: RateDirectory = Depends(get_directory),
):
    record = directory.create_rate(payload.origin, payload.destination, payload.rate)
    return RateCreatedOut(message="Exchange rate added", rate=record)


@router.put(
    "/{origin}/{destination}",
    response_model=RateChangedOut,
    summary="Replace the rate of an existing pair",
)
def update_rate(
    payload: RateUpdateIn,
    pair: RatePair = Depends(valid_pair),
    directory: RateDirectory = Depends(get_directory),
):
    affected = directory.update_rate(pair.origin, pair.destination, payload.rate)
    return RateChangedOut(message="Exchange rate updated", affected=affected)


@router.delete(
    "/{origin}/{destination}",
    response_model=RateChangedOut,
    summary="Delete the exchange rate of a pair",
)
def delete_rate(
    pair: RatePair = Depends(valid_pair),
    directory: RateDirectory = Depends(get_directory),
):
    affected = directory.delete_rate(pair.origin, pair.destination)
    return RateChangedOut(message="Exchange rate deleted", affected=affected)
