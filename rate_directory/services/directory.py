"""Rate directory: CRUD semantics over exchange-rate records.

Design:
- The store is injected (constructed once in ``create_app``) so tests can pass
  a store over a temporary database or a failing double.
- Each operation issues one store call. Store errors (``sqlite3.Error``, pool
  timeouts and a closed pool) are logged here with the operation name and
  re-raised as ``StoreFailure`` with a generic message; nothing is retried.
- Pairs are directed. ``get_rate`` never tries the inverse pair.
- ``create_rate`` does not check for an existing pair: duplicates may coexist
  and reads return the first one. Update/delete act on every matching row.
"""

from __future__ import annotations

from contextlib import contextmanager
import logging
import sqlite3
from typing import Iterator, List, Protocol

from sqlalchemy.exc import SQLAlchemyError

from rate_directory.core.errors import RateNotFound, StoreFailure
from rate_directory.db.pool import PoolClosed
from rate_directory.models.rates import ExchangeRate
from .currency import ensure_supported

logger = logging.getLogger("rate_directory.directory")

# SQLAlchemyError covers pool checkout timeouts.
STORE_ERRORS = (sqlite3.Error, SQLAlchemyError, PoolClosed)


class SupportsRateStore(Protocol):
    def list_rates(self) -> List[dict]: ...

    def get_rate(self, origin: str, destination: str) -> dict | None: ...

    def insert_rate(self, origin: str, destination: str, rate: float) -> dict: ...

    def update_rate(self, origin: str, destination: str, rate: float) -> int: ...

    def delete_rate(self, origin: str, destination: str) -> int: ...


@contextmanager
def _store_call(operation: str, message: str) -> Iterator[None]:
    try:
        yield
    except STORE_ERRORS as e:
        logger.exception("store failure during %s", operation, extra={"operation": operation})
        raise StoreFailure(message) from e


class RateDirectory:
    def __init__(self, store: SupportsRateStore):
        self.store = store

    def list_rates(self) -> List[ExchangeRate]:
        with _store_call("list_rates", "Failed to retrieve exchange rates"):
            rows = self.store.list_rates()
        return [ExchangeRate.from_row(r) for r in rows]

    def get_rate(self, origin: str, destination: str) -> ExchangeRate:
        with _store_call("get_rate", "Failed to retrieve the exchange rate"):
            row = self.store.get_rate(origin, destination)
        if row is None:
            raise RateNotFound(origin, destination)
        return ExchangeRate.from_row(row)

    def create_rate(self, origin: str, destination: str, rate: float) -> ExchangeRate:
        # Create is not path-routed, so it validates the codes itself.
        ensure_supported(origin, destination)
        with _store_call("create_rate", "Failed to add the exchange rate"):
            row = self.store.insert_rate(origin, destination, rate)
        logger.info("rate created %s->%s=%s (id=%s)", origin, destination, rate, row["id"])
        return ExchangeRate.from_row(row)

    def update_rate(self, origin: str, destination: str, new_rate: float) -> int:
        with _store_call("update_rate", "Failed to update the exchange rate"):
            affected = self.store.update_rate(origin, destination, new_rate)
        if affected == 0:
            raise RateNotFound(origin, destination)
        logger.info("rate updated %s->%s=%s (%s row(s))", origin, destination, new_rate, affected)
        return affected

    def delete_rate(self, origin: str, destination: str) -> int:
        with _store_call("delete_rate", "Failed to delete the exchange rate"):
            affected = self.store.delete_rate(origin, destination)
        if affected == 0:
            raise RateNotFound(origin, destination)
        logger.info("rate deleted %s->%s (%s row(s))", origin, destination, affected)
        return affected
