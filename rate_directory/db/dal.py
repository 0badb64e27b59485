"""Data Access Layer for exchange-rate records.

Responsibilities
----------------
- Run exactly one statement per call through a pooled connection.
- Return plain dict rows for reads and affected-row counts for keyed writes.
- Leave validation and not-found semantics to ``services.directory``;
  ``sqlite3.Error`` and pool errors propagate to the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .pool import ConnectionPool
from .schema import BASIC_UTC_NOW

RATE_COLUMNS = "id, origin, destination, rate, updated_at"


class RateStore:
    def __init__(self, pool: ConnectionPool):
        self.pool = pool

    def list_rates(self) -> List[Dict[str, Any]]:
        # No ORDER BY: callers get the store's native order.
        with self.pool.connection() as conn:
            rows = conn.execute(f"SELECT {RATE_COLUMNS} FROM exchange_rates").fetchall()
        return [dict(r) for r in rows]

    def get_rate(self, origin: str, destination: str) -> Optional[Dict[str, Any]]:
        """Return the first (lowest id) record for the pair, if any."""
        with self.pool.connection() as conn:
            row = conn.execute(
                f"""
                SELECT {RATE_COLUMNS} FROM exchange_rates
                WHERE origin = ? AND destination = ?
                ORDER BY id
                LIMIT 1
                """,
                (origin, destination),
            ).fetchone()
        return dict(row) if row else None

    def insert_rate(self, origin: str, destination: str, rate: float) -> Dict[str, Any]:
        with self.pool.connection() as conn:
            cur = conn.execute(
                f"""
                INSERT INTO exchange_rates (origin, destination, rate, updated_at)
                VALUES (?, ?, ?, ({BASIC_UTC_NOW}))
                """,
                (origin, destination, float(rate)),
            )
            # Same connection and transaction: reads back the row just written.
            row = conn.execute(
                f"SELECT {RATE_COLUMNS} FROM exchange_rates WHERE id = ?",
                (cur.lastrowid,),
            ).fetchone()
        return dict(row)

    def update_rate(self, origin: str, destination: str, rate: float) -> int:
        with self.pool.connection() as conn:
            cur = conn.execute(
                f"""
                UPDATE exchange_rates
                SET rate = ?, updated_at = ({BASIC_UTC_NOW})
                WHERE origin = ? AND destination = ?
                """,
                (float(rate), origin, destination),
            )
            return cur.rowcount

    def delete_rate(self, origin: str, destination: str) -> int:
        with self.pool.connection() as conn:
            cur = conn.execute(
                "DELETE FROM exchange_rates WHERE origin = ? AND destination = ?",
                (origin, destination),
            )
            return cur.rowcount

    def count_pair(self, origin: str, destination: str) -> int:
        with self.pool.connection() as conn:
            row = conn.execute(
                "SELECT COUNT(*) FROM exchange_rates WHERE origin = ? AND destination = ?",
                (origin, destination),
            ).fetchone()
        return int(row[0])

    def ping(self) -> bool:
        with self.pool.connection() as conn:
            conn.execute("SELECT 1").fetchone()
        return True

    def close(self) -> None:
        self.pool.close()
