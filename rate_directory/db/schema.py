"""Database schema DDL definitions and initialization utilities.

Tables:
  - exchange_rates: directed (origin, destination) rate records; no uniqueness
    is enforced on the pair, lookups take the lowest id
  - metadata: key/value store (schema version)
"""

from __future__ import annotations
import sqlite3
from typing import Sequence
from pathlib import Path

BASIC_UTC_NOW = "strftime('%Y-%m-%dT%H:%M:%fZ','now')"

EXCHANGE_RATES_DDL = f"""
CREATE TABLE IF NOT EXISTS exchange_rates (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    origin TEXT NOT NULL,
    destination TEXT NOT NULL,
    rate REAL NOT NULL,
    updated_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW})
);
"""

METADATA_DDL = f"""
CREATE TABLE IF NOT EXISTS metadata (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW})
);
"""

# Non-unique on purpose: duplicate pairs may coexist.
EXCHANGE_RATES_PAIR_INDEX_DDL = (
    "CREATE INDEX IF NOT EXISTS idx_exchange_rates_pair "
    "ON exchange_rates(origin, destination);"
)

DDL_ORDER: Sequence[str] = (
    EXCHANGE_RATES_DDL,
    METADATA_DDL,
)


def init_db(path: Path) -> None:
    """Create all tables idempotently.

    Parameters
    ----------
    path: Path to SQLite database file.
    """
    conn = sqlite3.connect(path)
    try:
        cur = conn.cursor()
        for ddl in DDL_ORDER:
            cur.execute(ddl)
        conn.commit()
    finally:
        conn.close()
