"""Database migration utilities.

Handles schema evolution by applying idempotent migrations keyed by an integer
`schema_version` stored in the metadata table.

Versions:
  1. ``exchange_rates`` (id, origin, destination, rate) without ``updated_at``
  2. ``updated_at`` column + (origin, destination) lookup index
"""

from __future__ import annotations
from pathlib import Path
import logging
import sqlite3
from typing import Optional

from . import schema as schema_def
from .schema import init_db

CURRENT_SCHEMA_VERSION = 2
SCHEMA_VERSION_KEY = "schema_version"

logger = logging.getLogger("rate_directory.db.migrate")


def _get_schema_version(conn: sqlite3.Connection) -> Optional[int]:
    try:
        cur = conn.cursor()
        cur.execute("SELECT value FROM metadata WHERE key=?", (SCHEMA_VERSION_KEY,))
        row = cur.fetchone()
        if row:
            return int(row[0])
    except sqlite3.OperationalError:
        # metadata table may not exist yet (first run before init_db)
        return None
    return None


def apply_migrations(db_path: Path) -> int:
    """Apply required migrations and return resulting schema version."""
    init_db(db_path)
    conn = sqlite3.connect(db_path)
    try:
        version = _get_schema_version(conn) or 1
        if version < 2:
            _migrate_to_v2(conn)
            version = 2
        _set_schema_version(conn, version)
        conn.commit()
        logger.debug("schema at version %s (%s)", version, db_path)
        return version
    finally:
        conn.close()


def _set_schema_version(conn: sqlite3.Connection, version: int) -> None:
    cur = conn.cursor()
    cur.execute(
        "INSERT INTO metadata (key, value) VALUES (?, ?) "
        "ON CONFLICT(key) DO UPDATE SET value=excluded.value, "
        f"updated_at=({schema_def.BASIC_UTC_NOW})",
        (SCHEMA_VERSION_KEY, str(version)),
    )


def _migrate_to_v2(conn: sqlite3.Connection) -> None:
    """Add updated_at to tables created by version 1 and the pair index."""
    cur = conn.cursor()
    try:
        if not _column_exists(cur, "exchange_rates", "updated_at"):
            # SQLite refuses non-constant defaults in ALTER TABLE ADD COLUMN.
            cur.execute(
                "ALTER TABLE exchange_rates ADD COLUMN updated_at TEXT NOT NULL DEFAULT ''"
            )
            cur.execute(
                f"UPDATE exchange_rates SET updated_at=({schema_def.BASIC_UTC_NOW})"
            )
        cur.execute(schema_def.EXCHANGE_RATES_PAIR_INDEX_DDL)
        conn.commit()
    except Exception:
        conn.rollback()
        raise


def _column_exists(cur: sqlite3.Cursor, table: str, column: str) -> bool:
    cur.execute(f"PRAGMA table_info({table})")
    return any(row[1] == column for row in cur.fetchall())
