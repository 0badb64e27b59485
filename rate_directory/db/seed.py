"""Seeding helpers for initial exchange-rate rows.

``seed_rates`` inserts each entry whose (origin, destination) pair has no
record yet. Existing rows are left untouched so this can be safely re-run.
Entries with unsupported codes or a non-positive rate are rejected up front.
"""

from __future__ import annotations
from contextlib import closing
from pathlib import Path
import json
import logging
import math
import sqlite3
from typing import Iterable, List, Mapping

from rate_directory.models.constants import SUPPORTED_CURRENCIES
from .schema import BASIC_UTC_NOW, init_db

logger = logging.getLogger("rate_directory.db.seed")


def load_seed_file(path: Path) -> List[Mapping[str, object]]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"seed file {path} must contain a JSON list")
    return data


def seed_rates(db_path: Path, entries: Iterable[Mapping[str, object]]) -> int:
    """Insert missing pairs and return how many rows were added."""
    init_db(db_path)  # ensure tables exist
    rows = [_validate_entry(e) for e in entries]
    inserted = 0
    with closing(sqlite3.connect(db_path)) as conn:
        cur = conn.cursor()
        for origin, destination, rate in rows:
            cur.execute(
                "SELECT 1 FROM exchange_rates WHERE origin = ? AND destination = ? LIMIT 1",
                (origin, destination),
            )
            if cur.fetchone():
                continue
            cur.execute(
                "INSERT INTO exchange_rates (origin, destination, rate, updated_at) "
                f"VALUES (?, ?, ?, ({BASIC_UTC_NOW}))",
                (origin, destination, rate),
            )
            inserted += 1
        conn.commit()
    logger.info("seeded %s exchange rate(s) into %s", inserted, db_path)
    return inserted


def _validate_entry(entry: Mapping[str, object]) -> tuple[str, str, float]:
    origin = entry.get("origin")
    destination = entry.get("destination")
    if not all(
        isinstance(code, str) and code in SUPPORTED_CURRENCIES
        for code in (origin, destination)
    ):
        raise ValueError(f"unsupported currency pair in seed entry: {dict(entry)}")
    try:
        rate = float(entry["rate"])  # type: ignore[arg-type]
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"invalid rate in seed entry: {dict(entry)}") from e
    if not (math.isfinite(rate) and rate > 0):
        raise ValueError(f"rate must be positive in seed entry: {dict(entry)}")
    return str(origin), str(destination), rate
