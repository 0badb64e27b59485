import json
import sqlite3

import pytest
from fastapi.testclient import TestClient

from rate_directory.core.config import Settings
from rate_directory.db.migrate import CURRENT_SCHEMA_VERSION, apply_migrations
from rate_directory.db.seed import load_seed_file, seed_rates
from rate_directory.main import create_app


def _columns(db, table):
    with sqlite3.connect(db) as conn:
        return {row[1] for row in conn.execute(f"PRAGMA table_info({table})")}


def _indexes(db):
    with sqlite3.connect(db) as conn:
        return {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='index'")}


def test_fresh_database_reaches_current_version(tmp_path):
    db = tmp_path / "fresh.sqlite3"
    assert apply_migrations(db) == CURRENT_SCHEMA_VERSION
    assert {"id", "origin", "destination", "rate", "updated_at"} <= _columns(db, "exchange_rates")
    assert "idx_exchange_rates_pair" in _indexes(db)


def test_migrations_are_idempotent(tmp_path):
    db = tmp_path / "again.sqlite3"
    apply_migrations(db)
    assert apply_migrations(db) == CURRENT_SCHEMA_VERSION


def _version_one_db(path):
    with sqlite3.connect(path) as conn:
        conn.execute(
            "CREATE TABLE exchange_rates (id INTEGER PRIMARY KEY AUTOINCREMENT, "
            "origin TEXT NOT NULL, destination TEXT NOT NULL, rate REAL NOT NULL)"
        )
        conn.execute("INSERT INTO exchange_rates (origin, destination, rate) VALUES ('USD','EUR',0.92)")
    return path


def test_version_one_table_is_upgraded_in_place(tmp_path):
    db = _version_one_db(tmp_path / "legacy.sqlite3")
    assert apply_migrations(db) == 2
    assert "updated_at" in _columns(db, "exchange_rates")
    with sqlite3.connect(db) as conn:
        row = conn.execute("SELECT origin, destination, rate, updated_at FROM exchange_rates").fetchone()
    assert row[:3] == ("USD", "EUR", 0.92)
    assert row[3]


def test_seed_inserts_missing_pairs_only(tmp_path):
    db = tmp_path / "seed.sqlite3"
    apply_migrations(db)
    entries = [
        {"origin": "USD", "destination": "EUR", "rate": 0.92},
        {"origin": "EUR", "destination": "USD", "rate": 1.08},
    ]
    assert seed_rates(db, entries) == 2
    assert seed_rates(db, entries + [{"origin": "USD", "destination": "MXN", "rate": "17.1"}]) == 1
    with sqlite3.connect(db) as conn:
        assert conn.execute("SELECT COUNT(*) FROM exchange_rates").fetchone()[0] == 3


@pytest.mark.parametrize(
    "entry",
    [
        {"origin": "XXX", "destination": "EUR", "rate": 1},
        {"origin": "USD", "destination": None, "rate": 1},
        {"origin": "USD", "destination": "EUR", "rate": 0},
        {"origin": "USD", "destination": "EUR", "rate": "n/a"},
        {"origin": "USD", "destination": "EUR"},
    ],
)
def test_seed_rejects_bad_entries(tmp_path, entry):
    with pytest.raises(ValueError):
        seed_rates(tmp_path / "bad.sqlite3", [entry])


def test_load_seed_file(tmp_path):
    path = tmp_path / "rates.json"
    path.write_text(json.dumps([{"origin": "USD", "destination": "EUR", "rate": 0.92}]))
    assert load_seed_file(path)[0]["rate"] == 0.92
    path.write_text(json.dumps({"origin": "USD"}))
    with pytest.raises(ValueError):
        load_seed_file(path)


def test_rates_created_after_upgrade_get_a_timestamp(tmp_path):
    db = _version_one_db(tmp_path / "upgraded.sqlite3")
    s = Settings(data_dir=tmp_path, db_path=db)
    s.init_post_load()
    with TestClient(create_app(settings_override=s)) as client:
        created = client.post("/api/tasas", json={"origin": "EUR", "destination": "USD", "rate": 1.08})
        assert created.status_code == 200
        assert created.json()["rate"]["updated_at"] != ""
        client.put("/api/tasas/USD/EUR", json={"rate": 0.95})
        rows = client.get("/api/tasas").json()
    assert all(r["updated_at"] for r in rows)


def test_seeded_rows_on_upgraded_database_get_a_timestamp(tmp_path):
    db = _version_one_db(tmp_path / "seeded.sqlite3")
    apply_migrations(db)
    seed_rates(db, [{"origin": "GBP", "destination": "EUR", "rate": 1.17}])
    with sqlite3.connect(db) as conn:
        stamp = conn.execute(
            "SELECT updated_at FROM exchange_rates WHERE origin = 'GBP'"
        ).fetchone()[0]
    assert stamp != ""
