"""Shared fixtures: isolated settings/database per test and a FastAPI client."""

import sqlite3

import pytest
from fastapi.testclient import TestClient

from rate_directory.core.config import Settings
from rate_directory.db.dal import RateStore
from rate_directory.db.migrate import apply_migrations
from rate_directory.db.pool import ConnectionPool
from rate_directory.main import create_app
from rate_directory.services.directory import RateDirectory


@pytest.fixture
def settings(tmp_path):
    s = Settings(
        data_dir=tmp_path,
        db_path=tmp_path / "rates.sqlite3",
        pool_size=4,
        pool_timeout_seconds=0.2,
        debug=False,
    )
    s.init_post_load()
    return s


@pytest.fixture
def pool(settings):
    apply_migrations(settings.db_path)
    p = ConnectionPool(settings.db_path, size=settings.pool_size, timeout=settings.pool_timeout_seconds)
    yield p
    p.close()


@pytest.fixture
def store(pool):
    return RateStore(pool)


@pytest.fixture
def directory(store):
    return RateDirectory(store)


@pytest.fixture
def client(settings):
    app = create_app(settings_override=settings)
    with TestClient(app) as c:
        yield c


class FailingStore:
    """Store double whose every call fails like a broken database."""

    def __init__(self):
        self.calls = []
        self.closed = False

    def _fail(self, name, *args):
        self.calls.append((name, args))
        raise sqlite3.OperationalError("database disk image is malformed: /secret/path")

    def list_rates(self):
        return self._fail("list_rates")

    def get_rate(self, origin, destination):
        return self._fail("get_rate", origin, destination)

    def insert_rate(self, origin, destination, rate):
        return self._fail("insert_rate", origin, destination, rate)

    def update_rate(self, origin, destination, rate):
        return self._fail("update_rate", origin, destination, rate)

    def delete_rate(self, origin, destination):
        return self._fail("delete_rate", origin, destination)

    def ping(self):
        return self._fail("ping")

    def close(self):
        self.closed = True


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def failing_client(settings, failing_store):
    app = create_app(settings_override=settings, store=failing_store)
    with TestClient(app) as c:
        yield c
