import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.core.database import Store, init_db
from app.main import create_app
from app.services.entities import build_gateways


def make_store() -> Store:
    # One shared in-memory SQLite connection for every request thread
    return Store(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
def empty_store():
    """Store without tables."""
    store = make_store()
    yield store
    store.dispose()


@pytest.fixture
def store(empty_store):
    init_db(empty_store)
    return empty_store


@pytest.fixture
def gateways(store):
    return build_gateways(store, max_id_attempts=3)


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as client:
        yield client
