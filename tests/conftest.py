"""Shared fixtures for the JobHub test-suite."""

from __future__ import annotations

import pathlib
import sys

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jobhub.application.realtime import SubscriptionProjector
from jobhub.domain.entities import Actor
from jobhub.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from jobhub.infrastructure.store import DocumentStore


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'jobhub.db'}"


@pytest.fixture
def store(database_url):
    """Return a document store backed by a fresh SQLite file."""

    engine = build_engine(database_url)
    initialize_database(engine)
    document_store = DocumentStore(build_session_factory(engine))
    yield document_store
    document_store.close()
    engine.dispose()


@pytest.fixture
async def projector(store):
    live_projector = SubscriptionProjector(store, resubscribe_attempts=1, resubscribe_delay=0)
    yield live_projector
    await live_projector.close()


@pytest.fixture
def alice() -> Actor:
    return Actor(user_id="alice", display_name="Alice", email="alice@example.com")


@pytest.fixture
def bob() -> Actor:
    return Actor(user_id="bob", display_name="Bob", email="bob@example.com")


@pytest.fixture
def client(database_url):
    """Return a test client bound to a clean application instance."""

    from fastapi.testclient import TestClient

    from jobhub.config import Settings
    from main import create_app

    settings = Settings(database_url=database_url, mark_read_delay_seconds=0.05)
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
