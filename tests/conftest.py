"""
Shared test fixtures.

Each test gets its own SQLite database file. Tables are created here with
SQLModel metadata, standing in for the migrations that provision the
store in a real deployment.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from redirector.db.kv_store import SQLKeyValueStore, get_store
from redirector.db.sqlite_adapter import SQLiteAdapter
from redirector.main import app


@pytest.fixture
def store(tmp_path) -> SQLKeyValueStore:
    """SQL key-value store over a fresh, provisioned SQLite database."""
    db_path = tmp_path / "redirects.db"

    sync_engine = create_engine(f"sqlite:///{db_path}")
    SQLModel.metadata.create_all(sync_engine)
    sync_engine.dispose()

    engine = SQLiteAdapter().create_engine(f"sqlite+aiosqlite:///{db_path}")
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    return SQLKeyValueStore(session_maker)


@pytest.fixture
def client(store):
    """TestClient wired to the per-test store. Redirects are not followed."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
