"""Shared fixtures: a fresh SQLite store per test and services bound to it."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from band_catalog_api.app.core.db import SQLiteStore
from band_catalog_api.app.main import create_app
from band_catalog_api.app.services.band_service import BandService
from band_catalog_api.app.services.song_service import SongService


@pytest.fixture
def store(tmp_path) -> SQLiteStore:
    """Create a migrated database in a temporary directory."""
    store = SQLiteStore(str(tmp_path / "catalog.db"))
    store.ensure_schema()
    return store


@pytest.fixture
def bands(store: SQLiteStore) -> BandService:
    return BandService(store)


@pytest.fixture
def songs(store: SQLiteStore) -> SongService:
    return SongService(store)


@pytest.fixture
async def client(store: SQLiteStore) -> AsyncClient:
    """Create an async HTTP client for an app bound to ``store``."""
    app = create_app(store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
