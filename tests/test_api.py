"""
Tests for the HTTP surface (FastAPI app over an httpx ASGI transport).

These tests verify:
- success bodies: plain text for creates, ``{"message": ...}`` otherwise
- the status mapping of the error boundary (400 / 404 / 500)
- the full band and song lifecycle including the cascade delete
"""

from __future__ import annotations

from httpx import ASGITransport, AsyncClient

from band_catalog_api.app.core.db import SQLiteStore
from band_catalog_api.app.main import create_app

# =============================================================================
# Health
# =============================================================================


async def test_ping(client: AsyncClient) -> None:
    response = await client.get("/ping")
    assert response.status_code == 200
    assert response.json() == {"message": "Pong!"}


# =============================================================================
# Bands
# =============================================================================


class TestBandsApi:
    async def test_create_and_list(self, client: AsyncClient) -> None:
        response = await client.post("/bands", json={"id": "b1", "name": "Queen"})
        assert response.status_code == 200
        assert response.text == "Band registered successfully"

        response = await client.get("/bands")
        assert response.status_code == 200
        assert response.json() == [{"id": "b1", "name": "Queen"}]

    async def test_create_invalid(self, client: AsyncClient) -> None:
        response = await client.post("/bands", json={"id": "", "name": "Queen"})
        assert response.status_code == 400
        assert response.json() == {"message": "'id' must contain at least 1 character"}

        response = await client.post("/bands", json={"id": "b1", "name": 1})
        assert response.status_code == 400
        assert response.json() == {"message": "'name' must be string"}

        assert (await client.get("/bands")).json() == []

    async def test_body_must_be_object(self, client: AsyncClient) -> None:
        response = await client.post("/bands", json=["b1", "Queen"])
        assert response.status_code == 400

    async def test_duplicate_id_is_storage_failure(self, client: AsyncClient) -> None:
        await client.post("/bands", json={"id": "b1", "name": "Queen"})
        response = await client.post("/bands", json={"id": "b1", "name": "Other"})
        assert response.status_code == 500
        assert "UNIQUE" in response.json()["message"]
        assert (await client.get("/bands")).json() == [{"id": "b1", "name": "Queen"}]

    async def test_get_band(self, client: AsyncClient) -> None:
        await client.post("/bands", json={"id": "b1", "name": "Queen"})
        assert (await client.get("/bands/b1")).json() == {"id": "b1", "name": "Queen"}
        assert (await client.get("/bands/b2")).status_code == 404

    async def test_partial_update(self, client: AsyncClient) -> None:
        await client.post("/bands", json={"id": "b1", "name": "Old"})
        response = await client.put("/bands/b1", json={"name": "New"})
        assert response.status_code == 200
        assert response.json() == {"message": "Update completed successfully"}
        assert (await client.get("/bands")).json() == [{"id": "b1", "name": "New"}]

    async def test_update_rejects_empty_string(self, client: AsyncClient) -> None:
        await client.post("/bands", json={"id": "b1", "name": "Old"})
        response = await client.put("/bands/b1", json={"name": ""})
        assert response.status_code == 400

    async def test_update_missing_band(self, client: AsyncClient) -> None:
        response = await client.put("/bands/b1", json={"name": "New"})
        assert response.status_code == 404
        assert response.json() == {"message": "Band not found"}
        assert (await client.get("/bands")).json() == []

    async def test_delete_missing_band(self, client: AsyncClient) -> None:
        response = await client.delete("/bands/b1")
        assert response.status_code == 404


# =============================================================================
# Songs
# =============================================================================


class TestSongsApi:
    async def test_lifecycle_with_cascade(self, client: AsyncClient) -> None:
        assert (await client.post("/bands", json={"id": "b1", "name": "Queen"})).status_code == 200
        response = await client.post("/songs", json={"id": "s1", "name": "Bohemian", "bandId": "b1"})
        assert response.status_code == 200
        assert response.text == "Song registered successfully"

        response = await client.get("/songs")
        assert response.status_code == 200
        assert response.json() == [
            {
                "bandId": "b1",
                "bandName": "Queen",
                "songId": "s1",
                "songName": "Bohemian",
                "songBandId": "b1",
            }
        ]

        response = await client.delete("/bands/b1")
        assert response.status_code == 200
        assert response.json() == {"message": "Band deleted successfully"}

        response = await client.get("/songs")
        assert response.status_code == 200
        assert response.json() == []

    async def test_update_song_uses_band_id_field(self, client: AsyncClient) -> None:
        await client.post("/bands", json={"id": "b1", "name": "Queen"})
        await client.post("/bands", json={"id": "b2", "name": "Yes"})
        await client.post("/songs", json={"id": "s1", "name": "Bohemian", "bandId": "b1"})

        response = await client.put("/songs/s1", json={"band_id": "b2"})
        assert response.status_code == 200
        assert (await client.get("/songs/s1")).json() == {"id": "s1", "name": "Bohemian", "bandId": "b2"}

    async def test_create_song_for_unknown_band(self, client: AsyncClient) -> None:
        response = await client.post("/songs", json={"id": "s1", "name": "Bohemian", "bandId": "nope"})
        assert response.status_code == 500
        assert "FOREIGN KEY" in response.json()["message"]

    async def test_create_song_missing_field(self, client: AsyncClient) -> None:
        response = await client.post("/songs", json={"id": "s1", "name": "Bohemian"})
        assert response.status_code == 400
        assert response.json() == {"message": "'bandId' must be string"}

    async def test_update_and_delete_missing_song(self, client: AsyncClient) -> None:
        assert (await client.put("/songs/s1", json={"name": "x"})).status_code == 404
        assert (await client.delete("/songs/s1")).status_code == 404

    async def test_delete_song(self, client: AsyncClient) -> None:
        await client.post("/bands", json={"id": "b1", "name": "Queen"})
        await client.post("/songs", json={"id": "s1", "name": "Bohemian", "bandId": "b1"})
        response = await client.delete("/songs/s1")
        assert response.status_code == 200
        assert response.json() == {"message": "Song deleted successfully"}
        assert (await client.get("/bands")).json() == [{"id": "b1", "name": "Queen"}]


# =============================================================================
# Unexpected failures
# =============================================================================


class BrokenStore(SQLiteStore):
    def __init__(self, error: Exception) -> None:
        super().__init__("unused.db")
        self.error = error

    def select_all(self, table):
        raise self.error


async def _get_bands(store: SQLiteStore):
    transport = ASGITransport(app=create_app(store))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get("/bands")


async def test_unexpected_error_reports_its_message() -> None:
    response = await _get_bands(BrokenStore(RuntimeError("boom")))
    assert response.status_code == 500
    assert response.json() == {"message": "boom"}


async def test_unexpected_error_without_message() -> None:
    response = await _get_bands(BrokenStore(RuntimeError()))
    assert response.status_code == 500
    assert response.json() == {"message": "Unexpected error"}
