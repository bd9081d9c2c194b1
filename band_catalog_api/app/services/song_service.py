"""
Service layer for songs.

Songs belong to a band through ``band_id``.  Creating a song does not
check that the band exists; the store's foreign key does, and a
dangling reference surfaces as ``ConflictError``.  Songs have no
dependents, so deleting one is a single statement.
"""

import logging
from typing import Any, Iterator, List, Mapping, Optional

from band_catalog_api.app.core.db import SQLiteStore
from band_catalog_api.app.core.errors import NotFoundError
from band_catalog_api.app.core.validation import (
    SONG_CREATE_FIELDS,
    SONG_UPDATE_FIELDS,
    validate_fields,
)
from band_catalog_api.app.schemas.song import SongRead, SongWithBandRead
from band_catalog_api.app.services.band_service import BANDS_TABLE, SONGS_TABLE, merge_value

JOINED_COLUMNS = [
    ("bands.id", "bandId"),
    ("bands.name", "bandName"),
    ("songs.id", "songId"),
    ("songs.name", "songName"),
    ("songs.band_id", "songBandId"),
]


class SongService:
    """Service class for managing songs."""

    def __init__(self, store: SQLiteStore) -> None:
        self.store = store

    async def list_songs_with_band(self) -> Iterator[SongWithBandRead]:
        """Return the songs joined with their owning band.

        Songs whose band does not exist are left out.  The result is a
        one-pass iterator.
        """
        rows = self.store.inner_join_select(
            BANDS_TABLE, SONGS_TABLE, "songs.band_id", "bands.id", JOINED_COLUMNS
        )
        return (SongWithBandRead(**row) for row in rows)

    async def get_song(self, song_id: str) -> SongRead:
        row = self._find(song_id)
        if row is None:
            raise NotFoundError("Song not found")
        return self._row_to_song_read(row)

    async def create_song(self, payload: Mapping[str, Any]) -> SongRead:
        logger = logging.getLogger(__name__)
        values = validate_fields(payload, SONG_CREATE_FIELDS)
        song = {"id": values["id"], "name": values["name"], "band_id": values["bandId"]}
        self.store.insert(SONGS_TABLE, song)
        logger.info("Created song %s for band %s", song["id"], song["band_id"])
        return self._row_to_song_read(song)

    async def update_song(self, id_to_edit: str, payload: Mapping[str, Any]) -> SongRead:
        """Merge the provided ``id``, ``name`` and ``band_id`` into a song."""
        logger = logging.getLogger(__name__)
        values = validate_fields(payload, SONG_UPDATE_FIELDS, partial=True)
        current = self._find(id_to_edit)
        if current is None:
            raise NotFoundError("Song not found")
        merged = {
            "id": merge_value(values.get("id"), current["id"]),
            "name": merge_value(values.get("name"), current["name"]),
            "band_id": merge_value(values.get("band_id"), current["band_id"]),
        }
        self.store.update_where(SONGS_TABLE, merged, {"id": id_to_edit})
        logger.info("Updated song %s", id_to_edit)
        return self._row_to_song_read(merged)

    async def delete_song(self, id_to_delete: str) -> None:
        logger = logging.getLogger(__name__)
        if self._find(id_to_delete) is None:
            raise NotFoundError("Song not found")
        self.store.delete_where(SONGS_TABLE, {"id": id_to_delete})
        logger.info("Deleted song %s", id_to_delete)

    def _find(self, song_id: str) -> Optional[Mapping[str, Any]]:
        rows: List[Mapping[str, Any]] = self.store.select_where(SONGS_TABLE, {"id": song_id})
        return rows[0] if rows else None

    @staticmethod
    def _row_to_song_read(row: Mapping[str, Any]) -> SongRead:
        return SongRead(id=row["id"], name=row["name"], band_id=row["band_id"])
