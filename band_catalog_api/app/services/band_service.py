"""
Service layer for bands.

This module provides CRUD operations for bands.  A band's ``id`` is
chosen by the caller and is what songs reference through their
``band_id`` column, so deleting a band first deletes its songs and
only then the band itself; the store enforces the foreign key and
would reject the opposite order.

Updates follow merge semantics: a field provided in the request
replaces the stored value, an omitted field keeps it.  The row is
always addressed by the id it had before the update, even when the
update renames it.
"""

import logging
from typing import Any, List, Mapping, Optional

from band_catalog_api.app.core.db import SQLiteStore
from band_catalog_api.app.core.errors import NotFoundError
from band_catalog_api.app.core.validation import BAND_FIELDS, validate_fields
from band_catalog_api.app.schemas.band import BandRead

BANDS_TABLE = "bands"
SONGS_TABLE = "songs"


def merge_value(new_value: Optional[str], current_value: Any) -> Any:
    """Return ``new_value`` when it is a non-empty string, else ``current_value``."""
    if isinstance(new_value, str) and new_value != "":
        return new_value
    return current_value


class BandService:
    """Service class for managing bands."""

    def __init__(self, store: SQLiteStore) -> None:
        self.store = store

    async def list_bands(self) -> List[BandRead]:
        """Return every band in the store's natural order."""
        rows = self.store.select_all(BANDS_TABLE)
        return [self._row_to_band_read(row) for row in rows]

    async def get_band(self, band_id: str) -> BandRead:
        row = self._find(band_id)
        if row is None:
            raise NotFoundError("Band not found")
        return self._row_to_band_read(row)

    async def create_band(self, payload: Mapping[str, Any]) -> BandRead:
        """Validate ``payload`` and insert a new band.

        A duplicate ``id`` is rejected by the store's primary key and
        surfaces as ``ConflictError``.
        """
        logger = logging.getLogger(__name__)
        values = validate_fields(payload, BAND_FIELDS)
        band = {"id": values["id"], "name": values["name"]}
        self.store.insert(BANDS_TABLE, band)
        logger.info("Created band %s", band["id"])
        return self._row_to_band_read(band)

    async def update_band(self, id_to_edit: str, payload: Mapping[str, Any]) -> BandRead:
        """Merge the provided fields of ``payload`` into band ``id_to_edit``.

        Provided fields are validated before the lookup, so an explicit
        empty string is rejected with 400 even for a missing band.
        """
        logger = logging.getLogger(__name__)
        values = validate_fields(payload, BAND_FIELDS, partial=True)
        current = self._find(id_to_edit)
        if current is None:
            raise NotFoundError("Band not found")
        merged = {
            "id": merge_value(values.get("id"), current["id"]),
            "name": merge_value(values.get("name"), current["name"]),
        }
        self.store.update_where(BANDS_TABLE, merged, {"id": id_to_edit})
        logger.info("Updated band %s", id_to_edit)
        return self._row_to_band_read(merged)

    async def delete_band(self, id_to_delete: str) -> None:
        """Delete a band together with all of its songs.

        Songs go first.  If that step fails the band is left untouched
        and the store error propagates.
        """
        logger = logging.getLogger(__name__)
        if self._find(id_to_delete) is None:
            raise NotFoundError("Band not found")
        removed_songs = self.store.delete_where(SONGS_TABLE, {"band_id": id_to_delete})
        self.store.delete_where(BANDS_TABLE, {"id": id_to_delete})
        logger.info("Deleted band %s and %s song(s)", id_to_delete, removed_songs)

    def _find(self, band_id: str) -> Optional[Mapping[str, Any]]:
        rows = self.store.select_where(BANDS_TABLE, {"id": band_id})
        return rows[0] if rows else None

    @staticmethod
    def _row_to_band_read(row: Mapping[str, Any]) -> BandRead:
        return BandRead(id=row["id"], name=row["name"])
