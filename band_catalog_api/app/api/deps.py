"""
FastAPI dependencies shared by the endpoints.

The store is created once by ``create_app`` and kept on
``app.state``; services are thin wrappers around it and are built per
request.
"""

from fastapi import Depends, Request

from band_catalog_api.app.core.db import SQLiteStore
from band_catalog_api.app.services.band_service import BandService
from band_catalog_api.app.services.song_service import SongService


def get_store(request: Request) -> SQLiteStore:
    return request.app.state.store


def get_band_service(store: SQLiteStore = Depends(get_store)) -> BandService:
    return BandService(store)


def get_song_service(store: SQLiteStore = Depends(get_store)) -> SongService:
    return SongService(store)
