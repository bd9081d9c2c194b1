"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers.  When new resources are
introduced, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import bands, health, songs

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(bands.router, prefix="/bands", tags=["bands"])
router.include_router(songs.router, prefix="/songs", tags=["songs"])
