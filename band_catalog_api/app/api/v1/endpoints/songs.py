"""
Song endpoints for API v1.

The listing joins each song with its band.  Note the body field names:
creation takes ``bandId`` while updates take ``band_id``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from fastapi.responses import PlainTextResponse

from band_catalog_api.app.api.deps import get_song_service
from band_catalog_api.app.schemas.band import MessageResponse
from band_catalog_api.app.schemas.song import SongRead, SongWithBandRead
from band_catalog_api.app.services.song_service import SongService

router = APIRouter()


@router.get("", response_model=List[SongWithBandRead])
async def list_songs(service: SongService = Depends(get_song_service)) -> List[SongWithBandRead]:
    """Return every song together with the id and name of its band."""
    return list(await service.list_songs_with_band())


@router.get("/{song_id}", response_model=SongRead)
async def get_song(song_id: str, service: SongService = Depends(get_song_service)) -> SongRead:
    return await service.get_song(song_id)


@router.post("", response_class=PlainTextResponse)
async def create_song(
    body: Dict[str, Any] = Body(default={}),
    service: SongService = Depends(get_song_service),
) -> str:
    """Register a song for an existing band (``id``, ``name``, ``bandId``)."""
    await service.create_song(body)
    return "Song registered successfully"


@router.put("/{song_id}", response_model=MessageResponse)
async def update_song(
    song_id: str,
    body: Dict[str, Any] = Body(default={}),
    service: SongService = Depends(get_song_service),
) -> MessageResponse:
    """Update a song (``id``, ``name``, ``band_id``); omitted fields are kept."""
    await service.update_song(song_id, body)
    return MessageResponse(message="Update completed successfully")


@router.delete("/{song_id}", response_model=MessageResponse)
async def delete_song(song_id: str, service: SongService = Depends(get_song_service)) -> MessageResponse:
    await service.delete_song(song_id)
    return MessageResponse(message="Song deleted successfully")
