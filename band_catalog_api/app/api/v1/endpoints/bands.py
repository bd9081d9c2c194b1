"""
Band endpoints for API v1.

Request bodies are read as plain JSON objects and validated by the
service, which reports the first invalid field.  Failures are turned
into responses by the error boundary installed in ``main``; the
handlers here only deal with the success path.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from fastapi.responses import PlainTextResponse

from band_catalog_api.app.api.deps import get_band_service
from band_catalog_api.app.schemas.band import BandRead, MessageResponse
from band_catalog_api.app.services.band_service import BandService

router = APIRouter()


@router.get("", response_model=List[BandRead])
async def list_bands(service: BandService = Depends(get_band_service)) -> List[BandRead]:
    """Return all bands."""
    return await service.list_bands()


@router.get("/{band_id}", response_model=BandRead)
async def get_band(band_id: str, service: BandService = Depends(get_band_service)) -> BandRead:
    """Retrieve a single band by ID.  Returns 404 if it does not exist."""
    return await service.get_band(band_id)


@router.post("", response_class=PlainTextResponse)
async def create_band(
    body: Dict[str, Any] = Body(default={}),
    service: BandService = Depends(get_band_service),
) -> str:
    """Register a band.

    The body must contain non-empty string ``id`` and ``name`` fields.
    Responds with a plain-text confirmation.
    """
    await service.create_band(body)
    return "Band registered successfully"


@router.put("/{band_id}", response_model=MessageResponse)
async def update_band(
    band_id: str,
    body: Dict[str, Any] = Body(default={}),
    service: BandService = Depends(get_band_service),
) -> MessageResponse:
    """Update a band.  Omitted fields keep their current value."""
    await service.update_band(band_id, body)
    return MessageResponse(message="Update completed successfully")


@router.delete("/{band_id}", response_model=MessageResponse)
async def delete_band(band_id: str, service: BandService = Depends(get_band_service)) -> MessageResponse:
    """Delete a band and every song that belongs to it."""
    await service.delete_band(band_id)
    return MessageResponse(message="Band deleted successfully")
