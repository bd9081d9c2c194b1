"""Liveness check."""

from fastapi import APIRouter

from band_catalog_api.app.schemas.band import MessageResponse

router = APIRouter()


@router.get("/ping", response_model=MessageResponse)
async def ping() -> MessageResponse:
    return MessageResponse(message="Pong!")
