"""
Pydantic schemas for bands.

A band is identified by a caller-assigned string ``id``; songs refer
to it through their ``bandId``.
"""

from pydantic import BaseModel, Field


class BandRead(BaseModel):
    """Schema for reading a band."""

    id: str = Field(..., example="b1")
    name: str = Field(..., example="Queen")


class MessageResponse(BaseModel):
    """Body returned by update and delete endpoints."""

    message: str
