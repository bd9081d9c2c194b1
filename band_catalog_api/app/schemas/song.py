"""
Pydantic schemas for songs.

The ``band_id`` column is exposed to clients as ``bandId``.  The joined
listing combines each song with the id and name of the band that owns
it.
"""

from pydantic import BaseModel, ConfigDict, Field


class SongRead(BaseModel):
    """Schema for reading a song."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., example="s1")
    name: str = Field(..., example="Bohemian Rhapsody")
    band_id: str = Field(..., alias="bandId", example="b1")


class SongWithBandRead(BaseModel):
    """One row of the songs listing, joined with the owning band."""

    model_config = ConfigDict(populate_by_name=True)

    band_id: str = Field(..., alias="bandId")
    band_name: str = Field(..., alias="bandName")
    song_id: str = Field(..., alias="songId")
    song_name: str = Field(..., alias="songName")
    # Same value as ``band_id``, read from the song side of the join.
    song_band_id: str = Field(..., alias="songBandId")
