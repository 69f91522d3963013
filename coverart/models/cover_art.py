"""Cover-art candidate models.

Defines the artwork-type enumeration and Pydantic v2 models for the
candidates returned by providers.  All models use frozen config to
enforce immutability; a fresh list is produced per extraction call and
owned by the caller.

    ParsedTrackImage  -- per-track image scraped from a release page,
                         consumed only by merge_track_images()
    CoverArt          -- one image the caller should import
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class ArtworkType(IntEnum):
    """Artwork types, keyed by the catalog's own stable integer ids.

    The values are round-tripped through the external cover-art archive,
    so they must never be renumbered.
    """

    FRONT = 1
    BACK = 2
    BOOKLET = 3
    MEDIUM = 4
    OBI = 5
    SPINE = 6
    TRACK = 7
    OTHER = 8
    TRAY = 9
    STICKER = 10
    POSTER = 11
    LINER = 12
    WATERMARK = 13
    RAW = 14  # Raw/Unedited


class CoverArt(BaseModel):
    """A single image a provider found for a release."""

    model_config = ConfigDict(frozen=True)

    url: str
    types: list[ArtworkType] = Field(default_factory=list)
    comment: str | None = None
    # When True, downstream image maximisation must leave the URL alone.
    skip_maximisation: bool = False


class ParsedTrackImage(BaseModel):
    """An image attached to one track of a release page."""

    model_config = ConfigDict(frozen=True)

    url: str
    track_number: str | None = None
