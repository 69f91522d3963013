"""Pydantic models for cover-art candidates."""

from coverart.models.cover_art import ArtworkType, CoverArt, ParsedTrackImage

__all__ = ["ArtworkType", "CoverArt", "ParsedTrackImage"]
