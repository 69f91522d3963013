"""Collapse per-track images into track-artwork candidates."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from coverart.models.cover_art import ArtworkType, CoverArt, ParsedTrackImage


def merge_track_images(
    track_images: Iterable[ParsedTrackImage | None],
    main_url: str | None,
) -> list[CoverArt]:
    """Merge track images sharing a URL into one TRACK candidate each.

    Entries that are ``None`` or reuse the release's main image
    (*main_url*) are dropped.  The comment lists the track numbers the
    image applies to, in the order they were encountered.
    """
    # dict keeps first-seen URL order, lists keep track-number order
    url_to_track_numbers: defaultdict[str, list[str | None]] = defaultdict(list)
    for image in track_images:
        if image is None or image.url == main_url:
            continue
        url_to_track_numbers[image.url].append(image.track_number)

    return [
        CoverArt(
            url=url,
            types=[ArtworkType.TRACK],
            comment=_track_image_comment(track_numbers),
        )
        for url, track_numbers in url_to_track_numbers.items()
    ]


def _track_image_comment(track_numbers: list[str | None]) -> str | None:
    known = [number for number in track_numbers if number is not None]
    if not known:
        return None
    prefix = "Track" if len(known) == 1 else "Tracks"
    return f"{prefix} {', '.join(known)}"
