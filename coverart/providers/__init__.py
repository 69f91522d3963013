"""Cover-art provider implementations.

    HeadMetaPropertyProvider -- abstract base; reads the head ``og:image``
                                meta property of the release page.
    SpotifyProvider          -- open.spotify.com album pages.

Built-in providers are listed in ``BUILTIN_PROVIDERS`` and registered by
``coverart.main.build_registry``.
"""

from coverart.providers.head_meta_provider import HeadMetaPropertyProvider
from coverart.providers.spotify_provider import SpotifyProvider

BUILTIN_PROVIDERS = (SpotifyProvider,)

__all__ = [
    "BUILTIN_PROVIDERS",
    "HeadMetaPropertyProvider",
    "SpotifyProvider",
]
