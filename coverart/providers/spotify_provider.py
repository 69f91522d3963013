"""Spotify album pages, scraped through their ``og:image`` property.

Spotify's own API needs OAuth, so the public album page is used instead.
"""

from __future__ import annotations

import re

from coverart.providers.head_meta_provider import HeadMetaPropertyProvider


class SpotifyProvider(HeadMetaPropertyProvider):
    name = "Spotify"
    favicon = "https://open.spotify.com/favicon.ico"
    supported_domains = ("open.spotify.com",)
    url_regex = re.compile(r"/album/(\w+)")
