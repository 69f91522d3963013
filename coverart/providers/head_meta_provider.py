"""Generic provider reading the release image from the ``og:image`` meta tag.

Sites whose release pages carry the cover in their head ``og:image``
property only need to declare name, favicon, domains and URL pattern(s);
image maximisation downstream takes care of upscaling the URL.
"""

from __future__ import annotations

from urllib.parse import urljoin

from coverart.interfaces.cover_art_provider import ICoverArtProvider
from coverart.models.cover_art import ArtworkType, CoverArt
from coverart.utils.dom import parse_dom, qs
from coverart.utils.errors import MissingElementError

_OG_IMAGE_SELECTOR = 'head > meta[property="og:image"]'


class HeadMetaPropertyProvider(ICoverArtProvider):
    """Base for providers whose front cover is the page's ``og:image``."""

    async def find_images(self, url: str) -> list[CoverArt]:
        response = await self.fetch_response(url)
        # Relative og:image content is relative to the page actually served.
        document = parse_dom(response.text, str(response.url))
        try:
            cover_element = qs(_OG_IMAGE_SELECTOR, document)
        except MissingElementError as exc:
            raise MissingElementError(
                selector=exc.selector,
                message=f"No og:image found on {url}",
                provider_name=self.name,
            ) from exc

        content = (cover_element.get("content") or "").strip()
        if not content:
            raise MissingElementError(
                selector=_OG_IMAGE_SELECTOR,
                message=f"og:image on {url} has no content",
                provider_name=self.name,
            )

        cover = CoverArt(url=urljoin(document.base_url, content), types=[ArtworkType.FRONT])
        self._logger.debug("og_image_found", provider=self.name, url=cover.url)
        return [cover]
