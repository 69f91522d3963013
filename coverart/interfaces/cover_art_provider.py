"""Abstract base class for cover-art providers.

A provider is a record of data -- display name, favicon, supported domain
patterns, and one or more URL patterns -- plus a single polymorphic
coroutine, :meth:`ICoverArtProvider.find_images`.  Everything else
(URL cleaning, support checks, id extraction, redirect safety and the
guarded page fetch) is implemented once here.

URL patterns are matched against :meth:`ICoverArtProvider.clean_url`, i.e.
``host + path`` with the scheme, query string and fragment removed.  Each
pattern must have exactly one capturing group yielding the release id,
and two URLs of the same release must yield the same id: redirect safety
depends on it.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from urllib.parse import urlsplit

import httpx

from coverart.models.cover_art import CoverArt
from coverart.utils.errors import UnsafeRedirectError
from coverart.utils.logging import get_logger

_DEFAULT_PORTS = {"http": 80, "https": 443}


class ICoverArtProvider(ABC):
    """Contract for providers that extract cover art from release pages.

    Subclasses declare ``name``, ``favicon``, ``supported_domains`` and
    ``url_regex`` as plain class attributes and implement
    :meth:`find_images`.  Instances are created once at startup, share one
    ``httpx.AsyncClient`` and are never mutated afterwards.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client
        self._logger = get_logger(__name__)

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider display name, used in import buttons and error messages."""

    @property
    @abstractmethod
    def favicon(self) -> str:
        """URL of the provider's favicon."""

    @property
    @abstractmethod
    def supported_domains(self) -> Sequence[str]:
        """Domain patterns handled by this provider, declared without ``www.``.

        ``*.domain.tld`` means any subdomain of ``domain.tld`` including
        ``domain.tld`` itself; a bare ``domain.tld`` only matches itself.
        """

    @property
    @abstractmethod
    def url_regex(self) -> re.Pattern[str] | Sequence[re.Pattern[str]]:
        """Pattern(s) recognising release URLs; group 1 is the release id."""

    @abstractmethod
    async def find_images(self, url: str) -> list[CoverArt]:
        """Find the provider's images for the release at *url*.

        Parameters
        ----------
        url:
            The release URL. Guaranteed to have passed :meth:`supports_url`.

        Returns
        -------
        list[CoverArt]
            Cover art that should be imported.

        Raises
        ------
        coverart.utils.errors.UnsafeRedirectError
            If the release page redirected to a different release.
        httpx.HTTPError
            Network and HTTP status failures propagate unmodified.
        """

    # ------------------------------------------------------------------
    # URL recognition
    # ------------------------------------------------------------------

    @property
    def url_patterns(self) -> list[re.Pattern[str]]:
        """``url_regex`` as a list, whether one or several were declared."""
        if isinstance(self.url_regex, re.Pattern):
            return [self.url_regex]
        return list(self.url_regex)

    @staticmethod
    def clean_url(url: str) -> str:
        """Return ``host + path`` for *url*; this is what ``url_regex`` sees."""
        parts = urlsplit(url)
        host = parts.hostname or ""
        port = parts.port
        if port is not None and port != _DEFAULT_PORTS.get(parts.scheme):
            host = f"{host}:{port}"
        return host + (parts.path or "/")

    def supports_url(self, url: str) -> bool:
        """Return ``True`` if images can be extracted for *url*."""
        cleaned = self.clean_url(url)
        return any(pattern.search(cleaned) for pattern in self.url_patterns)

    def extract_id(self, url: str) -> str | None:
        """Extract the release id from *url*, or ``None`` if unrecognised.

        Patterns are tried in declaration order; the first match wins.
        """
        cleaned = self.clean_url(url)
        for pattern in self.url_patterns:
            match = pattern.search(cleaned)
            if match is not None and match.group(1) is not None:
                return match.group(1)
        return None

    def is_safe_redirect(self, original_url: str, redirected_url: str) -> bool:
        """Return ``True`` if both URLs point towards the same release."""
        release_id = self.extract_id(original_url)
        return bool(release_id) and release_id == self.extract_id(redirected_url)

    # ------------------------------------------------------------------
    # Guarded fetch
    # ------------------------------------------------------------------

    async def fetch_response(self, url: str) -> httpx.Response:
        """Fetch the release page at *url* and return the final response.

        Redirects are followed, but if the final URL no longer points at
        the same release the content is discarded and
        :class:`UnsafeRedirectError` is raised, whatever the final status.
        HTTP status errors of an accepted page propagate unmodified.
        """
        response = await self._http.get(url, follow_redirects=True)

        final_url = str(response.url)
        if final_url != str(httpx.URL(url)) and not self.is_safe_redirect(url, final_url):
            self._logger.warning(
                "unsafe_redirect",
                provider=self.name,
                original_url=url,
                final_url=final_url,
                status_code=response.status_code,
            )
            raise UnsafeRedirectError(
                original_url=url,
                final_url=final_url,
                provider_name=self.name,
            )

        response.raise_for_status()
        self._logger.debug("page_fetched", provider=self.name, url=url, final_url=final_url)
        return response

    async def fetch_page(self, url: str) -> str:
        """Fetch the release page at *url* and return its body text."""
        return (await self.fetch_response(url)).text

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
