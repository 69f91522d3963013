"""Application wiring for coverart.

Builds the shared ``httpx.AsyncClient`` and the provider registry, and
exposes :func:`find_cover_art`, the one-call entry point used by the CLI
and by library callers that do not manage their own registry.
"""

from __future__ import annotations

import httpx

from coverart.config import settings
from coverart.config.settings import Settings
from coverart.models.cover_art import CoverArt
from coverart.providers import BUILTIN_PROVIDERS
from coverart.services.provider_registry import ProviderRegistry
from coverart.utils.errors import UnsupportedUrlError
from coverart.utils.logging import get_logger

logger = get_logger(__name__)


def build_http_client(custom_settings: Settings | None = None) -> httpx.AsyncClient:
    """Create the HTTP client shared by all providers.

    Parameters
    ----------
    custom_settings:
        Application settings.  Uses module-level ``settings`` if not provided.
    """
    s = custom_settings or settings
    return httpx.AsyncClient(
        timeout=httpx.Timeout(s.http_timeout),
        headers={
            "User-Agent": s.http_user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        },
        follow_redirects=True,
        max_redirects=s.http_max_redirects,
    )


def build_registry(http_client: httpx.AsyncClient) -> ProviderRegistry:
    """Register every built-in provider and freeze the registry."""
    registry = ProviderRegistry()
    for provider_cls in BUILTIN_PROVIDERS:
        registry.register(provider_cls(http_client))
    registry.freeze()
    return registry


async def find_cover_art(
    url: str,
    custom_settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
    registry: ProviderRegistry | None = None,
) -> list[CoverArt]:
    """Resolve the provider for *url* and return the images it finds.

    A client is created (and closed afterwards) when none is injected.

    Raises
    ------
    UnsupportedUrlError
        If no registered provider handles *url*.
    coverart.utils.errors.CoverArtError
        Provider failures (unsafe redirect, missing page element).
    httpx.HTTPError
        Network and HTTP status failures, unmodified.
    """
    owns_client = http_client is None
    client = http_client or build_http_client(custom_settings)
    try:
        providers = registry if registry is not None else build_registry(client)
        provider = providers.get_provider_for_url(url)
        if provider is None:
            raise UnsupportedUrlError(url=url)

        images = await provider.find_images(url)
        logger.info("cover_art_found", provider=provider.name, url=url, count=len(images))
        return images
    finally:
        if owns_client:
            await client.aclose()
