"""Shared pytest fixtures for the coverart test suite."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence
from unittest.mock import AsyncMock

import httpx
import pytest
import structlog

from coverart.providers.head_meta_provider import HeadMetaPropertyProvider

OG_IMAGE_PAGE = """
<html>
  <head>
    <title>Some Release</title>
    <meta property="og:title" content="Some Release">
    <meta property="og:image" content="https://cdn.example/cover.jpg">
  </head>
  <body><h1>Some Release</h1></body>
</html>
"""


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo any logging configuration a test (or the code under test) applied."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    structlog.reset_defaults()
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


# ---------------------------------------------------------------------------
# Provider helpers
# ---------------------------------------------------------------------------


class ExampleProvider(HeadMetaPropertyProvider):
    """Meta-tag provider for example.com release pages."""

    name = "Example"
    favicon = "https://example.com/favicon.ico"
    supported_domains = ("example.com",)
    url_regex = re.compile(r"example\.com/release/(\d+)")


def make_provider_class(
    name: str,
    domains: Sequence[str],
    url_regex: re.Pattern[str] | Sequence[re.Pattern[str]] = re.compile(r"/release/(\d+)"),
) -> type[HeadMetaPropertyProvider]:
    """Build a meta-tag provider class declaring *domains*."""
    return type(
        f"{name.replace(' ', '')}Provider",
        (HeadMetaPropertyProvider,),
        {
            "name": name,
            "favicon": f"https://{name.lower()}.test/favicon.ico",
            "supported_domains": tuple(domains),
            "url_regex": url_regex,
        },
    )


# ---------------------------------------------------------------------------
# HTTP helpers
# ---------------------------------------------------------------------------


def make_response(text: str = "", url: str = "https://example.com/release/1", status_code: int = 200) -> httpx.Response:
    """Build a real httpx.Response whose final URL is *url*."""
    return httpx.Response(status_code, text=text, request=httpx.Request("GET", url))


def make_http_client(response: httpx.Response) -> AsyncMock:
    client = AsyncMock()
    client.get = AsyncMock(return_value=response)
    return client


@pytest.fixture
def http_client() -> AsyncMock:
    """HTTP client returning the og:image page without redirecting."""
    return make_http_client(make_response(OG_IMAGE_PAGE))


@pytest.fixture
def example_provider(http_client: AsyncMock) -> ExampleProvider:
    return ExampleProvider(http_client)
