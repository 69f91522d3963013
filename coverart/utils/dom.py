"""Thin BeautifulSoup helpers used by scraping providers."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from coverart.utils.errors import MissingElementError


def parse_dom(html: str, base_url: str | None = None) -> BeautifulSoup:
    """Parse *html* into a queryable document.

    *base_url* is kept on the document as ``base_url`` so callers can
    resolve relative links found in it.
    """
    soup = BeautifulSoup(html, "html.parser")
    soup.base_url = base_url  # type: ignore[attr-defined]
    return soup


def qs(selector: str, document: BeautifulSoup | Tag) -> Tag:
    """Return the first element matching *selector*.

    Raises
    ------
    MissingElementError
        If nothing matches.
    """
    element = document.select_one(selector)
    if element is None:
        raise MissingElementError(selector=selector)
    return element

