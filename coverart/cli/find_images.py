"""Command-line front end: list the cover art a provider finds for a URL.

Usage::

    python -m coverart.cli https://open.spotify.com/album/4aawyAB9vmqN3uQ7FjRGTy
    python -m coverart.cli <url> --json
    python -m coverart.cli --providers

Log output goes to stderr so stdout only carries the results.  Exit code
is 0 on success, 1 when extraction fails (unsupported URL, unsafe
redirect, missing page element, HTTP error).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

import httpx

from coverart.config.settings import Settings
from coverart.models.cover_art import CoverArt
from coverart.utils.errors import CoverArtError
from coverart.utils.logging import configure_logging


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def _format_text_output(images: list[CoverArt]) -> str:
    if not images:
        return "No images found."

    lines: list[str] = []
    for index, image in enumerate(images, start=1):
        types = ", ".join(t.name.lower() for t in image.types) or "unknown"
        lines.append(f"{index}. {image.url}")
        lines.append(f"   Types: {types}")
        if image.comment:
            lines.append(f"   Comment: {image.comment}")
        if image.skip_maximisation:
            lines.append("   Maximisation: skipped")
    return "\n".join(lines)


def _format_json_output(images: list[CoverArt]) -> str:
    return json.dumps([image.model_dump(mode="json") for image in images], indent=2)


def _format_providers(registry) -> str:  # noqa: ANN001
    lines = []
    for provider in registry:
        lines.append(f"{provider.name}: {', '.join(provider.supported_domains)}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


async def _run(url: str | None, json_output: bool, list_providers: bool, app_settings: Settings) -> int:
    # Deferred import keeps `--help` and usage errors free of the HTTP stack.
    from coverart.main import build_http_client, build_registry, find_cover_art

    async with build_http_client(app_settings) as http_client:
        registry = build_registry(http_client)

        if list_providers:
            print(_format_providers(registry))
            return 0

        try:
            images = await find_cover_art(url, http_client=http_client, registry=registry)
        except (CoverArtError, httpx.HTTPError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    print(_format_json_output(images) if json_output else _format_text_output(images))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m coverart.cli",
        description="Find cover-art images for a release page URL.",
    )
    parser.add_argument("url", nargs="?", help="Release page URL.")
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output results as JSON instead of formatted text.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors.",
    )
    parser.add_argument(
        "--providers",
        action="store_true",
        dest="list_providers",
        help="List registered providers and their domains, then exit.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point; exits with the status returned by the runner."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.url and not args.list_providers:
        parser.error("a URL is required unless --providers is given")

    app_settings = Settings()
    log_level = "WARNING" if args.quiet or args.json_output else app_settings.log_level
    configure_logging(log_level=log_level, stream=sys.stderr)

    sys.exit(asyncio.run(_run(args.url, args.json_output, args.list_providers, app_settings)))


if __name__ == "__main__":
    main()
