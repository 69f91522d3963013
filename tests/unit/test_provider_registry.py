"""Unit tests for ProviderRegistry registration and URL lookup."""

from __future__ import annotations

import re
from unittest.mock import AsyncMock

import pytest

from coverart.services.provider_registry import ProviderRegistry
from coverart.utils.errors import ConfigurationError
from tests.conftest import make_provider_class


def _registry(*declarations: tuple[str, list[str]]) -> ProviderRegistry:
    registry = ProviderRegistry()
    for name, domains in declarations:
        registry.register(make_provider_class(name, domains)(AsyncMock()))
    return registry


def _resolved_name(registry: ProviderRegistry, url: str) -> str | None:
    provider = registry.get_provider(url)
    return provider.name if provider else None


class TestGetProvider:
    def test_exact_beats_wildcard_for_bare_domain(self) -> None:
        registry = _registry(("Wild", ["*.example.com"]), ("Exact", ["example.com"]))

        assert _resolved_name(registry, "https://example.com/release/1") == "Exact"

    def test_exact_beats_wildcard_for_subdomain(self) -> None:
        registry = _registry(("Wild", ["*.example.xyz"]), ("Exact", ["abc.example.xyz"]))

        assert _resolved_name(registry, "https://abc.example.xyz/release/1") == "Exact"
        assert _resolved_name(registry, "https://other.example.xyz/release/1") == "Wild"

    @pytest.mark.parametrize(
        "declarations",
        [
            (("Exact", ["example.com"]), ("Wild", ["*.example.com"])),
            (("Wild", ["*.example.com"]), ("Exact", ["example.com"])),
        ],
    )
    def test_registration_order_irrelevant(self, declarations) -> None:  # noqa: ANN001
        registry = _registry(*declarations)

        assert _resolved_name(registry, "https://example.com/release/1") == "Exact"

    def test_longer_wildcard_suffix_wins(self) -> None:
        registry = _registry(("Shallow", ["*.example.com"]), ("Deep", ["*.b.example.com"]))

        assert _resolved_name(registry, "https://a.b.example.com/release/1") == "Deep"
        assert _resolved_name(registry, "https://a.c.example.com/release/1") == "Shallow"

    def test_best_pattern_of_each_provider_considered(self) -> None:
        registry = _registry(
            ("Broad", ["*.example.com", "shop.example.com"]),
            ("Music", ["*.music.example.com"]),
        )

        assert _resolved_name(registry, "https://shop.example.com/release/1") == "Broad"
        assert _resolved_name(registry, "https://x.music.example.com/release/1") == "Music"

    def test_www_prefix_ignored(self) -> None:
        registry = _registry(("Exact", ["example.com"]))

        assert _resolved_name(registry, "https://www.example.com/release/1") == "Exact"

    def test_host_case_ignored(self) -> None:
        registry = _registry(("Exact", ["example.com"]))

        assert _resolved_name(registry, "https://EXAMPLE.com/release/1") == "Exact"

    def test_declared_pattern_normalized_for_lookup(self) -> None:
        registry = _registry(("Padded", [" Example.COM "]))

        assert _resolved_name(registry, "https://example.com/release/1") == "Padded"

    def test_unknown_host_returns_none(self) -> None:
        registry = _registry(("Exact", ["example.com"]))

        assert registry.get_provider("https://unknown.org/release/1") is None

    def test_url_without_host_returns_none(self) -> None:
        registry = _registry(("Exact", ["example.com"]))

        assert registry.get_provider("not a url") is None


class TestGetProviderForUrl:
    def test_requires_supported_path(self) -> None:
        registry = _registry(("Exact", ["example.com"]))

        assert registry.get_provider_for_url("https://example.com/release/1").name == "Exact"
        assert registry.get_provider_for_url("https://example.com/artist/1") is None

    def test_unknown_host_returns_none(self) -> None:
        registry = _registry(("Exact", ["example.com"]))

        assert registry.get_provider_for_url("https://nowhere.test/release/1") is None


class TestRegister:
    def test_register_returns_provider(self) -> None:
        registry = ProviderRegistry()
        provider = make_provider_class("One", ["one.test"])(AsyncMock())

        assert registry.register(provider) is provider
        assert "One" in registry
        assert registry.get("One") is provider
        assert registry.names() == ["One"]
        assert list(registry) == [provider]
        assert len(registry) == 1

    def test_duplicate_name_rejected(self) -> None:
        registry = _registry(("One", ["one.test"]))

        with pytest.raises(ConfigurationError):
            registry.register(make_provider_class("One", ["other.test"])(AsyncMock()))

    def test_duplicate_pattern_rejected(self) -> None:
        registry = _registry(("One", ["*.shared.test"]))

        with pytest.raises(ConfigurationError) as exc_info:
            registry.register(make_provider_class("Two", ["*.Shared.test"])(AsyncMock()))

        assert exc_info.value.provider_name == "Two"
        assert "Two" not in registry

    def test_invalid_pattern_rejected(self) -> None:
        registry = ProviderRegistry()

        with pytest.raises(ConfigurationError):
            registry.register(make_provider_class("Bad", ["music.*.test"])(AsyncMock()))
        assert len(registry) == 0

    def test_provider_without_domains_rejected(self) -> None:
        registry = ProviderRegistry()

        with pytest.raises(ConfigurationError):
            registry.register(make_provider_class("Empty", [])(AsyncMock()))

    def test_provider_without_url_patterns_rejected(self) -> None:
        registry = ProviderRegistry()
        provider = make_provider_class("NoRegex", ["noregex.test"], url_regex=[])(AsyncMock())

        with pytest.raises(ConfigurationError):
            registry.register(provider)

    @pytest.mark.parametrize(
        "url_regex",
        [re.compile(r"/release/\d+"), re.compile(r"/(release|album)/(\d+)")],
    )
    def test_url_pattern_needs_one_capturing_group(self, url_regex: re.Pattern[str]) -> None:
        registry = ProviderRegistry()
        provider = make_provider_class("NoGroup", ["nogroup.test"], url_regex=url_regex)(AsyncMock())

        with pytest.raises(ConfigurationError) as exc_info:
            registry.register(provider)

        assert "capturing group" in exc_info.value.message
        assert "NoGroup" not in registry

    def test_frozen_registry_rejects_registration(self) -> None:
        registry = _registry(("One", ["one.test"]))
        registry.freeze()

        assert registry.frozen is True
        with pytest.raises(ConfigurationError):
            registry.register(make_provider_class("Two", ["two.test"])(AsyncMock()))
        assert registry.get_provider("https://one.test/release/1").name == "One"

    def test_multi_pattern_provider(self) -> None:
        registry = ProviderRegistry()
        provider_cls = make_provider_class(
            "Multi",
            ["multi.test", "*.multi.test"],
            [re.compile(r"/album/(\d+)"), re.compile(r"/release/(\d+)")],
        )
        registry.register(provider_cls(AsyncMock()))

        assert registry.get_provider_for_url("https://eu.multi.test/album/7").name == "Multi"
