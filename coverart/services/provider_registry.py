"""Process-wide registry mapping provider names to provider instances.

Populated once at startup (see ``coverart.main.build_registry``) and
frozen; afterwards it is read-only and safe to query from any number of
concurrent extraction coroutines.

Lookup by URL evaluates the domain-pattern specificity of *every*
registered provider and returns the most specific one, so registration
order never decides which provider handles a host.  Two providers may not
declare the same pattern, which keeps that choice unambiguous.
"""

from __future__ import annotations

from collections.abc import Iterator
from urllib.parse import urlsplit

from coverart.interfaces.cover_art_provider import ICoverArtProvider
from coverart.utils.domains import best_match_specificity, normalize_host, validate_domain_pattern
from coverart.utils.errors import ConfigurationError
from coverart.utils.logging import get_logger


class ProviderRegistry:
    """Name-keyed provider registry with specificity-aware URL lookup."""

    def __init__(self) -> None:
        self._providers: dict[str, ICoverArtProvider] = {}
        self._pattern_owners: dict[str, str] = {}
        # Validated (normalized) domain patterns per provider name.
        self._domains: dict[str, list[str]] = {}
        self._frozen = False
        self._logger = get_logger(__name__)

    # -- Registration ----------------------------------------------------------

    def register(self, provider: ICoverArtProvider) -> ICoverArtProvider:
        """Add *provider* to the registry.

        Raises
        ------
        ConfigurationError
            If the registry is frozen, the name is already taken, a domain
            pattern is malformed or already claimed by another provider, or
            a URL pattern does not have exactly one capturing group.
        """
        if self._frozen:
            raise ConfigurationError(
                message="Provider registry is frozen", provider_name=provider.name
            )
        if provider.name in self._providers:
            raise ConfigurationError(
                message="Duplicate provider name", provider_name=provider.name
            )
        if not provider.supported_domains:
            raise ConfigurationError(
                message="Provider declares no supported domains", provider_name=provider.name
            )
        if not provider.url_patterns:
            raise ConfigurationError(
                message="Provider declares no URL patterns", provider_name=provider.name
            )
        for url_pattern in provider.url_patterns:
            if url_pattern.groups != 1:
                raise ConfigurationError(
                    message=(
                        f"URL pattern {url_pattern.pattern!r} must have exactly one "
                        f"capturing group, found {url_pattern.groups}"
                    ),
                    provider_name=provider.name,
                )

        patterns = [validate_domain_pattern(pattern) for pattern in provider.supported_domains]
        for pattern in patterns:
            owner = self._pattern_owners.get(pattern)
            if owner is not None and owner != provider.name:
                raise ConfigurationError(
                    message=f"Domain pattern {pattern!r} is already registered by {owner}",
                    provider_name=provider.name,
                )

        for pattern in patterns:
            self._pattern_owners[pattern] = provider.name
        self._domains[provider.name] = patterns
        self._providers[provider.name] = provider
        self._logger.debug("provider_registered", provider=provider.name, domains=patterns)
        return provider

    def freeze(self) -> None:
        """Disallow further registrations."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -- Lookup ----------------------------------------------------------------

    def get(self, name: str) -> ICoverArtProvider | None:
        return self._providers.get(name)

    def names(self) -> list[str]:
        return list(self._providers)

    def get_provider(self, url: str) -> ICoverArtProvider | None:
        """Return the provider whose domain patterns best match *url*'s host.

        Only the host is considered; use :meth:`get_provider_for_url` to also
        require the provider to recognise the URL itself.
        """
        host = normalize_host(urlsplit(url).hostname or "")
        if not host:
            return None

        best: ICoverArtProvider | None = None
        best_score = None
        for name, provider in self._providers.items():
            score = best_match_specificity(self._domains[name], host)
            if score is not None and (best_score is None or score > best_score):
                best, best_score = provider, score
        return best

    def get_provider_for_url(self, url: str) -> ICoverArtProvider | None:
        """Return the provider for *url* if it also supports the URL's path."""
        provider = self.get_provider(url)
        if provider is None or not provider.supports_url(url):
            return None
        self._logger.debug("provider_resolved", provider=provider.name, url=url)
        return provider

    # -- Container protocol ----------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __iter__(self) -> Iterator[ICoverArtProvider]:
        return iter(self._providers.values())

    def __len__(self) -> int:
        return len(self._providers)
