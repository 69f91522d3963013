"""Custom exception hierarchy for coverart.

All application exceptions inherit from :class:`CoverArtError`, which
carries an optional ``provider_name`` so error handlers can identify which
provider (e.g. "Spotify") caused the failure.

    CoverArtError  (base -- catch-all for any coverart error)
    +-- UnsafeRedirectError    (page fetch redirected to another release)
    +-- MissingElementError    (required page element absent)
    +-- UnsupportedUrlError    (no registered provider handles the URL)
    +-- ConfigurationError     (invalid provider/registry configuration)

"This provider cannot handle this URL" is NOT an error: lookups return
``None`` / ``False`` for that case.
"""


class CoverArtError(Exception):
    """Base exception for all coverart errors.

    The ``__str__`` method prefixes the provider name in brackets for
    structured log output, e.g. ``[Spotify] Refusing to extract images``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Extraction errors
# ---------------------------------------------------------------------------

class UnsafeRedirectError(CoverArtError):
    """Raised when a page fetch redirected to a URL for a different release.

    Not recoverable locally: the caller decides whether the final URL is
    correct and, if so, retries with it explicitly.
    """

    def __init__(
        self,
        original_url: str,
        final_url: str,
        provider_name: str | None = None,
        message: str | None = None,
    ) -> None:
        self.original_url = original_url
        self.final_url = final_url
        if message is None:
            message = (
                f"Refusing to extract images from {provider_name or 'this'} provider "
                f"because the original URL {original_url} redirected to {final_url}, "
                "which may be a different release. If this redirected URL is correct, "
                f"please retry with {final_url} directly."
            )
        super().__init__(message=message, provider_name=provider_name)


class MissingElementError(CoverArtError):
    """Raised when a required element is absent from a fetched page."""

    def __init__(
        self,
        selector: str,
        message: str | None = None,
        provider_name: str | None = None,
    ) -> None:
        self.selector = selector
        super().__init__(
            message=message or f"Could not find element matching {selector!r}",
            provider_name=provider_name,
        )


class UnsupportedUrlError(CoverArtError):
    """Raised by the orchestration layer when no provider handles a URL."""

    def __init__(self, url: str, message: str | None = None) -> None:
        self.url = url
        super().__init__(message=message or f"No provider supports {url}")


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigurationError(CoverArtError):
    """Raised when a provider or the registry is misconfigured at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
