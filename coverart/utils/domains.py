"""Domain-pattern matching for provider resolution.

A domain pattern is either a bare host (``example.com``), which matches
only that exact host, or a wildcard host (``*.example.com``), which
matches ``example.com`` itself and any of its subdomains.  The wildcard
must be the whole first label.

When several patterns match the same host, the more specific one wins:

    - an exact pattern beats any wildcard pattern
      (``example.com`` beats ``*.example.com`` for ``example.com``)
    - among wildcards, the longer literal suffix wins
      (``*.b.example.com`` beats ``*.example.com`` for ``a.b.example.com``)

:func:`match_specificity` encodes that ordering as a sortable tuple so the
registry can pick the best provider with a plain ``max()``.
"""

from __future__ import annotations

from collections.abc import Iterable

from coverart.utils.errors import ConfigurationError

_WILDCARD_PREFIX = "*."
_WWW_PREFIX = "www."

# (is_exact, literal_length); larger tuples are more specific.
Specificity = tuple[int, int]


def validate_domain_pattern(pattern: str) -> str:
    """Return the normalized (lower-cased) form of *pattern*.

    Raises
    ------
    ConfigurationError
        If the pattern is empty, contains empty labels, starts with
        ``www.``, or uses a wildcard anywhere but as the whole first label.
    """
    normalized = pattern.strip().lower()
    if not normalized:
        raise ConfigurationError(message="Domain pattern must not be empty")

    literal = normalized[len(_WILDCARD_PREFIX):] if normalized.startswith(_WILDCARD_PREFIX) else normalized
    if not literal or "*" in literal:
        raise ConfigurationError(
            message=f"Invalid domain pattern {pattern!r}: wildcard must be the first label"
        )
    if any(not label for label in literal.split(".")):
        raise ConfigurationError(message=f"Invalid domain pattern {pattern!r}: empty label")
    if literal.startswith(_WWW_PREFIX):
        raise ConfigurationError(
            message=f"Invalid domain pattern {pattern!r}: declare domains without 'www.'"
        )
    return normalized


def normalize_host(host: str) -> str:
    """Lower-case *host*, drop a trailing dot and a single leading ``www.``."""
    normalized = host.strip().lower().rstrip(".")
    if normalized.startswith(_WWW_PREFIX):
        normalized = normalized[len(_WWW_PREFIX):]
    return normalized


def _split_pattern(pattern: str) -> tuple[bool, str]:
    normalized = pattern.lower()
    if normalized.startswith(_WILDCARD_PREFIX):
        return True, normalized[len(_WILDCARD_PREFIX):]
    return False, normalized


def domain_matches(pattern: str, host: str) -> bool:
    """Return ``True`` if *host* is matched by *pattern* (case-insensitive)."""
    return match_specificity(pattern, host) is not None


def match_specificity(pattern: str, host: str) -> Specificity | None:
    """Rank how specifically *pattern* matches *host*.

    Returns ``None`` when the pattern does not match at all.
    """
    is_wildcard, literal = _split_pattern(pattern)
    host = host.lower()

    if not is_wildcard:
        return (1, len(literal)) if host == literal else None

    if host == literal or host.endswith("." + literal):
        return (0, len(literal))
    return None


def best_match_specificity(patterns: Iterable[str], host: str) -> Specificity | None:
    """Return the most specific match among *patterns*, or ``None``."""
    scores = [
        score
        for score in (match_specificity(pattern, host) for pattern in patterns)
        if score is not None
    ]
    return max(scores, default=None)
