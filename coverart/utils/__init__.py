"""Utility modules for coverart.

- **domains** -- domain-pattern validation and specificity ranking used
  by the provider registry.
- **dom** -- BeautifulSoup parsing and a fail-loud query-selector helper.
- **errors** -- exception hierarchy rooted at CoverArtError.
- **logging** -- structlog setup with console/JSON dual renderer.
- **track_images** -- merges per-track images into TRACK candidates.
"""

from coverart.utils.domains import (
    best_match_specificity,
    domain_matches,
    match_specificity,
    normalize_host,
    validate_domain_pattern,
)
from coverart.utils.errors import (
    ConfigurationError,
    CoverArtError,
    MissingElementError,
    UnsafeRedirectError,
    UnsupportedUrlError,
)
from coverart.utils.logging import configure_logging, get_logger
from coverart.utils.track_images import merge_track_images

__all__ = [
    "ConfigurationError",
    "CoverArtError",
    "MissingElementError",
    "UnsafeRedirectError",
    "UnsupportedUrlError",
    "best_match_specificity",
    "configure_logging",
    "domain_matches",
    "get_logger",
    "match_specificity",
    "merge_track_images",
    "normalize_host",
    "validate_domain_pattern",
]
