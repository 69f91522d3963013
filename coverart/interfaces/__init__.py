"""Public interface definitions for cover-art providers.

Concrete providers live in ``coverart.providers`` and are registered in
``coverart.main.build_registry`` during startup.
"""

from coverart.interfaces.cover_art_provider import ICoverArtProvider

__all__ = ["ICoverArtProvider"]
