"""coverart: resolve release page URLs to cover-art candidates."""

__version__ = "0.1.0"
