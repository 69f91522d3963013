"""Command-line tools for coverart."""
