"""CLI command groups."""

__all__ = ["config", "preview"]

from . import config, preview
