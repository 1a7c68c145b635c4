"""Pokedex package exports commonly used helpers for convenience."""

from .cache import TTLCache
from .config import Settings, get_settings
from .logging_config import configure_logging

__all__ = ["TTLCache", "Settings", "get_settings", "configure_logging"]
