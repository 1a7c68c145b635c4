"""Command-line entry point for the Pokedex explorer."""
from __future__ import annotations

import logging

from pokedex.cache import TTLCache
from pokedex.clients.pokeapi import PokeAPIClient
from pokedex.config import get_settings
from pokedex.logging_config import configure_logging
from pokedex.registry import Pokedex
from pokedex.repl import Repl

LOGGER = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)

    cache = TTLCache(settings.cache_interval_seconds)
    try:
        client = PokeAPIClient(settings, cache)
        repl = Repl(client, Pokedex())
        LOGGER.info("pokedex started", extra={"url": settings.api_base_url})
        try:
            repl.run()
        except KeyboardInterrupt:
            print()
            print("Closing the Pokedex... Goodbye!")
    finally:
        cache.close()
    return 0
