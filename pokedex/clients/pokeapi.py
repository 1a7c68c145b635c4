"""PokeAPI REST client."""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional, TypeVar

import requests
from requests import Response

from pokedex.cache import TTLCache
from pokedex.config import Settings
from pokedex.models import LocationArea, LocationPage, Pokemon

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class PokeAPIError(RuntimeError):
    """Raised when PokeAPI cannot be reached or returns an error."""


class PokeAPIClient:
    """Small HTTP client that serves repeated lookups from a TTL cache."""

    def __init__(
        self,
        settings: Settings,
        cache: TTLCache,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._settings = settings
        self._cache = cache
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    def fetch_locations(self, url: Optional[str] = None) -> LocationPage:
        """Return a page of location areas, the first page when ``url`` is empty."""

        return self._fetch(url or self._settings.location_area_url, LocationPage.from_payload)

    def fetch_location_area(self, name: str) -> LocationArea:
        """Return a location area with the Pokemon that can be encountered there."""

        return self._fetch(self._settings.location_area_detail_url(name), LocationArea.from_payload)

    def fetch_pokemon(self, name: str) -> Pokemon:
        return self._fetch(self._settings.pokemon_url(name), Pokemon.from_payload)

    def _fetch(self, url: str, parse: Callable[[Any], T]) -> T:
        cached, found = self._cache.get(url)
        if found:
            try:
                result = parse(json.loads(cached))
            except ValueError:
                LOGGER.warning("discarding unreadable cache entry", extra={"url": url})
            else:
                LOGGER.debug("cache hit", extra={"url": url})
                return result

        try:
            response = self._session.get(url, timeout=self._settings.request_timeout_seconds)
        except requests.RequestException as exc:
            LOGGER.error("pokeapi request failed", extra={"url": url, "detail": str(exc)})
            raise PokeAPIError(f"Unable to reach PokeAPI: {exc}") from exc
        self._raise_for_status(response)

        try:
            result = parse(response.json())
        except ValueError as exc:
            LOGGER.error("unexpected pokeapi response", extra={"url": url, "detail": str(exc)})
            raise PokeAPIError(f"Unexpected response from PokeAPI: {exc}") from exc

        self._cache.add(url, response.content)
        return result

    def _raise_for_status(self, response: Response) -> None:
        """Raise descriptive errors for PokeAPI responses."""

        if response.ok:
            return
        status = response.status_code
        detail = response.text
        if status == 404:
            message = "Not found."
        elif status == 429:
            message = "Rate limited by PokeAPI, try again shortly."
        else:
            message = f"PokeAPI error ({status})."
        LOGGER.error(
            "pokeapi request failed",
            extra={"url": response.url, "status": status, "detail": detail[:200]},
        )
        raise PokeAPIError(message)
