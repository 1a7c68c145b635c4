"""Application settings and environment loading utilities."""
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional


def _load_dotenv() -> None:
    env_path = Path(".env")
    if not env_path.exists():
        return
    for line in env_path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


_load_dotenv()


def _positive_float(value: Optional[str], name: str, default: float) -> float:
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise RuntimeError(f"Invalid number for environment variable {name}: {value!r}") from exc
    if not math.isfinite(parsed) or parsed <= 0:
        raise RuntimeError(f"Environment variable {name} must be a finite positive number, got {value!r}")
    return parsed


def _log_level(value: Optional[str], name: str, default: str) -> str:
    level = (value or "").strip().upper() or default
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"Unknown log level for environment variable {name}: {value!r}")
    return level


@dataclass(frozen=True)
class Settings:
    """Runtime configuration derived from environment variables."""

    api_base_url: str = "https://pokeapi.co/api/v2"
    cache_interval_seconds: float = 10.0
    request_timeout_seconds: float = 30.0
    log_level: str = "WARNING"

    @property
    def location_area_url(self) -> str:
        return f"{self.api_base_url}/location-area/"

    def location_area_detail_url(self, name: str) -> str:
        return f"{self.api_base_url}/location-area/{name}/"

    def pokemon_url(self, name: str) -> str:
        return f"{self.api_base_url}/pokemon/{name}/"

    @classmethod
    def from_env(cls) -> "Settings":
        base_url = (os.getenv("POKEDEX_API_BASE_URL") or cls.api_base_url).rstrip("/")
        cache_interval = _positive_float(
            os.getenv("POKEDEX_CACHE_INTERVAL_SECONDS"),
            "POKEDEX_CACHE_INTERVAL_SECONDS",
            cls.cache_interval_seconds,
        )
        timeout = _positive_float(
            os.getenv("POKEDEX_REQUEST_TIMEOUT_SECONDS"),
            "POKEDEX_REQUEST_TIMEOUT_SECONDS",
            cls.request_timeout_seconds,
        )
        log_level = _log_level(os.getenv("POKEDEX_LOG_LEVEL"), "POKEDEX_LOG_LEVEL", cls.log_level)

        return cls(
            api_base_url=base_url,
            cache_interval_seconds=cache_interval,
            request_timeout_seconds=timeout,
            log_level=log_level,
        )


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings.from_env()
