"""Typed views over PokeAPI response payloads."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


def _require(payload: Any, key: str) -> Any:
    if not isinstance(payload, dict) or key not in payload:
        raise ValueError(f"Missing field in response: {key}")
    return payload[key]


def _names(items: Any, *path: str) -> List[str]:
    if not isinstance(items, list):
        raise ValueError(f"Expected a list for {'.'.join(path) or 'items'}")
    names = []
    for item in items:
        for key in path:
            item = _require(item, key)
        names.append(str(_require(item, "name")))
    return names


@dataclass(frozen=True)
class LocationPage:
    """One page of the ``location-area`` listing."""

    names: List[str]
    next_url: Optional[str]
    previous_url: Optional[str]

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "LocationPage":
        return cls(
            names=_names(_require(payload, "results")),
            next_url=payload.get("next") or None,
            previous_url=payload.get("previous") or None,
        )


@dataclass(frozen=True)
class LocationArea:
    name: str
    pokemon: List[str]

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "LocationArea":
        return cls(
            name=str(_require(payload, "name")),
            pokemon=_names(_require(payload, "pokemon_encounters"), "pokemon"),
        )


@dataclass(frozen=True)
class Pokemon:
    name: str
    height: int
    weight: int
    base_experience: int
    stats: List[Tuple[str, int]]
    types: List[str]

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Pokemon":
        try:
            stats = [
                (str(_require(_require(item, "stat"), "name")), int(_require(item, "base_stat")))
                for item in _require(payload, "stats")
            ]
            return cls(
                name=str(_require(payload, "name")),
                height=int(_require(payload, "height")),
                weight=int(_require(payload, "weight")),
                # Some forms report null base experience.
                base_experience=int(payload.get("base_experience") or 0),
                stats=stats,
                types=_names(_require(payload, "types"), "type"),
            )
        except TypeError as exc:
            raise ValueError(f"Malformed pokemon payload: {exc}") from exc
