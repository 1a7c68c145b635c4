"""In-memory registry of caught Pokemon."""
from __future__ import annotations

import random
from typing import Dict, List, Optional

from pokedex.models import Pokemon


class Pokedex:
    """Holds the Pokemon caught during this session, keyed by name."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self._caught: Dict[str, Pokemon] = {}

    def attempt_catch(self, name: str, pokemon: Pokemon) -> bool:
        """Roll against base experience; an even roll stores ``pokemon`` under ``name``.

        ``name`` is what the user typed (a name or a numeric id), so later
        lookups with the same input find the entry.
        """

        roll = self._rng.randint(0, max(pokemon.base_experience, 0))
        if roll % 2:
            return False
        self._caught[name] = pokemon
        return True

    def get(self, name: str) -> Optional[Pokemon]:
        return self._caught.get(name)

    def names(self) -> List[str]:
        return list(self._caught)

    def __contains__(self, name: object) -> bool:
        return name in self._caught

    def __len__(self) -> int:
        return len(self._caught)
