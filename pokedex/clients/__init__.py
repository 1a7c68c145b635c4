"""HTTP clients."""
from .pokeapi import PokeAPIClient, PokeAPIError  # noqa: F401
