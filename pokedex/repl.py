"""Interactive command loop for exploring PokeAPI."""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional, TextIO

from pokedex.clients.pokeapi import PokeAPIClient, PokeAPIError
from pokedex.registry import Pokedex
from pokedex.utils import clean_input

LOGGER = logging.getLogger(__name__)

PROMPT = "Pokedex > "


@dataclass(frozen=True)
class Command:
    name: str
    description: str
    handler: Callable[[List[str]], bool]
    argument: Optional[str] = None

    @property
    def usage(self) -> str:
        return f"{self.name} <{self.argument}>" if self.argument else self.name


def _prompt_lines(prompt: str) -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


class Repl:
    """Dispatches user commands against the client and the caught registry.

    Handlers return ``False`` to stop the loop.
    """

    def __init__(
        self,
        client: PokeAPIClient,
        pokedex: Optional[Pokedex] = None,
        out: TextIO = sys.stdout,
    ) -> None:
        self._client = client
        self._pokedex = pokedex if pokedex is not None else Pokedex()
        self._out = out
        self.next_url: Optional[str] = None
        self.previous_url: Optional[str] = None
        self.commands: Dict[str, Command] = {
            command.name: command
            for command in (
                Command("help", "Displays a help message", self._help),
                Command("exit", "Exit the Pokedex", self._exit),
                Command("map", "Show the next page of location areas", self._map),
                Command("mapb", "Show the previous page of location areas", self._mapb),
                Command("explore", "List the Pokemon found in an area", self._explore, "area_name"),
                Command("catch", "Try to catch a Pokemon", self._catch, "pokemon_name"),
                Command("inspect", "Show details of a caught Pokemon", self._inspect, "pokemon_name"),
                Command("pokedex", "List the Pokemon you have caught", self._list_caught),
            )
        }

    @property
    def pokedex(self) -> Pokedex:
        return self._pokedex

    def run(self, lines: Optional[Iterable[str]] = None) -> None:
        """Process ``lines`` (interactive input by default) until ``exit`` or EOF."""

        source = lines if lines is not None else _prompt_lines(PROMPT)
        for line in source:
            if not self.dispatch(line):
                return
        self._exit([])

    def dispatch(self, line: str) -> bool:
        """Run one input line; return ``False`` when the loop should stop."""

        words = clean_input(line)
        if not words:
            return True
        command = self.commands.get(words[0])
        if command is None:
            self._print("Unknown command")
            return True
        args = words[1:]
        if command.argument and not args:
            self._print(f"Usage: {command.usage}")
            return True
        try:
            return command.handler(args)
        except Exception:  # noqa: BLE001
            LOGGER.exception("command failed", extra={"command": command.name})
            raise

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def _help(self, args: List[str]) -> bool:
        self._print("Welcome to the Pokedex!")
        self._print("Usage:")
        self._print()
        for command in self.commands.values():
            self._print(f"{command.usage}: {command.description}")
        return True

    def _exit(self, args: List[str]) -> bool:
        self._print("Closing the Pokedex... Goodbye!")
        return False

    def _map(self, args: List[str]) -> bool:
        self._show_locations(self.next_url)
        return True

    def _mapb(self, args: List[str]) -> bool:
        if not self.previous_url:
            self._print("you're on the first page")
            return True
        self._show_locations(self.previous_url)
        return True

    def _show_locations(self, url: Optional[str]) -> None:
        try:
            page = self._client.fetch_locations(url)
        except PokeAPIError as exc:
            self._print(f"Error fetching locations: {exc}")
            return
        for name in page.names:
            self._print(name)
        self.next_url = page.next_url
        self.previous_url = page.previous_url

    def _explore(self, args: List[str]) -> bool:
        area_name = args[0]
        self._print(f"Exploring {area_name}...")
        try:
            area = self._client.fetch_location_area(area_name)
        except PokeAPIError as exc:
            self._print(f"Error fetching location details: {exc}")
            return True
        self._print("Found Pokemon:")
        for name in area.pokemon:
            self._print(f" - {name}")
        return True

    def _catch(self, args: List[str]) -> bool:
        name = args[0]
        self._print(f"Throwing a Pokeball at {name}...")
        try:
            pokemon = self._client.fetch_pokemon(name)
        except PokeAPIError as exc:
            self._print(f"Error fetching Pokemon details: {exc}")
            return True
        if self._pokedex.attempt_catch(name, pokemon):
            self._print(f"{name} was caught!")
        else:
            self._print(f"{name} escaped!")
        return True

    def _inspect(self, args: List[str]) -> bool:
        pokemon = self._pokedex.get(args[0])
        if pokemon is None:
            self._print("you have not caught that pokemon")
            return True
        self._print(f"Name: {pokemon.name}")
        self._print(f"Height: {pokemon.height}")
        self._print(f"Weight: {pokemon.weight}")
        self._print("Stats:")
        for stat_name, base_stat in pokemon.stats:
            self._print(f"  -{stat_name}: {base_stat}")
        self._print("Types:")
        for type_name in pokemon.types:
            self._print(f"  - {type_name}")
        return True

    def _list_caught(self, args: List[str]) -> bool:
        names = self._pokedex.names()
        if not names:
            self._print("Your Pokedex is empty.")
            return True
        self._print("Your Pokedex:")
        for name in names:
            self._print(f" - {name}")
        return True
