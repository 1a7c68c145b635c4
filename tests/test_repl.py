from __future__ import annotations

import io
import random

import pytest

from pokedex.clients.pokeapi import PokeAPIError
from pokedex.models import LocationArea, LocationPage, Pokemon
from pokedex.registry import Pokedex
from pokedex.repl import Repl

PIKACHU = Pokemon(
    name="pikachu",
    height=4,
    weight=60,
    base_experience=112,
    stats=[("hp", 35), ("speed", 90)],
    types=["electric"],
)


class FakePokeClient:
    def __init__(self) -> None:
        self.pages = {}
        self.areas = {}
        self.pokemon = {}
        self.location_calls = []

    def fetch_locations(self, url=None):  # noqa: D401
        """Return the preset page for ``url``."""

        self.location_calls.append(url)
        return self.pages[url]

    def fetch_location_area(self, name):
        if name not in self.areas:
            raise PokeAPIError("Not found.")
        return self.areas[name]

    def fetch_pokemon(self, name):
        if name not in self.pokemon:
            raise PokeAPIError("Not found.")
        return self.pokemon[name]


class FixedRandom(random.Random):
    def __init__(self, value: int) -> None:
        super().__init__()
        self.value = value

    def randint(self, a, b):
        return self.value


@pytest.fixture()
def fake():
    fake = FakePokeClient()
    fake.pages[None] = LocationPage(["area-1", "area-2"], "page-2", None)
    fake.pages["page-2"] = LocationPage(["area-3"], None, "page-1")
    fake.pages["page-1"] = LocationPage(["area-1", "area-2"], "page-2", None)
    fake.areas["area-1"] = LocationArea("area-1", ["pikachu", "pidgey"])
    fake.pokemon["pikachu"] = PIKACHU
    fake.pokemon["25"] = PIKACHU
    return fake


def make_repl(fake, roll: int = 0):
    out = io.StringIO()
    repl = Repl(fake, Pokedex(rng=FixedRandom(roll)), out=out)
    return repl, out


def test_map_pages_forward_and_back(fake):
    repl, out = make_repl(fake)

    repl.run(["map", "map", "mapb", "exit"])

    assert out.getvalue().splitlines() == [
        "area-1",
        "area-2",
        "area-3",
        "area-1",
        "area-2",
        "Closing the Pokedex... Goodbye!",
    ]
    assert fake.location_calls == [None, "page-2", "page-1"]


def test_mapb_on_first_page(fake):
    repl, out = make_repl(fake)

    repl.dispatch("mapb")

    assert out.getvalue() == "you're on the first page\n"
    assert fake.location_calls == []


def test_explore_lists_encounters(fake):
    repl, out = make_repl(fake)

    repl.dispatch("  EXPLORE   Area-1 ")

    assert out.getvalue().splitlines() == [
        "Exploring area-1...",
        "Found Pokemon:",
        " - pikachu",
        " - pidgey",
    ]


def test_fetch_error_is_reported_and_loop_continues(fake):
    repl, out = make_repl(fake)

    assert repl.dispatch("explore nowhere") is True

    assert "Error fetching location details: Not found." in out.getvalue()


def test_catch_then_inspect(fake):
    repl, out = make_repl(fake, roll=2)

    repl.run(["catch pikachu", "inspect pikachu", "pokedex"])

    assert out.getvalue().splitlines() == [
        "Throwing a Pokeball at pikachu...",
        "pikachu was caught!",
        "Name: pikachu",
        "Height: 4",
        "Weight: 60",
        "Stats:",
        "  -hp: 35",
        "  -speed: 90",
        "Types:",
        "  - electric",
        "Your Pokedex:",
        " - pikachu",
        "Closing the Pokedex... Goodbye!",
    ]


def test_odd_roll_escapes(fake):
    repl, out = make_repl(fake, roll=3)

    repl.dispatch("catch pikachu")
    repl.dispatch("inspect pikachu")

    assert out.getvalue().splitlines() == [
        "Throwing a Pokeball at pikachu...",
        "pikachu escaped!",
        "you have not caught that pokemon",
    ]
    assert "pikachu" not in repl.pokedex


def test_missing_argument_prints_usage(fake):
    repl, out = make_repl(fake)

    repl.dispatch("catch")

    assert out.getvalue() == "Usage: catch <pokemon_name>\n"


def test_unknown_and_blank_input(fake):
    repl, out = make_repl(fake)

    assert repl.dispatch("   ") is True
    assert repl.dispatch("fly") is True

    assert out.getvalue() == "Unknown command\n"


def test_help_lists_commands(fake):
    repl, out = make_repl(fake)

    repl.dispatch("help")

    text = out.getvalue()
    assert text.startswith("Welcome to the Pokedex!\nUsage:\n\n")
    for name in ("help", "exit", "map", "mapb", "explore <area_name>", "catch", "inspect", "pokedex"):
        assert name in text


def test_empty_pokedex(fake):
    repl, out = make_repl(fake)

    repl.dispatch("pokedex")

    assert out.getvalue() == "Your Pokedex is empty.\n"


def test_exit_stops_processing(fake):
    repl, out = make_repl(fake)

    repl.run(["exit", "map"])

    assert out.getvalue() == "Closing the Pokedex... Goodbye!\n"
    assert fake.location_calls == []


def test_catch_by_id_then_inspect_by_same_id(fake):
    repl, out = make_repl(fake, roll=0)

    repl.run(["catch 25", "inspect 25"])

    lines = out.getvalue().splitlines()
    assert lines[:3] == ["Throwing a Pokeball at 25...", "25 was caught!", "Name: pikachu"]
    assert "25" in repl.pokedex


def test_interactive_input_ends_on_eof(fake, monkeypatch):
    repl, out = make_repl(fake)
    prompts = []
    answers = iter(["pokedex"])

    def fake_input(prompt):
        prompts.append(prompt)
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)

    repl.run()

    assert prompts == ["Pokedex > ", "Pokedex > "]
    assert out.getvalue().splitlines() == [
        "Your Pokedex is empty.",
        "Closing the Pokedex... Goodbye!",
    ]
