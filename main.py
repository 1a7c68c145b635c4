"""Run the Pokedex explorer from a source checkout."""
from pokedex.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
