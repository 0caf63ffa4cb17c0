"""Interactive command-line Pokedex backed by PokeAPI, with a caching API client."""

__version__ = "0.1.0"