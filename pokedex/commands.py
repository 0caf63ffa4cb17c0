"""The commands understood by the Pokedex prompt."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, TextIO

from pokedex.client import Client
from pokedex.models import LocationPage, Pokemon

CATCH_THRESHOLD = 40


class CommandError(Exception):
    """A command could not be carried out; the message is shown to the user."""


@dataclass
class Config:
    """State shared by all commands during a session."""

    client: Client
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    caught_pokemon: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)
    out: TextIO | None = None


@dataclass(frozen=True)
class Command:
    """A named command, its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def _say(cfg: Config, *values: object) -> None:
    print(*values, file=cfg.out)


def _single_argument(args: tuple[str, ...], message: str) -> str:
    if len(args) != 1:
        raise CommandError(message)
    return args[0]


def command_help(cfg: Config, *args: str) -> None:
    """Show every command with its description."""
    _say(cfg)
    _say(cfg, "Welcome to the Pokedex!")
    _say(cfg, "Usage:")
    _say(cfg)
    for command in get_commands().values():
        _say(cfg, f"{command.name}: {command.description}")
    _say(cfg)


def command_catch(cfg: Config, *args: str) -> None:
    """Throw a Pokeball; a Pokemon with more base experience escapes more often."""
    name = _single_argument(args, "you must provide a pokemon name")
    pokemon = cfg.client.get_pokemon(name)
    if pokemon.base_experience <= 0:
        raise CommandError(f"{pokemon.name} has no base experience to catch against")

    roll = cfg.rng.randrange(pokemon.base_experience)

    _say(cfg, f"Throwing a Pokeball at {pokemon.name}...")
    if roll > CATCH_THRESHOLD:
        _say(cfg, f"{pokemon.name} escaped!")
        return

    _say(cfg, f"{pokemon.name} was caught!")
    _say(cfg, "You may now inspect it with the inspect command.")
    cfg.caught_pokemon[pokemon.name] = pokemon


def command_inspect(cfg: Config, *args: str) -> None:
    """Show the details of a Pokemon that has been caught."""
    name = _single_argument(args, "you must provide a pokemon name")
    pokemon = cfg.caught_pokemon.get(name)
    if pokemon is None:
        raise CommandError("you have not caught that pokemon")

    _say(cfg, "Name:", pokemon.name)
    _say(cfg, "Height:", pokemon.height)
    _say(cfg, "Weight:", pokemon.weight)
    _say(cfg, "Stats:")
    for stat in pokemon.stats:
        _say(cfg, f"  -{stat.name}: {stat.base_stat}")
    _say(cfg, "Types:")
    for type_info in pokemon.types:
        _say(cfg, "  -", type_info.name)


def command_pokedex(cfg: Config, *args: str) -> None:
    """List every Pokemon caught so far."""
    _say(cfg, "Your Pokedex:")
    for pokemon in cfg.caught_pokemon.values():
        _say(cfg, f" - {pokemon.name}")


def command_explore(cfg: Config, *args: str) -> None:
    """List the Pokemon that can be encountered in a location area."""
    name = _single_argument(args, "you must provide a location name")
    location = cfg.client.get_location(name)
    _say(cfg, f"Exploring {location.name}...")
    _say(cfg, "Found Pokemon: ")
    for encounter in location.pokemon_encounters:
        _say(cfg, f" - {encounter.name}")


def _show_page(cfg: Config, page: LocationPage) -> None:
    cfg.next_locations_url = page.next
    cfg.prev_locations_url = page.previous
    for location in page.results:
        _say(cfg, location.name)


def command_mapf(cfg: Config, *args: str) -> None:
    """Show the next page of location areas."""
    _show_page(cfg, cfg.client.list_locations(cfg.next_locations_url))


def command_mapb(cfg: Config, *args: str) -> None:
    """Show the previous page of location areas."""
    if cfg.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_page(cfg, cfg.client.list_locations(cfg.prev_locations_url))


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye and leave the program."""
    _say(cfg, "Closing the Pokedex... Goodbye!")
    raise SystemExit(0)


def get_commands() -> dict[str, Command]:
    """Return the commands, keyed by the word that starts them."""
    return {
        "help": Command("help", "Displays a help message", command_help),
        "catch": Command("catch <pokemon_name>", "Attempt to catch a pokemon", command_catch),
        "inspect": Command(
            "inspect <pokemon_name>", "View details about a caught Pokemon", command_inspect
        ),
        "pokedex": Command("pokedex", "See all the pokemon you've caught", command_pokedex),
        "explore": Command("explore <location_name>", "Explore a location", command_explore),
        "map": Command("map", "Get the next page of locations", command_mapf),
        "mapb": Command("mapb", "Get the previous page of locations", command_mapb),
        "exit": Command("exit", "Exit the Pokedex", command_exit),
    }