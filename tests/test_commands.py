import io

import pytest

from pokedex.client import ApiError
from pokedex.commands import (
    CommandError,
    Config,
    command_catch,
    command_exit,
    command_explore,
    command_help,
    command_inspect,
    command_mapb,
    command_mapf,
    command_pokedex,
    get_commands,
)
from pokedex.models import (
    Location,
    LocationPage,
    NamedResource,
    Pokemon,
    PokemonStat,
    PokemonType,
)


class FakeClient:
    def __init__(self, pokemon=(), locations=(), pages=None):
        self.pokemon = {p.name: p for p in pokemon}
        self.locations = {loc.name: loc for loc in locations}
        self.pages = pages or {}
        self.requested_pages = []

    def get_pokemon(self, name):
        try:
            return self.pokemon[name]
        except KeyError:
            raise ApiError(f"no pokemon {name}") from None

    def get_location(self, name):
        try:
            return self.locations[name]
        except KeyError:
            raise ApiError(f"no location {name}") from None

    def list_locations(self, page_url=None):
        self.requested_pages.append(page_url)
        return self.pages[page_url]


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.bounds = []

    def randrange(self, stop):
        self.bounds.append(stop)
        return self.value


PIKACHU = Pokemon(
    name="pikachu",
    base_experience=112,
    height=4,
    weight=60,
    stats=(PokemonStat(name="hp", base_stat=35), PokemonStat(name="speed", base_stat=90)),
    types=(PokemonType(name="electric", slot=1),),
)


def make_config(client, rng=None):
    cfg = Config(client=client, out=io.StringIO())
    if rng is not None:
        cfg.rng = rng
    return cfg


def lines(cfg):
    return cfg.out.getvalue().splitlines()


def test_catch_success_records_pokemon():
    cfg = make_config(FakeClient(pokemon=[PIKACHU]), FixedRng(40))
    command_catch(cfg, "pikachu")
    assert cfg.caught_pokemon == {"pikachu": PIKACHU}
    assert lines(cfg) == [
        "Throwing a Pokeball at pikachu...",
        "pikachu was caught!",
        "You may now inspect it with the inspect command.",
    ]


def test_catch_rolls_against_base_experience():
    rng = FixedRng(0)
    cfg = make_config(FakeClient(pokemon=[PIKACHU]), rng)
    command_catch(cfg, "pikachu")
    assert rng.bounds == [PIKACHU.base_experience]


def test_catch_escape_leaves_pokedex_empty():
    cfg = make_config(FakeClient(pokemon=[PIKACHU]), FixedRng(41))
    command_catch(cfg, "pikachu")
    assert cfg.caught_pokemon == {}
    assert lines(cfg) == ["Throwing a Pokeball at pikachu...", "pikachu escaped!"]


def test_catch_low_experience_always_caught():
    weak = Pokemon(name="magikarp", base_experience=1)
    cfg = make_config(FakeClient(pokemon=[weak]))
    command_catch(cfg, "magikarp")
    assert "magikarp" in cfg.caught_pokemon


@pytest.mark.parametrize("args", [(), ("a", "b")])
def test_catch_requires_one_argument(args):
    cfg = make_config(FakeClient())
    with pytest.raises(CommandError, match="you must provide a pokemon name"):
        command_catch(cfg, *args)


def test_catch_zero_experience_is_an_error():
    cfg = make_config(FakeClient(pokemon=[Pokemon(name="ditto")]))
    with pytest.raises(CommandError):
        command_catch(cfg, "ditto")
    assert cfg.caught_pokemon == {}


def test_catch_propagates_client_error():
    cfg = make_config(FakeClient())
    with pytest.raises(ApiError):
        command_catch(cfg, "missingno")


def test_inspect_shows_details():
    cfg = make_config(FakeClient())
    cfg.caught_pokemon["pikachu"] = PIKACHU
    command_inspect(cfg, "pikachu")
    assert lines(cfg) == [
        "Name: pikachu",
        "Height: 4",
        "Weight: 60",
        "Stats:",
        "  -hp: 35",
        "  -speed: 90",
        "Types:",
        "  - electric",
    ]


def test_inspect_uncaught_pokemon():
    cfg = make_config(FakeClient())
    with pytest.raises(CommandError, match="you have not caught that pokemon"):
        command_inspect(cfg, "pikachu")


def test_inspect_requires_one_argument():
    cfg = make_config(FakeClient())
    with pytest.raises(CommandError, match="you must provide a pokemon name"):
        command_inspect(cfg)


def test_pokedex_lists_caught():
    cfg = make_config(FakeClient())
    cfg.caught_pokemon["pikachu"] = PIKACHU
    cfg.caught_pokemon["bulbasaur"] = Pokemon(name="bulbasaur")
    command_pokedex(cfg)
    assert lines(cfg) == ["Your Pokedex:", " - pikachu", " - bulbasaur"]


def test_pokedex_empty():
    cfg = make_config(FakeClient())
    command_pokedex(cfg)
    assert lines(cfg) == ["Your Pokedex:"]


def test_explore_lists_encounters():
    area = Location(
        name="canalave-city-area",
        pokemon_encounters=(NamedResource(name="tentacool"), NamedResource(name="staryu")),
    )
    cfg = make_config(FakeClient(locations=[area]))
    command_explore(cfg, "canalave-city-area")
    assert lines(cfg) == [
        "Exploring canalave-city-area...",
        "Found Pokemon: ",
        " - tentacool",
        " - staryu",
    ]


def test_explore_requires_one_argument():
    cfg = make_config(FakeClient())
    with pytest.raises(CommandError, match="you must provide a location name"):
        command_explore(cfg)


def _pages():
    first = LocationPage(
        next="page2", previous=None, results=(NamedResource(name="a"), NamedResource(name="b"))
    )
    second = LocationPage(next="page3", previous="page1", results=(NamedResource(name="c"),))
    return {None: first, "page1": first, "page2": second}


def test_mapf_walks_forward_and_updates_urls():
    client = FakeClient(pages=_pages())
    cfg = make_config(client)
    command_mapf(cfg)
    assert lines(cfg) == ["a", "b"]
    assert cfg.next_locations_url == "page2"
    assert cfg.prev_locations_url is None
    command_mapf(cfg)
    assert lines(cfg)[-1] == "c"
    assert cfg.next_locations_url == "page3"
    assert cfg.prev_locations_url == "page1"
    assert client.requested_pages == [None, "page2"]


def test_mapb_on_first_page():
    cfg = make_config(FakeClient(pages=_pages()))
    with pytest.raises(CommandError, match="you're on the first page"):
        command_mapb(cfg)


def test_mapb_goes_back():
    client = FakeClient(pages=_pages())
    cfg = make_config(client)
    command_mapf(cfg)
    command_mapf(cfg)
    command_mapb(cfg)
    assert client.requested_pages[-1] == "page1"
    assert lines(cfg)[-2:] == ["a", "b"]
    assert cfg.prev_locations_url is None


def test_exit_says_goodbye():
    cfg = make_config(FakeClient())
    with pytest.raises(SystemExit) as info:
        command_exit(cfg)
    assert info.value.code == 0
    assert lines(cfg) == ["Closing the Pokedex... Goodbye!"]


def test_help_lists_every_command():
    cfg = make_config(FakeClient())
    command_help(cfg)
    output = lines(cfg)
    assert "Welcome to the Pokedex!" in output
    for command in get_commands().values():
        assert f"{command.name}: {command.description}" in output


def test_get_commands_keys_and_callbacks():
    commands = get_commands()
    assert set(commands) == {"help", "catch", "inspect", "pokedex", "explore", "map", "mapb", "exit"}
    assert commands["map"].callback is command_mapf
    assert commands["catch"].name == "catch <pokemon_name>"