# pokedex

An interactive command-line Pokedex. You can page through the location areas
of the Pokemon world and explore an area to see which Pokemon can be met there.
You can also try to catch Pokemon and inspect the ones you have caught. The data
comes from the public PokeAPI over HTTP.

Raw responses are kept in an in-memory cache. Every five minutes, entries older
than five minutes are dropped. Until then, going back over the same pages or
Pokemon does not repeat the request.

## Installation

```
pip install .
```

The package needs Python 3.10 or later and nothing outside the standard
library.

## Usage

Start the prompt:

```
pokedex
```

Type commands at the `Pokedex > ` prompt. Input is lower-cased and split on
whitespace, so case and extra spaces do not matter.

| Command                   | What it does                        |
|---------------------------|-------------------------------------|
| `help`                    | Displays a help message             |
| `map`                     | Get the next page of locations      |
| `mapb`                    | Get the previous page of locations  |
| `explore <location_name>` | Explore a location                  |
| `catch <pokemon_name>`    | Attempt to catch a pokemon          |
| `inspect <pokemon_name>`  | View details about a caught Pokemon |
| `pokedex`                 | See all the pokemon you've caught   |
| `exit`                    | Exit the Pokedex                    |

The prompt answers these cases as follows:

- An unknown word prints `Unknown command`.
- A command used wrongly prints a short message, then the prompt continues.
  This covers a missing argument, `mapb` on the first page, and inspecting a
  Pokemon you have not caught.
- A failed request or an unreadable response also prints a short message,
  then the prompt continues.
- The session ends on `exit` or at the end of input.

A short session looks like this (the names come from the API):

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Found Pokemon:
 - tentacool
 - tentacruel
...
Pokedex > catch tentacool
Throwing a Pokeball at tentacool...
tentacool was caught!
You may now inspect it with the inspect command.
Pokedex > inspect tentacool
Name: tentacool
Height: ...
Weight: ...
Stats:
  -hp: ...
...
Types:
  - water
  - poison
```

### How catching works

Catching is left to chance. The program draws a random number from 0 up to the
Pokemon's base experience. The Pokemon is caught when that number is 40 or
less. The higher a Pokemon's base experience, the more likely it is to escape.

## Using it as a library

You can use the pieces behind the prompt on their own.

- `pokedex.cache.Cache(interval)` is a thread-safe map from keys to bytes.
  - Its methods are `add(key, value)` and `get(key)`; `get` returns `None` for a
    missing key.
  - It supports `in` and `len()`.
  - A background thread drops, once per `interval` seconds, the entries older
    than `interval`.
  - `close()` stops that thread. The cache is also a context manager.
- `pokedex.client.Client(timeout=5.0, cache_interval=300.0, fetch=None)`
  fetches documents and caches the raw responses.
  - `list_locations(page_url=None)` returns a `LocationPage`.
  - `get_location(name)` returns a `Location`.
  - `get_pokemon(name)` returns a `Pokemon`.
  - Failures raise `pokedex.client.ApiError`.
  - `fetch`, if given, is called as `fetch(url, timeout)` and must return the
    response body. This lets you supply documents without network access.
  - `close()` stops the cache's thread. The client is also a context manager.
- `pokedex.models` defines `NamedResource`, `LocationPage`, `Location`,
  `PokemonStat`, `PokemonType` and `Pokemon`. These are frozen dataclasses, and
  each is built from decoded JSON with `from_json`.
- `pokedex.commands` holds the command functions, `get_commands()`, `Command`,
  `CommandError` and `Config`.
  - `Config` holds the session state: the client, the paging URLs and the
    caught Pokemon.
  - It also holds the random generator and the output stream.
- `pokedex.repl` holds `clean_input(text)`, `start_repl(cfg, stream=None)` and
  the `main(argv=None)` entry point.

## What it does not do

Caught Pokemon are kept only in memory for the current session; nothing is
saved to disk, so the Pokedex starts empty each time.

## Running the tests

```
pip install ".[test]"
pytest
```