"""Records decoded from the JSON documents served by the Pokemon API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _require_object(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


def _str(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected a string, got {type(value).__name__}")
    return value


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected a string, got {type(value).__name__}")
    return value


def _int(data: dict, key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key}: expected an integer, got {type(value).__name__}")
    return value


def _bool(data: dict, key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{key}: expected a boolean, got {type(value).__name__}")
    return value


def _list(data: dict, key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{key}: expected an array, got {type(value).__name__}")
    return value


def _object(data: dict, key: str) -> dict:
    value = data.get(key)
    if value is None:
        return {}
    return _require_object(value, key)


@dataclass(frozen=True)
class NamedResource:
    """A name together with the API URL of the resource it names."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_json(cls, data: Any) -> NamedResource:
        data = _require_object(data, "named resource")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: tuple[NamedResource, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data: Any) -> LocationPage:
        data = _require_object(data, "location page")
        return cls(
            count=_int(data, "count"),
            next=_optional_str(data, "next"),
            previous=_optional_str(data, "previous"),
            results=tuple(NamedResource.from_json(r) for r in _list(data, "results")),
        )


@dataclass(frozen=True)
class Location:
    """A location area and the Pokemon that can be encountered there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: tuple[NamedResource, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data: Any) -> Location:
        data = _require_object(data, "location")
        encounters = tuple(
            NamedResource.from_json(_object(_require_object(enc, "encounter"), "pokemon"))
            for enc in _list(data, "pokemon_encounters")
        )
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            game_index=_int(data, "game_index"),
            location=NamedResource.from_json(_object(data, "location")),
            pokemon_encounters=encounters,
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a Pokemon."""

    name: str = ""
    base_stat: int = 0
    effort: int = 0

    @classmethod
    def from_json(cls, data: Any) -> PokemonStat:
        data = _require_object(data, "stat")
        return cls(
            name=_str(_object(data, "stat"), "name"),
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
        )


@dataclass(frozen=True)
class PokemonType:
    """One of the types of a Pokemon, in its slot."""

    name: str = ""
    slot: int = 0

    @classmethod
    def from_json(cls, data: Any) -> PokemonType:
        data = _require_object(data, "type")
        return cls(name=_str(_object(data, "type"), "name"), slot=_int(data, "slot"))


@dataclass(frozen=True)
class Pokemon:
    """A Pokemon as described by the API."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    location_area_encounters: str = ""
    species: NamedResource = field(default_factory=NamedResource)
    abilities: tuple[NamedResource, ...] = field(default_factory=tuple)
    forms: tuple[NamedResource, ...] = field(default_factory=tuple)
    moves: tuple[NamedResource, ...] = field(default_factory=tuple)
    stats: tuple[PokemonStat, ...] = field(default_factory=tuple)
    types: tuple[PokemonType, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data: Any) -> Pokemon:
        data = _require_object(data, "pokemon")
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            order=_int(data, "order"),
            is_default=_bool(data, "is_default"),
            location_area_encounters=_str(data, "location_area_encounters"),
            species=NamedResource.from_json(_object(data, "species")),
            abilities=tuple(
                NamedResource.from_json(_object(_require_object(a, "ability"), "ability"))
                for a in _list(data, "abilities")
            ),
            forms=tuple(NamedResource.from_json(f) for f in _list(data, "forms")),
            moves=tuple(
                NamedResource.from_json(_object(_require_object(m, "move"), "move"))
                for m in _list(data, "moves")
            ),
            stats=tuple(PokemonStat.from_json(s) for s in _list(data, "stats")),
            types=tuple(PokemonType.from_json(t) for t in _list(data, "types")),
        )