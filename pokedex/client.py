"""A caching client for the Pokemon API."""

from __future__ import annotations

import json
import urllib.request
from typing import Any, Callable, TypeVar

from pokedex.cache import Cache
from pokedex.models import Location, LocationPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"

Fetch = Callable[[str, float], bytes]

_Model = TypeVar("_Model", LocationPage, Location, Pokemon)


class ApiError(Exception):
    """A request failed or its response could not be decoded."""


def _http_get(url: str, timeout: float) -> bytes:
    with urllib.request.urlopen(url, timeout=timeout) as response:
        return response.read()


class Client:
    """Fetches API documents, keeping raw responses in an expiring cache.

    ``fetch`` is called as ``fetch(url, timeout)`` and returns the response
    body; by default it performs an HTTP GET.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        cache_interval: float = 300.0,
        fetch: Fetch | None = None,
    ) -> None:
        self._timeout = timeout
        self._cache = Cache(cache_interval)
        self._fetch = fetch if fetch is not None else _http_get

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return a page of location areas; the first page when no URL is given."""
        url = page_url if page_url is not None else f"{BASE_URL}/location-area"
        return self._load(url, LocationPage)

    def get_location(self, location_name: str) -> Location:
        """Return the location area with the given name."""
        return self._load(f"{BASE_URL}/location-area/{location_name}", Location)

    def get_pokemon(self, pokemon_name: str) -> Pokemon:
        """Return the Pokemon with the given name."""
        return self._load(f"{BASE_URL}/pokemon/{pokemon_name}", Pokemon)

    def close(self) -> None:
        """Stop the cache's background reaper."""
        self._cache.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _load(self, url: str, model: type[_Model]) -> _Model:
        cached = self._cache.get(url)
        if cached is not None:
            return self._decode(cached, url, model)

        try:
            body = self._fetch(url, self._timeout)
        except OSError as exc:
            raise ApiError(f"request to {url} failed: {exc}") from exc

        result = self._decode(body, url, model)
        self._cache.add(url, body)
        return result

    @staticmethod
    def _decode(body: bytes, url: str, model: type[_Model]) -> _Model:
        try:
            data: Any = json.loads(body)
            return model.from_json(data)
        except ValueError as exc:
            raise ApiError(f"invalid response from {url}: {exc}") from exc