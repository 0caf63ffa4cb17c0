"""A thread-safe byte cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class _Entry:
    created_at: float
    value: bytes


class Cache:
    """Maps keys to byte strings.

    A background thread runs once per ``interval`` seconds. Each run drops
    every entry that is older than ``interval``.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self._interval = float(interval)
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    @property
    def interval(self) -> float:
        """Seconds between reaps, and also the lifetime of an entry."""
        return self._interval

    def add(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``. An existing entry is replaced."""
        entry = _Entry(created_at=time.monotonic(), value=bytes(value))
        with self._lock:
            self._entries[key] = entry

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.value

    def close(self) -> None:
        """Stop the background reaper. Entries stay in place and never expire."""
        self._stop.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self._interval):
            self._reap(time.monotonic())

    def _reap(self, now: float) -> None:
        cutoff = now - self._interval
        with self._lock:
            self._entries = {
                key: entry
                for key, entry in self._entries.items()
                if entry.created_at >= cutoff
            }