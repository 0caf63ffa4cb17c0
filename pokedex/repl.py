"""The interactive prompt and the program's entry point."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from pokedex.client import ApiError, Client
from pokedex.commands import CommandError, Config, get_commands

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case the text and split it into words."""
    return text.lower().split()


def start_repl(cfg: Config, stream: TextIO | None = None) -> None:
    """Read commands line by line until the input ends or a command exits."""
    source = sys.stdin if stream is None else stream
    commands = get_commands()
    while True:
        print(PROMPT, end="", file=cfg.out, flush=True)
        line = source.readline()
        if not line:
            print(file=cfg.out)
            return

        words = clean_input(line)
        if not words:
            continue

        name, *args = words
        command = commands.get(name)
        if command is None:
            print("Unknown command", file=cfg.out)
            continue

        try:
            command.callback(cfg, *args)
        except (CommandError, ApiError) as exc:
            print(exc, file=cfg.out)


def main(argv: list[str] | None = None) -> int:
    """Start an interactive Pokedex session on standard input."""
    parser = argparse.ArgumentParser(prog="pokedex", description="An interactive Pokedex.")
    parser.parse_args(argv)
    with Client(timeout=5.0, cache_interval=300.0) as client:
        start_repl(Config(client=client))
    return 0