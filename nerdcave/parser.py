"""Turn a raw input line into a verb and a target phrase."""

from __future__ import annotations

from typing import NamedTuple


class Command(NamedTuple):
    verb: str
    target: str

    @property
    def is_empty(self) -> bool:
        return not self.verb


def parse(raw: str) -> Command:
    parts = raw.strip().lower().split()
    if not parts:
        return Command("", "")
    return Command(parts[0], " ".join(parts[1:]))
