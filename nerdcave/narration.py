"""Styled output lines produced by command handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Style(str, Enum):
    PLAIN = "plain"
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    USER_ECHO = "user-echo"


@dataclass(frozen=True)
class Line:
    text: str
    style: Style = Style.PLAIN


@dataclass
class Narration:
    """Ordered lines for one command.

    ``clear`` asks the presentation layer to wipe what it has rendered so far
    before showing these lines. It carries no game meaning.
    """

    lines: list[Line] = field(default_factory=list)
    clear: bool = False

    def say(self, text: str = "", style: Style = Style.PLAIN) -> "Narration":
        self.lines.append(Line(text, style))
        return self

    def success(self, text: str) -> "Narration":
        return self.say(text, Style.SUCCESS)

    def error(self, text: str) -> "Narration":
        return self.say(text, Style.ERROR)

    def info(self, text: str) -> "Narration":
        return self.say(text, Style.INFO)

    def blank(self) -> "Narration":
        return self.say("")

    def extend(self, other: "Narration") -> "Narration":
        self.lines.extend(other.lines)
        self.clear = self.clear or other.clear
        return self

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)

    def styles(self) -> list[Style]:
        return [line.style for line in self.lines]

    def __iter__(self):
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __str__(self) -> str:
        return self.text
