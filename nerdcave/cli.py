#!/usr/bin/env python3
"""Terminal front end: reads a line, runs it, prints the styled narration."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from nerdcave.engine import GameEngine
from nerdcave.errors import ConfigError
from nerdcave.log import TranscriptLogger, configure_logging
from nerdcave.narration import Narration, Style
from nerdcave.settings import Settings, load_settings

QUIT_WORDS = {"quit", "exit"}


class Terminal:
    """Renders narration to a rich console and optionally a transcript file."""

    def __init__(self, console: Console, transcript: Optional[TranscriptLogger] = None):
        self.console = console
        self.transcript = transcript

    def show(self, narration: Narration):
        if narration.clear:
            self.console.clear()
        for line in narration:
            self.write(line.text, line.style)

    def write(self, text: str, style: Style = Style.PLAIN):
        self.console.print(escape(text), style=style.value if style is not Style.PLAIN else None)
        if self.transcript is not None:
            self.transcript.log(text)

    def prompt(self) -> str:
        return self.console.input("[user-echo]> [/user-echo]")


def build_console(settings: Settings, file=None) -> Console:
    styles = {name: value or "none" for name, value in settings.styles.items()}
    return Console(theme=Theme(styles), highlight=False, file=file)


def run(engine: GameEngine, terminal: Terminal, read_line=None) -> None:
    read_line = read_line or terminal.prompt
    terminal.show(engine.start())
    while True:
        try:
            command = read_line()
        except (EOFError, KeyboardInterrupt):
            terminal.write("")
            break

        if not command.strip():
            continue
        if command.strip().lower() in QUIT_WORDS:
            terminal.write("Bye!", Style.INFO)
            break

        if terminal.transcript is not None:
            terminal.transcript.log(f"> {command}")
        terminal.show(engine.execute(command))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play the Nerd Cave text adventure")
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument("--transcript", default=None, help="Label for a transcript log in the log dir")
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    configure_logging(settings.log_level)
    transcript = None
    if args.transcript:
        transcript = TranscriptLogger(settings.log_dir, args.transcript, echo=False)

    try:
        run(GameEngine(), Terminal(build_console(settings), transcript))
    finally:
        if transcript is not None:
            transcript.close()


if __name__ == "__main__":
    main()
