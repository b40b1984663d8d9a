"""Logging setup and the session transcript writer."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


class TranscriptLogger:
    """Tees output to both stdout and a log file, flushing after every write."""

    def __init__(self, log_dir: str, label: str, echo: bool = True):
        os.makedirs(log_dir, exist_ok=True)
        safe = label.replace(" ", "_").replace("/", "_")
        self.path = os.path.join(log_dir, f"{safe}.log")
        self.echo = echo
        self.f = open(self.path, "w", encoding="utf-8")

    def log(self, msg: str = ""):
        if self.echo:
            print(msg)
        self.f.write(msg + "\n")
        self.f.flush()

    def close(self):
        self.f.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
