"""Nerd Cave: a tiny text adventure engine."""

from nerdcave.engine import GameEngine
from nerdcave.narration import Line, Narration, Style

__all__ = ["GameEngine", "Line", "Narration", "Style"]
__version__ = "0.3.0"
