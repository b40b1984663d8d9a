"""Core game engine: command interpreter over an explicit GameState, no I/O."""

from __future__ import annotations

import logging
from enum import Enum

from nerdcave import handlers, nouns
from nerdcave.narration import Narration
from nerdcave.parser import parse
from nerdcave.state import GameState
from nerdcave.world import CLOTHES, KEY, WELCOME

logger = logging.getLogger(__name__)


class Action(Enum):
    LOOK = "look"
    MOVE = "move"
    TAKE = "take"
    INVENTORY = "inventory"
    USE = "use"
    HELP = "help"
    RESET_VIEW = "reset_view"


DIRECTIONS = ("north", "south", "east", "west")

VERBS = {
    "look": Action.LOOK,
    "l": Action.LOOK,
    "go": Action.MOVE,
    "move": Action.MOVE,
    "take": Action.TAKE,
    "get": Action.TAKE,
    "pickup": Action.TAKE,
    "pick": Action.TAKE,
    "inventory": Action.INVENTORY,
    "inv": Action.INVENTORY,
    "i": Action.INVENTORY,
    "use": Action.USE,
    "flip": Action.USE,
    "turn": Action.USE,
    "switch": Action.USE,
    "help": Action.HELP,
    "?": Action.HELP,
    "clear": Action.RESET_VIEW,
    "cls": Action.RESET_VIEW,
}
VERBS.update({direction: Action.MOVE for direction in DIRECTIONS})

WEAR_VERBS = {"wear", "put"}
UNLOCK_VERBS = {"unlock", "open"}

# Actions that refuse an empty target, with the prompt to show instead.
TARGET_PROMPTS = {
    Action.MOVE: "Go where? Try: GO NORTH",
    Action.TAKE: "Take what?",
    Action.USE: "Use what?",
}


class GameEngine:
    def __init__(self, state: GameState | None = None):
        self.state = state if state is not None else GameState.new()
        self.turns = 0
        self.dispatch = {
            Action.LOOK: handlers.look,
            Action.MOVE: handlers.move,
            Action.TAKE: handlers.take,
            Action.INVENTORY: handlers.inventory,
            Action.USE: handlers.use,
            Action.HELP: handlers.show_help,
            Action.RESET_VIEW: handlers.reset_view,
        }

    def start(self) -> Narration:
        """Opening narration for a new session."""
        out = Narration()
        for line in WELCOME:
            out.say(line)
        return out.extend(handlers.render(self.state))

    def execute(self, command: str) -> Narration:
        """Parse and execute one input line."""
        verb, target = parse(command)
        if not verb:
            return Narration()

        if verb in DIRECTIONS:
            target = verb

        if verb in WEAR_VERBS:
            if not nouns.mentions(target, CLOTHES):
                return Narration().error("Wear what?")
            action, target = Action.USE, CLOTHES
        elif verb in UNLOCK_VERBS:
            if not nouns.mentions(target, nouns.DOOR):
                return Narration().error("You can't open that.")
            action, target = Action.USE, KEY
        else:
            action = VERBS.get(verb)

        if action is None:
            logger.debug("unrecognised input %r", command)
            return Narration().error(
                f'I don\'t understand "{command.strip()}". Try HELP for available commands.'
            )

        if not target and action in TARGET_PROMPTS:
            return Narration().error(TARGET_PROMPTS[action])

        self.turns += 1
        logger.debug("turn %d: %s %r in %s", self.turns, action.value, target, self.state.current_room)
        return self.dispatch[action](self.state, target)

    def is_won(self) -> bool:
        return self.state.flags["won"]

    def is_lost(self) -> bool:
        return self.state.flags["lost"]

    def get_state(self) -> dict:
        return {
            "current_room": self.state.current_room,
            "inventory": list(self.state.inventory),
            "visited": sorted(self.state.visited),
            "flags": dict(self.state.flags),
            "turns": self.turns,
            "won": self.is_won(),
            "lost": self.is_lost(),
        }
