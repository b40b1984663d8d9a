"""Nerd Cave world definition: rooms, items, flags and fixed narration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from nerdcave.errors import WorldError

START_ROOM = "bedroom"
VICTORY_ROOM = "hallway"
FAILURE_ROOM = "hallway_fail"

KEY = "key"
CLOTHES = "clothes"

ROOMS = {
    "bedroom": {
        "name": "Your Nerd Cave (1989)",
        "description": (
            "Your bedroom is a shrine to 80s computing. Posters of Tron and "
            "WarGames adorn the walls. Your trusty Commodore 64 sits on the desk "
            "to the SOUTH, its beige plastic gleaming. A wardrobe full of graphic "
            "tees is to the WEST. An overturned office chair with squeaky wheels "
            "lies near the desk. The door to freedom (and breakfast) is to the "
            "NORTH. A light switch is mounted on the wall by the door."
        ),
        "description_dark": (
            "It's pitch black. You can't see a thing. You hear muffled sounds "
            "outside your door to the NORTH. Your bed is somewhere behind you. "
            "You know your room has a desk to the SOUTH, a wardrobe to the WEST, "
            "and a light switch... somewhere near the door."
        ),
        "exits": {"north": "hallway"},
        "items": [CLOTHES],
    },
    "hallway": {
        "name": "The Hallway of Victory",
        "description": (
            "SURPRISE!!! 🎉🎂🎈\n\n"
            "A massive crowd erupts in cheers! Balloons fall from the ceiling! "
            "Your friends, and even that weird kid writing adventures for your "
            "birthday are all here!\n\n"
            "'HAPPY BIRTHDAY!' they shout in unison.\n\n"
            "Your Metallica t-shirt has never looked so good. Today is YOUR day!\n\n"
            "🎮 CONGRATULATIONS! YOU WON THE GAME! 🎮"
        ),
        "exits": {},
        "items": [],
    },
    "hallway_fail": {
        "name": "The Hallway of Shame",
        "description": (
            "You open the door, naked ...\n\n"
            "The crowd gasps. Your friends cover their eyes. Someone's camera "
            "flashes. You dissolve in shame. GAME OVER."
        ),
        "exits": {},
        "items": [],
    },
}

# Story progress (all start False)
INITIAL_FLAGS = {
    "lights_on": False,
    "door_unlocked": False,
    "dressed": False,
    "fell_over_chair": False,
    "commodore_picked_up": False,
    "won": False,
    "lost": False,
}

RULE = "─────────────────────────────────────────────"

WELCOME = [
    "You wake up groggily. Your digital alarm clock",
    "blinks 10:47 AM in angry red LEDs.",
    "",
    "'Ugh... what day is it?' you mumble. Your head",
    "is still full of BASIC listings from last night.",
    "",
    "Outside your door, you hear... something.",
    "Whispers? Shuffling? Probably just your cat.",
    "",
    RULE,
    "Commands: LOOK, GO [direction], TAKE [item],",
    "          USE [item], INVENTORY, HELP",
    RULE,
    "",
]

HELP_BANNER = "═══════════════════════════════════════"

HELP = [
    "  LOOK [item] - Examine surroundings or item",
    "  GO [direction] - Move (NORTH, SOUTH, EAST, WEST)",
    "  TAKE [item] - Pick up an item",
    "  USE [item] - Use an item or interact",
    "  WEAR [clothes] - Put on clothes",
    "  UNLOCK [door] - Use key on door",
    "  INVENTORY (INV, I) - Check your items",
    "  HELP (?) - Show this message",
    "  CLEAR (CLS) - Clear the screen",
]


@dataclass
class Room:
    id: str
    name: str
    description: str
    description_dark: Optional[str] = None
    exits: dict[str, str] = field(default_factory=dict)
    items: list[str] = field(default_factory=list)

    def has_item(self, item_id: str) -> bool:
        return item_id in self.items


def build_rooms(rooms: Optional[dict] = None, start_room: str = START_ROOM) -> dict[str, Room]:
    """Create a fresh, session-owned set of rooms from static data.

    Raises WorldError when an exit or the start room points nowhere.
    """
    source = ROOMS if rooms is None else rooms
    built = {}
    for room_id, data in source.items():
        built[room_id] = Room(
            id=room_id,
            name=data["name"],
            description=data["description"],
            description_dark=data.get("description_dark"),
            exits=dict(data.get("exits", {})),
            items=list(data.get("items", [])),
        )

    if start_room not in built:
        raise WorldError(f"Start room '{start_room}' is not defined.")
    for room in built.values():
        for direction, target in room.exits.items():
            if target not in built:
                raise WorldError(
                    f"Exit '{direction}' of room '{room.id}' leads to unknown room '{target}'."
                )
    return built
