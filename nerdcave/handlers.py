"""Command handlers. Each one reads and mutates a GameState and returns narration."""

from __future__ import annotations

import logging

from nerdcave import nouns
from nerdcave.narration import Narration
from nerdcave.state import GameState
from nerdcave.world import (
    CLOTHES,
    FAILURE_ROOM,
    HELP,
    HELP_BANNER,
    KEY,
    RULE,
    START_ROOM,
    VICTORY_ROOM,
)

logger = logging.getLogger(__name__)

GAME_OVER = "The game is over. Type CLEAR to redraw the scene or HELP for the command list."
TOO_DARK_TO_TAKE = "It's too dark to find anything. Try turning on the lights!"


def _set_flag(state: GameState, name: str) -> None:
    state.flags[name] = True
    logger.info("flag %s set in %s", name, state.current_room)


def _game_over() -> Narration:
    return Narration().info(GAME_OVER)


# -- rendering --

def render(state: GameState) -> Narration:
    out = Narration()
    room = state.room

    out.success(RULE)
    out.success(f"📍 {room.name}")
    out.success(RULE)

    if state.is_over:
        out.say(room.description)
        out.blank()
        if state.flags["won"]:
            out.info("Type HELP!")
        return out

    if state.in_room(START_ROOM) and not state.flags["lights_on"] and room.description_dark:
        out.say(room.description_dark)
    else:
        out.say(room.description)
        if room.items:
            out.blank()
            out.info(f"You can see: {', '.join(room.items)}")

    out.blank()
    out.say(f"Exits: {', '.join(room.exits).upper()}")
    out.blank()
    return out


# -- look --

def _examine_computer(state: GameState, out: Narration) -> None:
    out.info("Your beloved Commodore 64! 64 whole kilobytes of RAM!")
    out.info("The beige beauty sits majestically on your desk.")
    if not state.flags["commodore_picked_up"]:
        out.info("You might want to pick it up to see what's underneath...")


def _examine_desk(state: GameState, out: Narration) -> None:
    out.info("Your cluttered desk. Home to your Commodore 64 and various floppy disks.")
    if state.flags["commodore_picked_up"]:
        out.info("There's a key here now that you moved the C64!")


def _examine_wardrobe(state: GameState, out: Narration) -> None:
    out.info("Your wardrobe full of nerdy t-shirts.")
    out.info("The classics. You should probably wear something.")
    if state.rooms[START_ROOM].has_item(CLOTHES):
        out.success("You could TAKE CLOTHES from here.")


def _examine_chair(state: GameState, out: Narration) -> None:
    if state.flags["fell_over_chair"]:
        out.info("That treacherous chair that tripped you. It looks innocent now.")
    else:
        out.info("An office chair on wheels. Looks harmless... for now.")


def _examine_posters(state: GameState, out: Narration) -> None:
    out.info("Your walls are covered in the finest 80s sci-fi cinema.")
    out.info("Tron. WarGames. The good stuff.")


EXAMINE = {
    nouns.COMPUTER: _examine_computer,
    nouns.DESK: _examine_desk,
    nouns.WARDROBE: _examine_wardrobe,
    nouns.CHAIR: _examine_chair,
    nouns.POSTERS: _examine_posters,
}


def look(state: GameState, target: str) -> Narration:
    if not target or not state.in_room(START_ROOM):
        return render(state)

    if not state.flags["lights_on"]:
        return Narration().error("It's too dark to see anything specific. Maybe turn on the lights?")

    noun = nouns.first_mentioned(target, nouns.EXAMINABLE)
    if noun is None:
        return Narration().info("Nothing special about that.")

    out = Narration()
    EXAMINE[noun](state, out)
    return out


# -- move --

def _to_wardrobe(state: GameState) -> Narration:
    out = Narration()
    if not state.flags["lights_on"]:
        return out.error("You bump into something soft. Probably the wardrobe. Turn on the lights!")
    out.info("You open the wardrobe. Ah, the smell of vintage cotton and nostalgia.")
    if state.room.has_item(CLOTHES):
        out.success("Your clothes are here. You should TAKE CLOTHES.")
    else:
        out.info("You already took your favorite outfit from here.")
    return out


def _stumble_in_dark(state: GameState) -> Narration:
    out = Narration()
    if state.flags["fell_over_chair"]:
        out.success("You carefully navigate around the chair this time.")
        out.info("Smart move. Still can't see anything though.")
        return out

    _set_flag(state, "fell_over_chair")
    out.error("You stumble forward in the darkness...")
    out.blank()
    out.error("*CRASH!* *CLATTER!* *BONK!*")
    out.blank()
    out.error("OW! You trip over your office chair and face-plant into the carpet!")
    out.error("The chair rolls away, squeaking mockingly.")
    out.error("Maybe you should turn on the lights first, genius.")
    return out


def _to_desk(state: GameState) -> Narration:
    out = Narration().info("You approach your desk. Your Commodore 64 sits proudly upon it.")
    if state.flags["commodore_picked_up"]:
        if state.room.has_item(KEY):
            out.success("The KEY is here, revealed from under the C64!")
    else:
        out.info("Maybe you should examine or take the Commodore 64?")
    return out


def _through_door(state: GameState) -> Narration:
    out = Narration()
    if not state.flags["door_unlocked"]:
        out.error("You try the door. It's locked from the outside!")
        out.info("Why would someone lock you in?! Suspicious...")
        return out

    if not state.flags["dressed"]:
        out.error("You open the door in your underwear...")
        out.blank()
        state.enter(FAILURE_ROOM)
        _set_flag(state, "lost")
    else:
        out.success("You unlock the door and swing it open...")
        out.blank()
        state.enter(VICTORY_ROOM)
        _set_flag(state, "won")
    return out.extend(render(state))


def move(state: GameState, direction: str) -> Narration:
    if state.is_over:
        return _game_over()

    if state.in_room(START_ROOM):
        if direction == "west":
            return _to_wardrobe(state)
        if direction == "south":
            if not state.flags["lights_on"]:
                return _stumble_in_dark(state)
            return _to_desk(state)
        if direction == "north":
            return _through_door(state)

    destination = state.room.exits.get(direction)
    if destination is None:
        return Narration().error(f"You can't go {direction} from here.")

    logger.info("moving %s from %s to %s", direction, state.current_room, destination)
    state.enter(destination)
    out = Narration().success(f"You go {direction}...")
    out.blank()
    return out.extend(render(state))


# -- take --

def _lift_computer(state: GameState) -> Narration:
    out = Narration()
    out.info("You carefully lift your precious Commodore 64...")
    out.info("It's heavier than it looks! Those 80s computers were built to last.")
    out.blank()
    out.success("Wait! There's something underneath it!")
    out.success("A KEY! It was hiding under your C64 all along!")
    out.blank()
    out.info("You set the computer back down gently.")
    _set_flag(state, "commodore_picked_up")
    state.room.items[:] = [KEY]
    return out


ITEM_FLAVOR = {
    KEY: "This must be the key to your door! But why was it under your C64?",
    CLOTHES: "Your favorite Metallica t-shirt and jeans. A classic combo.",
}


def take(state: GameState, item_name: str) -> Narration:
    if state.is_over:
        return _game_over()

    if state.in_room(START_ROOM) and not state.flags["lights_on"]:
        return Narration().error(TOO_DARK_TO_TAKE)

    if (
        state.in_room(START_ROOM)
        and not state.flags["commodore_picked_up"]
        and nouns.mentions(item_name, nouns.COMPUTER)
    ):
        return _lift_computer(state)

    room = state.room
    if not room.items:
        return Narration().error("There's nothing to take here.")

    item = nouns.resolve_item(item_name, room.items)
    if item is None:
        return Narration().error(f"There's no {item_name} here.")

    state.pick_up(item)
    logger.debug("took %s; inventory=%s", item, state.inventory)
    out = Narration().success(f"You take the {item}.")
    if item in ITEM_FLAVOR:
        out.info(ITEM_FLAVOR[item])
    return out


# -- inventory --

def inventory(state: GameState, _target: str = "") -> Narration:
    out = Narration()
    if not state.inventory:
        return out.say("Your inventory is empty.")
    out.say("You are carrying:")
    for item in state.inventory:
        out.info(f"  - {item}")
    return out


# -- use --

def _flip_light(state: GameState) -> Narration:
    out = Narration()
    if not state.in_room(START_ROOM):
        return out.error("There's no light switch here.")
    if state.flags["lights_on"]:
        return out.info("The lights are already on. You could turn them off, but why would you?")

    out.success("*Click*")
    out.blank()
    out.success("The lights flicker on, revealing your glorious nerd kingdom!")
    _set_flag(state, "lights_on")
    out.blank()
    return out.extend(render(state))


def _use_key(state: GameState) -> Narration:
    out = Narration()
    if not state.in_room(START_ROOM):
        return out.error("There's nothing to unlock here.")
    if state.flags["door_unlocked"]:
        return out.info("The door is already unlocked.")
    out.success("You unlock the bedroom door with the key!")
    out.success("*Click* The lock turns smoothly.")
    _set_flag(state, "door_unlocked")
    return out


def _wear_clothes(state: GameState) -> Narration:
    out = Narration()
    if state.flags["dressed"]:
        return out.info("You're already dressed. Looking good!")
    out.success("You put on your clothes. Your Metallica t-shirt fits perfectly.")
    _set_flag(state, "dressed")
    state.discard(CLOTHES)
    return out


ITEM_USES = {
    KEY: _use_key,
    CLOTHES: _wear_clothes,
}


def use(state: GameState, item_name: str) -> Narration:
    if state.is_over:
        return _game_over()

    if nouns.mentions(item_name, nouns.LIGHT):
        return _flip_light(state)

    item = nouns.resolve_item(item_name, state.inventory)
    if item is None:
        return Narration().error(f"You don't have a {item_name}.")

    handler = ITEM_USES.get(item)
    if handler is None:
        return Narration().error(f"You're not sure how to use the {item_name} here.")
    return handler(state)


# -- help / view --

def show_help(_state: GameState, _target: str = "") -> Narration:
    out = Narration()
    out.info(HELP_BANNER)
    out.info("AVAILABLE COMMANDS:")
    out.info(HELP_BANNER)
    for line in HELP:
        out.say(line)
    out.blank()
    return out


def reset_view(state: GameState, _target: str = "") -> Narration:
    out = render(state)
    out.clear = True
    return out
