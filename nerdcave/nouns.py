"""Alias tables for the nouns the player can refer to.

A target phrase mentions a noun when the whole phrase, or any single word of
it, is one of that noun's aliases. Leading filler words are ignored.
"""

from __future__ import annotations

from typing import Optional

from nerdcave.world import CLOTHES, KEY

FILLER = {"the", "a", "an", "my", "at", "on", "to", "with"}

COMPUTER = "computer"
DESK = "desk"
WARDROBE = "wardrobe"
CHAIR = "chair"
POSTERS = "posters"
LIGHT = "light"
DOOR = "door"

ALIASES = {
    COMPUTER: {"computer", "commodore", "c64", "commodore 64"},
    DESK: {"desk"},
    WARDROBE: {"wardrobe", "closet"},
    CHAIR: {"chair", "office chair"},
    POSTERS: {"poster", "posters", "wall", "walls"},
    LIGHT: {"light", "lights", "switch", "light switch", "lamp"},
    DOOR: {"door", "bedroom door"},
    KEY: {"key"},
    CLOTHES: {"clothes", "cloth", "clothing", "shirt", "t-shirt", "tshirt", "tee", "outfit", "jeans"},
}

# Things that can sit in a room or in the inventory.
ITEM_NOUNS = (KEY, CLOTHES)

# Order matters: the first examinable noun mentioned wins.
EXAMINABLE = (COMPUTER, DESK, WARDROBE, CHAIR, POSTERS)


def normalize(phrase: str) -> str:
    words = phrase.lower().split()
    while words and words[0] in FILLER:
        words.pop(0)
    return " ".join(words)


def mentions(phrase: str, noun: str) -> bool:
    cleaned = normalize(phrase)
    if not cleaned:
        return False
    aliases = ALIASES[noun]
    if cleaned in aliases:
        return True
    return any(word in aliases for word in cleaned.split())


def first_mentioned(phrase: str, nouns) -> Optional[str]:
    for noun in nouns:
        if mentions(phrase, noun):
            return noun
    return None


def resolve_item(phrase: str, candidates) -> Optional[str]:
    """Find which of ``candidates`` (item ids) the phrase names."""
    cleaned = normalize(phrase)
    for item_id in candidates:
        if cleaned == item_id.lower():
            return item_id
    for item_id in candidates:
        if item_id in ALIASES and mentions(cleaned, item_id):
            return item_id
    return None
