from nerdcave import nouns
from nerdcave.world import CLOTHES, KEY


def test_mentions_ignores_filler_words():
    assert nouns.mentions("on the lights", nouns.LIGHT)
    assert nouns.mentions("at my desk", nouns.DESK)


def test_mentions_multiword_alias():
    assert nouns.mentions("commodore 64", nouns.COMPUTER)
    assert nouns.mentions("light switch", nouns.LIGHT)


def test_mentions_is_word_based_not_substring():
    assert not nouns.mentions("keyboard", KEY)
    assert not nouns.mentions("deskjet", nouns.DESK)


def test_empty_phrase_mentions_nothing():
    assert not nouns.mentions("", nouns.DOOR)
    assert not nouns.mentions("the", nouns.DOOR)


def test_first_mentioned_respects_order():
    assert nouns.first_mentioned("chair", nouns.EXAMINABLE) == nouns.CHAIR
    assert nouns.first_mentioned("computer on desk", nouns.EXAMINABLE) == nouns.COMPUTER
    assert nouns.first_mentioned("bed", nouns.EXAMINABLE) is None


def test_resolve_item_exact_and_alias():
    assert nouns.resolve_item("the KEY", [CLOTHES, KEY]) == KEY
    assert nouns.resolve_item("shirt", [CLOTHES]) == CLOTHES
    assert nouns.resolve_item("computer", [KEY]) is None
    assert nouns.resolve_item("clothes", []) is None
