from nerdcave.parser import Command, parse


def test_verb_and_target_are_normalized():
    assert parse("  LOOK   at  Desk ") == Command("look", "at desk")


def test_single_word_has_empty_target():
    assert parse("North") == Command("north", "")


def test_empty_and_blank_input():
    assert parse("").is_empty
    assert parse("   \t ").is_empty
    assert parse("   ") == Command("", "")


def test_any_string_is_accepted():
    cmd = parse("?!? ### ...")
    assert cmd.verb == "?!?"
    assert cmd.target == "### ..."
