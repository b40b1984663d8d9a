from nerdcave import handlers
from nerdcave.state import GameState
from nerdcave.world import build_rooms

ATTIC = {
    "landing": {"name": "Landing", "description": "A creaky landing.", "exits": {"up": "attic"}},
    "attic": {"name": "Attic", "description": "Dusty boxes.", "exits": {"down": "landing"}, "items": ["key"]},
}


def attic_state(**kwargs) -> GameState:
    state = GameState(rooms=build_rooms(ATTIC, start_room="landing"), current_room="landing", **kwargs)
    state.visited.add("landing")
    return state


def test_generic_exit_moves_and_renders():
    state = attic_state()
    out = handlers.move(state, "up")

    assert state.current_room == "attic"
    assert state.visited == {"landing", "attic"}
    assert out.lines[0].text == "You go up..."
    assert "📍 Attic" in out.text
    assert "You can see: key" in out.text
    assert "Exits: DOWN" in out.text


def test_take_outside_the_bedroom_needs_no_light():
    state = attic_state()
    handlers.move(state, "up")
    assert handlers.take(state, "key").lines[0].text == "You take the key."
    assert state.rooms["attic"].items == []


def test_light_switch_only_in_bedroom():
    state = attic_state()
    assert handlers.use(state, "light").text == "There's no light switch here."
    assert state.flags["lights_on"] is False


def test_key_has_nothing_to_unlock_elsewhere():
    state = attic_state(inventory=["key"])
    assert handlers.use(state, "key").text == "There's nothing to unlock here."
    assert state.flags["door_unlocked"] is False


def test_look_with_target_outside_bedroom_rerenders():
    state = attic_state()
    assert handlers.look(state, "boxes").text == handlers.render(state).text


def test_unusable_item():
    state = GameState.new()
    state.inventory.append("floppy")
    out = handlers.use(state, "floppy")
    assert out.text == "You're not sure how to use the floppy here."


def test_already_dressed():
    state = GameState.new()
    state.flags["dressed"] = True
    state.inventory.append("clothes")
    assert "already dressed" in handlers.use(state, "clothes").text
    assert state.inventory == ["clothes"]
