"""Per-session player and world state."""

from __future__ import annotations

from dataclasses import dataclass, field

from nerdcave.world import INITIAL_FLAGS, START_ROOM, Room, build_rooms


@dataclass
class GameState:
    rooms: dict[str, Room]
    current_room: str = START_ROOM
    inventory: list[str] = field(default_factory=list)
    visited: set[str] = field(default_factory=set)
    flags: dict[str, bool] = field(default_factory=lambda: dict(INITIAL_FLAGS))

    @classmethod
    def new(cls) -> "GameState":
        state = cls(rooms=build_rooms())
        state.visited.add(state.current_room)
        return state

    @property
    def room(self) -> Room:
        return self.rooms[self.current_room]

    @property
    def is_over(self) -> bool:
        return self.flags["won"] or self.flags["lost"]

    def in_room(self, room_id: str) -> bool:
        return self.current_room == room_id

    def enter(self, room_id: str) -> None:
        self.current_room = room_id
        self.visited.add(room_id)

    def pick_up(self, item_id: str) -> None:
        """Move an item from the current room into the inventory."""
        self.room.items.remove(item_id)
        if item_id not in self.inventory:
            self.inventory.append(item_id)

    def discard(self, item_id: str) -> None:
        if item_id in self.inventory:
            self.inventory.remove(item_id)
