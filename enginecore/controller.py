"""Keyboard-driven movement script."""

from __future__ import annotations

import enum

from enginecore.behaviour import ScriptBehaviour
from enginecore.components import Rigidbody
from enginecore.events import Event, EventType, Key
from enginecore.vectors import Vector3


class MovementDirection(enum.Enum):
    """Direction requested by the last key press."""

    NONE = "none"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_KEY_DIRECTIONS = {
    Key.W: MovementDirection.UP,
    Key.S: MovementDirection.DOWN,
    Key.A: MovementDirection.LEFT,
    Key.D: MovementDirection.RIGHT,
}

_DIRECTION_VECTORS = {
    MovementDirection.UP: (0.0, 1.0, 0.0),
    MovementDirection.DOWN: (0.0, -1.0, 0.0),
    MovementDirection.LEFT: (-1.0, 0.0, 0.0),
    MovementDirection.RIGHT: (1.0, 0.0, 0.0),
    MovementDirection.NONE: (0.0, 0.0, 0.0),
}


class Controller(ScriptBehaviour):
    """Moves the rigidbody with W/A/S/D for one frame per key press."""

    def __init__(self, speed: float = 5.0) -> None:
        super().__init__()
        self.speed = speed
        self.movement_state = MovementDirection.NONE
        self.rigidbody: Rigidbody | None = None

    def on_start(self) -> None:
        self.rigidbody = self.get_component(Rigidbody)

    def on_update(self) -> None:
        if self.rigidbody is None:
            return
        direction = Vector3(*_DIRECTION_VECTORS[self.movement_state])
        self.rigidbody.velocity = direction * self.speed
        self.movement_state = MovementDirection.NONE

    def on_fixed_update(self) -> None:
        pass

    def on_event(self, event: Event | None) -> None:
        if event is None or event.type != EventType.INPUT:
            return
        self.movement_state = _KEY_DIRECTIONS.get(event.data, MovementDirection.NONE)