"""Per-frame physics: rigidbody integration and box collisions."""

from __future__ import annotations

from typing import Iterable

from enginecore.components import BoxCollider2D, GameObject, Rigidbody
from enginecore.logger import LogLevel, log


class Physics:
    """Moves rigidbodies and resolves collisions between boxed bodies."""

    def __init__(self) -> None:
        self.delta_time = 0.0
        log(LogLevel.INFO, "Physics Engine Created", "Application")

    def update(self, game_objects: Iterable[GameObject]) -> None:
        """Advance every rigidbody, then check each pair of colliding bodies."""
        objects = list(game_objects)

        for obj in objects:
            body = obj.get_component(Rigidbody)
            if body is not None:
                body.update(self.delta_time)

        bodies = [
            (obj, obj.get_component(BoxCollider2D))
            for obj in objects
            if obj.get_component(Rigidbody) is not None
            and obj.get_component(BoxCollider2D) is not None
        ]
        for obj, collider in bodies:
            for other, other_collider in bodies:
                if other is obj:
                    continue
                if collider.check_collision(other_collider, self.delta_time):
                    collider.resolve_collision(other_collider, self.delta_time)