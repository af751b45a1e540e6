"""Base class for user scripts attached to game objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from enginecore.events import Event


class ScriptBehaviour(ABC):
    """User script: receives lifecycle calls and events for one game object."""

    def __init__(self) -> None:
        self.game_object: Any = None

    def attach(self, game_object: Any) -> None:
        """Bind the behaviour to the game object it controls."""
        self.game_object = game_object

    def get_component(self, kind: type) -> Any:
        """Look up a component of the given kind on the attached game object."""
        if self.game_object is None:
            raise RuntimeError("behaviour is not attached to a game object")
        return self.game_object.get_component(kind)

    @abstractmethod
    def on_start(self) -> None:
        """Called once when the behaviour is installed."""

    @abstractmethod
    def on_update(self) -> None:
        """Called every frame."""

    @abstractmethod
    def on_fixed_update(self) -> None:
        """Called on each fixed physics step."""

    @abstractmethod
    def on_event(self, event: Event) -> None:
        """Called for every event the application receives."""