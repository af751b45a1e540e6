"""Engine events and a simple observer/subject notification system."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class Key(enum.IntEnum):
    """Keyboard keys the engine reports."""

    ESC = 0
    Q = 1
    W = 2
    E = 3
    R = 4
    T = 5
    Y = 6
    U = 7
    I = 8  # noqa: E741
    O = 9  # noqa: E741
    P = 10
    A = 11
    S = 12
    D = 13
    F = 14
    G = 15
    H = 16
    J = 17
    K = 18
    L = 19
    Z = 20
    X = 21
    C = 22
    V = 23
    B = 24
    N = 25
    M = 26


class EventName(enum.IntEnum):
    """What happened."""

    KEYPRESS = 0
    CREATE_GAME_OBJECT = 1


class EventType(enum.IntEnum):
    """Where an event came from."""

    INPUT = 0
    EDITOR = 1


@dataclass
class Event:
    """An event with an optional payload (for key presses, the Key)."""

    name: EventName
    type: EventType
    data: Any = None


_NAME_LABELS = {
    EventName.KEYPRESS: "Key Press",
    EventName.CREATE_GAME_OBJECT: "Create Game Object",
}

_TYPE_LABELS = {
    EventType.INPUT: "Input",
    EventType.EDITOR: "Editor",
}


def event_name_to_string(event: Event) -> str:
    """Readable label for the event's name."""
    try:
        return _NAME_LABELS[event.name]
    except KeyError:
        raise ValueError(f"unknown event name: {event.name!r}") from None


def event_type_to_string(event: Event) -> str:
    """Readable label for the event's type."""
    try:
        return _TYPE_LABELS[event.type]
    except KeyError:
        raise ValueError(f"unknown event type: {event.type!r}") from None


class Observer(ABC):
    """Something that wants to hear about events."""

    @abstractmethod
    def on_notify(self, event: Event) -> None:
        """Handle one event."""


class Subject:
    """Keeps a list of observers and passes events on to them in order."""

    def __init__(self) -> None:
        self._observers: list[Observer | None] = []

    def add_observer(self, observer: Observer | None) -> None:
        """Register an observer; the same one may be added more than once."""
        self._observers.append(observer)

    def remove_observer(self, observer: Observer | None) -> None:
        """Remove every registration of the observer."""
        self._observers = [o for o in self._observers if o is not observer]

    def emit(self, event: Event) -> None:
        """Notify every registered observer of the event."""
        for observer in tuple(self._observers):
            if observer is not None:
                observer.on_notify(event)