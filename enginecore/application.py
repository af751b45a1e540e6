"""The engine's main loop: scripts, input events and physics."""

from __future__ import annotations

import argparse
import time
from typing import Sequence

from enginecore.behaviour import ScriptBehaviour
from enginecore.camera import Camera
from enginecore.components import GameObject, Script, Transform
from enginecore.controller import Controller
from enginecore.events import Event, EventName, EventType, Key, Observer, Subject
from enginecore.logger import LogLevel, log
from enginecore.physics import Physics
from enginecore.serialization import ScriptLoader, load_scene, save_scene

_BUILTIN_SCRIPTS: dict[str, type[ScriptBehaviour]] = {"Controller": Controller}


def _load_builtin_script(name: str) -> ScriptBehaviour | None:
    script_class = _BUILTIN_SCRIPTS.get(name)
    if script_class is None:
        log(LogLevel.ERROR, f"Could not load script {name}", "ScriptAPI")
        return None
    return script_class()


class Application(Observer):
    """Owns the game objects and advances them frame by frame."""

    def __init__(self, script_loader: ScriptLoader | None = None) -> None:
        self.game_objects: list[GameObject] = []
        self.physics = Physics()
        self.camera = Camera()
        self.script_loader: ScriptLoader = script_loader or _load_builtin_script
        self.events = Subject()
        self.events.add_observer(self)
        self.should_close = False
        self.fps = 0
        self.frame_count = 0
        self._fps_clock = 0.0

    def create_game_object(self, name: str = "GameObject") -> GameObject:
        """Add a new game object with a transform to the scene."""
        game_object = GameObject(name)
        game_object.add_component(Transform)
        self.game_objects.append(game_object)
        return game_object

    def _behaviours(self):
        for game_object in self.game_objects:
            script = game_object.get_component(Script)
            if script is not None and script.behaviour is not None:
                yield script.behaviour

    def on_notify(self, event: Event) -> None:
        """Act on engine-level events, then pass the event to every script."""
        if event.name == EventName.KEYPRESS and event.data == Key.ESC:
            self.should_close = True
        elif event.name == EventName.CREATE_GAME_OBJECT:
            self.create_game_object()
        for behaviour in list(self._behaviours()):
            behaviour.on_event(event)

    def handle_key(self, key: Key) -> None:
        """Report a key press; Escape closes the application."""
        self.events.emit(Event(EventName.KEYPRESS, EventType.INPUT, key))

    def step(self, delta_time: float) -> None:
        """Run one frame: script updates, then physics."""
        self.physics.delta_time = delta_time
        for behaviour in list(self._behaviours()):
            behaviour.on_update()
        self.physics.update(self.game_objects)
        self.frame_count += 1
        self._fps_clock += delta_time
        if self._fps_clock > 1.0 and delta_time > 0:
            self.fps = int(1.0 / delta_time)
            self._fps_clock = 0.0

    def run(self, frames: int | None = None, delta_time: float | None = None) -> int:
        """Step until closed or ``frames`` have run; return the frames run.

        Without ``delta_time`` each frame uses the wall-clock time since
        the previous one.
        """
        count = 0
        last = time.perf_counter()
        while not self.should_close and (frames is None or count < frames):
            now = time.perf_counter()
            self.step(delta_time if delta_time is not None else now - last)
            last = now
            count += 1
        return count


def main(argv: Sequence[str] | None = None) -> int:
    """Load an optional scene, run the loop and optionally save the result."""
    parser = argparse.ArgumentParser(description="Run the engine without a window.")
    parser.add_argument("--scene", help="scene file to load")
    parser.add_argument("--save", help="write the scene here when the loop ends")
    parser.add_argument("--frames", type=int, help="number of frames to run")
    parser.add_argument("--delta-time", type=float, help="fixed seconds per frame")
    args = parser.parse_args(argv)

    app = Application()
    if args.scene:
        app.game_objects.extend(load_scene(args.scene, app.script_loader))
    try:
        app.run(args.frames, args.delta_time)
    except KeyboardInterrupt:
        pass
    if args.save:
        save_scene(app.game_objects, args.save)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())