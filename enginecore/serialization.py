"""Binary scene files: game objects with their components.

Numbers are little-endian: counts and component ids are 32-bit unsigned,
floats are 32-bit, booleans take one byte, and strings are a 32-bit length
followed by UTF-8 bytes.
"""

from __future__ import annotations

import struct
from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Optional

from enginecore.behaviour import ScriptBehaviour
from enginecore.components import (
    BoxCollider2D,
    Component,
    ComponentType,
    GameObject,
    Mesh,
    Rigidbody,
    Script,
    Transform,
)
from enginecore.vectors import Vector3

ScriptLoader = Callable[[str], Optional[ScriptBehaviour]]

_U32 = struct.Struct("<I")
_F32 = struct.Struct("<f")
_BOOL = struct.Struct("<?")
_VEC3 = struct.Struct("<3f")


class _SceneReader:
    """Pulls typed values from a binary stream, failing on short reads."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def _take(self, size: int) -> bytes:
        data = self._stream.read(size)
        if len(data) != size:
            raise ValueError("scene data is truncated")
        return data

    def u32(self) -> int:
        return _U32.unpack(self._take(_U32.size))[0]

    def f32(self) -> float:
        return _F32.unpack(self._take(_F32.size))[0]

    def boolean(self) -> bool:
        return _BOOL.unpack(self._take(_BOOL.size))[0]

    def string(self) -> str:
        return self._take(self.u32()).decode("utf-8")

    def vector3(self) -> Vector3:
        return Vector3(*_VEC3.unpack(self._take(_VEC3.size)))


def _write_string(text: str, stream: BinaryIO) -> None:
    data = text.encode("utf-8")
    stream.write(_U32.pack(len(data)))
    stream.write(data)


def _write_vector3(vector: Vector3, stream: BinaryIO) -> None:
    stream.write(_VEC3.pack(*vector))


def _write_component(component: Component, stream: BinaryIO) -> None:
    kind = component.component_type
    stream.write(_U32.pack(int(kind)))
    if isinstance(component, Transform):
        _write_vector3(component.position, stream)
        _write_vector3(component.scale, stream)
        _write_vector3(component.rotation, stream)
    elif isinstance(component, Mesh):
        _write_string(component.mesh_file_path, stream)
        _write_vector3(component.color, stream)
    elif isinstance(component, Rigidbody):
        stream.write(_BOOL.pack(component.gravity))
        _write_vector3(component.velocity, stream)
        _write_vector3(component.acceleration, stream)
        stream.write(_F32.pack(component.restitution))
    elif isinstance(component, BoxCollider2D):
        stream.write(_BOOL.pack(component.stationary))
    elif isinstance(component, Script):
        _write_string(component.name, stream)


def write_game_object(game_object: GameObject, stream: BinaryIO) -> None:
    """Write the object's name and each of its components in order."""
    _write_string(game_object.name, stream)
    stream.write(_U32.pack(len(game_object.components)))
    for component in game_object.components:
        _write_component(component, stream)


def _read_component(
    kind: ComponentType,
    game_object: GameObject,
    reader: _SceneReader,
    script_loader: ScriptLoader | None,
) -> Component:
    if kind is ComponentType.TRANSFORM:
        transform = Transform(game_object)
        transform.position = reader.vector3()
        transform.scale = reader.vector3()
        transform.rotation = reader.vector3()
        return transform
    if kind is ComponentType.MESH:
        mesh = Mesh(game_object)
        mesh.mesh_file_path = reader.string()
        mesh.color = reader.vector3()
        if mesh.mesh_file_path:
            mesh.load_mesh(mesh.mesh_file_path)
        return mesh
    if kind is ComponentType.RIGIDBODY:
        body = Rigidbody(game_object)
        body.gravity = reader.boolean()
        body.velocity = reader.vector3()
        body.acceleration = reader.vector3()
        body.restitution = reader.f32()
        return body
    if kind is ComponentType.BOX_COLLIDER_2D:
        collider = BoxCollider2D(game_object)
        collider.stationary = reader.boolean()
        return collider
    script = Script(game_object)
    script.name = reader.string()
    if script_loader is not None:
        behaviour = script_loader(script.name)
        if behaviour is not None:
            behaviour.attach(game_object)
            script.set_behaviour(behaviour)
    return script


def _read_game_object(reader: _SceneReader, script_loader: ScriptLoader | None) -> GameObject:
    game_object = GameObject("GameObject")
    game_object.name = reader.string()
    for _ in range(reader.u32()):
        raw = reader.u32()
        try:
            kind = ComponentType(raw)
        except ValueError:
            raise ValueError(f"unknown component id {raw}") from None
        game_object.components.append(
            _read_component(kind, game_object, reader, script_loader)
        )
    return game_object


def read_game_object(
    stream: BinaryIO, script_loader: ScriptLoader | None = None
) -> GameObject:
    """Read one game object; scripts get their behaviour from ``script_loader``."""
    return _read_game_object(_SceneReader(stream), script_loader)


def write_scene(game_objects: Iterable[GameObject], stream: BinaryIO) -> None:
    """Write the object count followed by every object."""
    objects = list(game_objects)
    stream.write(_U32.pack(len(objects)))
    for game_object in objects:
        write_game_object(game_object, stream)


def read_scene(
    stream: BinaryIO, script_loader: ScriptLoader | None = None
) -> list[GameObject]:
    """Read every game object of a scene."""
    reader = _SceneReader(stream)
    return [_read_game_object(reader, script_loader) for _ in range(reader.u32())]


def save_scene(game_objects: Iterable[GameObject], path: str | Path) -> None:
    """Write a scene file."""
    with open(path, "wb") as stream:
        write_scene(game_objects, stream)


def load_scene(
    path: str | Path, script_loader: ScriptLoader | None = None
) -> list[GameObject]:
    """Read a scene file."""
    with open(path, "rb") as stream:
        return read_scene(stream, script_loader)