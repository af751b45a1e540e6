"""Game objects and the components that can be attached to them."""

from __future__ import annotations

import enum
import io
import random
import struct
from pathlib import Path
from typing import ClassVar, TypeVar

from enginecore.behaviour import ScriptBehaviour
from enginecore.vectors import Vector2, Vector3, Vertex

GRAVITY = 9.81
MIN_VERTICAL_CORRECTION = 0.01

_ID_LOW = 100000
_ID_HIGH = 999999
_id_rng = random.Random()

_COUNT = struct.Struct("<I")
_VERTEX = struct.Struct("<8f")
_INDEX = struct.Struct("<I")


def generate_random_id() -> int:
    """Random six-digit identifier for a game object."""
    return _id_rng.randint(_ID_LOW, _ID_HIGH)


class ComponentType(enum.IntEnum):
    """Kinds of component; the values are the ids stored in scene files."""

    TRANSFORM = 0
    MESH = 1
    RIGIDBODY = 2
    BOX_COLLIDER_2D = 3
    SCRIPT = 4


class DrawMode(enum.Enum):
    """How a mesh is drawn."""

    TRIANGLES = "triangles"
    WIREFRAME = "wireframe"


class Component:
    """Base of every component; each belongs to exactly one game object."""

    component_type: ClassVar[ComponentType]

    def __init__(self, game_object: GameObject) -> None:
        self.game_object = game_object


class Transform(Component):
    """Position, scale and rotation of a game object."""

    component_type = ComponentType.TRANSFORM

    def __init__(self, game_object: GameObject) -> None:
        super().__init__(game_object)
        self.position = Vector3(0.0)
        self.scale = Vector3(1.0)
        self.rotation = Vector3(0.0)


class Rigidbody(Component):
    """Velocity-based motion, optionally pulled down by gravity."""

    component_type = ComponentType.RIGIDBODY

    def __init__(self, game_object: GameObject) -> None:
        super().__init__(game_object)
        self.gravity = False
        self.velocity = Vector3(0.0)
        self.acceleration = Vector3(0.0)
        self.restitution = 1.0

    def update(self, delta_time: float) -> None:
        """Integrate velocity and move the transform; no-op without one."""
        transform = self.game_object.get_component(Transform)
        if transform is None:
            return
        acceleration = self.acceleration
        if self.gravity:
            acceleration = Vector3(acceleration.x, acceleration.y - GRAVITY, acceleration.z)
        self.velocity = self.velocity + acceleration * delta_time
        transform.position = transform.position + self.velocity * delta_time


class BoxCollider2D(Component):
    """Axis-aligned box in the x/y plane sized by the transform's scale."""

    component_type = ComponentType.BOX_COLLIDER_2D

    def __init__(self, game_object: GameObject) -> None:
        super().__init__(game_object)
        self.show_collider = False
        self.stationary = False

    def check_collision(self, other: BoxCollider2D, delta_time: float) -> bool:
        """Report an overlap with ``other`` and push this object out of it.

        The object is moved along the axis of least overlap; a vertical
        overlap of at most 0.01 is left alone.
        """
        mine = self.game_object.get_component(Transform)
        theirs = other.game_object.get_component(Transform)
        if mine is None or theirs is None:
            return False

        p, q = mine.position, theirs.position
        half = mine.scale * 0.5
        other_half = theirs.scale * 0.5

        right_a, left_a = p.x + half.x, p.x - half.x
        top_a, bottom_a = p.y + half.y, p.y - half.y
        right_b, left_b = q.x + other_half.x, q.x - other_half.x
        top_b, bottom_b = q.y + other_half.y, q.y - other_half.y

        colliding = (
            right_a > left_b
            and left_a < right_b
            and top_a > bottom_b
            and bottom_a < top_b
        )
        if not colliding:
            return False

        overlap_x = min(right_a, right_b) - max(left_a, left_b)
        overlap_y = min(top_a, top_b) - max(bottom_a, bottom_b)

        if overlap_x < overlap_y:
            offset = other_half.x + half.x
            x = q.x - offset if p.x < q.x else q.x + offset
            mine.position = Vector3(x, p.y, p.z)
        elif overlap_y > MIN_VERTICAL_CORRECTION:
            offset = other_half.y + half.y
            y = q.y - offset if p.y < q.y else q.y + offset
            mine.position = Vector3(p.x, y, p.z)
        return True

    def resolve_collision(self, other: BoxCollider2D, delta_time: float) -> None:
        """Bounce: reverse velocities scaled by each body's restitution.

        The other body keeps its velocity when its collider is stationary.
        """
        body = self.game_object.get_component(Rigidbody)
        other_body = other.game_object.get_component(Rigidbody)
        if body is None:
            return
        body.velocity = body.velocity * (body.restitution * -1.0)
        if not other.stationary and other_body is not None:
            other_body.velocity = other_body.velocity * (other_body.restitution * -1.0)


def _read_exact(stream: io.BufferedIOBase, size: int) -> bytes:
    chunk = stream.read(size)
    if len(chunk) != size:
        raise ValueError("mesh file is truncated")
    return chunk


def read_mesh_file(path: str | Path) -> tuple[list[Vertex], list[int]]:
    """Read a binary mesh file: vertex count, vertices, index count, indices."""
    with open(path, "rb") as stream:
        (vertex_count,) = _COUNT.unpack(_read_exact(stream, _COUNT.size))
        vertex_bytes = _read_exact(stream, _VERTEX.size * vertex_count)
        vertices = [
            Vertex(Vector3(px, py, pz), Vector2(u, v), Vector3(r, g, b))
            for px, py, pz, u, v, r, g, b in _VERTEX.iter_unpack(vertex_bytes)
        ]
        (index_count,) = _COUNT.unpack(_read_exact(stream, _COUNT.size))
        index_bytes = _read_exact(stream, _INDEX.size * index_count)
        indices = [value for (value,) in _INDEX.iter_unpack(index_bytes)]
    return vertices, indices


def write_mesh_file(path: str | Path, vertices: list[Vertex], indices: list[int]) -> None:
    """Write vertices and indices in the binary mesh format."""
    with open(path, "wb") as stream:
        stream.write(_COUNT.pack(len(vertices)))
        for vertex in vertices:
            stream.write(_VERTEX.pack(*vertex.position, *vertex.tex_coord, *vertex.color))
        stream.write(_COUNT.pack(len(indices)))
        for index in indices:
            stream.write(_INDEX.pack(index))


class Mesh(Component):
    """Triangle mesh loaded from a mesh file, with a flat colour."""

    component_type = ComponentType.MESH

    def __init__(self, game_object: GameObject) -> None:
        super().__init__(game_object)
        self.vertices: list[Vertex] = []
        self.indices: list[int] = []
        self.color = Vector3(1.0)
        self.mesh_file_path = ""
        self.draw_mode = DrawMode.TRIANGLES

    def load_mesh(self, location: str | Path) -> None:
        """Replace the mesh data with the contents of a mesh file."""
        self.vertices, self.indices = read_mesh_file(location)
        self.mesh_file_path = str(location)

    def write_mesh(self) -> None:
        """Save the current mesh data back to the file it came from."""
        write_mesh_file(self.mesh_file_path, self.vertices, self.indices)


class Script(Component):
    """Holds a named user behaviour."""

    component_type = ComponentType.SCRIPT

    def __init__(self, game_object: GameObject) -> None:
        super().__init__(game_object)
        self.name = ""
        self.behaviour: ScriptBehaviour | None = None

    def set_behaviour(self, behaviour: ScriptBehaviour) -> None:
        """Install the behaviour and start it."""
        self.behaviour = behaviour
        behaviour.on_start()


C = TypeVar("C")


class GameObject:
    """A named entity made of at most one component of each kind."""

    def __init__(self, name: str = "GameObject") -> None:
        self.name = name
        self.id = generate_random_id()
        self.components: list[Component] = []

    def __repr__(self) -> str:
        return f"GameObject(name={self.name!r}, id={self.id})"

    def get_component(self, kind: type[C]) -> C | None:
        """First attached component that is an instance of ``kind``, or None."""
        return next((c for c in self.components if isinstance(c, kind)), None)

    def add_component(self, kind: type[C]) -> C:
        """Attach a new component of ``kind`` unless one is already present.

        Returns the component of that kind now attached.
        """
        existing = self.get_component(kind)
        if existing is not None:
            return existing
        component = kind(self)
        self.components.append(component)
        return component