"""Two- and three-component vectors and the mesh vertex built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Iterator


class Vector2:
    """A mutable 2D vector.

    ``Vector2()`` is the zero vector, ``Vector2(v)`` fills both components
    with ``v`` and ``Vector2(x, y)`` sets each component.
    """

    __slots__ = ("x", "y")
    __hash__ = None  # mutable

    def __init__(self, x: float = 0.0, y: float | None = None) -> None:
        if y is None:
            y = x
        self.x = float(x)
        self.y = float(y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vector2 | float) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector2:
        if isinstance(other, Real):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0.0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / size, self.y / size)


class Vector3:
    """A mutable 3D vector.

    ``Vector3()`` is the zero vector, ``Vector3(v)`` fills all components
    with ``v`` and ``Vector3(x, y, z)`` sets each component.
    """

    __slots__ = ("x", "y", "z")
    __hash__ = None  # mutable

    def __init__(
        self, x: float = 0.0, y: float | None = None, z: float | None = None
    ) -> None:
        if y is None and z is None:
            y = z = x
        elif y is None or z is None:
            raise TypeError("Vector3 takes no, one or three components")
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector3:
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0.0:
            return Vector3(0.0, 0.0, 0.0)
        return Vector3(self.x / size, self.y / size, self.z / size)


@dataclass
class Vertex:
    """A mesh vertex: position, texture coordinate and colour."""

    position: Vector3 = field(default_factory=Vector3)
    tex_coord: Vector2 = field(default_factory=Vector2)
    color: Vector3 = field(default_factory=lambda: Vector3(1.0))