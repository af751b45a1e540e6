"""Orthographic camera projection."""

from __future__ import annotations

Matrix4 = tuple[tuple[float, float, float, float], ...]

FRAMEBUFFER_SCALE = 100.0

IDENTITY: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Matrix4:
    """Orthographic projection matrix, in row-major order.

    The box [left, right] x [bottom, top] x [-near, -far] maps onto the
    cube [-1, 1] in every axis.
    """
    if left == right or bottom == top or near == far:
        raise ValueError("projection volume must not be empty")
    width = right - left
    height = top - bottom
    depth = far - near
    return (
        (2.0 / width, 0.0, 0.0, -(right + left) / width),
        (0.0, 2.0 / height, 0.0, -(top + bottom) / height),
        (0.0, 0.0, -2.0 / depth, -(far + near) / depth),
        (0.0, 0.0, 0.0, 1.0),
    )


class Camera:
    """Holds the projection used to draw the scene."""

    def __init__(self) -> None:
        self.projection: Matrix4 = IDENTITY

    def set_ortho_from_framebuffer(self, width: int, height: int) -> None:
        """Show 100 framebuffer pixels per world unit, centred on the origin."""
        half_w = width / FRAMEBUFFER_SCALE
        half_h = height / FRAMEBUFFER_SCALE
        self.projection = ortho(-half_w, half_w, -half_h, half_h, -1.0, 1.0)