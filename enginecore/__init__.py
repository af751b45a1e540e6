"""A small 2D game engine core: components, physics, events and scene files."""

__version__ = "0.1.0"