"""A small 2D game engine with entities, components, scenes, physics and animation."""

__version__ = "0.1.0"