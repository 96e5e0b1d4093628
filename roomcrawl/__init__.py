"""Game-logic core for a top-down room crawler: vectors, assets, state machines, collisions, input, camera, animation, enemies and HUD helpers."""

__version__ = "0.1.0"