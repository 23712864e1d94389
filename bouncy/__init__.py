"""Balls bouncing elastically inside a window: vectors, walls, balls and the game loop."""

__version__ = "0.1.0"