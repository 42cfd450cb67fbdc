"""Game logic for a star-dodging arcade shooter: vector maths, ships, bullets and scenes."""

__version__ = "0.1.0"