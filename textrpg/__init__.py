"""A turn-based text role-playing game for the terminal."""

__version__ = "0.1.0"