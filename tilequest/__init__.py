"""A tile-based platformer with tile maps, rooms and a world layout view."""

__version__ = "0.1.0"