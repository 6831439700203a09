"""A small tile-based role-playing game built on pygame and entity components."""

__version__ = "0.1.0"