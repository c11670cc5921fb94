"""Graft - add libraries to a project and wire them in with schematics."""

__version__ = "0.4.0"
