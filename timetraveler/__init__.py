"""Backdated commit timestamps from human-typed date expressions."""

__version__ = "1.1.2"
