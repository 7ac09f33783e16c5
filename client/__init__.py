"""Pygame front end for the Slither Solo simulation."""

__all__ = ["input", "main", "render"]
