"""Simulation core for the Slither Solo game."""

__all__ = [
    "camera",
    "collision",
    "constants",
    "leaderboard",
    "loop",
    "pellet",
    "snake",
    "steering",
    "utils",
    "world",
]
