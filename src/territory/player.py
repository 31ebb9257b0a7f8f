"""Counters kept for every player"""

from dataclasses import dataclass


@dataclass
class PlayerState:
    """
    boundary: free fields next to the player's territory (maintained incrementally, never recounted)
    busy_areas: number of separate areas the player currently owns
    completed_moves: number of fields the player owns
    """

    boundary: int = 0
    busy_areas: int = 0
    completed_moves: int = 0
