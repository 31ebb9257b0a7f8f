"""
Type definitions used across layers
"""

from enum import StrEnum


class MoveKind(StrEnum):
    """How an accepted placement related to the player's existing areas."""

    NEW_AREA = "new area"
    EXTENSION = "extension"
    MERGE = "merge"
