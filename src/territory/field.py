"""
A single field on the board and the players that can claim it

(placed in its own module as multiple other modules need to import it)
"""

from dataclasses import dataclass
from string import ascii_lowercase
from typing import Optional, Self

# Rendering maps every player to a single character: '1'-'9', then 'a'-'z'
MAX_PLAYERS = 35
UNCLAIMED = 0
EMPTY_SYMBOL = "."


@dataclass(slots=True)
class Field:
    owner: int = UNCLAIMED
    area_id: int = 0

    @property
    def is_claimed(self) -> bool:
        return self.owner != UNCLAIMED


@dataclass(frozen=True)
class PlayerId:
    """A player number that is known to be valid for the game it was created for."""

    number: int

    @classmethod
    def parse(cls, number: int, player_count: int) -> Optional[Self]:
        """None when the number does not belong to any player of the game."""
        if 1 <= number <= player_count:
            return cls(number)
        return None

    @property
    def index(self) -> int:
        """Position of the player in the list of player states"""
        return self.number - 1

    def to_symbol(self) -> str:
        return player_symbol(self.number)


def player_symbol(number: int) -> str:
    """'1'..'9' for players 1-9, 'a'..'z' for players 10-35. Anything else renders as an empty field."""
    if 1 <= number <= 9:
        return str(number)
    if 10 <= number <= MAX_PLAYERS:
        return ascii_lowercase[number - 10]
    return EMPTY_SYMBOL
