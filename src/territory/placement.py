"""Record of an accepted placement"""

from dataclasses import dataclass

from src.core.shared_types import MoveKind


@dataclass(frozen=True)
class Placement:
    player: int
    x: int
    y: int
    kind: MoveKind

    def to_notation(self) -> str:
        """
        Compact notation: player number, '@', then the coordinate.

        ex. "2@3,1": player 2 claimed the field in column 3, row 1
        """
        return f"{self.player}@{self.x},{self.y}"

    def __str__(self) -> str:
        return self.to_notation()
