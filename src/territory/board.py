"""The Board stores who owns every field and to which area the field belongs"""

from dataclasses import dataclass
from typing import Self

from src.territory.field import Field, player_symbol


@dataclass
class Board:
    width: int
    height: int
    # flat storage: field (x, y) lives at index y * width + x
    fields: list[Field]

    @classmethod
    def empty(cls, width: int, height: int) -> Self:
        """Every field starts out unclaimed."""
        return cls(width, height, [Field() for _ in range(width * height)])

    def is_within_bounds(self, x: int, y: int) -> bool:
        return (0 <= x < self.width) and (0 <= y < self.height)

    def field(self, x: int, y: int) -> Field:
        """NOTE: no bounds check. Callers make sure the coordinate exists."""
        return self.fields[y * self.width + x]

    def owner(self, x: int, y: int) -> int:
        return self.field(x, y).owner

    def area_id(self, x: int, y: int) -> int:
        return self.field(x, y).area_id

    def claim(self, x: int, y: int, owner: int, area_id: int) -> None:
        """Hand an unclaimed field over to its (one and only) owner"""
        claimed = self.field(x, y)
        claimed.owner = owner
        claimed.area_id = area_id

    def to_text(self) -> str:
        """
        One line per row, every line terminated by a newline.
        The top row (y = height - 1) comes first, so the board reads like a map with the origin in the bottom-left corner.
        """
        return "".join(self._row_to_text(y) for y in range(self.height - 1, -1, -1))

    def _row_to_text(self, y: int) -> str:
        symbols = [player_symbol(self.owner(x, y)) for x in range(self.width)]
        return "".join(symbols) + "\n"
