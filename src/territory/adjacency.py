"""
Geometry of a placement: who owns the fields around a coordinate.

All functions are stateless queries. A neighbour that falls off the board simply does not count.
The Game uses them to classify a move and to correct the boundary counters without rescanning the board.
"""

from typing import Protocol

from src.territory.field import UNCLAIMED


class Board(Protocol):
    """Just the parts the adjacency queries need"""

    def is_within_bounds(self, x: int, y: int) -> bool: ...
    def owner(self, x: int, y: int) -> int: ...
    def area_id(self, x: int, y: int) -> int: ...


Vector = tuple[int, int]
NeighbourAreaIds = tuple[int, int, int, int]

# Order matters: the first same-owner neighbour in this order donates its area id. left, right, down, up
ORTHOGONAL_DIRECTIONS: tuple[Vector, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# NOTE only these two diagonals take part in the pinch correction (see diagonal_pinch_count)
PINCH_DIAGONALS: tuple[Vector, ...] = ((-1, -1), (1, 1))


def _owned_by(board: Board, owner: int, x: int, y: int) -> bool:
    return board.is_within_bounds(x, y) and board.owner(x, y) == owner


def orthogonal_neighbours(board: Board, x: int, y: int) -> list[tuple[int, int]]:
    """Coordinates of the (up to four) neighbours that exist on the board"""
    return [
        (x + dx, y + dy)
        for dx, dy in ORTHOGONAL_DIRECTIONS
        if board.is_within_bounds(x + dx, y + dy)
    ]


def orthogonal_same_owner_count(board: Board, owner: int, x: int, y: int) -> int:
    """
    How many of the four orthogonal neighbours belong to `owner`.

    With owner == UNCLAIMED this counts the free neighbours instead, which is exactly
    the number of new boundary fields a marker on (x, y) opens up.
    """
    return sum(
        1 for nx, ny in orthogonal_neighbours(board, x, y) if board.owner(nx, ny) == owner
    )


def distance_two_same_owner_count(board: Board, owner: int, x: int, y: int) -> int:
    """
    Fields of `owner` two steps away along an axis.

    The field in between was already counted as boundary by that other field,
    so it must not be counted a second time when (x, y) gets claimed.
    """
    return sum(
        1
        for dx, dy in ORTHOGONAL_DIRECTIONS
        if _owned_by(board, owner, x + 2 * dx, y + 2 * dy)
    )


def diagonal_pinch_count(board: Board, owner: int, x: int, y: int) -> int:
    """
    Free corners shared with a diagonal neighbour of the same owner.
    ---

    A diagonal neighbour D and (x, y) have two orthogonal neighbours in common.
    Each of them that is still free was counted by D already, and is counted again by the gross gain of (x, y).

    NOTE: only the (x-1, y-1) and (x+1, y+1) diagonals are inspected, never (x-1, y+1) / (x+1, y-1).
    The boundary numbers of finished games depend on this, so keep it that way.
    """
    pinches = 0
    for dx, dy in PINCH_DIAGONALS:
        if not _owned_by(board, owner, x + dx, y + dy):
            continue
        # corners shared by (x, y) and the diagonal neighbour. Both exist because the diagonal does.
        if board.owner(x, y + dy) == UNCLAIMED:
            pinches += 1
        if board.owner(x + dx, y) == UNCLAIMED:
            pinches += 1
    return pinches


def collect_neighbour_area_ids(
    board: Board, owner: int, x: int, y: int
) -> NeighbourAreaIds:
    """Area ids of the orthogonal neighbours (left, right, down, up). 0 where the neighbour is missing or owned by someone else."""
    left, right, down, up = (
        board.area_id(x + dx, y + dy) if _owned_by(board, owner, x + dx, y + dy) else 0
        for dx, dy in ORTHOGONAL_DIRECTIONS
    )
    return left, right, down, up


def distinct_area_id_count(neighbour_ids: NeighbourAreaIds, around: int) -> int:
    """
    Decides whether a placement merges areas
    ----

    * all four neighbours are ours: report 4 straight away. Only used as "this is a merge".
    * otherwise count the pairs of neighbours with differing ids, and stop once `around` pairs were found.
    * no differing pair at all: 1 (every neighbour belongs to the same area).

    NOTE: this is a pair count, not a count of distinct ids. Two different ids give a single pair, so 1,
    and the Game treats that placement as an extension.
    """
    if around == 4:
        return around

    differing_pairs = 0
    for i in range(len(neighbour_ids) - 1):
        for j in range(i + 1, len(neighbour_ids)):
            if differing_pairs >= around:
                break
            first, second = neighbour_ids[i], neighbour_ids[j]
            if first and second and first != second:
                differing_pairs += 1
    return differing_pairs or 1


def pick_representative_area_id(neighbour_ids: NeighbourAreaIds) -> int:
    """The first non-zero id in neighbour order. 0 if there is none."""
    return next((area_id for area_id in neighbour_ids if area_id), 0)
