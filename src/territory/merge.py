"""Relabel the fields of areas that got connected by a single placement"""

from src.territory.adjacency import orthogonal_neighbours
from src.territory.board import Board


def merge_areas(board: Board, area_id: int, owner: int, x: int, y: int) -> None:
    """
    Start a relabelling traversal from every orthogonal neighbour of the new field on (x, y).

    NOTE the new field must already carry `area_id`, otherwise the traversal walks straight back into it.
    """
    for nx, ny in orthogonal_neighbours(board, x, y):
        merge_traversal(board, area_id, owner, nx, ny)


def merge_traversal(board: Board, area_id: int, owner: int, x: int, y: int) -> None:
    """
    Give every field of the connected `owner` region around (x, y) the id `area_id`.
    ----

    Uses an explicit stack instead of recursion, so large regions cannot exhaust the call stack.
    A field that already carries `area_id` counts as visited and is never pushed again.
    """
    if not board.is_within_bounds(x, y):
        return

    pending: list[tuple[int, int]] = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        current = board.field(cx, cy)
        if current.owner != owner or current.area_id == area_id:
            continue
        current.area_id = area_id
        for neighbour in orthogonal_neighbours(board, cx, cy):
            if board.area_id(*neighbour) != area_id:
                pending.append(neighbour)
