"""Unit tests for /src/territory/merge.py"""

from src.territory.board import Board
from src.territory.merge import merge_areas, merge_traversal


def test_merge_relabels_both_sides() -> None:
    """A row 1 1 _ 2 2 of one player gets connected in the middle"""
    board = Board.empty(5, 1)
    for x, area_id in [(0, 1), (1, 1), (3, 2), (4, 2)]:
        board.claim(x, 0, owner=1, area_id=area_id)
    board.claim(2, 0, owner=1, area_id=1)

    merge_areas(board, 1, 1, 2, 0)

    assert [field.area_id for field in board.fields] == [1, 1, 1, 1, 1]


def test_traversal_stays_within_owner() -> None:
    board = Board.empty(4, 1)
    board.claim(0, 0, owner=1, area_id=2)
    board.claim(1, 0, owner=1, area_id=2)
    board.claim(2, 0, owner=2, area_id=2)
    board.claim(3, 0, owner=1, area_id=2)

    merge_traversal(board, 1, 1, 0, 0)

    assert [field.area_id for field in board.fields] == [1, 1, 2, 2]


def test_traversal_follows_bends() -> None:
    """An L shaped region is relabelled completely, the separate field is not"""
    board = Board.empty(3, 3)
    for x, y in [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]:
        board.claim(x, y, owner=1, area_id=3)
    board.claim(2, 0, owner=1, area_id=3)

    merge_traversal(board, 5, 1, 0, 0)

    assert board.area_id(2, 2) == 5
    assert board.area_id(1, 2) == 5
    assert board.area_id(2, 0) == 3


def test_traversal_on_free_field_is_no_op() -> None:
    board = Board.empty(2, 2)
    board.claim(1, 1, owner=1, area_id=2)
    merge_traversal(board, 1, 1, 0, 0)
    assert board.area_id(1, 1) == 2


def test_traversal_outside_board_is_no_op() -> None:
    board = Board.empty(2, 2)
    board.claim(1, 1, owner=1, area_id=2)
    merge_traversal(board, 1, 1, -1, 0)
    merge_traversal(board, 1, 1, 2, 1)
    assert board.area_id(1, 1) == 2


def test_traversal_of_large_region() -> None:
    """Far more fields than the default recursion limit"""
    board = Board.empty(200, 200)
    for y in range(200):
        for x in range(200):
            board.claim(x, y, owner=1, area_id=2)

    merge_traversal(board, 1, 1, 0, 0)

    assert all(field.area_id == 1 for field in board.fields)
