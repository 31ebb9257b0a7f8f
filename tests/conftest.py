"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.territory.game import Game

# (player, x, y, accepted?) on a 10x10 board with 2 players and at most 3 areas each
GOLDEN_MOVES: list[tuple[int, int, int, bool]] = [
    (1, 0, 0, True),
    (2, 3, 1, True),
    (1, 0, 2, True),
    (1, 0, 9, True),
    (1, 5, 5, False),
    (1, 0, 1, True),
    (1, 5, 5, True),
    (1, 6, 6, False),
    (2, 2, 1, True),
    (2, 1, 1, True),
    (2, 0, 1, False),
    (2, 6, 6, True),
]


@pytest.fixture
def golden_board() -> str:
    """How the board of the reference game looks after all moves"""
    return (
        "1.........\n"
        "..........\n"
        "..........\n"
        "......2...\n"
        ".....1....\n"
        "..........\n"
        "..........\n"
        "1.........\n"
        "1222......\n"
        "1.........\n"
    )


@pytest.fixture
def golden_game() -> Game:
    """The full reference game, every move played (the rejected ones too)."""
    game = Game.new_game(width=10, height=10, player_count=2, max_areas=3)
    for player, x, y, accepted in GOLDEN_MOVES:
        assert game.place_marker(player, x, y) is accepted
    return game


@pytest.fixture
def game_with_moves() -> Callable[..., Game]:
    """Call the inner function with the board settings and a list of (player, x, y) moves that must all be accepted"""

    def _create_game(
        moves: list[tuple[int, int, int]],
        width: int = 5,
        height: int = 5,
        player_count: int = 2,
        max_areas: int = 5,
    ) -> Game:
        game = Game.new_game(width, height, player_count, max_areas)
        for player, x, y in moves:
            assert game.place_marker(player, x, y), f"move {player}@{x},{y} refused"
        return game

    return _create_game
