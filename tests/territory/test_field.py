"""Unit tests for /src/territory/field.py"""

from string import ascii_lowercase

import pytest

from src.territory.field import EMPTY_SYMBOL, MAX_PLAYERS, Field, PlayerId, player_symbol


@pytest.mark.parametrize(
    "number, symbol",
    [(number, str(number)) for number in range(1, 10)]
    + [(number, ascii_lowercase[number - 10]) for number in range(10, MAX_PLAYERS + 1)],
)
def test_player_symbols(number: int, symbol: str) -> None:
    """Players 1-9 use their digit, players 10-35 continue with 'a'-'z'"""
    assert player_symbol(number) == symbol


@pytest.mark.parametrize("number", [0, -1, MAX_PLAYERS + 1, 100])
def test_no_symbol_for_non_players(number: int) -> None:
    assert player_symbol(number) == EMPTY_SYMBOL


def test_parse_valid_player() -> None:
    player_id = PlayerId.parse(3, player_count=3)
    assert player_id == PlayerId(3)
    assert player_id is not None
    assert player_id.index == 2
    assert player_id.to_symbol() == "3"


@pytest.mark.parametrize("number", [0, -2, 4])
def test_parse_invalid_player(number: int) -> None:
    """Only 1..player_count are players of the game"""
    assert PlayerId.parse(number, player_count=3) is None


def test_new_field_is_unclaimed() -> None:
    field = Field()
    assert not field.is_claimed
    assert field.area_id == 0

    field.owner = 4
    assert field.is_claimed
