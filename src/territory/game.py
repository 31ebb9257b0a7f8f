"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to place a marker on the board -->
and keeps the per-player counters up to date, so every query can be answered without scanning the board.
"""

import logging
from copy import copy
from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import GameSetupError
from src.core.models import GameModel, PlayerModel
from src.core.shared_types import MoveKind
from src.territory.adjacency import (
    collect_neighbour_area_ids,
    diagonal_pinch_count,
    distance_two_same_owner_count,
    distinct_area_id_count,
    orthogonal_neighbours,
    orthogonal_same_owner_count,
    pick_representative_area_id,
)
from src.territory.board import Board
from src.territory.field import MAX_PLAYERS, UNCLAIMED, Field, PlayerId, player_symbol
from src.territory.merge import merge_areas
from src.territory.placement import Placement
from src.territory.player import PlayerState

logger = logging.getLogger(__name__)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    players: list[PlayerState]
    max_areas: int
    moves: list[Placement]

    @classmethod
    def new_game(
        cls, width: int, height: int, player_count: int, max_areas: int
    ) -> Self:
        """Empty board of width x height, shared by `player_count` players who may each own `max_areas` separate areas."""
        settings = {
            "width": width,
            "height": height,
            "player_count": player_count,
            "max_areas": max_areas,
        }
        invalid = [name for name, value in settings.items() if value < 1]
        if invalid:
            raise GameSetupError(
                f"Cannot create new game. Must be at least 1: {', '.join(invalid)}."
            )
        if player_count > MAX_PLAYERS:
            raise GameSetupError(
                f"Cannot create new game. At most {MAX_PLAYERS} players can take part, got {player_count}."
            )

        logger.info(
            "New game: %dx%d board, %d players, %d areas per player",
            width,
            height,
            player_count,
            max_areas,
        )
        return cls(
            board=Board.empty(width, height),
            players=[PlayerState() for _ in range(player_count)],
            max_areas=max_areas,
            moves=[],
        )

    def to_model(self) -> GameModel:
        """Encode into the format the Service layer uses"""
        return GameModel(
            width=self.board_width,
            height=self.board_height,
            player_count=self.player_count,
            max_areas=self.max_areas,
            board=self.render_board(),
            players=[
                PlayerModel(
                    player=number,
                    symbol=self.player_symbol(number),
                    owned_fields=self.owned_field_count(number),
                    free_fields=self.free_field_count(number),
                    busy_areas=self.busy_area_count(number),
                )
                for number in range(1, self.player_count + 1)
            ],
            moves=[move.to_notation() for move in self.moves],
        )

    # --- QUERIES ---
    @property
    def board_width(self) -> int:
        return self.board.width

    @property
    def board_height(self) -> int:
        return self.board.height

    @property
    def player_count(self) -> int:
        return len(self.players)

    def owned_field_count(self, player: int) -> int:
        """Number of fields the player owns. 0 for an unknown player."""
        state = self._player_state(player)
        return state.completed_moves if state else 0

    def free_field_count(self, player: int) -> int:
        """
        Number of fields the player could still claim with a single move.
        ----

        * All areas used up? The player can only grow existing areas, which is exactly what the boundary counts.
        * Otherwise a brand-new area can be started on any unclaimed field of the board.
        """
        state = self._player_state(player)
        if state is None:
            return 0
        if state.busy_areas == self.max_areas:
            return state.boundary
        claimed = sum(other.completed_moves for other in self.players)
        return self.board_width * self.board_height - claimed

    def busy_area_count(self, player: int) -> int:
        state = self._player_state(player)
        return state.busy_areas if state else 0

    def player_symbol(self, player: int) -> str:
        """'.' for anybody who is not a player of this game"""
        player_id = PlayerId.parse(player, self.player_count)
        return player_id.to_symbol() if player_id else player_symbol(UNCLAIMED)

    def render_board(self) -> str:
        return self.board.to_text()

    def field(self, x: int, y: int) -> Optional[Field]:
        """Copy of the field on (x, y), so callers cannot change the board behind the Game's back."""
        if not self.board.is_within_bounds(x, y):
            return None
        return copy(self.board.field(x, y))

    # --- MOVES ---
    def place_marker(self, player: int, x: int, y: int) -> bool:
        """
        Attempt to claim the field on (x, y) for `player`
        -----

        Returns False (and leaves the game untouched) when:
        * the player does not take part in this game
        * the coordinate lies outside the board
        * the field is already claimed
        * the field has no neighbour of the player and the player already owns `max_areas` areas

        Otherwise the field is claimed as a new area, an extension of an area or the merge of several areas,
        and the counters of the player (and of neighbouring opponents) are updated.
        """
        player_id = PlayerId.parse(player, self.player_count)
        if player_id is None:
            logger.debug("Rejected %d@%d,%d: unknown player", player, x, y)
            return False
        if not self.board.is_within_bounds(x, y):
            logger.debug("Rejected %d@%d,%d: outside the board", player, x, y)
            return False
        if self.board.field(x, y).is_claimed:
            logger.debug("Rejected %d@%d,%d: field already claimed", player, x, y)
            return False

        around = orthogonal_same_owner_count(self.board, player_id.number, x, y)
        if around == 0 and not self._can_open_area(player_id):
            logger.debug("Rejected %d@%d,%d: no areas left", player, x, y)
            return False

        if around == 0:
            kind = self._claim_new_area(player_id, x, y)
        else:
            kind = self._claim_next_to_own_areas(player_id, around, x, y)

        self._update_boundaries(player_id, x, y)

        placement = Placement(player_id.number, x, y, kind)
        self.moves.append(placement)
        logger.debug("Accepted %s (%s)", placement, kind)
        return True

    # -- PRIVATE HELPERS ---
    def _player_state(self, player: int) -> Optional[PlayerState]:
        player_id = PlayerId.parse(player, self.player_count)
        return self.players[player_id.index] if player_id else None

    def _can_open_area(self, player_id: PlayerId) -> bool:
        return self.players[player_id.index].busy_areas < self.max_areas

    def _claim_new_area(self, player_id: PlayerId, x: int, y: int) -> MoveKind:
        """An "island": the newest area gets the (new) number of areas as its id"""
        state = self.players[player_id.index]
        state.busy_areas += 1
        self.board.claim(x, y, player_id.number, state.busy_areas)
        return MoveKind.NEW_AREA

    def _claim_next_to_own_areas(
        self, player_id: PlayerId, around: int, x: int, y: int
    ) -> MoveKind:
        """
        At least one neighbour is ours.
        ----

        1. Extension: neighbours show no more than one pair of different ids --> join the first neighbour's area.
           Every extra neighbour is counted as an area that got absorbed.
        2. Merge: neighbours show several differing pairs --> join the first neighbour's area and relabel everything connected.

        In both cases the claimed field itself was part of the boundary, and no longer is.
        """
        state = self.players[player_id.index]
        neighbour_ids = collect_neighbour_area_ids(
            self.board, player_id.number, x, y
        )
        distinct = distinct_area_id_count(neighbour_ids, around)
        area_id = pick_representative_area_id(neighbour_ids)
        self.board.claim(x, y, player_id.number, area_id)
        state.boundary -= 1

        if distinct == 1:
            state.busy_areas -= around - 1
            return MoveKind.EXTENSION

        state.busy_areas -= distinct - 1
        merge_areas(self.board, area_id, player_id.number, x, y)
        return MoveKind.MERGE

    def _update_boundaries(self, player_id: PlayerId, x: int, y: int) -> None:
        """
        Bookkeeping after the field on (x, y) got claimed
        ----

        1. gross gain: every free neighbour of the new field
        2. minus the fields in between the new field and our fields two steps away (already counted)
        3. minus the free corners shared with a diagonal neighbour of ours (already counted)
        4. opponents next to the new field lose it from their boundary
        """
        owner = player_id.number
        state = self.players[player_id.index]
        state.completed_moves += 1
        state.boundary += orthogonal_same_owner_count(self.board, UNCLAIMED, x, y)
        state.boundary -= distance_two_same_owner_count(self.board, owner, x, y)
        state.boundary -= diagonal_pinch_count(self.board, owner, x, y)

        for nx, ny in orthogonal_neighbours(self.board, x, y):
            neighbour_owner = self.board.owner(nx, ny)
            if neighbour_owner not in (UNCLAIMED, owner):
                self.players[neighbour_owner - 1].boundary -= 1
