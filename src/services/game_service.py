"""Orchestration of communication from API models to the business logic and the game repository (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    NewGameRequest,
    PlayerSummary,
)
from src.core.exceptions import GameNotFoundError, IllegalMoveError
from src.core.models import GameModel
from src.services.repository import GameRepository
from src.territory.game import Game

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for the territory game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    def create_new_game(self, request: NewGameRequest) -> GameResponse:
        """Set up an empty board with the requested shape and limits."""

        # Use info in NewGameRequest to create a new Game
        new_game = Game.new_game(
            width=request.width,
            height=request.height,
            player_count=request.player_count,
            max_areas=request.max_areas,
        )

        # Store the Game in the repository
        game_id = self.repo.create_game(new_game)
        logger.info("Created game %s", game_id)

        # Return a GameResponse
        return self._create_game_response(game_id, new_game.to_model())

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game.to_model())

    def place_marker(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt."""

        # Retrieve the Game from the repository
        game = self._fetch_game(request.game_id)

        # Attempt the move. The Game stays untouched when it refuses.
        if not game.place_marker(request.player, request.x, request.y):
            raise IllegalMoveError(
                f"Player {request.player} cannot claim field ({request.x}, {request.y}) in game {request.game_id}."
            )

        # Return a GameResponse
        return self._create_game_response(request.game_id, game.to_model())

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game."""
        if self.repo.delete_game(request.game_id) is None:
            raise GameNotFoundError(f"Game with game_id={request.game_id} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            width=model.width,
            height=model.height,
            player_count=model.player_count,
            max_areas=model.max_areas,
            board=model.board,
            players=[
                PlayerSummary(
                    player=player.player,
                    symbol=player.symbol,
                    owned_fields=player.owned_fields,
                    free_fields=player.free_fields,
                    busy_areas=player.busy_areas,
                )
                for player in model.players
            ],
            move_history=model.moves,
        )

    def _fetch_game(self, game_id: UUID) -> Game:
        """Attempt to find the game in the repository and raise error if it fails."""
        game = self.repo.get_game(game_id)
        if game is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game
