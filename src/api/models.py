"""Requests and Response models"""

from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.territory.field import MAX_PLAYERS


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    width: int
    height: int
    player_count: int
    max_areas: int

    @field_validator(*["width", "height", "max_areas"])
    @classmethod
    def validate_positive(cls, value: int) -> int:
        if value < 1:
            raise InvalidRequestError(
                f"Board dimensions and area limit must be at least 1, got {value}."
            )
        return value

    @field_validator("player_count")
    @classmethod
    def validate_player_count(cls, value: int) -> int:
        if not 1 <= value <= MAX_PLAYERS:
            raise InvalidRequestError(
                f"Number of players must lie between 1 and {MAX_PLAYERS}, got {value}."
            )
        return value


class MoveRequest(BaseModel):
    game_id: UUID
    player: int
    x: int
    y: int

    @field_validator("player")
    @classmethod
    def validate_player(cls, value: int) -> int:
        if value < 1:
            raise InvalidRequestError(f"Player numbers start at 1, got {value}.")
        return value

    @field_validator(*["x", "y"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Coordinates cannot be negative, got {value}.")
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class PlayerSummary(BaseModel):
    player: int
    symbol: str
    owned_fields: int
    free_fields: int
    busy_areas: int


class GameResponse(BaseModel):
    game_id: UUID
    width: int
    height: int
    player_count: int
    max_areas: int
    board: str
    players: list[PlayerSummary]
    move_history: list[str]
