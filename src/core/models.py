"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The API layer (higher) and the domain layer (lower) both use the model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the API layer or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
PlayerNumber = int
BoardText = str


@dataclass
class PlayerModel:
    """Counters of a single player, as exposed to the outside world."""

    player: PlayerNumber
    symbol: str
    owned_fields: int
    free_fields: int
    busy_areas: int


@dataclass
class GameModel:
    """Transport-safe snapshot of a territory game used between API, Service and Game layers."""

    width: int
    height: int
    player_count: int
    max_areas: int
    board: BoardText
    players: list[PlayerModel]
    moves: list[str]
