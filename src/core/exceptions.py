"""
Custom exceptions shared by all layers.

Everything derives from GameError, so the service (or anything above it) can catch a single type.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while handling a game"""


class GameSetupError(GameError):
    """A game cannot be created with the requested dimensions / players / areas."""


class IllegalMoveError(GameError):
    """The engine rejected a placement."""


class InvalidRequestError(GameError):
    """Request data did not pass validation at the API boundary."""


class GameNotFoundError(GameError):
    """No game stored under the requested ID."""
