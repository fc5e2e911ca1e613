"""
Custom exceptions, shared by all layers.

Every exception derives from GameError, so the layers above the domain can catch a single type.
"""

from enum import StrEnum


class RejectionReason(StrEnum):
    """Why the engine refused a move. Informational only: every reason is the same rejection."""

    NOT_YOUR_PIECE = "start square is not occupied by the current player"
    NO_WAITING_PIECES = "no pieces left waiting off the board"
    NO_MOVEMENT = "a roll must move the piece at least one square"
    OVERSHOOT = "roll would carry the piece past the end of the board"
    OWN_PIECE = "destination is occupied by your own piece"
    PROTECTED_ROSETTE = "destination is a rosette occupied by the opponent"


class GameError(Exception):
    """Base class for all errors raised by this project."""


class InvalidMoveError(GameError):
    """The engine rejected the move. The snapshot it was given is left untouched."""

    def __init__(self, reason: RejectionReason, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or reason.value)


class GameStateError(GameError):
    """The game is not in a state that accepts the requested action."""


class NotYourTurnError(GameError):
    """A player tried to act while it is someone else's turn."""


class InvalidNotationError(GameError):
    """Move notation or serialized snapshot data could not be parsed."""


class RepositoryError(GameError):
    """Requested record does not exist (or could not be stored)."""


class InvalidRequestError(GameError):
    """Request data failed validation before reaching the service."""
