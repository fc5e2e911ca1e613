"""Requests and Response models"""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.ur.board import LANE_ROW, MAX_ROLL
from src.ur.moves import OFF_BOARD_MARK

PlayerKey = str
PlayerName = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    player_name: str
    player_id: int = 1
    total_pieces: Optional[int] = None

    @field_validator("player_id")
    @classmethod
    def validate_player_id(cls, value: int) -> int:
        if value not in LANE_ROW:
            raise InvalidRequestError(
                f"Player id must be one of {sorted(LANE_ROW)}, got {value}."
            )
        return value

    @field_validator("total_pieces")
    @classmethod
    def validate_total_pieces(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 1:
            raise InvalidRequestError("A game needs at least one piece per player.")
        return value


class JoinGameRequest(BaseModel):
    game_id: UUID
    player_name: str


class LegalMovesRequest(BaseModel):
    game_id: UUID
    player_name: str
    roll: int

    @field_validator("roll")
    @classmethod
    def validate_roll(cls, value: int) -> int:
        return _validate_roll(value)


class MoveRequest(BaseModel):
    game_id: UUID
    player_name: str
    start: str
    roll: int

    @field_validator("start")
    @classmethod
    def validate_start(cls, value: str) -> str:
        """Either the off-board mark or a square id"""
        value = value.strip()
        if value != OFF_BOARD_MARK and not value.isdigit():
            raise InvalidRequestError(
                f"Cannot interpret start: {value!r} as off-board ({OFF_BOARD_MARK!r}) or a square id."
            )
        return value

    @field_validator("roll")
    @classmethod
    def validate_roll(cls, value: int) -> int:
        return _validate_roll(value)


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


def _validate_roll(value: int) -> int:
    """Whatever the dice show: zero up to the maximum roll. The engine decides what a roll can do."""
    if not 0 <= value <= MAX_ROLL:
        raise InvalidRequestError(
            f"A roll must lie between 0 and {MAX_ROLL}, got {value}."
        )
    return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    players: dict[PlayerKey, PlayerName]
    status: str
    current_player: int
    waiting_pieces: dict[PlayerKey, int]
    passed_pieces: dict[PlayerKey, int]
    winner: Optional[PlayerName]
    state: dict[str, Any]
    move_history: list[str]


class LegalMovesResponse(BaseModel):
    game_id: UUID
    player_name: str
    player_id: int
    roll: int
    legal_moves: list[str]
