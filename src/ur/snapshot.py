"""
The complete state of a game of Ur at one moment.

A Snapshot is never modified once built. Every accepted move produces a new one (see transition.py),
so earlier snapshots stay valid and can be kept around as history.
"""

from dataclasses import dataclass
from typing import Any, Optional, Self

from src.core.exceptions import InvalidNotationError
from src.ur.square import Direction, PlayerId, Square, SquareId


@dataclass(frozen=True)
class Snapshot:
    """
    Data that fully describes a game in progress.
    ----

    * `squares`: the board. The key set is fixed for the life of a game, only the occupants change.
    * `first_square_for` / `last_square_for`: where a player's pieces enter, and the square they leave the board from.
    * `waiting_piece_num` / `passed_piece_num`: pieces not yet entered / pieces that completed the path.
    * `total_piece_per_player_num`: same for every player.
    * `turn_after`: whose turn follows each player's turn.
    * `current_player`: the player whose move is validated/applied next.
    * `winner`: set once, when a player has passed all of their pieces.
    """

    squares: dict[SquareId, Square]
    first_square_for: dict[PlayerId, SquareId]
    last_square_for: dict[PlayerId, SquareId]
    waiting_piece_num: dict[PlayerId, int]
    passed_piece_num: dict[PlayerId, int]
    total_piece_per_player_num: int
    turn_after: dict[PlayerId, PlayerId]
    current_player: PlayerId
    winner: Optional[PlayerId] = None

    @property
    def players(self) -> list[PlayerId]:
        return sorted(self.turn_after)

    def square(self, square_id: SquareId) -> Square:
        return self.squares[square_id]

    def occupant(self, square_id: SquareId) -> Optional[PlayerId]:
        return self.squares[square_id].occupant

    def occupied_by(self, player: PlayerId) -> list[SquareId]:
        """Ids of the squares holding `player`'s pieces, in id order."""
        return sorted(
            square_id
            for square_id, square in self.squares.items()
            if square.occupant == player
        )

    def pieces_on_board(self, player: PlayerId) -> int:
        return len(self.occupied_by(player))

    def is_finished(self) -> bool:
        return self.winner is not None

    # --- SERIALIZATION ---
    def to_dict(self) -> dict[str, Any]:
        """Plain, JSON-ready data. Mapping keys become strings, as JSON requires."""
        return {
            "squares": {
                str(square_id): {
                    "is_rosette": square.is_rosette,
                    "direction_for": {
                        str(player): direction.value
                        for player, direction in square.direction_for.items()
                    },
                    "neighbours": {
                        direction.value: neighbour
                        for direction, neighbour in square.neighbours.items()
                    },
                    "occupant": square.occupant,
                }
                for square_id, square in self.squares.items()
            },
            "first_square_for": _keys_to_str(self.first_square_for),
            "last_square_for": _keys_to_str(self.last_square_for),
            "waiting_piece_num": _keys_to_str(self.waiting_piece_num),
            "passed_piece_num": _keys_to_str(self.passed_piece_num),
            "total_piece_per_player_num": self.total_piece_per_player_num,
            "turn_after": _keys_to_str(self.turn_after),
            "current_player": self.current_player,
            "winner": self.winner,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Reverse of `to_dict`. Raises InvalidNotationError if the data is malformed."""
        try:
            squares = {
                int(square_id): Square(
                    square_id=int(square_id),
                    is_rosette=bool(raw["is_rosette"]),
                    direction_for={
                        int(player): Direction(direction)
                        for player, direction in raw["direction_for"].items()
                    },
                    neighbours={
                        Direction(direction): (
                            int(neighbour) if neighbour is not None else None
                        )
                        for direction, neighbour in raw["neighbours"].items()
                    },
                    occupant=(
                        int(raw["occupant"]) if raw["occupant"] is not None else None
                    ),
                )
                for square_id, raw in data["squares"].items()
            }
            return cls(
                squares=squares,
                first_square_for=_keys_to_int(data["first_square_for"]),
                last_square_for=_keys_to_int(data["last_square_for"]),
                waiting_piece_num=_keys_to_int(data["waiting_piece_num"]),
                passed_piece_num=_keys_to_int(data["passed_piece_num"]),
                total_piece_per_player_num=int(data["total_piece_per_player_num"]),
                turn_after=_keys_to_int(data["turn_after"]),
                current_player=int(data["current_player"]),
                winner=int(data["winner"]) if data["winner"] is not None else None,
            )
        except (KeyError, TypeError, ValueError, AttributeError) as error:
            raise InvalidNotationError(
                f"Cannot build a snapshot from the given data: {error!r}"
            ) from error


def _keys_to_str(mapping: dict[int, int]) -> dict[str, int]:
    return {str(key): value for key, value in mapping.items()}


def _keys_to_int(mapping: dict[str, Any]) -> dict[int, int]:
    return {int(key): int(value) for key, value in mapping.items()}
