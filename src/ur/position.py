"""
Where a piece is, or ends up.

A piece that has not yet entered is `OffBoard`; a piece on the board is `OnBoard(square_id)`;
a piece that completed its path is `Exited`. Moves start from `OnBoard | OffBoard` and end on `OnBoard | Exited`.
"""

from dataclasses import dataclass

from src.ur.square import SquareId


@dataclass(frozen=True)
class OnBoard:
    square_id: SquareId


@dataclass(frozen=True)
class OffBoard:
    """The staging area of pieces waiting to enter the board."""


@dataclass(frozen=True)
class Exited:
    """A piece that left the board from its player's last square."""


OFF_BOARD = OffBoard()
EXITED = Exited()

Position = OnBoard | OffBoard
Destination = OnBoard | Exited
