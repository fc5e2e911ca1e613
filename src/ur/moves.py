"""
A move attempt, and the compact notation used to record it.

Notation (plays the role UCI notation plays in chess):

* "-3": bring a new piece onto the board with a roll of 3
* "12+2": move the piece standing on square 12 forward by 2
"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidNotationError
from src.ur.position import OFF_BOARD, OffBoard, OnBoard, Position

OFF_BOARD_MARK = "-"
STEP_MARK = "+"


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made: where the piece starts, and how far it travels"""

    start: Position
    roll: int

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        notation = notation.strip()
        if notation.startswith(OFF_BOARD_MARK):
            start: Position = OFF_BOARD
            roll_str = notation[len(OFF_BOARD_MARK) :]
        else:
            square_str, separator, roll_str = notation.partition(STEP_MARK)
            if not separator or not square_str.isdigit():
                raise InvalidNotationError(f"Cannot interpret {notation!r} as a move.")
            start = OnBoard(int(square_str))

        if not roll_str.isdigit():
            raise InvalidNotationError(f"Cannot interpret {notation!r} as a move.")
        return cls(start, int(roll_str))

    def to_notation(self) -> str:
        if isinstance(self.start, OffBoard):
            return f"{OFF_BOARD_MARK}{self.roll}"
        return f"{self.start.square_id}{STEP_MARK}{self.roll}"


def build_notation(start: str, roll: int) -> str:
    """Helper for the service: a start given as "-" (off the board) or a square id, plus the roll."""
    if start.strip() == OFF_BOARD_MARK:
        return f"{OFF_BOARD_MARK}{roll}"
    return f"{start.strip()}{STEP_MARK}{roll}"
