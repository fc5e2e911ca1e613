"""
A square on the board, and the directions a piece can travel in.

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Optional

# Type aliases. Players and squares are identified by plain integers.
PlayerId = int
SquareId = int


class Direction(StrEnum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


@dataclass(frozen=True)
class Square:
    """
    One node of the board graph.
    ----

    * `direction_for` tells, per player, which way is forward on this square (paths diverge at the ends of the board).
    * `neighbours` maps a direction to the id of the adjacent square, or None at the edge of the board.
    * `occupant` is the player whose piece sits here. At most one piece per square.
    """

    square_id: SquareId
    is_rosette: bool
    direction_for: dict[PlayerId, Direction]
    neighbours: dict[Direction, Optional[SquareId]]
    occupant: Optional[PlayerId] = None

    def next_for(self, player: PlayerId) -> Optional[SquareId]:
        """The neighbour lying in `player`'s direction of travel (None at the edge of the board)."""
        direction = self.direction_for.get(player)
        if direction is None:
            return None
        return self.neighbours.get(direction)

    def is_occupied(self) -> bool:
        return self.occupant is not None

    def with_occupant(self, player: Optional[PlayerId]) -> Square:
        """Copy of this square with a different occupant. The topology dictionaries are shared, never modified."""
        return replace(self, occupant=player)
