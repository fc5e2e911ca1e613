"""
Walk the board graph to find where a move ends.
----

A piece advances one square per unit of the roll, always following the direction the square assigns to its player.
Entering the board costs one step (landing on the player's first square). Leaving the board also costs one step,
and is only possible from the player's last square with exactly one step to spare.
"""

import logging

from src.core.exceptions import InvalidMoveError, RejectionReason
from src.ur.position import EXITED, Destination, OffBoard, OnBoard, Position
from src.ur.snapshot import Snapshot

logger = logging.getLogger(__name__)


def traverse(snapshot: Snapshot, start: Position, roll: int) -> Destination:
    """
    Destination of a move of `roll` steps from `start` for the current player.

    Raises InvalidMoveError when the piece would overshoot the end of the board (or run into an edge that is not
    the player's exit). A roll of zero leaves an on-board piece where it is; from off the board it is rejected,
    as the piece never reaches the board.
    """
    if roll < 0:
        raise InvalidMoveError(
            RejectionReason.NO_MOVEMENT, f"A roll cannot be negative: {roll}"
        )

    player = snapshot.current_player
    if isinstance(start, OffBoard):
        if roll == 0:
            raise InvalidMoveError(RejectionReason.NO_MOVEMENT)
        # entering the board is the first step
        current = snapshot.first_square_for[player]
        remaining = roll - 1
    else:
        current = start.square_id
        remaining = roll

    while remaining > 0:
        next_square = snapshot.square(current).next_for(player)
        if next_square is None:
            if remaining == 1 and current == snapshot.last_square_for[player]:
                return EXITED
            logger.debug(
                "Player %s overshoots from square %s with %d step(s) left",
                player,
                current,
                remaining,
            )
            raise InvalidMoveError(RejectionReason.OVERSHOOT)
        current = next_square
        remaining -= 1

    return OnBoard(current)
