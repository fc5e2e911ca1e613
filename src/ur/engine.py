"""
Entry point of the rules engine.

`make_move` chains the individual rules: check the start, walk the board, check the destination, apply the move.
Any failure along the way is a rejection (InvalidMoveError) and leaves the given snapshot as it was.
"""

import logging

from src.core.exceptions import InvalidMoveError, RejectionReason
from src.ur.moves import Move
from src.ur.position import OFF_BOARD, OffBoard, OnBoard, Position
from src.ur.snapshot import Snapshot
from src.ur.transition import apply
from src.ur.traversal import traverse
from src.ur.validation import is_capture, is_valid_destination, is_valid_start

logger = logging.getLogger(__name__)


def make_move(snapshot: Snapshot, start: Position, roll: int) -> Snapshot:
    """
    Attempt a move for the current player.
    -----

    1. the piece must be theirs (or waiting off the board)
    2. the roll must move it at least one square (a zero roll is not a move)
    3. walking the board must not overshoot the exit
    4. the destination must not hold their own piece, nor an opponent sitting on a rosette
    5. build the next snapshot
    """
    player = snapshot.current_player
    if not is_valid_start(snapshot, start):
        reason = (
            RejectionReason.NO_WAITING_PIECES
            if isinstance(start, OffBoard)
            else RejectionReason.NOT_YOUR_PIECE
        )
        logger.debug("Rejected move for player %s from %s: %s", player, start, reason)
        raise InvalidMoveError(reason)

    if roll <= 0:
        logger.debug("Rejected move for player %s: roll of %d", player, roll)
        raise InvalidMoveError(RejectionReason.NO_MOVEMENT)

    destination = traverse(snapshot, start, roll)

    if not is_valid_destination(snapshot, destination):
        # for the type checker: leaving the board is never refused
        assert isinstance(destination, OnBoard)
        reason = (
            RejectionReason.OWN_PIECE
            if snapshot.occupant(destination.square_id) == player
            else RejectionReason.PROTECTED_ROSETTE
        )
        logger.debug(
            "Rejected move for player %s to %s: %s", player, destination, reason
        )
        raise InvalidMoveError(reason)

    if is_capture(snapshot, destination):
        logger.debug("Player %s captures on %s", player, destination)

    new_snapshot = apply(snapshot, start, destination)
    logger.debug(
        "Player %s moved %s -> %s (roll %d). Next player: %s",
        player,
        start,
        destination,
        roll,
        new_snapshot.current_player,
    )
    return new_snapshot


def play(snapshot: Snapshot, move: Move) -> Snapshot:
    """Convenience wrapper taking a Move instead of its parts."""
    return make_move(snapshot, move.start, move.roll)


def legal_moves(snapshot: Snapshot, roll: int) -> list[Move]:
    """
    Every move the current player could make with `roll`. Entering from off the board is listed first,
    then pieces on the board in square id order.

    NOTE: only informational. Whether a player may skip their turn when this list is empty (or not) is up to the caller.
    """
    starts: list[Position] = [OFF_BOARD]
    starts.extend(
        OnBoard(square_id)
        for square_id in snapshot.occupied_by(snapshot.current_player)
    )

    moves: list[Move] = []
    for start in starts:
        try:
            make_move(snapshot, start, roll)
        except InvalidMoveError:
            continue
        moves.append(Move(start, roll))
    return moves
