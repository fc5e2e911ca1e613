"""Legality checks for both ends of a move. Pure predicates: nothing here changes the snapshot."""

from src.ur.position import Destination, Exited, OffBoard, OnBoard, Position
from src.ur.snapshot import Snapshot


def is_valid_start(snapshot: Snapshot, start: Position) -> bool:
    """
    Can the current player move a piece from `start`?

    * from a square: only if the square exists and their own piece stands there.
    * from off the board: only if they still have pieces waiting.
    """
    player = snapshot.current_player
    if isinstance(start, OffBoard):
        return snapshot.waiting_piece_num[player] > 0
    if start.square_id not in snapshot.squares:
        return False
    return snapshot.occupant(start.square_id) == player


def is_valid_destination(snapshot: Snapshot, destination: Destination) -> bool:
    """
    Can the current player's piece end its move on `destination`?

    Leaving the board is always allowed. A square is allowed when it is free, or when an opponent stands on it
    and it is not a rosette (the opponent gets captured). Your own piece, or an opponent on a rosette, blocks the move.
    """
    if isinstance(destination, Exited):
        return True

    square = snapshot.square(destination.square_id)
    if square.occupant is None:
        return True
    if square.occupant == snapshot.current_player:
        return False
    return not square.is_rosette


def is_capture(snapshot: Snapshot, destination: Destination) -> bool:
    """A legal destination that is occupied can only hold an opponent's piece."""
    return isinstance(destination, OnBoard) and snapshot.square(
        destination.square_id
    ).is_occupied()
