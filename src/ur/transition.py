"""
Apply a validated move and build the snapshot that follows it.
----

Order of the updates:

1. take the moving piece off its starting square (or out of the waiting pool)
2. send a captured opponent back to their waiting pool
3. place the moving piece on its destination (or count it as passed)
4. declare the winner once all of the mover's pieces have passed
5. hand over the turn, unless the piece landed on a rosette

The input snapshot is left untouched: every mapping that changes is copied first, unchanged ones are shared.
"""

from dataclasses import replace

from src.ur.position import Destination, OffBoard, OnBoard, Position
from src.ur.snapshot import Snapshot


def apply(snapshot: Snapshot, start: Position, destination: Destination) -> Snapshot:
    """Resulting snapshot. Assumes `start` and `destination` were already validated against `snapshot`."""
    player = snapshot.current_player
    squares = dict(snapshot.squares)
    waiting = dict(snapshot.waiting_piece_num)
    passed = dict(snapshot.passed_piece_num)

    # 1. vacate the source
    if isinstance(start, OffBoard):
        waiting[player] -= 1
    else:
        squares[start.square_id] = squares[start.square_id].with_occupant(None)

    if isinstance(destination, OnBoard):
        target = squares[destination.square_id]
        # 2. capture. NOTE validation only lets through an occupied square if the opponent is there
        if target.occupant is not None:
            waiting[target.occupant] += 1
        # 3. place
        squares[destination.square_id] = target.with_occupant(player)
    else:
        passed[player] += 1

    # 4. win check. Never clears an earlier winner.
    winner = snapshot.winner
    if winner is None and passed[player] == snapshot.total_piece_per_player_num:
        winner = player

    # 5. a rosette grants another turn
    lands_on_rosette = (
        isinstance(destination, OnBoard) and squares[destination.square_id].is_rosette
    )
    next_player = player if lands_on_rosette else snapshot.turn_after[player]

    return replace(
        snapshot,
        squares=squares,
        waiting_piece_num=waiting,
        passed_piece_num=passed,
        current_player=next_player,
        winner=winner,
    )
