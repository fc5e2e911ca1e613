"""
Construction of the standard Ur board, and the starting snapshot of a new game.
----

The board is 3 rows by 8 columns with a gap in the outer rows:

    row 0:  [ *][  ][  ][  ]        [ *][  ]      lane of player 1
    row 1:  [  ][  ][  ][ *][  ][  ][  ][  ]      shared row
    row 2:  [ *][  ][  ][  ]        [ *][  ]      lane of player 2

(* = rosette)

A piece enters on column 3 of its own lane, runs west to column 0, crosses the shared row eastwards,
turns back into its own lane at column 7 and leaves the board from column 6. That is 14 squares per player,
with rosettes on positions 4, 8 (shared by both players) and 14.
"""

from src.ur.snapshot import Snapshot
from src.ur.square import Direction, PlayerId, Square, SquareId

# The board is always 3x8. Just in case we want to try some funky variants, keep it adjustable.
BOARD_ROWS = 3
BOARD_COLUMNS = 8
SHARED_ROW = 1
GAP_COLUMNS = (4, 5)
ROSETTES: frozenset[tuple[int, int]] = frozenset(
    {(0, 0), (2, 0), (1, 3), (0, 6), (2, 6)}
)

PLAYER_ONE: PlayerId = 1
PLAYER_TWO: PlayerId = 2
LANE_ROW: dict[PlayerId, int] = {PLAYER_ONE: 0, PLAYER_TWO: 2}
ENTRY_COLUMN = 3
EXIT_COLUMN = 6

STANDARD_PIECES_PER_PLAYER = 7
# four tetrahedral dice, each with one marked tip out of two
MAX_ROLL = 4

# (row, column) offset of one step in each direction. North points towards row 0.
STEP: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}


def square_id(row: int, column: int) -> SquareId:
    return row * BOARD_COLUMNS + column


def is_on_board(row: int, column: int) -> bool:
    if not (0 <= row < BOARD_ROWS and 0 <= column < BOARD_COLUMNS):
        return False
    return row == SHARED_ROW or column not in GAP_COLUMNS


def standard_squares() -> dict[SquareId, Square]:
    """Build the 20 squares of the standard board, all of them empty."""
    squares: dict[SquareId, Square] = {}
    for row in range(BOARD_ROWS):
        for column in range(BOARD_COLUMNS):
            if not is_on_board(row, column):
                continue
            squares[square_id(row, column)] = Square(
                square_id=square_id(row, column),
                is_rosette=(row, column) in ROSETTES,
                direction_for=_directions(row, column),
                neighbours=_neighbours(row, column),
            )
    return squares


def standard_snapshot(
    total_piece_per_player_num: int = STANDARD_PIECES_PER_PLAYER,
    first_player: PlayerId = PLAYER_ONE,
) -> Snapshot:
    """Starting position: an empty board, every piece waiting, nobody has won yet."""
    players = list(LANE_ROW)
    return Snapshot(
        squares=standard_squares(),
        first_square_for={
            player: square_id(LANE_ROW[player], ENTRY_COLUMN) for player in players
        },
        last_square_for={
            player: square_id(LANE_ROW[player], EXIT_COLUMN) for player in players
        },
        waiting_piece_num={player: total_piece_per_player_num for player in players},
        passed_piece_num={player: 0 for player in players},
        total_piece_per_player_num=total_piece_per_player_num,
        turn_after={PLAYER_ONE: PLAYER_TWO, PLAYER_TWO: PLAYER_ONE},
        current_player=first_player,
    )


def player_path(snapshot: Snapshot, player: PlayerId) -> list[SquareId]:
    """
    The squares a piece of `player` visits, from entry square to exit square.

    NOTE the walk is bounded by the number of squares, so a badly wired board (a loop) cannot hang it.
    """
    path = [snapshot.first_square_for[player]]
    for _ in range(len(snapshot.squares)):
        next_square = snapshot.square(path[-1]).next_for(player)
        if next_square is None:
            break
        path.append(next_square)
    return path


def _directions(row: int, column: int) -> dict[PlayerId, Direction]:
    """Forward direction for every player on the square at (row, column)."""
    if row != SHARED_ROW:
        # lanes are private: the same direction applies to anyone
        direction = Direction.WEST
        if column == 0:
            direction = Direction.SOUTH if row < SHARED_ROW else Direction.NORTH
        return {player: direction for player in LANE_ROW}

    if column < BOARD_COLUMNS - 1:
        return {player: Direction.EAST for player in LANE_ROW}

    # end of the shared row: each player turns back into their own lane
    return {
        player: Direction.NORTH if LANE_ROW[player] < SHARED_ROW else Direction.SOUTH
        for player in LANE_ROW
    }


def _neighbours(row: int, column: int) -> dict[Direction, SquareId | None]:
    neighbours: dict[Direction, SquareId | None] = {}
    for direction, (d_row, d_column) in STEP.items():
        target = (row + d_row, column + d_column)
        neighbours[direction] = square_id(*target) if is_on_board(*target) else None
    return neighbours
