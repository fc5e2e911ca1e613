"""Unit tests for /src/ur/square.py"""

from src.ur.square import Direction, Square


def make_square(occupant=None) -> Square:
    return Square(
        square_id=15,
        is_rosette=False,
        direction_for={1: Direction.NORTH, 2: Direction.SOUTH},
        neighbours={
            Direction.NORTH: 7,
            Direction.SOUTH: 23,
            Direction.EAST: None,
            Direction.WEST: 14,
        },
        occupant=occupant,
    )


def test_next_square_follows_the_players_direction() -> None:
    """Both players share the square, but each goes their own way from here."""
    square = make_square()
    assert square.next_for(1) == 7
    assert square.next_for(2) == 23


def test_next_square_at_edge_of_board() -> None:
    square = Square(
        square_id=6,
        is_rosette=True,
        direction_for={1: Direction.WEST},
        neighbours={Direction.WEST: None, Direction.EAST: 7},
    )
    assert square.next_for(1) is None


def test_unknown_player_has_no_next_square() -> None:
    assert make_square().next_for(3) is None


def test_with_occupant_leaves_original_untouched() -> None:
    square = make_square()
    occupied = square.with_occupant(2)

    assert occupied.occupant == 2
    assert occupied.is_occupied()
    assert square.occupant is None
    assert not square.is_occupied()
    # the topology is shared, not copied
    assert occupied.neighbours is square.neighbours
    assert occupied.direction_for is square.direction_for
