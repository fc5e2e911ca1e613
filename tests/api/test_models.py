from uuid import UUID, uuid4

import pytest

from src.api.models import CreateGameRequest, LegalMovesRequest, MoveRequest
from src.core.exceptions import InvalidRequestError


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - CreateGameRequest --
def test_create_request_defaults() -> None:
    request = CreateGameRequest(player_name="don't hate the player, hate the name.")
    assert request.player_id == 1
    assert request.total_pieces is None


def test_create_request_second_seat() -> None:
    request = CreateGameRequest(player_name="mock", player_id=2, total_pieces=5)
    assert request.player_id == 2
    assert request.total_pieces == 5


@pytest.mark.parametrize("player_id", [0, 3, -1])
def test_invalid_player_id(player_id: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = CreateGameRequest(player_name="mock", player_id=player_id)


def test_invalid_piece_count() -> None:
    with pytest.raises(InvalidRequestError):
        _ = CreateGameRequest(player_name="mock", total_pieces=0)


# -- Validation - MoveRequest --
@pytest.mark.parametrize("start", ["-", "0", "12", " 15 "])
def test_valid_start(mock_id: UUID, start: str) -> None:
    request = MoveRequest(
        game_id=mock_id, player_name="bladiblidiboo", start=start, roll=2
    )
    assert request.start == start.strip()


@pytest.mark.parametrize(
    "start",
    [
        "nonsense",  # not a square id
        "a1",  # chess habits
        "--",  # off-board mark, twice
        "-3",  # a whole move instead of a start
        "",
    ],
)
def test_invalid_start(mock_id: UUID, start: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(game_id=mock_id, player_name="mock", start=start, roll=2)


@pytest.mark.parametrize("roll", [0, 1, 4])
def test_valid_roll(mock_id: UUID, roll: int) -> None:
    """A roll of zero is what the dice can show. Whether it moves anything is up to the engine."""
    request = MoveRequest(game_id=mock_id, player_name="mock", start="-", roll=roll)
    assert request.roll == roll


@pytest.mark.parametrize("roll", [-1, 5, 12])
def test_invalid_roll(mock_id: UUID, roll: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(game_id=mock_id, player_name="mock", start="-", roll=roll)
    with pytest.raises(InvalidRequestError):
        _ = LegalMovesRequest(game_id=mock_id, player_name="mock", roll=roll)
