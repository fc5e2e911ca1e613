"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from dataclasses import replace
from typing import Callable, Generator, Optional

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base
from src.ur.board import standard_snapshot
from src.ur.snapshot import Snapshot

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

PositionBuilder = Callable[..., Snapshot]


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def build_position() -> PositionBuilder:
    """
    Factory for standard-board snapshots with pieces already placed.

    Waiting counts are derived from the pieces on the board and the passed pieces, so every position it builds
    respects piece conservation.
    """

    def _build(
        occupants: Optional[dict[int, int]] = None,
        current_player: int = 1,
        passed: Optional[dict[int, int]] = None,
        total: int = 7,
    ) -> Snapshot:
        occupants = occupants or {}
        passed = {1: 0, 2: 0, **(passed or {})}
        base = standard_snapshot(total_piece_per_player_num=total)
        squares = dict(base.squares)
        for square_id, player in occupants.items():
            squares[square_id] = squares[square_id].with_occupant(player)
        waiting = {
            player: total
            - passed[player]
            - sum(1 for owner in occupants.values() if owner == player)
            for player in (1, 2)
        }
        return replace(
            base,
            squares=squares,
            waiting_piece_num=waiting,
            passed_piece_num=passed,
            current_player=current_player,
        )

    return _build
