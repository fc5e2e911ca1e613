"""Storage of Ur games, as seen by the service. SQLGameRepository is the real one; the service tests use a dict."""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Games are stored and returned as GameModel: serialized snapshots, move notation, names and status."""

    def get_game(self, game_id: UUID) -> GameModel | None: ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Returns the stored game and the id it was stored under."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replaces the whole record. None when the id is unknown."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Returns the game as it was before removal. None when the id is unknown."""
        ...
