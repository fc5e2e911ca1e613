"""Implementation of (Game)Repository using SQLAlchemy"""

from copy import deepcopy
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import GameModel
from src.db.schema import DBGame


class SQLGameRepository:
    """
    Ur games stored in a single table, the snapshots as JSON documents.

    NOTE: the JSON columns are not tracked for in-place changes. Models go in and come out as copies, so a caller
    editing a returned snapshot (or history) cannot silently change the record held by the session.
    """

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: UUID) -> GameModel | None:
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a new game under a fresh id."""
        game_db = DBGame(id=uuid4())
        self._write_model(game_db, game)
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db), game_db.id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite the snapshot, history, moves, players and status of an existing game."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        self._write_model(game_db, game)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_model = self._to_model(game_db)
        self.db.delete(game_db)
        self.db.commit()
        return game_model

    def _fetch_game(self, game_id: UUID) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    @staticmethod
    def _write_model(game_db: DBGame, game: GameModel) -> None:
        # whole documents are reassigned, which is what marks the JSON columns as dirty
        game_db.current_state = deepcopy(game.current_state)
        game_db.history_states = deepcopy(game.history_states)
        game_db.moves = list(game.moves)
        game_db.registered_players = dict(game.registered_players)
        game_db.status = game.status

    @staticmethod
    def _to_model(game_db: DBGame) -> GameModel:
        return GameModel(
            current_state=deepcopy(game_db.current_state),
            history_states=deepcopy(game_db.history_states),
            moves=list(game_db.moves),
            registered_players=dict(game_db.registered_players),
            status=game_db.status,
        )
