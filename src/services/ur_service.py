"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    JoinGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository
from src.ur.board import STANDARD_PIECES_PER_PLAYER
from src.ur.game import Game
from src.ur.moves import build_notation

logger = logging.getLogger(__name__)


class UrService:
    """Orchestration of layers for the Royal Game of Ur."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """First player requested to create a new game."""

        # Use info in CreateGameRequest to create a new Game, and convert into GameModel
        new_game = Game.new_game(
            player=request.player_name,
            player_id=request.player_id,
            total_pieces=request.total_pieces or STANDARD_PIECES_PER_PLAYER,
        )
        created_game_data = new_game.to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s for %r", game_id, request.player_name)

        # Return a GameResponse
        return self._create_game_response(game_id, stored_game)

    def join_game(self, request: JoinGameRequest) -> GameResponse:
        """Second player requested to join a game."""

        # Retrieve persisted GameModel from repository
        stored_model = self._fetch_game(request.game_id)

        # Create a new Game instance from the retrieved GameModel
        game = Game.from_model(stored_model)

        # Register the requested player
        game.register_player(request.player_name)

        # Capture updated state in GameModel
        with_player_registered = game.to_model()

        # store in repository
        self.repo.update_game(request.game_id, with_player_registered)

        # Return a GameResponse
        return self._create_game_response(request.game_id, with_player_registered)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal moves for the roll the player just made."""

        stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model)

        legal_moves = game.legal_moves(request.player_name, request.roll)
        return LegalMovesResponse(
            game_id=request.game_id,
            player_name=request.player_name,
            player_id=game.snapshot.current_player,
            roll=request.roll,
            legal_moves=legal_moves,
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt. A rejected move raises, and nothing gets stored."""

        # Retrieve persisted GameModel from repository
        stored_model = self._fetch_game(request.game_id)

        # Parse data in MoveRequest to move notation
        move_notation = build_notation(start=request.start, roll=request.roll)

        # Create a new Game instance from the retrieved GameModel
        game = Game.from_model(stored_model)

        # Attempt the move
        game.make_move(move_notation, request.player_name)

        # Capture updated state in GameModel
        after_move = game.to_model()

        # store in repository
        self.repo.update_game(request.game_id, after_move)
        logger.debug(
            "Game %s: %r played %s", request.game_id, request.player_name, move_notation
        )

        # Return a GameResponse
        return self._create_game_response(request.game_id, after_move)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        state = model.current_state
        winner_id = state["winner"]
        return GameResponse(
            game_id=game_id,
            players=model.registered_players,
            status=model.status,
            current_player=state["current_player"],
            waiting_pieces=state["waiting_piece_num"],
            passed_pieces=state["passed_piece_num"],
            winner=(
                model.registered_players.get(str(winner_id))
                if winner_id is not None
                else None
            ),
            state=state,
            move_history=model.moves,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
