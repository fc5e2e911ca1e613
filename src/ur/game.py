"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of the board game -->
passes this information to the service layer, which can then pass it onwards to the API layer.

The rules themselves live in engine.py; Game adds the bookkeeping around them: who plays which seat,
whose turn it is, the history of snapshots and moves, and whether the game is still running.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import (
    GameStateError,
    InvalidNotationError,
    NotYourTurnError,
)
from src.core.models import GameModel
from src.core.shared_types import Status
from src.ur.board import (
    LANE_ROW,
    PLAYER_ONE,
    STANDARD_PIECES_PER_PLAYER,
    standard_snapshot,
)
from src.ur.engine import legal_moves, play
from src.ur.moves import Move
from src.ur.snapshot import Snapshot
from src.ur.square import PlayerId

logger = logging.getLogger(__name__)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    snapshot: Snapshot
    moves: list[Move]
    history: list[Snapshot]  # snapshots before each move, oldest first
    players: dict[PlayerId, str]
    status: Status

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        try:
            status = Status(model.status)
        except ValueError as error:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            ) from error

        try:
            players = {
                int(player_id): name
                for player_id, name in model.registered_players.items()
            }
        except ValueError as error:
            raise InvalidNotationError(
                f"Player ids must be integers: {list(model.registered_players)}"
            ) from error

        # create the Game
        snapshot = Snapshot.from_dict(model.current_state)
        history = [Snapshot.from_dict(state) for state in model.history_states]
        moves = [Move.from_notation(notation) for notation in model.moves]
        return cls(snapshot, moves, history, players, status)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            current_state=self.snapshot.to_dict(),
            history_states=[snapshot.to_dict() for snapshot in self.history],
            moves=[move.to_notation() for move in self.moves],
            registered_players={
                str(player_id): name for player_id, name in self.players.items()
            },
            status=self.status.value,
        )

    @classmethod
    def new_game(
        cls,
        player: str,
        player_id: PlayerId = PLAYER_ONE,
        total_pieces: int = STANDARD_PIECES_PER_PLAYER,
        first_player: PlayerId = PLAYER_ONE,
    ) -> Self:
        """To start a new game with the player taking the seat `player_id` on the standard board."""
        if player_id not in LANE_ROW:
            raise GameStateError(
                f"Cannot create new game. Player id {player_id} not in {','.join(str(p) for p in LANE_ROW)}."
            )
        if first_player not in LANE_ROW:
            raise GameStateError(
                f"Cannot create new game. First player {first_player} not in {','.join(str(p) for p in LANE_ROW)}."
            )
        if total_pieces < 1:
            raise GameStateError(
                f"Cannot create new game. Need at least one piece per player, got {total_pieces}."
            )

        return cls(
            snapshot=standard_snapshot(total_pieces, first_player),
            moves=[],
            history=[],
            players={player_id: player},
            status=Status.WAITING_FOR_PLAYERS,
        )

    @property
    def winner(self) -> Optional[str]:
        """Name of the player who passed all of their pieces, if any."""
        if self.snapshot.winner is None:
            return None
        return self.players.get(self.snapshot.winner)

    def register_player(self, player: str) -> None:
        """Registering the 2nd player to an open game"""
        if self.status != Status.WAITING_FOR_PLAYERS:
            raise GameStateError(
                f"Cannot join this game. Game is not accepting new players. status: {self.status}"
            )
        if player in self.players.values():
            raise GameStateError(f"Player {player!r} already joined this game.")

        free_seat = next(
            (
                player_id
                for player_id in self.snapshot.players
                if player_id not in self.players
            ),
            None,
        )
        if free_seat is None:
            raise GameStateError("Cannot join this game. There is no free seat left.")
        self.players[free_seat] = player
        logger.info("Player %r joined as player %s", player, free_seat)
        self._change_status(Status.IN_PROGRESS)

    def legal_moves(self, player: str, roll: int) -> list[str]:
        """
        Service will request the set of legal moves for a roll.
        ----

        1. Check if it is your turn
        2. Yes? Generate legal moves and return them in move notation.
        """
        self._assert_in_progress()
        self._assert_your_turn(player)
        return [move.to_notation() for move in legal_moves(self.snapshot, roll)]

    def make_move(self, move_notation: str, player: str) -> None:
        """
        Attempt to make a move
        -----

        1. make sure the game is running and it is your turn
        2. let the engine validate and apply the move (raises InvalidMoveError, nothing changes in that case)
        3. record the previous snapshot and the move
        4. update game status (if someone has won)
        """
        self._assert_in_progress()
        self._assert_your_turn(player)

        move = Move.from_notation(move_notation)
        new_snapshot = play(self.snapshot, move)

        self.history.append(self.snapshot)
        self.moves.append(move)
        self.snapshot = new_snapshot

        if self.snapshot.is_finished():
            logger.info("Game over: %s wins", self.winner)
            self._change_status(Status.FINISHED)

    # -- PRIVATE HELPERS ---
    def _get_turn_player(self) -> str:
        return self.players[self.snapshot.current_player]

    def _assert_in_progress(self) -> None:
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _assert_your_turn(self, player: str) -> None:
        """You must wait for your turn before calculating legal moves / making a move."""
        player_to_move = self._get_turn_player()
        if player != player_to_move:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {player_to_move} to make a move first."
            )

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
