"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Any

# Type aliases to make GameModel easier to read
PlayerKey = str
PlayerName = str
SerializedSnapshot = dict[str, Any]


@dataclass
class GameModel:
    """Transport-safe representation of a game of Ur used between API, Service, DB, and Game layers."""

    current_state: SerializedSnapshot
    history_states: list[SerializedSnapshot]
    moves: list[str]
    registered_players: dict[PlayerKey, PlayerName]
    status: str
