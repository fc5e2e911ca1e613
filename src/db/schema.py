"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    """One game of Ur. The snapshots are stored as JSON documents (see Snapshot.to_dict)."""

    __tablename__ = "games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    current_state: Mapped[dict[str, Any]] = mapped_column(JSON)
    history_states: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
    moves: Mapped[list[str]] = mapped_column(JSON, default=list)
    registered_players: Mapped[dict[str, str]] = mapped_column(JSON)
    status: Mapped[str]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
