"""Event persistence (SQLAlchemy)."""

from .db import EventRow, EventStore

__all__ = ["EventRow", "EventStore"]
