from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List

from sqlalchemy import Column
from sqlalchemy import create_engine
from sqlalchemy import func
from sqlalchemy import Integer
from sqlalchemy import String
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from ..core.errors import StorageError
from ..core.types import Category, Event

logger = logging.getLogger(__name__)

Base = declarative_base()


class EventRow(Base):
    """
    One computed event in the 'events' table. Dates are ISO YYYY-MM-DD text
    so that ordering by start_date is lexicographic and portable.
    """

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    year = Column(Integer, nullable=False, index=True)
    category = Column(String, nullable=False)
    name = Column(String, nullable=False)
    start_date = Column(String(10), nullable=False)
    end_date = Column(String(10), nullable=False)

    @classmethod
    def from_event(cls, ev: Event) -> "EventRow":
        year, category, name, start, end = ev.as_row()
        return cls(year=year, category=category, name=name, start_date=start, end_date=end)

    def to_event(self) -> Event:
        return Event(
            name=self.name,
            category=Category(self.category),
            start_date=date.fromisoformat(self.start_date),
            end_date=date.fromisoformat(self.end_date),
            year=self.year,
        )


class EventStore:
    """Persists evaluated years. One short-lived session per operation."""

    def __init__(self, url: str = "sqlite:///meb_calendar.sqlite", *, echo: bool = False):
        self.url = url
        self.engine = create_engine(url, echo=echo, future=True)
        self.Session = sessionmaker(bind=self.engine, future=True)

    def init(self) -> None:
        try:
            Base.metadata.create_all(self.engine)  # create table(s) if not exist
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot create events table at {self.url}") from e
        logger.debug("events table ready at %s", self.url)

    def year_exists(self, year: int) -> bool:
        try:
            with self.Session() as session:
                count = session.query(func.count(EventRow.id)).filter(EventRow.year == year).scalar()
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot query year {year}") from e
        return bool(count)

    def insert_events(self, events: Iterable[Event]) -> int:
        rows = [EventRow.from_event(ev) for ev in events]
        try:
            with self.Session() as session, session.begin():
                session.add_all(rows)
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot insert {len(rows)} events") from e
        logger.info("Inserted %d events", len(rows))
        return len(rows)

    def events_by_year(self, year: int) -> List[Event]:
        try:
            with self.Session() as session:
                rows = (
                    session.query(EventRow)
                    .filter(EventRow.year == year)
                    .order_by(EventRow.start_date, EventRow.id)
                    .all()
                )
                return [row.to_event() for row in rows]
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot read year {year}") from e

    def delete_year(self, year: int) -> int:
        try:
            with self.Session() as session, session.begin():
                n = session.query(EventRow).filter(EventRow.year == year).delete()
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot delete year {year}") from e
        logger.info("Deleted %d stored events for %d", n, year)
        return n

    def replace_year(self, year: int, events: Iterable[Event]) -> int:
        """Swap the stored events of `year` for `events` in one transaction."""
        rows = [EventRow.from_event(ev) for ev in events]
        try:
            with self.Session() as session, session.begin():
                n = session.query(EventRow).filter(EventRow.year == year).delete()
                session.add_all(rows)
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot replace year {year}") from e
        logger.info("Replaced %d stored events for %d with %d", n, year, len(rows))
        return len(rows)

    def close(self) -> None:
        self.engine.dispose()

    def __enter__(self) -> "EventStore":
        self.init()
        return self

    def __exit__(self, *exc) -> None:
        self.close()
