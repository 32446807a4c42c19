"""
Event Repository

Data access layer for events. Reads are scoped either by owning user or by
event id; mutations are addressed by event id alone.
"""

from datetime import date as date_type, time as time_type
from typing import List, Optional, Union
import logging

from sqlalchemy import update, delete
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from event_planner.models.event import Event
from event_planner.repositories.base import BaseRepository, fits_primary_key
from event_planner.core.formats import parse_date, parse_time
from event_planner.core.exceptions import (
    DatabaseException,
    NotFoundException,
    ValidationException,
)

logger = logging.getLogger("EVENT_REPOSITORY")

DateLike = Union[date_type, str]
TimeLike = Union[time_type, str]

MISSING_REQUIRED = "Missing required fields"
EVENT_NOT_FOUND = "Event not found"


def _as_date(value: DateLike) -> date_type:
    try:
        return parse_date(value)
    except ValueError as e:
        raise ValidationException(str(e))


def _as_time(value: TimeLike) -> time_type:
    try:
        return parse_time(value)
    except ValueError as e:
        raise ValidationException(str(e))


class EventRepository(BaseRepository[Event]):
    """Repository for events."""

    def __init__(self, db: Session):
        super().__init__(Event, db)

    def list_for_user(self, user_id: int) -> List[Event]:
        """
        All events owned by ``user_id``, earliest first.

        Raises:
            ValidationException: If ``user_id`` is missing
        """
        if not user_id:
            raise ValidationException("Missing userId")
        if not fits_primary_key(user_id):
            return []
        try:
            return (
                self.db.query(Event)
                .filter(Event.user_id == user_id)
                .order_by(Event.date.asc(), Event.time.asc(), Event.id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            raise DatabaseException("Database query failed") from e

    def create_event(
        self,
        user_id: int,
        title: str,
        date: DateLike,
        time: TimeLike,
        description: Optional[str] = None,
        link: Optional[str] = None,
    ) -> Event:
        if not user_id or not title or not date or not time:
            raise ValidationException(MISSING_REQUIRED)
        if not fits_primary_key(user_id):
            raise ValidationException(f"Invalid userId: {user_id}")

        event = Event(
            user_id=user_id,
            title=title,
            date=_as_date(date),
            time=_as_time(time),
            description=description,
            link=link,
        )
        event = self.create(event, error_message="Failed to create event")
        logger.info(f"Created event {event.id} for user {user_id}")
        return event

    def get_event(self, event_id: int) -> Event:
        """
        Raises:
            NotFoundException: If no event has ``event_id``
        """
        return self.get_or_fail(event_id, EVENT_NOT_FOUND)

    def update_event(
        self,
        event_id: int,
        title: str,
        date: DateLike,
        time: TimeLike,
        description: Optional[str] = None,
        link: Optional[str] = None,
    ) -> None:
        """
        Replace every mutable field of the event.

        Omitted ``description``/``link`` overwrite the stored values with null.

        Raises:
            ValidationException: If ``title``, ``date`` or ``time`` is missing
            NotFoundException: If no row matched ``event_id``
        """
        if not title or not date or not time:
            raise ValidationException(MISSING_REQUIRED)

        values = {
            "title": title,
            "date": _as_date(date),
            "time": _as_time(time),
            "description": description,
            "link": link,
        }
        if not fits_primary_key(event_id):
            raise NotFoundException("Event", event_id, EVENT_NOT_FOUND)

        try:
            result = self.db.execute(
                update(Event)
                .where(Event.id == event_id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseException("Failed to update event") from e

        if result.rowcount == 0:
            raise NotFoundException("Event", event_id, EVENT_NOT_FOUND)
        logger.info(f"Updated event {event_id}")

    def delete_event(self, event_id: int) -> None:
        """
        Raises:
            NotFoundException: If no row matched ``event_id``
        """
        if not fits_primary_key(event_id):
            raise NotFoundException("Event", event_id, EVENT_NOT_FOUND)

        try:
            result = self.db.execute(
                delete(Event)
                .where(Event.id == event_id)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseException("Failed to delete event") from e

        if result.rowcount == 0:
            raise NotFoundException("Event", event_id, EVENT_NOT_FOUND)
        logger.info(f"Deleted event {event_id}")
