from typing import Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session
import logging

from event_planner.core.database import StorageConnector
from event_planner.repositories.user_repository import UserRepository
from event_planner.repositories.event_repository import EventRepository

logger = logging.getLogger('CORE_DEPENDENCIES')


# ============================================================================
# Database Dependencies
# ============================================================================

def get_connector(request: Request) -> StorageConnector:
    """The storage connector owned by the running application."""
    return request.app.state.connector


def get_db(connector: StorageConnector = Depends(get_connector)) -> Generator[Session, None, None]:
    """
    Get database session for dependency injection.

    Yields:
        Session: SQLAlchemy database session, closed after the response

    Example:
        @router.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.query(Item).all()
    """
    with connector.session() as db:
        yield db


# ============================================================================
# Repository Dependencies
# ============================================================================

def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_event_repository(db: Session = Depends(get_db)) -> EventRepository:
    return EventRepository(db)
