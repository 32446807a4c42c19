"""
Repositories package.

This package contains all data access layer repositories following the Repository Pattern.
Each repository extends BaseRepository and provides domain-specific data operations.

Usage:
    from event_planner.repositories import EventRepository

    # In a FastAPI route with dependency injection:
    def list_events(db: Session = Depends(get_db)):
        repo = EventRepository(db)
        return repo.list_for_user(user_id)
"""

from event_planner.repositories.base import BaseRepository
from event_planner.repositories.user_repository import UserRepository
from event_planner.repositories.event_repository import EventRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "EventRepository",
]
