"""
ORM Models package.

All models are imported here to ensure proper model registration with
SQLAlchemy before ``Base.metadata.create_all`` runs.

Usage:
    from event_planner.models import Base, User, Event
"""

from event_planner.models.base import Base, TimestampMixin
from event_planner.models.user import User
from event_planner.models.event import Event

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "Event",
]
