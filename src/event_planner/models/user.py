"""
User ORM model.

One row per external identity; created on first login and never updated.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from event_planner.models.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    """User keyed by the identity provider's UID."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    firebase_uid = Column(String(128), unique=True, nullable=False, index=True)
    email = Column(String(255), nullable=False)
    username = Column(String(255), nullable=False)

    events = relationship("Event", back_populates="owner", passive_deletes=True)
