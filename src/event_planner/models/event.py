"""
Event ORM model.

A scheduled event on a single date and time, owned by one user.
"""

from sqlalchemy import Column, Integer, String, Text, Date, Time, ForeignKey, Index
from sqlalchemy.orm import relationship

from event_planner.models.base import Base, TimestampMixin


class Event(TimestampMixin, Base):
    """Calendar event tied to a user."""

    __tablename__ = "events"
    __table_args__ = (
        Index("ix_events_user_schedule", "user_id", "date", "time"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(255), nullable=False)
    date = Column(Date, nullable=False)
    time = Column(Time, nullable=False)
    description = Column(Text, nullable=True)
    link = Column(String(2048), nullable=True)

    owner = relationship("User", back_populates="events")
