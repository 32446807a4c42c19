"""
Event Pydantic Schemas
"""

from datetime import date as date_type, time as time_type
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from event_planner.core.formats import parse_date, parse_time

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


class EventFields(BaseModel):
    """Mutable event fields, all optional so the router can report absence itself."""

    title: Optional[str] = Field(None, max_length=255)
    date: Optional[date_type] = None
    time: Optional[time_type] = None
    description: Optional[str] = None
    link: Optional[str] = Field(None, max_length=2048)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("date", mode="before")
    @classmethod
    def parse_unpadded_date(cls, v):
        if v is None or v == "":
            return None
        return parse_date(v)

    @field_validator("time", mode="before")
    @classmethod
    def parse_unpadded_time(cls, v):
        if v is None or v == "":
            return None
        return parse_time(v)


class CreateEventRequest(EventFields):
    """Request schema for creating an event."""

    user_id: Optional[int] = Field(None, alias="userId")


class UpdateEventRequest(EventFields):
    """Request schema for replacing an event's fields."""


class EventResponse(BaseModel):
    """Event as returned to clients, with canonical date and time strings."""

    id: int
    user_id: int
    title: str
    date: date_type
    time: time_type
    description: Optional[str] = None
    link: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("date")
    def serialize_date(self, value: date_type) -> str:
        return value.strftime(DATE_FORMAT)

    @field_serializer("time")
    def serialize_time(self, value: time_type) -> str:
        return value.strftime(TIME_FORMAT)


class EventCreatedResponse(BaseModel):
    id: int
    message: str = "Event created successfully"


class EventMutationResponse(BaseModel):
    """Acknowledgement for update and delete."""

    message: str
    event_id: int = Field(..., alias="eventId")

    model_config = ConfigDict(populate_by_name=True)
