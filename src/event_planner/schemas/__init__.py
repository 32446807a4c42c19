"""
Pydantic schemas package.

This package contains all Pydantic models for request/response validation,
organized by domain:
- common: Shared schemas (errors, health)
- user: Login request and response
- event: Event requests, responses and acknowledgements

Usage:
    from event_planner.schemas import CreateEventRequest, EventResponse
"""

from event_planner.schemas.common import ERROR_RESPONSES, ErrorResponse, HealthCheckResponse
from event_planner.schemas.user import LoginRequest, LoginResponse
from event_planner.schemas.event import (
    CreateEventRequest,
    UpdateEventRequest,
    EventResponse,
    EventCreatedResponse,
    EventMutationResponse,
)

__all__ = [
    # Common
    "ERROR_RESPONSES",
    "ErrorResponse",
    "HealthCheckResponse",

    # User
    "LoginRequest",
    "LoginResponse",

    # Event
    "CreateEventRequest",
    "UpdateEventRequest",
    "EventResponse",
    "EventCreatedResponse",
    "EventMutationResponse",
]
