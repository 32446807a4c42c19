"""
API routers package for the FastAPI application.

This package contains all API endpoint routers organized by domain:
- users_api: Login / first-time registration
- events_api: Event CRUD endpoints
- health_api: Health check endpoints
- exception_handlers: Mapping of application exceptions to error responses
"""

from .users_api import router as users_api_router
from .events_api import router as events_api_router
from .health_api import health_api_router
from .exception_handlers import setup_exception_handlers

__all__ = [
    "users_api_router",
    "events_api_router",
    "health_api_router",
    "setup_exception_handlers",
]
