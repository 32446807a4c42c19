"""
Common/shared Pydantic schemas.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""
    error: str


class HealthCheckResponse(BaseModel):
    """Health check response."""
    status: str
    database: Dict[str, Any]
    version: Optional[str] = None


# OpenAPI documentation of the error bodies produced by api.exception_handlers
ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing or malformed input"},
    404: {"model": ErrorResponse, "description": "Event or route not found"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
}
