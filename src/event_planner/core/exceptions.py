"""
Custom exceptions for the application.

This module defines domain-specific exceptions for better error handling
and more meaningful error messages throughout the application.

The ``message`` of every exception here is safe to return to a client;
underlying driver errors are chained as ``__cause__`` and only logged.
"""

from typing import Optional, Any, Dict


class ApplicationException(Exception):
    """Base exception for all application-specific exceptions."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DatabaseException(ApplicationException):
    """Exception raised for database-related errors (unavailable store, rejected statement)."""
    pass


class ValidationException(ApplicationException):
    """Exception raised when required input is missing or malformed."""
    pass


class NotFoundException(ApplicationException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any, message: Optional[str] = None):
        message = message or f"{resource} not found"
        super().__init__(message, {"resource": resource, "identifier": identifier})


class RouteNotFoundException(ApplicationException):
    """Exception raised when no handler matches the request method and path."""

    def __init__(self, method: str, path: str):
        super().__init__("Route not found", {"method": method, "path": path})


class ConfigurationException(ApplicationException):
    """Exception raised for configuration-related errors."""
    pass
