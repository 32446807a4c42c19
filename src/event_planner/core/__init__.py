"""
Core module for application configuration, database setup, and dependency injection.

This module contains the foundational infrastructure for the FastAPI application:
- Configuration management
- Storage connector and session management
- Dependency injection setup
- Custom exceptions
- Logging setup
"""
