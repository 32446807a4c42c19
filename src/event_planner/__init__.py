"""
Event Planner API.

Backend for a personal calendar: users sign in with an external identity
token and manage their own scheduled events.
"""

__version__ = "1.0.0"
