"""
Database module for the Task Lists backend
"""

from .connection import get_async_session, get_session_factory, init_database, reset_database

__all__ = ["get_async_session", "get_session_factory", "init_database", "reset_database"]
