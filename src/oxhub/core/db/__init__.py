"""Database utilities - engine and session."""

from src.oxhub.core.db.engine import create_engine_for_url, dispose_engine, get_engine
from src.oxhub.core.db.session import get_session

__all__ = [
    # Engine
    "create_engine_for_url",
    "dispose_engine",
    "get_engine",
    # Session
    "get_session",
]
