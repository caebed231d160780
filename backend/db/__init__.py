"""Database package for the Museum Events site."""

from .database import Base, engine, SessionLocal, init_db
from .models import User, UserSession

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "init_db",
    "User",
    "UserSession",
]
