"""Database package."""
from schoolvote.db.session import engine, SessionLocal, get_db, get_db_context
from schoolvote.db.base import Base

__all__ = ["engine", "SessionLocal", "get_db", "get_db_context", "Base"]
