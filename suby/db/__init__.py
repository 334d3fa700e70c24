"""Database package — async SQLAlchemy engine, session factory, Base."""
from suby.db.base import Base, async_session_factory, create_tables, dispose_engine, engine, get_db

__all__ = ["Base", "async_session_factory", "create_tables", "dispose_engine", "engine", "get_db"]
