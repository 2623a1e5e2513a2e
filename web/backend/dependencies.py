#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Generator
from sqlalchemy.orm import Session, sessionmaker

from database.database import make_engine, init_db
from .config import get_config


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self, url: str = None):
        url = url or get_config().database.url
        kwargs = {"pool_pre_ping": True, "echo": get_config().database.echo}
        if not url.startswith("sqlite"):
            kwargs.update(pool_size=10, max_overflow=20)
        self.engine = make_engine(url, **kwargs)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def create_tables(self) -> None:
        init_db(bind=self.engine)

    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()


# Global database manager instance
_db_manager = DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...
    """
    yield from _db_manager.get_session()


def get_db_manager() -> DatabaseManager:
    return _db_manager
