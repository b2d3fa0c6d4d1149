"""Database engine configuration."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from gujlearn.core.config import settings


def create_db_engine(database_url: str | None = None) -> Engine:
    """
    Create SQLAlchemy engine.

    SQLite URLs (used by the test suite and local tinkering) get a single shared
    connection so an in-memory database survives across sessions and threads.

    Args:
        database_url: Override for settings.DATABASE_URL
    """
    url = database_url or settings.DATABASE_URL
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,
        max_overflow=10,
        echo=False,
    )


# Global engine instance
engine = create_db_engine()
