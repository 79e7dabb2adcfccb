import logging
from collections.abc import Iterator
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from src.configuration.config import Base

logger = logging.getLogger(__name__)


class Database:
    """
    Shared handle over the connection pool.

    Built once at startup and passed to whoever needs sessions. The engine pool is
    safe for concurrent use; each request gets its own session from ``session()``.
    ``close()`` disposes the pool and must be called on shutdown.
    """

    def __init__(self, url: str, echo: bool = False, **engine_options: Any):
        self.engine: Engine = create_engine(url, pool_pre_ping=True, echo=echo, **engine_options)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def session(self) -> Session:
        return self._session_factory()

    def create_all(self) -> None:
        """Create every table registered on ``Base`` that does not exist yet."""
        if self.engine.dialect.name == "postgresql":
            with self.engine.begin() as connection:
                connection.execute(text("CREATE EXTENSION IF NOT EXISTS pg_trgm"))
        Base.metadata.create_all(bind=self.engine)

    def ping(self) -> bool:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Database ping failed: {str(e)}")
            return False

    def close(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
