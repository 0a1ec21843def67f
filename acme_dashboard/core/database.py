import asyncio
import logging
from contextlib import contextmanager
from typing import Callable, Iterator, TypeVar

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import NullPool

from acme_dashboard.core.config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

# NullPool: every session checkout opens a fresh connection and close() really closes it
engine = create_engine(settings.database_url, poolclass=NullPool)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


@contextmanager
def connection() -> Iterator[Session]:
    """
    Scoped acquisition of a database session.

    The underlying connection is established before the body runs, so an
    unreachable store fails here rather than inside the caller's query. The
    session is closed exactly once on every exit path.
    """
    db: Session = SessionLocal()
    try:
        db.connection()
        logger.debug("Database connection acquired")
        yield db
    finally:
        db.close()
        logger.debug("Database connection released")


async def with_connection(operation: Callable[[Session], T]) -> T:
    """Run ``operation`` against a fresh connection without blocking the event loop."""

    def run() -> T:
        with connection() as db:
            return operation(db)

    return await asyncio.to_thread(run)
