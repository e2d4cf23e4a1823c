"""Database Session Manager - async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions surface as PersistenceError (core/errors.py) carrying the
      driver's failure text

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - translate_db_errors wraps a single unit of work inside a request-scoped session,
      so services map failures without owning the session
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from autoconnect.core.errors import PersistenceError

logger = logging.getLogger(__name__)


def describe_db_error(e: SQLAlchemyError) -> str:
    """Driver-level message without SQLAlchemy's statement/parameter dump."""
    orig = getattr(e, "orig", None)
    if orig is not None:
        return str(orig)
    return str(e).split("\n", 1)[0]


@asynccontextmanager
async def translate_db_errors(
    db: AsyncSession, operation: str,
) -> AsyncGenerator[None, None]:
    """Roll back and raise PersistenceError for any SQLAlchemy failure in the block."""
    try:
        yield
    except IntegrityError as e:
        await db.rollback()
        logger.error(f"DB integrity error during {operation}: {e}")
        raise PersistenceError(describe_db_error(e), operation)
    except OperationalError as e:
        await db.rollback()
        logger.error(f"DB operational error during {operation}: {e}")
        raise PersistenceError(describe_db_error(e), operation)
    except DBAPIError as e:
        await db.rollback()
        logger.error(f"DB driver error during {operation}: {e}")
        raise PersistenceError(describe_db_error(e), operation)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"SQLAlchemy error during {operation}: {e}")
        raise PersistenceError(describe_db_error(e), operation)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            async with translate_db_errors(session, "session"):
                yield session
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for the health check)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
