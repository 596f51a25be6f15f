"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py), carrying
      the violated constraint (e.g. users.email) for integrity failures

Design Decisions:
    - Singleton db_manager initialized on startup by the FastAPI lifespan
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
import re
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from app.core.errors import DatabaseError
from app.db.base import Base
from app import models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)

# first match wins; IntegrityError and OperationalError subclass DBAPIError
_FAILURES: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)

_SQLITE_CONSTRAINT = re.compile(r"(?:UNIQUE|NOT NULL|CHECK) constraint failed: (\S+)")


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int | None = 20,
        max_overflow: int | None = 10,
    ):
        pool_kwargs = {}
        if pool_size is not None:
            pool_kwargs = {
                "pool_size": pool_size,
                "max_overflow": max_overflow or 0,
                "pool_recycle": 3600,
            }
        self.engine = create_async_engine(
            database_url, pool_pre_ping=True, **pool_kwargs,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback; SQLAlchemy errors become DatabaseError."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            raise _to_database_error(e) from e
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create missing tables from model metadata (DATABASE_SYNC=true)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (used by /health/readiness)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


def _violated_constraint(e: IntegrityError) -> str | None:
    """asyncpg reports constraint_name on the driver error; SQLite only in its message."""
    name = getattr(getattr(e.orig, "__cause__", None), "constraint_name", None)
    if name:
        return name
    match = _SQLITE_CONSTRAINT.search(str(e.orig))
    return match.group(1) if match else None


def _to_database_error(e: SQLAlchemyError) -> DatabaseError:
    message, operation = next(
        (message, operation) for error_type, message, operation in _FAILURES
        if isinstance(e, error_type)
    )
    constraint = _violated_constraint(e) if isinstance(e, IntegrityError) else None
    logger.error(
        f"DB {operation} error: {e}",
        extra={"error_code": "DATABASE_ERROR", "constraint": constraint},
    )
    return DatabaseError(message, operation, constraint=constraint)


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
