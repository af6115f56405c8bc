"""PostgreSQL store with async SQLAlchemy.

Handles:
- Engine / connection pool lifecycle
- Session management
- StorageGateway: the single read path used by services
"""

import asyncio
from collections.abc import Mapping
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql import Executable

from catalog_api.settings import get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    pass


class StorageError(RuntimeError):
    """Store unreachable, read timed out, or statement rejected."""


class StorageGateway:
    """Executes read statements and returns rows as plain dicts.

    Each call checks out its own session and gives it back before returning,
    whether the read succeeds, fails or is cancelled. "No rows" is an empty
    list; every failure is a StorageError.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        timeout: float | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._timeout = timeout

    async def query(
        self,
        statement: Executable | str,
        params: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Run a read statement.

        Args:
            statement: SQLAlchemy statement, or raw SQL text with :named binds.
            params: Bound parameters.

        Returns:
            Rows as column name -> value dicts, in the order the store returned them.

        Raises:
            StorageError: On connectivity failure, timeout or malformed query.
        """
        if isinstance(statement, str):
            statement = text(statement)

        try:
            async with self._session_factory() as session:
                result = await asyncio.wait_for(
                    session.execute(statement, params),
                    timeout=self._timeout,
                )
                return [dict(row) for row in result.mappings().all()]
        except asyncio.TimeoutError as e:
            raise StorageError(f"Query timed out after {self._timeout}s") from e
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(str(e)) from e


# Engine and gateway (initialized on startup)
_engine: AsyncEngine | None = None
_gateway: StorageGateway | None = None


async def init_db() -> None:
    """Initialize database connection pool."""
    global _engine, _gateway

    settings = get_settings()
    _engine = create_async_engine(
        settings.async_database_url,
        echo=settings.debug,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
    )
    session_factory = async_sessionmaker(
        _engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    _gateway = StorageGateway(session_factory, timeout=settings.query_timeout_seconds)


async def ping_db() -> None:
    """Round-trip a trivial query to validate connectivity early."""
    await get_gateway().query("SELECT 1")


async def close_db() -> None:
    """Close database connection pool."""
    global _engine, _gateway
    if _engine:
        await _engine.dispose()
        _engine = None
        _gateway = None


def get_gateway() -> StorageGateway:
    """Get the process-wide gateway."""
    if _gateway is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return _gateway
