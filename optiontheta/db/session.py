"""Database engine and session lifecycle management."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, AsyncGenerator, Dict, Optional

import structlog
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

if TYPE_CHECKING:
    from ..config import Settings

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PoolOptions:
    """Connection pool tuning for server databases; ignored for SQLite."""

    size: int = 5
    max_overflow: int = 10
    timeout: float = 30.0
    recycle: int = 3600
    pre_ping: bool = True

    def engine_kwargs(self) -> Dict[str, Any]:
        return {
            "pool_size": self.size,
            "max_overflow": self.max_overflow,
            "pool_timeout": self.timeout,
            "pool_recycle": self.recycle,
            "pool_pre_ping": self.pre_ping,
        }


class DatabaseManager:
    """Owns the async engine and hands out request-scoped sessions.

    One instance is built at startup by :func:`init_db`; tests construct
    their own against in-memory SQLite.

    Args:
        database_url: Async driver URL, e.g. ``postgresql+asyncpg://...``
        echo: Log every SQL statement through SQLAlchemy
        pool: Pool tuning for PostgreSQL
        slow_query_threshold: Warn about statements slower than this many
            seconds; disabled when None
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool: Optional[PoolOptions] = None,
        slow_query_threshold: Optional[float] = None,
    ):
        self.database_url = database_url
        self.echo = echo
        self.pool = pool or PoolOptions()
        self.slow_query_threshold = slow_query_threshold
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @classmethod
    def from_settings(cls, settings: "Settings") -> "DatabaseManager":
        return cls(
            settings.resolved_database_url,
            echo=settings.database_echo,
            pool=PoolOptions(
                size=settings.database_pool_size,
                max_overflow=settings.database_max_overflow,
            ),
            slow_query_threshold=settings.slow_query_threshold,
        )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    def _engine_kwargs(self) -> Dict[str, Any]:
        if not self.is_sqlite:
            return self.pool.engine_kwargs()
        if ":memory:" in self.database_url:
            # every session must see the same in-memory database
            return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
        return {}

    @property
    def engine(self) -> AsyncEngine:
        """The async engine, created on first access."""
        if self._engine is None:
            engine = create_async_engine(self.database_url, echo=self.echo, **self._engine_kwargs())
            if self.is_sqlite:
                _enforce_sqlite_foreign_keys(engine)
            if self.slow_query_threshold is not None:
                _warn_on_slow_queries(engine, self.slow_query_threshold)
            self._engine = engine
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                self.engine, class_=AsyncSession, expire_on_commit=False
            )
        return self._session_factory

    async def create_tables(self) -> None:
        """Create every SQLModel table that does not exist yet."""
        async with self.engine.begin() as connection:
            await connection.run_sync(SQLModel.metadata.create_all)

    async def drop_tables(self) -> None:
        async with self.engine.begin() as connection:
            await connection.run_sync(SQLModel.metadata.drop_all)

    async def close(self) -> None:
        """Dispose of the engine; a later access creates a new one."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None

    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; anything left uncommitted is rolled back on error.

        Committing is the caller's job (see ``PositionService``).
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise


def _enforce_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores FOREIGN KEY clauses unless enabled on each connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _warn_on_slow_queries(engine: AsyncEngine, threshold: float) -> None:
    sync_engine = engine.sync_engine

    @event.listens_for(sync_engine, "before_cursor_execute")
    def start_timer(conn, cursor, statement, parameters, context, executemany):
        conn.info.setdefault("query_started", []).append(time.perf_counter())

    @event.listens_for(sync_engine, "after_cursor_execute")
    def stop_timer(conn, cursor, statement, parameters, context, executemany):
        elapsed = time.perf_counter() - conn.info["query_started"].pop()
        if elapsed >= threshold:
            logger.warning(
                "Slow query detected",
                duration_s=round(elapsed, 3),
                statement=statement[:200],
            )


_db_manager: Optional[DatabaseManager] = None


def init_db(settings: "Settings") -> DatabaseManager:
    """Build the process-wide database manager from settings."""
    global _db_manager
    _db_manager = DatabaseManager.from_settings(settings)
    return _db_manager


def get_db_manager() -> DatabaseManager:
    """The process-wide database manager.

    Raises:
        RuntimeError: If :func:`init_db` has not run (e.g. outside the app lifespan)
    """
    if _db_manager is None:
        raise RuntimeError("Database manager not initialized; call init_db() first")
    return _db_manager


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a request-scoped database session."""
    async for session in get_db_manager().get_session():
        yield session
