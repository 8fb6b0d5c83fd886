"""
Database Configuration and Session Management

Async SQLAlchemy engine and session factory management.
"""

from typing import Optional, Dict, Any

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
    AsyncEngine
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import get_settings
from app.utils.logger import get_logger

# Initialize logger
logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """Database connection and session management."""

    def __init__(self, database_url: Optional[str] = None) -> None:
        """
        Initialize database manager.

        Args:
            database_url: Overrides ``DATABASE_URL`` from settings
        """
        self.database_url = database_url or get_settings().DATABASE_URL
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        """Get database engine."""
        if self._engine is None:
            raise RuntimeError("Database not initialized. Call init_database() first.")
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get session factory."""
        if self._session_factory is None:
            raise RuntimeError("Database not initialized. Call init_database() first.")
        return self._session_factory

    async def init_database(self) -> None:
        """Initialize database connections."""
        settings = get_settings()
        engine_kwargs: Dict[str, Any] = {
            "echo": settings.DATABASE_ECHO,
        }

        # SQLite-specific configuration
        if self.database_url.startswith("sqlite"):
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            engine_kwargs["pool_size"] = settings.DATABASE_POOL_SIZE
            engine_kwargs["max_overflow"] = settings.DATABASE_MAX_OVERFLOW
            engine_kwargs["pool_pre_ping"] = True

        self._engine = create_async_engine(self.database_url, **engine_kwargs)

        if self._engine.dialect.name == "sqlite":
            # SQLite ignores REFERENCES and ON DELETE CASCADE unless enabled per connection
            event.listen(self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        logger.info("Database engine initialized", dialect=self._engine.dialect.name)

    async def create_tables(self) -> None:
        """Create database tables."""
        # Register models on Base.metadata
        import app.models  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created successfully")
        except SQLAlchemyError as e:
            logger.error(f"Failed to create database tables: {e}")
            raise

    async def health_check(self) -> bool:
        """Run a trivial query against the database."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, RuntimeError) as e:
            logger.warning(f"Database health check failed: {e}")
            return False

    async def close_connections(self) -> None:
        """Close database connections."""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database engine disposed")
