"""
Application Container

Owns the process-wide DatabaseManager between startup and shutdown.
"""

from typing import Optional

from app.core.config import get_settings
from app.core.database import DatabaseManager
from app.utils.logger import get_logger

logger = get_logger(__name__)


class ApplicationContainer:
    """Holds the database manager for the lifetime of the application."""

    def __init__(self) -> None:
        self.db_manager: Optional[DatabaseManager] = None

    async def start(self, database_url: Optional[str] = None) -> DatabaseManager:
        """Open the database engine, creating tables when configured to."""
        if self.db_manager is not None:
            return self.db_manager

        db_manager = DatabaseManager(database_url)
        await db_manager.init_database()
        if get_settings().AUTO_CREATE_TABLES:
            await db_manager.create_tables()

        self.db_manager = db_manager
        logger.info("Container started", database_url=db_manager.database_url)
        return db_manager

    async def stop(self) -> None:
        """Dispose of the database engine."""
        if self.db_manager is None:
            return

        await self.db_manager.close_connections()
        self.db_manager = None
        logger.info("Container stopped")


container = ApplicationContainer()


async def init_container(database_url: Optional[str] = None) -> DatabaseManager:
    return await container.start(database_url)


async def shutdown_container() -> None:
    await container.stop()


def get_container() -> ApplicationContainer:
    return container
