"""
Base Repository Pattern Implementation

Provides a generic base repository with common database operations
and transaction management using SQLAlchemy async sessions.
"""

from typing import TypeVar, Generic, Optional, Type, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import DatabaseManager
from app.core.exceptions import DatabaseException
from app.utils.logger import get_logger, log_database_operation

ModelType = TypeVar("ModelType")

logger = get_logger(__name__)


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing common CRUD operations.

    Each operation opens its own session and commits or rolls back before
    returning. Storage errors are raised as ``DatabaseException`` so callers
    never mistake an outage for a missing row.
    """

    model: Type[ModelType]

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    def get_session(self) -> AsyncSession:
        """Get database session."""
        return self.db_manager.session_factory()

    def _fail(self, operation: str, error: SQLAlchemyError, record_id: Any = None) -> DatabaseException:
        logger.error(
            f"Error during {operation} on {self.model.__name__}: {error}",
            record_id=record_id
        )
        return DatabaseException(
            f"{operation} failed for {self.model.__name__}",
            details={"operation": operation, "table": self.table_name, "record_id": record_id}
        )

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """Get entity by ID."""
        async with self.get_session() as session:
            try:
                result = await session.get(self.model, id)
                log_database_operation("read", self.table_name, record_id=id, found=result is not None)
                return result
            except SQLAlchemyError as e:
                raise self._fail("read", e, id) from e

    async def add(self, db_obj: ModelType) -> ModelType:
        """Insert a fully built entity and return it refreshed."""
        async with self.get_session() as session:
            try:
                session.add(db_obj)
                await session.commit()
                await session.refresh(db_obj)
                log_database_operation("create", self.table_name, record_id=db_obj.id)
                return db_obj
            except SQLAlchemyError as e:
                await session.rollback()
                raise self._fail("create", e) from e

    async def remove(self, id: int) -> Optional[ModelType]:
        """Delete entity by ID, returning the deleted entity."""
        async with self.get_session() as session:
            try:
                db_obj = await session.get(self.model, id)
                if db_obj is None:
                    log_database_operation("delete", self.table_name, record_id=id, found=False)
                    return None

                await session.delete(db_obj)
                await session.commit()
                log_database_operation("delete", self.table_name, record_id=id, found=True)
                return db_obj
            except SQLAlchemyError as e:
                await session.rollback()
                raise self._fail("delete", e, id) from e

    async def exists_by_id(self, id: int) -> bool:
        """Check if entity exists by ID."""
        async with self.get_session() as session:
            try:
                query = select(func.count(self.model.id)).where(self.model.id == id)
                result = await session.execute(query)
                found = (result.scalar() or 0) > 0
                log_database_operation("exists", self.table_name, record_id=id, found=found)
                return found
            except SQLAlchemyError as e:
                raise self._fail("exists", e, id) from e
