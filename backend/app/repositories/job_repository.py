"""
Job Repository Implementation

Repository for job database operations with paging, title filtering
and sorting.
"""

from typing import List, Optional
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError

from app.repositories.base_repository import BaseRepository
from app.repositories.interfaces import JobRepositoryInterface
from app.models.job import Job
from app.schemas.query import PageQuery, JobSortField
from app.utils.logger import log_database_operation


class JobRepository(BaseRepository[Job], JobRepositoryInterface):
    """Repository for job database operations."""

    model = Job

    _sort_columns = {
        JobSortField.ID: Job.id,
        JobSortField.JOB_TITLE: Job.job_title,
    }

    async def get_all(self, query: PageQuery) -> List[Job]:
        """Get one page of jobs matching the query."""
        if query.is_past_storage_range:
            log_database_operation("list", self.table_name, page_number=query.page_number, returned=0)
            return []

        async with self.get_session() as session:
            try:
                stmt = select(self.model)

                if query.job_title:
                    # Match % and _ literally
                    stmt = stmt.where(
                        func.lower(self.model.job_title).contains(
                            query.job_title.lower(), autoescape=True
                        )
                    )

                sort_column = self._sort_columns[query.sort_by]
                if query.is_descending:
                    stmt = stmt.order_by(sort_column.desc(), self.model.id.desc())
                else:
                    stmt = stmt.order_by(sort_column.asc(), self.model.id.asc())

                stmt = stmt.offset(query.offset).limit(query.limit)

                result = await session.execute(stmt)
                jobs = list(result.scalars().all())
                log_database_operation(
                    "list",
                    self.table_name,
                    page_number=query.page_number,
                    page_size=query.page_size,
                    returned=len(jobs)
                )
                return jobs
            except SQLAlchemyError as e:
                raise self._fail("list", e) from e

    async def create(self, job: Job) -> Job:
        """Persist a new job."""
        return await self.add(job)

    async def delete(self, job_id: int) -> Optional[Job]:
        """Hard-delete a job, returning the removed record."""
        return await self.remove(job_id)
