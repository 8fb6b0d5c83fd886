"""
API Dependencies

Common dependencies used across API endpoints: the database manager,
repositories, the job service, and pagination.
"""

from typing import Optional
from fastapi import Depends, HTTPException, status, Query

from app.core.container import get_container
from app.core.database import DatabaseManager
from app.repositories import (
    JobRepository,
    ResumeRepository,
    JobRepositoryInterface,
    ResumeRepositoryInterface,
)
from app.schemas.query import (
    PageQuery,
    JobSortField,
    MIN_PAGE_NUMBER,
    MIN_PAGE_SIZE,
    MAX_PAGE_SIZE,
    DEFAULT_PAGE_SIZE,
)
from app.services.job_service import JobService
from app.utils.logger import get_logger

# Initialize logger
logger = get_logger(__name__)


def get_db_manager() -> DatabaseManager:
    """
    Database manager dependency.

    Raises:
        HTTPException: If the application container has not been initialized
    """
    db_manager = get_container().db_manager
    if db_manager is None:
        logger.error("Database requested before container initialization")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database not available"
        )
    return db_manager


def get_job_repository(
    db_manager: DatabaseManager = Depends(get_db_manager)
) -> JobRepositoryInterface:
    return JobRepository(db_manager)


def get_resume_repository(
    db_manager: DatabaseManager = Depends(get_db_manager)
) -> ResumeRepositoryInterface:
    return ResumeRepository(db_manager)


def get_job_service(
    job_repo: JobRepositoryInterface = Depends(get_job_repository),
    resume_repo: ResumeRepositoryInterface = Depends(get_resume_repository)
) -> JobService:
    """Job service dependency."""
    return JobService(job_repo, resume_repo)


async def get_page_query(
    page_number: int = Query(
        MIN_PAGE_NUMBER,
        ge=MIN_PAGE_NUMBER,
        alias="pageNumber",
        description="Page number"
    ),
    page_size: int = Query(
        DEFAULT_PAGE_SIZE,
        ge=MIN_PAGE_SIZE,
        le=MAX_PAGE_SIZE,
        alias="pageSize",
        description="Page size"
    ),
    job_title: Optional[str] = Query(None, alias="jobTitle", description="Job title filter"),
    sort_by: JobSortField = Query(JobSortField.ID, alias="sortBy", description="Sort field"),
    is_descending: bool = Query(False, alias="isDescending", description="Sort descending")
) -> PageQuery:
    """
    Pagination dependency.

    Returns:
        PageQuery: Page, filter and sort parameters
    """
    return PageQuery(
        page_number=page_number,
        page_size=page_size,
        job_title=job_title,
        sort_by=sort_by,
        is_descending=is_descending
    )
