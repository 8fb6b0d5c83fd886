"""
Job Service Layer

Business logic for managing the jobs of a resume: listing, lookup,
creation under an existing resume, and deletion.
"""

from typing import List

from app.repositories.interfaces import JobRepositoryInterface, ResumeRepositoryInterface
from app.core.exceptions import JobNotFoundException, InvalidParentException
from app.mappers.job_mapper import to_entity, to_view, to_views
from app.schemas.job import JobCreate, JobResponse
from app.schemas.query import PageQuery
from app.models.job import Job
from app.utils.logger import get_logger

logger = get_logger(__name__)


class JobService:
    """Service layer for job operations."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        resume_repo: ResumeRepositoryInterface
    ):
        self.job_repo = job_repo
        self.resume_repo = resume_repo

    async def list_jobs(self, query: PageQuery) -> List[JobResponse]:
        """
        Get one page of jobs.

        Args:
            query: Page, filter and sort parameters

        Returns:
            List[JobResponse]: Jobs in repository order; empty past the last page
        """
        jobs = await self.job_repo.get_all(query)
        logger.info(
            "Listed jobs",
            page_number=query.page_number,
            page_size=query.page_size,
            count=len(jobs)
        )
        return to_views(jobs)

    async def get_job(self, job_id: int) -> JobResponse:
        """
        Get job by ID.

        Raises:
            JobNotFoundException: If no job has this ID
        """
        job = await self.job_repo.get_by_id(job_id)
        if job is None:
            logger.info("Job not found", job_id=job_id)
            raise JobNotFoundException(job_id)

        return to_view(job)

    async def create_job(self, resume_id: int, job_in: JobCreate) -> JobResponse:
        """
        Create a job under an existing resume.

        The resume is checked before anything is written; when it is missing
        the job repository is not called.

        Args:
            resume_id: Owning resume
            job_in: Job creation data

        Returns:
            JobResponse: The stored job

        Raises:
            InvalidParentException: If the resume does not exist
        """
        if not await self.resume_repo.exists(resume_id):
            logger.warning("Rejected job for missing resume", resume_id=resume_id)
            raise InvalidParentException(resume_id)

        job = await self.job_repo.create(to_entity(job_in, resume_id))
        logger.info("Created job", job_id=job.id, resume_id=resume_id)
        return to_view(job)

    async def delete_job(self, job_id: int) -> Job:
        """
        Delete a job.

        Unlike the other operations this returns the full entity, including
        ``resume_id``, rather than the public view.

        Raises:
            JobNotFoundException: If no job has this ID
        """
        job = await self.job_repo.delete(job_id)
        if job is None:
            logger.info("Job not found for deletion", job_id=job_id)
            raise JobNotFoundException(job_id)

        logger.info("Deleted job", job_id=job_id, resume_id=job.resume_id)
        return job
