"""
Job Mapper

Converts between job schemas and the Job ORM model.
"""

from typing import Iterable, List

from app.models.job import Job
from app.schemas.job import JobCreate, JobResponse


def to_entity(job_in: JobCreate, resume_id: int) -> Job:
    """
    Build an unsaved Job for ``resume_id`` from creation input.

    The returned job has no ``id``; storage assigns it on insert.
    """
    return Job(
        job_title=job_in.job_title,
        job_description=list(job_in.job_description),
        is_current_job=job_in.is_current_job,
        resume_id=resume_id,
    )


def to_view(job: Job) -> JobResponse:
    """Project the public fields of a job."""
    return JobResponse(
        id=job.id,
        job_title=job.job_title,
        job_description=list(job.job_description or []),
        is_current_job=job.is_current_job,
    )


def to_views(jobs: Iterable[Job]) -> List[JobResponse]:
    return [to_view(job) for job in jobs]
