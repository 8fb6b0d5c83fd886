"""
Job API v1 Endpoints

RESTful endpoints for the jobs of a resume.
"""

from typing import List
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from app.api.deps import get_job_service, get_page_query
from app.core.exceptions import JobNotFoundException, InvalidParentException
from app.schemas.job import JobCreate, JobResponse, JobEntityResponse
from app.schemas.query import PageQuery
from app.services.job_service import JobService
from app.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("/", response_model=List[JobResponse])
async def get_jobs(
    query: PageQuery = Depends(get_page_query),
    job_service: JobService = Depends(get_job_service)
):
    """Get one page of jobs."""
    return await job_service.list_jobs(query)


@router.get(
    "/{job_id}",
    response_model=JobResponse,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Job not found"}}
)
async def get_job(
    job_id: int,
    job_service: JobService = Depends(get_job_service)
):
    """Get job by ID."""
    try:
        return await job_service.get_job(job_id)
    except JobNotFoundException:
        return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.post(
    "/{resume_id}",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Resume does not exist"}}
)
async def create_job(
    resume_id: int,
    job_in: JobCreate,
    request: Request,
    response: Response,
    job_service: JobService = Depends(get_job_service)
):
    """Create a new job under a resume."""
    try:
        job = await job_service.create_job(resume_id, job_in)
    except InvalidParentException as e:
        return JSONResponse(status_code=e.http_status, content=e.user_message)

    response.headers["Location"] = str(request.url_for("get_job", job_id=job.id))
    return job


@router.delete(
    "/{job_id}",
    response_model=JobEntityResponse,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Job not found"}}
)
async def delete_job(
    job_id: int,
    job_service: JobService = Depends(get_job_service)
):
    """Delete a job and return the removed record."""
    try:
        job = await job_service.delete_job(job_id)
    except JobNotFoundException:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return JobEntityResponse.model_validate(job)
