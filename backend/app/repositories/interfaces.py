"""
Repository Interfaces

Persistence capabilities the job service depends on. Concrete adapters
live alongside these interfaces; tests substitute mocks built from them.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.models.job import Job
from app.schemas.query import PageQuery


class JobRepositoryInterface(ABC):
    """Persistence operations for jobs."""

    @abstractmethod
    async def get_all(self, query: PageQuery) -> List[Job]:
        """Return one page of jobs. The order is stable for a fixed query."""

    @abstractmethod
    async def get_by_id(self, job_id: int) -> Optional[Job]:
        """Return the job with ``job_id``, or None."""

    @abstractmethod
    async def create(self, job: Job) -> Job:
        """Persist ``job`` and return it with its generated id."""

    @abstractmethod
    async def delete(self, job_id: int) -> Optional[Job]:
        """Remove the job with ``job_id`` and return it, or None if absent."""


class ResumeRepositoryInterface(ABC):
    """The resume lookups the job service needs."""

    @abstractmethod
    async def exists(self, resume_id: int) -> bool:
        """Return True if a resume with ``resume_id`` exists."""
