"""
Repository Layer

Data access layer using the repository pattern for clean separation
of database operations from business logic.
"""

from .interfaces import JobRepositoryInterface, ResumeRepositoryInterface
from .base_repository import BaseRepository
from .job_repository import JobRepository
from .resume_repository import ResumeRepository

__all__ = [
    "JobRepositoryInterface",
    "ResumeRepositoryInterface",
    "BaseRepository",
    "JobRepository",
    "ResumeRepository",
]
