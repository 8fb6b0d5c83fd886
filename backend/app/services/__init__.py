"""
Services Layer

Business logic layer containing service classes that orchestrate
business operations, validation, and coordination between repositories.
"""

from .job_service import JobService

__all__ = [
    "JobService",
]
