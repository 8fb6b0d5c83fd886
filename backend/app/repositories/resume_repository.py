"""
Resume Repository Implementation

Read-only access to resumes; the job service only needs existence checks.
"""

from app.repositories.base_repository import BaseRepository
from app.repositories.interfaces import ResumeRepositoryInterface
from app.models.resume import Resume


class ResumeRepository(BaseRepository[Resume], ResumeRepositoryInterface):
    """Repository for resume lookups."""

    model = Resume

    async def exists(self, resume_id: int) -> bool:
        return await self.exists_by_id(resume_id)
