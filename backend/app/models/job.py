"""
Job Database Model

SQLAlchemy 2.0 model for job-history entries that belong to a resume.
"""

from typing import Optional, List

from sqlalchemy import Integer, String, Boolean, ForeignKey, Index, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class Job(Base):
    """
    Job history entry.

    Each job belongs to exactly one resume. ``job_description`` holds the
    bullet points in the order they were supplied.
    """

    __tablename__ = "jobs"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Job information
    job_title: Mapped[str] = mapped_column(String(255), nullable=False)
    job_description: Mapped[List[str]] = mapped_column(JSON, default=list, nullable=False)
    is_current_job: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Owning resume
    resume_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("resumes.id", ondelete="CASCADE"),
        nullable=False
    )

    __table_args__ = (
        Index('idx_job_resume_id', 'resume_id'),
        Index('idx_job_title', 'job_title'),
        # Deleted ids are never handed out again
        {"sqlite_autoincrement": True},
    )

    def __init__(
        self,
        job_title: str,
        job_description: Optional[List[str]] = None,
        is_current_job: bool = False,
        resume_id: Optional[int] = None,
        id: Optional[int] = None,
    ) -> None:
        super().__init__(
            id=id,
            job_title=job_title,
            job_description=list(job_description or []),
            is_current_job=is_current_job,
            resume_id=resume_id,
        )

    def __repr__(self) -> str:
        """String representation of Job."""
        return f"<Job(id={self.id}, job_title='{self.job_title}', resume_id={self.resume_id})>"
