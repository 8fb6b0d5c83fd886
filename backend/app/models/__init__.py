"""
Database Models Package

Contains SQLAlchemy ORM models for the Resume Jobs API.
"""

from app.core.database import Base
from app.models.resume import Resume
from app.models.job import Job

__all__ = [
    "Base",
    "Resume",
    "Job",
]
