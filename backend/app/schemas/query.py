"""
Pagination Query Schema

Page request consumed by job listing.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel

from app.core.config import get_settings

settings = get_settings()

MIN_PAGE_NUMBER = 1
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = settings.MAX_PAGE_SIZE
DEFAULT_PAGE_SIZE = settings.DEFAULT_PAGE_SIZE

# Largest row offset a 64-bit SQL integer can carry
MAX_OFFSET = 2 ** 63 - 1


class JobSortField(str, Enum):
    """Fields a job listing can be sorted by."""
    ID = "id"
    JOB_TITLE = "jobTitle"


class PageQuery(BaseModel):
    """One page of a listing, plus optional filtering and sorting."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    page_number: int = Field(MIN_PAGE_NUMBER, ge=MIN_PAGE_NUMBER, description="Page number (1-based)")
    page_size: int = Field(
        DEFAULT_PAGE_SIZE,
        ge=MIN_PAGE_SIZE,
        le=MAX_PAGE_SIZE,
        description="Page size"
    )
    job_title: Optional[str] = Field(None, description="Case-insensitive job title filter")
    sort_by: JobSortField = Field(JobSortField.ID, description="Sort field")
    is_descending: bool = Field(False, description="Sort descending")

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def is_past_storage_range(self) -> bool:
        """True when the offset cannot be expressed as a SQL integer."""
        return self.offset > MAX_OFFSET

    @property
    def limit(self) -> int:
        return self.page_size
