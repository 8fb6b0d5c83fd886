"""
Job Pydantic Schemas

Request/response models for job-related API endpoints. Field names are
snake_case in Python and camelCase on the wire.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class JobSchemaBase(BaseModel):
    """Shared configuration for job schemas."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class JobCreate(JobSchemaBase):
    """Schema for creating a new job under a resume."""

    job_title: str = Field(..., min_length=1, max_length=255, description="Job title")
    job_description: List[str] = Field(
        default_factory=list,
        description="Job description bullet points, in display order"
    )
    is_current_job: bool = Field(False, description="Whether this is the current job")

    @field_validator("job_title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("jobTitle must not be blank")
        return value


class JobResponse(JobSchemaBase):
    """Public view of a job."""

    id: Optional[int] = Field(None, description="Job ID, unset until stored")
    job_title: str = Field(..., description="Job title")
    job_description: List[str] = Field(default_factory=list, description="Job description bullet points")
    is_current_job: bool = Field(..., description="Whether this is the current job")


class JobEntityResponse(JobResponse):
    """Full job record, including the owning resume."""

    resume_id: int = Field(..., description="Owning resume ID")
