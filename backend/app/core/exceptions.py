"""
Custom Exceptions for the Resume Jobs API

Business logic exceptions with user-friendly messages and proper error codes.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone
from enum import Enum

from fastapi import status


class ErrorSeverity(Enum):
    """Error severity levels for monitoring and alerting."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification and handling."""
    NOT_FOUND = "not_found"
    BUSINESS_LOGIC = "business_logic"
    DATABASE = "database"
    SYSTEM = "system"


class BaseApplicationException(Exception):
    """
    Base exception for all application-specific errors.

    Provides structured error information for consistent error handling
    and user-friendly error responses.
    """

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        error_code: Optional[str] = None,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        suggested_action: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details or {}
        self.suggested_action = suggested_action
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "error_code": self.error_code,
            "message": self.user_message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
            "suggested_action": self.suggested_action
        }


# Resource Exceptions
class ResourceNotFoundException(BaseApplicationException):
    """Exception for resource not found errors."""

    def __init__(self, resource_type: str, resource_id: Optional[int] = None, **kwargs):
        kwargs.setdefault("user_message", f"{resource_type.capitalize()} not found")
        kwargs.setdefault("error_code", "RESOURCE_NOT_FOUND")
        super().__init__(
            message=f"{resource_type} not found",
            category=ErrorCategory.NOT_FOUND,
            severity=ErrorSeverity.LOW,
            http_status=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
            **kwargs
        )
        self.resource_id = resource_id


class JobNotFoundException(ResourceNotFoundException):
    """Exception for job not found errors."""

    def __init__(self, job_id: int, **kwargs):
        super().__init__(
            resource_type="job",
            resource_id=job_id,
            error_code="JOB_NOT_FOUND",
            **kwargs
        )


# Business Logic Exceptions
class BusinessLogicException(BaseApplicationException):
    """Exception for business logic violations."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", message)
        kwargs.setdefault("error_code", "BUSINESS_LOGIC_ERROR")
        super().__init__(
            message=message,
            category=ErrorCategory.BUSINESS_LOGIC,
            severity=ErrorSeverity.LOW,
            http_status=status.HTTP_400_BAD_REQUEST,
            **kwargs
        )


class InvalidParentException(BusinessLogicException):
    """Raised when a job is created under a resume that does not exist."""

    MESSAGE = "Resume does not exist"

    def __init__(self, resume_id: int, **kwargs):
        super().__init__(
            message=self.MESSAGE,
            error_code="INVALID_PARENT",
            details={"resume_id": resume_id},
            suggested_action="Create the resume before adding jobs to it",
            **kwargs
        )
        self.resume_id = resume_id


# Database Exceptions
class DatabaseException(BaseApplicationException):
    """Exception for database errors."""

    def __init__(self, message: str = "Database operation failed", **kwargs):
        kwargs.setdefault("user_message", "The database is temporarily unavailable")
        kwargs.setdefault("error_code", "DATABASE_ERROR")
        super().__init__(
            message=message,
            category=ErrorCategory.DATABASE,
            severity=ErrorSeverity.HIGH,
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            suggested_action="Please try again later",
            **kwargs
        )
