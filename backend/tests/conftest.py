"""
Test Configuration for the Resume Jobs API

Shared fixtures: repository mocks, an in-memory SQLite database, and
HTTP clients wired to either.
"""

from typing import AsyncGenerator, Dict, Any
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.api.deps import get_db_manager, get_job_service
from app.core.database import DatabaseManager
from app.models import Job, Resume
from app.repositories import (
    JobRepository,
    ResumeRepository,
    JobRepositoryInterface,
    ResumeRepositoryInterface,
)
from app.schemas.job import JobCreate
from app.services.job_service import JobService


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (fast)"
    )
    config.addinivalue_line(
        "markers", "api: marks tests that go through the HTTP layer"
    )
    config.addinivalue_line(
        "markers", "database: marks tests that need a real database"
    )


@pytest.fixture
def sample_job_data() -> Dict[str, Any]:
    """Creation payload as a client would send it."""
    return {
        "jobTitle": "Senior Tech Engineer",
        "jobDescription": ["Testing JobList 1", "Testing JobList 2"],
        "isCurrentJob": True,
    }


@pytest.fixture
def sample_job_create(sample_job_data) -> JobCreate:
    return JobCreate.model_validate(sample_job_data)


@pytest.fixture
def make_job():
    """Factory for stored-looking Job entities."""
    def _make_job(
        id: int = 1,
        job_title: str = "Senior Tech Engineer",
        job_description=None,
        is_current_job: bool = True,
        resume_id: int = 1,
    ) -> Job:
        return Job(
            id=id,
            job_title=job_title,
            job_description=job_description if job_description is not None
            else ["Testing JobList 1", "Testing JobList 2"],
            is_current_job=is_current_job,
            resume_id=resume_id,
        )
    return _make_job


@pytest.fixture
def job_repo_mock() -> AsyncMock:
    return AsyncMock(spec=JobRepositoryInterface)


@pytest.fixture
def resume_repo_mock() -> AsyncMock:
    return AsyncMock(spec=ResumeRepositoryInterface)


@pytest.fixture
def job_service(job_repo_mock, resume_repo_mock) -> JobService:
    return JobService(job_repo_mock, resume_repo_mock)


@pytest.fixture
def client(job_service):
    """Test client whose job service is backed by repository mocks."""
    app.dependency_overrides[get_job_service] = lambda: job_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def db_manager() -> AsyncGenerator[DatabaseManager, None]:
    """Fresh in-memory SQLite database per test."""
    manager = DatabaseManager("sqlite+aiosqlite:///:memory:")
    await manager.init_database()
    await manager.create_tables()
    yield manager
    await manager.close_connections()


@pytest_asyncio.fixture
async def resume_in_db(db_manager) -> Resume:
    async with db_manager.session_factory() as session:
        resume = Resume(full_name="Jane Doe")
        session.add(resume)
        await session.commit()
        await session.refresh(resume)
        return resume


@pytest.fixture
def job_repository(db_manager) -> JobRepository:
    return JobRepository(db_manager)


@pytest.fixture
def resume_repository(db_manager) -> ResumeRepository:
    return ResumeRepository(db_manager)


@pytest_asyncio.fixture
async def test_client(db_manager) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client running the full stack against the in-memory database."""
    app.dependency_overrides[get_db_manager] = lambda: db_manager
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
