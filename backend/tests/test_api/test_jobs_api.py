"""
Tests for Jobs API endpoints.

The first group drives the router with repository mocks; the second runs
the whole stack against an in-memory database.
"""

import pytest
from httpx import AsyncClient

from app.core.exceptions import DatabaseException
from app.models.job import Job
from app.schemas.query import PageQuery


@pytest.mark.api
class TestJobsAPIWithMocks:
    """Test status codes and payloads with mocked repositories."""

    def test_get_jobs(self, client, job_repo_mock, make_job):
        job_repo_mock.get_all.return_value = [
            make_job(id=1),
            make_job(id=2, job_title="Project Manager", is_current_job=False),
        ]

        response = client.get("/api/v1/jobs/", params={"pageNumber": 1, "pageSize": 10})

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 2
        assert [job["id"] for job in data] == [1, 2]
        assert data[1] == {
            "id": 2,
            "jobTitle": "Project Manager",
            "jobDescription": ["Testing JobList 1", "Testing JobList 2"],
            "isCurrentJob": False,
        }

        query = job_repo_mock.get_all.await_args.args[0]
        assert query.page_number == 1
        assert query.page_size == 10

    def test_get_jobs_forwards_filters(self, client, job_repo_mock):
        job_repo_mock.get_all.return_value = []

        response = client.get(
            "/api/v1/jobs/",
            params={"jobTitle": "engineer", "sortBy": "jobTitle", "isDescending": "true"}
        )

        assert response.status_code == 200
        assert response.json() == []
        query = job_repo_mock.get_all.await_args.args[0]
        assert query.job_title == "engineer"
        assert query.sort_by.value == "jobTitle"
        assert query.is_descending is True

    @pytest.mark.parametrize("params", [
        {"pageNumber": 0},
        {"pageSize": 0},
        {"pageSize": 1000},
        {"sortBy": "salary"},
    ])
    def test_get_jobs_rejects_invalid_query(self, client, job_repo_mock, params):
        response = client.get("/api/v1/jobs/", params=params)

        assert response.status_code == 422
        job_repo_mock.get_all.assert_not_called()

    def test_get_job_by_id(self, client, job_repo_mock, make_job):
        job_repo_mock.get_by_id.return_value = make_job(id=1, resume_id=3)

        response = client.get("/api/v1/jobs/1")

        assert response.status_code == 200
        job = response.json()
        assert job["id"] == 1
        assert job["jobTitle"] == "Senior Tech Engineer"
        assert "resumeId" not in job

    def test_get_job_not_found(self, client, job_repo_mock):
        job_repo_mock.get_by_id.return_value = None

        response = client.get("/api/v1/jobs/99")

        assert response.status_code == 404
        assert response.content == b""

    def test_create_job(self, client, job_repo_mock, resume_repo_mock, sample_job_data, make_job):
        resume_repo_mock.exists.return_value = True
        job_repo_mock.create.return_value = make_job(id=12, resume_id=1)

        response = client.post("/api/v1/jobs/1", json=sample_job_data)

        assert response.status_code == 201
        assert response.json()["jobTitle"] == "Senior Tech Engineer"
        assert response.json()["id"] == 12
        assert response.headers["location"].endswith("/api/v1/jobs/12")

        stored = job_repo_mock.create.await_args.args[0]
        assert stored.resume_id == 1

    def test_create_job_missing_resume(self, client, job_repo_mock, resume_repo_mock, sample_job_data):
        resume_repo_mock.exists.return_value = False

        response = client.post("/api/v1/jobs/1", json=sample_job_data)

        assert response.status_code == 400
        assert response.json() == "Resume does not exist"
        job_repo_mock.create.assert_not_called()

    def test_create_job_invalid_body(self, client, resume_repo_mock):
        response = client.post("/api/v1/jobs/1", json={"jobDescription": ["a"]})

        assert response.status_code == 422
        resume_repo_mock.exists.assert_not_called()

    def test_delete_job_returns_entity(self, client, job_repo_mock, make_job):
        job_repo_mock.delete.return_value = make_job(id=1, resume_id=3)

        response = client.delete("/api/v1/jobs/1")

        assert response.status_code == 200
        job = response.json()
        assert job["id"] == 1
        # Delete exposes the full record, unlike the read endpoints
        assert job["resumeId"] == 3

    def test_delete_job_not_found(self, client, job_repo_mock):
        job_repo_mock.delete.return_value = None

        response = client.delete("/api/v1/jobs/1")

        assert response.status_code == 404
        assert response.content == b""

    def test_storage_failure_is_500(self, client, job_repo_mock):
        job_repo_mock.get_by_id.side_effect = DatabaseException("read failed for Job")

        response = client.get("/api/v1/jobs/1")

        assert response.status_code == 500
        assert response.json()["error"]["error_code"] == "DATABASE_ERROR"


@pytest.mark.api
@pytest.mark.database
@pytest.mark.asyncio
class TestJobsAPIEndToEnd:
    """Test the full request path against SQLite."""

    async def test_create_get_list_delete(self, test_client: AsyncClient, resume_in_db, sample_job_data):
        create_response = await test_client.post(f"/api/v1/jobs/{resume_in_db.id}", json=sample_job_data)
        assert create_response.status_code == 201
        job_id = create_response.json()["id"]

        get_response = await test_client.get(create_response.headers["location"])
        assert get_response.status_code == 200
        assert get_response.json()["jobDescription"] == sample_job_data["jobDescription"]

        list_response = await test_client.get("/api/v1/jobs/")
        assert [job["id"] for job in list_response.json()] == [job_id]

        delete_response = await test_client.delete(f"/api/v1/jobs/{job_id}")
        assert delete_response.status_code == 200
        assert delete_response.json()["resumeId"] == resume_in_db.id

        missing_response = await test_client.get(f"/api/v1/jobs/{job_id}")
        assert missing_response.status_code == 404

    async def test_create_for_unknown_resume(self, test_client: AsyncClient, job_repository, sample_job_data):
        response = await test_client.post("/api/v1/jobs/999", json=sample_job_data)

        assert response.status_code == 400
        assert response.json() == "Resume does not exist"
        assert await job_repository.get_all(PageQuery()) == []

    async def test_page_past_end_is_empty(self, test_client: AsyncClient, db_manager, resume_in_db):
        async with db_manager.session_factory() as session:
            session.add(Job(job_title="Analyst", resume_id=resume_in_db.id))
            await session.commit()

        response = await test_client.get("/api/v1/jobs/", params={"pageNumber": 2, "pageSize": 10})

        assert response.status_code == 200
        assert response.json() == []

    async def test_huge_page_number_is_empty(self, test_client: AsyncClient, db_manager, resume_in_db):
        async with db_manager.session_factory() as session:
            session.add(Job(job_title="Analyst", resume_id=resume_in_db.id))
            await session.commit()

        response = await test_client.get(
            "/api/v1/jobs/",
            params={"pageNumber": 10 ** 17, "pageSize": 100}
        )

        assert response.status_code == 200
        assert response.json() == []
