# =============================================
# tests/test_jobs.py
# =============================================
import pytest

from jobboard.repositories.job_repository import JobRepository
from jobboard.schemas.enums import UserRole

@pytest.fixture
async def recruiter(make_user):
    return await make_user(UserRole.RECRUITER, is_approved=True)

# =============================================
# PUBLIC ROUTES
# =============================================

async def test_list_jobs_is_public_and_hides_inactive(client, recruiter, make_job):
    first = await make_job(recruiter, title="First")
    await make_job(recruiter, title="Closed", is_active=False)
    second = await make_job(recruiter, title="Second")

    response = await client.get("/api/jobs")

    assert response.status_code == 200
    assert [job["id"] for job in response.json()] == [second.id, first.id]

async def test_get_unknown_job(client):
    response = await client.get("/api/jobs/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"message": "Job not found"}

async def test_get_job_anonymous_has_not_applied(client, recruiter, make_job):
    job = await make_job(recruiter)

    response = await client.get(f"/api/jobs/{job.id}")

    body = response.json()
    assert response.status_code == 200
    assert body["hasApplied"] is False
    assert body["jobType"] == "Full-time"
    assert body["recruiterId"] == recruiter.id

async def test_get_job_reports_has_applied(client, recruiter, make_user, make_job, make_application, headers_for):
    applicant = await make_user()
    job = await make_job(recruiter)
    await make_application(job, applicant)

    response = await client.get(f"/api/jobs/{job.id}", headers=headers_for(applicant))

    assert response.json()["hasApplied"] is True

async def test_get_job_with_bad_token_is_treated_as_anonymous(client, recruiter, make_job):
    job = await make_job(recruiter)

    response = await client.get(f"/api/jobs/{job.id}", headers={"Authorization": "Bearer nonsense"})

    assert response.status_code == 200
    assert response.json()["hasApplied"] is False

# =============================================
# CREATE
# =============================================

async def test_create_job(client, recruiter, headers_for, job_payload):
    response = await client.post("/api/jobs", json=job_payload, headers=headers_for(recruiter))

    body = response.json()
    assert response.status_code == 201
    assert body["recruiterId"] == recruiter.id
    assert body["salaryCurrency"] == "USD"
    assert body["isActive"] is True
    assert body["requirements"] == ["SQL", "Python"]

async def test_create_job_requires_approval(client, make_user, headers_for, job_payload):
    pending = await make_user(UserRole.RECRUITER)

    response = await client.post("/api/jobs", json=job_payload, headers=headers_for(pending))

    assert response.status_code == 403
    assert response.json() == {"message": "Recruiter account is pending approval"}

async def test_create_job_requires_recruiter(client, make_user, headers_for, job_payload):
    applicant = await make_user()

    response = await client.post("/api/jobs", json=job_payload, headers=headers_for(applicant))

    assert response.status_code == 403

async def test_create_job_requires_session(client, job_payload):
    response = await client.post("/api/jobs", json=job_payload)

    assert response.status_code == 401

async def test_create_job_validation(client, recruiter, headers_for, job_payload):
    job_payload["jobType"] = "Freelance"
    job_payload["skills"] = []

    response = await client.post("/api/jobs", json=job_payload, headers=headers_for(recruiter))

    body = response.json()
    assert response.status_code == 400
    assert body["message"] == "Validation error"
    fields = {error["field"] for error in body["errors"]}
    assert {"jobType", "skills"} <= fields

async def test_create_job_rejects_inverted_salary_range(client, recruiter, headers_for, job_payload):
    job_payload["salaryMin"] = 100000
    job_payload["salaryMax"] = 50000

    response = await client.post("/api/jobs", json=job_payload, headers=headers_for(recruiter))

    assert response.status_code == 400

# =============================================
# UPDATE / DELETE
# =============================================

async def test_update_own_job(client, recruiter, make_job, headers_for):
    job = await make_job(recruiter)

    response = await client.put(
        f"/api/jobs/{job.id}",
        json={"title": "Principal Engineer", "isActive": False},
        headers=headers_for(recruiter)
    )

    body = response.json()
    assert response.status_code == 200
    assert body["title"] == "Principal Engineer"
    assert body["isActive"] is False
    assert body["location"] == job.location

async def test_update_someone_elses_job(client, recruiter, make_user, make_job, headers_for, db):
    other = await make_user(UserRole.RECRUITER, is_approved=True)
    job = await make_job(recruiter, title="Original")

    response = await client.put(f"/api/jobs/{job.id}", json={"title": "Hijacked"}, headers=headers_for(other))

    assert response.status_code == 403
    assert response.json() == {"message": "Forbidden: Not your job"}
    assert (await JobRepository(db).get_by_id(job.id)).title == "Original"

async def test_update_unknown_job_before_ownership(client, recruiter, headers_for):
    response = await client.put("/api/jobs/missing", json={"title": "x"}, headers=headers_for(recruiter))

    assert response.status_code == 404

async def test_update_rejects_null_required_field(client, recruiter, make_job, headers_for):
    job = await make_job(recruiter)

    response = await client.put(f"/api/jobs/{job.id}", json={"title": None}, headers=headers_for(recruiter))

    assert response.status_code == 400

async def test_update_checks_ownership_before_body(client, recruiter, make_user, make_job, headers_for):
    other = await make_user(UserRole.RECRUITER, is_approved=True)
    job = await make_job(recruiter)

    response = await client.put(f"/api/jobs/{job.id}", json={"title": None}, headers=headers_for(other))

    assert response.status_code == 403

async def test_update_unknown_job_with_malformed_body(client, recruiter, headers_for):
    response = await client.put("/api/jobs/missing", json={"salaryMin": "lots"}, headers=headers_for(recruiter))

    assert response.status_code == 404

async def test_update_salary_range_uses_stored_values(client, recruiter, make_job, headers_for, db):
    job = await make_job(recruiter, salary_min=100000, salary_max=120000)

    response = await client.put(f"/api/jobs/{job.id}", json={"salaryMax": 10}, headers=headers_for(recruiter))

    assert response.status_code == 400
    assert response.json()["message"] == "salary_max must be greater than or equal to salary_min"
    stored = await JobRepository(db).get_by_id(job.id)
    assert (stored.salary_min, stored.salary_max) == (100000, 120000)

async def test_update_salary_within_stored_range(client, recruiter, make_job, headers_for):
    job = await make_job(recruiter, salary_min=100000, salary_max=120000)

    response = await client.put(f"/api/jobs/{job.id}", json={"salaryMax": 150000}, headers=headers_for(recruiter))

    assert response.status_code == 200
    assert response.json()["salaryMin"] == 100000
    assert response.json()["salaryMax"] == 150000

async def test_delete_own_job(client, recruiter, make_job, headers_for, db):
    job = await make_job(recruiter)

    response = await client.delete(f"/api/jobs/{job.id}", headers=headers_for(recruiter))

    assert response.status_code == 200
    assert response.json() == {"message": "Job deleted successfully"}
    assert await JobRepository(db).get_by_id(job.id) is None

async def test_delete_someone_elses_job(client, recruiter, make_user, make_job, headers_for, db):
    other = await make_user(UserRole.RECRUITER, is_approved=True)
    job = await make_job(recruiter)

    response = await client.delete(f"/api/jobs/{job.id}", headers=headers_for(other))

    assert response.status_code == 403
    assert await JobRepository(db).get_by_id(job.id) is not None

# =============================================
# RECRUITER DASHBOARD
# =============================================

async def test_recruiter_jobs_include_inactive(client, recruiter, make_user, make_job, headers_for):
    other = await make_user(UserRole.RECRUITER, is_approved=True)
    await make_job(recruiter)
    await make_job(recruiter, is_active=False)
    await make_job(other)

    response = await client.get("/api/recruiter/jobs", headers=headers_for(recruiter))

    assert response.status_code == 200
    assert len(response.json()) == 2

async def test_recruiter_stats(client, recruiter, make_user, make_job, make_application, headers_for):
    job = await make_job(recruiter)
    await make_application(job, await make_user())
    await make_application(job, await make_user())

    response = await client.get("/api/recruiter/stats", headers=headers_for(recruiter))

    assert response.json() == {"jobsPosted": 1, "activeApplications": 2, "totalViews": 0}

async def test_job_applications_for_owner_only(client, recruiter, make_user, make_job, make_application, headers_for):
    other = await make_user(UserRole.RECRUITER, is_approved=True)
    job = await make_job(recruiter)
    application = await make_application(job, await make_user())

    own = await client.get(f"/api/jobs/{job.id}/applications", headers=headers_for(recruiter))
    foreign = await client.get(f"/api/jobs/{job.id}/applications", headers=headers_for(other))

    assert own.status_code == 200
    assert [item["id"] for item in own.json()] == [application.id]
    assert foreign.status_code == 403
