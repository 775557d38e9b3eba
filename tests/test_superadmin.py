# =============================================
# tests/test_superadmin.py
# =============================================
import pytest

from jobboard.repositories.user_repository import UserRepository
from jobboard.schemas.enums import UserRole

@pytest.fixture
async def superadmin(make_user):
    return await make_user(UserRole.SUPERADMIN)

async def test_stats(client, superadmin, make_user, make_job, headers_for):
    recruiter = await make_user(UserRole.RECRUITER, is_approved=True)
    await make_user(UserRole.RECRUITER)
    await make_user(UserRole.APPLICANT)
    await make_job(recruiter)
    await make_job(recruiter, is_active=False)

    response = await client.get("/api/superadmin/stats", headers=headers_for(superadmin))

    assert response.status_code == 200
    assert response.json() == {
        "totalRecruiters": 2,
        "pendingRecruiters": 1,
        "activeJobs": 1,
        "totalApplicants": 1,
    }

async def test_pending_recruiters(client, superadmin, make_user, headers_for):
    pending = await make_user(UserRole.RECRUITER, company_name="Hooli")
    await make_user(UserRole.RECRUITER, is_approved=True)

    response = await client.get("/api/superadmin/pending-recruiters", headers=headers_for(superadmin))

    assert response.status_code == 200
    body = response.json()
    assert [user["id"] for user in body] == [pending.id]
    assert body[0]["companyName"] == "Hooli"

async def test_approve_recruiter_twice(client, superadmin, make_user, headers_for, db):
    recruiter = await make_user(UserRole.RECRUITER)
    url = f"/api/superadmin/approve-recruiter/{recruiter.id}"

    first = await client.post(url, headers=headers_for(superadmin))
    second = await client.post(url, headers=headers_for(superadmin))

    assert first.status_code == 200
    assert first.json() == {"message": "Recruiter approved successfully"}
    assert second.status_code == 200

    user = await UserRepository(db).get_by_id(recruiter.id)
    assert user.is_approved is True

async def test_approve_unknown_recruiter_is_not_found(client, superadmin, make_user, headers_for):
    applicant = await make_user()

    response = await client.post(
        f"/api/superadmin/approve-recruiter/{applicant.id}",
        headers=headers_for(superadmin)
    )

    assert response.status_code == 404
    assert response.json() == {"message": "Recruiter not found"}

async def test_reject_recruiter_deletes_account(client, superadmin, make_user, headers_for, db):
    recruiter = await make_user(UserRole.RECRUITER)

    response = await client.post(
        f"/api/superadmin/reject-recruiter/{recruiter.id}",
        headers=headers_for(superadmin)
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Recruiter rejected successfully"}
    assert await UserRepository(db).get_by_id(recruiter.id) is None

async def test_reject_approved_recruiter_is_not_found(client, superadmin, make_user, headers_for):
    recruiter = await make_user(UserRole.RECRUITER, is_approved=True)

    response = await client.post(
        f"/api/superadmin/reject-recruiter/{recruiter.id}",
        headers=headers_for(superadmin)
    )

    assert response.status_code == 404

async def test_recruiter_cannot_approve(client, make_user, headers_for):
    recruiter = await make_user(UserRole.RECRUITER)

    response = await client.post(
        f"/api/superadmin/approve-recruiter/{recruiter.id}",
        headers=headers_for(recruiter)
    )

    assert response.status_code == 403
