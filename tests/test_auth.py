# =============================================
# tests/test_auth.py
# =============================================
from datetime import timedelta
from jose import jwt

from jobboard.core.security import create_session_token
from jobboard.schemas.enums import UserRole

async def test_missing_session_is_unauthorized(client):
    response = await client.get("/api/auth/user")

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}

async def test_expired_session_is_unauthorized(client, make_user):
    user = await make_user()
    token = create_session_token(user.id, expires_delta=timedelta(seconds=-5))

    response = await client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401

async def test_token_with_wrong_signature_is_unauthorized(client, make_user):
    user = await make_user()
    token = jwt.encode({"sub": user.id, "exp": 9999999999}, "x" * 40, algorithm="HS256")

    response = await client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401

async def test_session_cookie_is_accepted(client, make_user):
    user = await make_user()
    client.cookies.set("session", create_session_token(user.id))

    response = await client.get("/api/auth/user")

    assert response.status_code == 200
    assert response.json()["id"] == user.id

async def test_current_user_uses_camel_case(client, make_user, headers_for):
    user = await make_user(UserRole.RECRUITER, company_name="Initech")

    response = await client.get("/api/auth/user", headers=headers_for(user))

    body = response.json()
    assert response.status_code == 200
    assert body["role"] == "recruiter"
    assert body["isApproved"] is False
    assert body["companyName"] == "Initech"
    assert "createdAt" in body

async def test_current_user_without_row_is_not_found(client):
    token = create_session_token("ghost")

    response = await client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}

# =============================================
# LOGIN CALLBACK
# =============================================

async def test_callback_creates_applicant_from_claims(client):
    token = create_session_token("idp-42", {"email": "grace@example.com", "first_name": "Grace"})

    response = await client.post("/api/auth/callback", headers={"Authorization": f"Bearer {token}"})

    body = response.json()
    assert response.status_code == 200
    assert body["id"] == "idp-42"
    assert body["email"] == "grace@example.com"
    assert body["firstName"] == "Grace"
    assert body["role"] == "applicant"
    assert body["isApproved"] is False

async def test_callback_role_claim_only_applies_on_first_login(client):
    first = create_session_token("idp-7", {"email": "r@example.com", "role": "recruiter"})
    await client.post("/api/auth/callback", headers={"Authorization": f"Bearer {first}"})

    again = create_session_token("idp-7", {"email": "r2@example.com", "role": "superadmin"})
    response = await client.post("/api/auth/callback", headers={"Authorization": f"Bearer {again}"})

    body = response.json()
    assert body["role"] == "recruiter"
    assert body["email"] == "r2@example.com"

async def test_callback_ignores_unknown_role_claim(client):
    token = create_session_token("idp-8", {"role": "owner"})

    response = await client.post("/api/auth/callback", headers={"Authorization": f"Bearer {token}"})

    assert response.json()["role"] == "applicant"

# =============================================
# ROLE CHECKS
# =============================================

async def test_role_mismatch_is_forbidden(client, make_user, headers_for):
    applicant = await make_user()

    response = await client.get("/api/superadmin/stats", headers=headers_for(applicant))

    assert response.status_code == 403
    assert response.json() == {"message": "Forbidden"}

async def test_role_check_without_row_is_forbidden(client):
    token = create_session_token("ghost")

    response = await client.get("/api/recruiter/jobs", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 403

async def test_role_checks_run_after_authentication(client):
    response = await client.get("/api/applicant/stats")

    assert response.status_code == 401

async def test_callback_with_email_of_another_account(client, make_user):
    existing = await make_user()
    token = create_session_token("idp-9", {"email": existing.email})

    response = await client.post("/api/auth/callback", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 400
    assert response.json() == {"message": "Email is already linked to another account"}
