# =============================================
# tests/conftest.py
# =============================================
import os

# Settings are read at import time, so the environment must be ready first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-characters")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from jobboard.main import app
from jobboard.config.database import build_engine, create_tables, drop_all_tables, get_db
from jobboard.core.security import create_session_token
from jobboard.database.models.user import User
from jobboard.database.models.job import Job
from jobboard.database.models.application import Application
from jobboard.schemas.enums import UserRole, JobType, ExperienceLevel

# =============================================
# DATABASE
# =============================================

@pytest.fixture
async def engine():
    test_engine = build_engine("sqlite+aiosqlite://")
    await create_tables(bind=test_engine)
    yield test_engine
    await drop_all_tables(bind=test_engine)
    await test_engine.dispose()

@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session

@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

# =============================================
# FACTORIES
# =============================================

@pytest.fixture
def make_user(session_factory):
    counter = {"n": 0}

    async def _make_user(role: UserRole = UserRole.APPLICANT, **fields) -> User:
        counter["n"] += 1
        n = counter["n"]
        fields.setdefault("id", f"{role.value}-{n}")
        fields.setdefault("email", f"{role.value}{n}@example.com")
        fields.setdefault("first_name", role.value.title())
        fields.setdefault("last_name", str(n))
        async with session_factory() as session:
            user = User(role=role, **fields)
            session.add(user)
            await session.commit()
            await session.refresh(user)
            return user

    return _make_user

@pytest.fixture
def make_job(session_factory):
    async def _make_job(recruiter: User, **fields) -> Job:
        fields.setdefault("title", "Backend Engineer")
        fields.setdefault("company_name", "Acme")
        fields.setdefault("location", "Remote")
        fields.setdefault("job_type", JobType.FULL_TIME)
        fields.setdefault("experience_level", ExperienceLevel.MID)
        fields.setdefault("description", "Build APIs")
        fields.setdefault("requirements", ["Python"])
        fields.setdefault("responsibilities", ["Ship features"])
        fields.setdefault("skills", ["FastAPI"])
        async with session_factory() as session:
            job = Job(recruiter_id=recruiter.id, **fields)
            session.add(job)
            await session.commit()
            await session.refresh(job)
            return job

    return _make_job

@pytest.fixture
def make_application(session_factory):
    async def _make_application(job: Job, applicant: User, **fields) -> Application:
        fields.setdefault("resume_url", applicant.resume_url or "https://files.example.com/cv.pdf")
        async with session_factory() as session:
            application = Application(job_id=job.id, applicant_id=applicant.id, **fields)
            session.add(application)
            await session.commit()
            await session.refresh(application)
            return application

    return _make_application

# =============================================
# AUTH HELPERS
# =============================================

def auth_headers(user_id: str, **claims) -> dict:
    return {"Authorization": f"Bearer {create_session_token(user_id, claims)}"}

@pytest.fixture
def headers_for():
    def _headers_for(user: User, **claims) -> dict:
        return auth_headers(user.id, **claims)

    return _headers_for

@pytest.fixture
def job_payload():
    return {
        "title": "Data Engineer",
        "companyName": "Globex",
        "location": "Berlin",
        "jobType": "Full-time",
        "experienceLevel": "Senior Level",
        "description": "Own the data platform",
        "requirements": ["SQL", "Python"],
        "responsibilities": ["Design pipelines"],
        "skills": ["Airflow", "dbt"],
        "salaryMin": 70000,
        "salaryMax": 90000,
    }
