# =============================================
# jobboard/api/v1/endpoints/jobs.py
# =============================================
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, List, Optional

from jobboard.config.database import get_db
from jobboard.database.models.user import User
from jobboard.services.job_service import JobService
from jobboard.services.application_service import ApplicationService
from jobboard.schemas.job import JobCreate, JobResponse, JobDetail
from jobboard.schemas.application import ApplicationCreate, ApplicationResponse
from jobboard.schemas.base import MessageResponse
from jobboard.api.v1.endpoints.auth import (
    AuthContext,
    get_optional_auth_context,
    require_recruiter,
    require_approved_recruiter,
    require_applicant
)
from jobboard.api.v1.endpoints.applications import get_application_service

# =============================================
# ROUTER INSTANCE
# =============================================
router = APIRouter()

# =============================================
# DEPENDENCIES
# =============================================
async def get_job_service(db: AsyncSession = Depends(get_db)) -> JobService:
    return JobService(db)

# =============================================
# PUBLIC ROUTES
# =============================================

@router.get("", response_model=List[JobResponse])
async def get_jobs(
    job_service: JobService = Depends(get_job_service)
):
    """
    List active jobs, newest first

    Inactive jobs are never listed here.
    """
    return await job_service.get_active_jobs()

@router.get("/{job_id}", response_model=JobDetail)
async def get_job(
    job_id: str,
    auth: Optional[AuthContext] = Depends(get_optional_auth_context),
    job_service: JobService = Depends(get_job_service)
):
    """
    Get a job by ID

    With a valid session, **hasApplied** tells whether the caller already
    applied; anonymous callers always get false.
    """
    return await job_service.get_job(job_id, viewer_id=auth.user_id if auth else None)

# =============================================
# RECRUITER ROUTES
# =============================================

@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_data: JobCreate,
    current_user: User = Depends(require_approved_recruiter),
    job_service: JobService = Depends(get_job_service)
):
    """
    Post a new job

    **Requires an approved recruiter**

    - **title**, **companyName**, **location**, **description**: required text
    - **jobType**: Full-time, Part-time, Contract or Internship
    - **experienceLevel**: Entry Level, Mid Level, Senior Level or Lead
    - **requirements**, **responsibilities**, **skills**: non-empty lists
    - **salaryMin** / **salaryMax** / **salaryCurrency**: optional range
    """
    return await job_service.create_job(current_user.id, job_data)

@router.put("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: str,
    payload: Any = Body(None),
    current_user: User = Depends(require_recruiter),
    job_service: JobService = Depends(get_job_service)
):
    """
    Update a job (partial)

    **Requires the recruiter who posted it**

    Accepts any subset of the fields of POST /api/jobs. The body is checked
    only after the job is found and ownership is confirmed.
    """
    return await job_service.update_job(job_id, current_user.id, payload)

@router.delete("/{job_id}", response_model=MessageResponse)
async def delete_job(
    job_id: str,
    current_user: User = Depends(require_recruiter),
    job_service: JobService = Depends(get_job_service)
):
    """
    Delete a job and every application submitted to it

    **Requires the recruiter who posted it**
    """
    return await job_service.delete_job(job_id, current_user.id)

@router.get("/{job_id}/applications", response_model=List[ApplicationResponse])
async def get_job_applications(
    job_id: str,
    current_user: User = Depends(require_recruiter),
    job_service: JobService = Depends(get_job_service)
):
    """
    Applications received for a job, newest first

    **Requires the recruiter who posted it**
    """
    return await job_service.get_job_applications(job_id, current_user.id)

# =============================================
# APPLICANT ROUTES
# =============================================

@router.post("/{job_id}/apply", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def apply_to_job(
    job_id: str,
    application_data: Optional[ApplicationCreate] = None,
    current_user: User = Depends(require_applicant),
    application_service: ApplicationService = Depends(get_application_service)
):
    """
    Apply to a job with the resume stored on the caller's profile

    **Requires an applicant**

    - **coverLetter**: optional free text
    """
    return await application_service.apply(
        job_id,
        current_user,
        application_data or ApplicationCreate()
    )
