# =============================================
# jobboard/api/v1/endpoints/applications.py
# =============================================
from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any

from jobboard.config.database import get_db
from jobboard.database.models.user import User
from jobboard.services.application_service import ApplicationService
from jobboard.schemas.application import ApplicationResponse
from jobboard.api.v1.endpoints.auth import get_current_user, require_recruiter

router = APIRouter()

async def get_application_service(db: AsyncSession = Depends(get_db)) -> ApplicationService:
    return ApplicationService(db)

@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: str,
    current_user: User = Depends(get_current_user),
    application_service: ApplicationService = Depends(get_application_service)
):
    """
    Get an application

    Applicants may read their own, recruiters those submitted to their jobs,
    superadmins any.
    """
    return await application_service.get_application(application_id, current_user)

@router.put("/{application_id}/status", response_model=ApplicationResponse)
async def update_application_status(
    application_id: str,
    payload: Any = Body(None),
    current_user: User = Depends(require_recruiter),
    application_service: ApplicationService = Depends(get_application_service)
):
    """
    Move an application to a new status

    **Requires the recruiter who posted the job**

    - **status**: Submitted, Under Review, Interviewing, Accepted or Rejected
    """
    return await application_service.update_status(application_id, current_user.id, payload)
