# =============================================
# jobboard/api/v1/endpoints/applicant.py
# =============================================
from fastapi import APIRouter, Depends
from typing import List

from jobboard.database.models.user import User
from jobboard.services.application_service import ApplicationService
from jobboard.services.stats_service import StatsService
from jobboard.schemas.application import ApplicationWithJob
from jobboard.schemas.stats import ApplicantStats
from jobboard.api.v1.endpoints.auth import require_applicant
from jobboard.api.v1.endpoints.superadmin import get_stats_service
from jobboard.api.v1.endpoints.applications import get_application_service

router = APIRouter()

@router.get("/stats", response_model=ApplicantStats)
async def get_applicant_stats(
    current_user: User = Depends(require_applicant),
    stats_service: StatsService = Depends(get_stats_service)
):
    """Applications submitted and how many are still in review"""
    return await stats_service.get_applicant_stats(current_user.id)

@router.get("/applications", response_model=List[ApplicationWithJob])
async def get_my_applications(
    current_user: User = Depends(require_applicant),
    application_service: ApplicationService = Depends(get_application_service)
):
    """The caller's applications with the job each one targets, newest first"""
    return await application_service.get_applicant_applications(current_user.id)
