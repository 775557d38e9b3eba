# =============================================
# jobboard/api/v1/endpoints/recruiter.py
# =============================================
from fastapi import APIRouter, Depends
from typing import List

from jobboard.database.models.user import User
from jobboard.services.job_service import JobService
from jobboard.services.stats_service import StatsService
from jobboard.schemas.job import JobResponse
from jobboard.schemas.stats import RecruiterStats
from jobboard.api.v1.endpoints.auth import require_recruiter
from jobboard.api.v1.endpoints.superadmin import get_stats_service
from jobboard.api.v1.endpoints.jobs import get_job_service

router = APIRouter()

@router.get("/stats", response_model=RecruiterStats)
async def get_recruiter_stats(
    current_user: User = Depends(require_recruiter),
    stats_service: StatsService = Depends(get_stats_service)
):
    """Jobs posted and applications received by the caller"""
    return await stats_service.get_recruiter_stats(current_user.id)

@router.get("/jobs", response_model=List[JobResponse])
async def get_recruiter_jobs(
    current_user: User = Depends(require_recruiter),
    job_service: JobService = Depends(get_job_service)
):
    """Every job the caller posted, active or not, newest first"""
    return await job_service.get_recruiter_jobs(current_user.id)
