# =============================================
# jobboard/api/v1/endpoints/superadmin.py
# =============================================
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from jobboard.config.database import get_db
from jobboard.database.models.user import User
from jobboard.services.user_service import UserService
from jobboard.services.stats_service import StatsService
from jobboard.schemas.user import UserResponse
from jobboard.schemas.stats import SuperadminStats
from jobboard.schemas.base import MessageResponse
from jobboard.api.v1.endpoints.auth import get_user_service, require_superadmin

# =============================================
# ROUTER INSTANCE
# =============================================
router = APIRouter()

async def get_stats_service(db: AsyncSession = Depends(get_db)) -> StatsService:
    return StatsService(db)

# =============================================
# SUPERADMIN ROUTES
# =============================================

@router.get("/stats", response_model=SuperadminStats)
async def get_superadmin_stats(
    current_user: User = Depends(require_superadmin),
    stats_service: StatsService = Depends(get_stats_service)
):
    """
    Platform-wide counters

    **Requires superadmin**
    """
    return await stats_service.get_superadmin_stats()

@router.get("/pending-recruiters", response_model=List[UserResponse])
async def get_pending_recruiters(
    current_user: User = Depends(require_superadmin),
    user_service: UserService = Depends(get_user_service)
):
    """
    Recruiters waiting for approval, oldest sign-up first

    **Requires superadmin**
    """
    return await user_service.get_pending_recruiters()

@router.post("/approve-recruiter/{user_id}", response_model=MessageResponse)
async def approve_recruiter(
    user_id: str,
    current_user: User = Depends(require_superadmin),
    user_service: UserService = Depends(get_user_service)
):
    """
    Approve a recruiter so they can post jobs. Approving twice is harmless.

    **Requires superadmin**
    """
    return await user_service.approve_recruiter(user_id)

@router.post("/reject-recruiter/{user_id}", response_model=MessageResponse)
async def reject_recruiter(
    user_id: str,
    current_user: User = Depends(require_superadmin),
    user_service: UserService = Depends(get_user_service)
):
    """
    Reject a pending recruiter

    The account is deleted outright, along with anything it owns.

    **Requires superadmin**
    """
    return await user_service.reject_recruiter(user_id)
