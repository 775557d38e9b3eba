# =============================================
# jobboard/api/v1/endpoints/profile.py
# =============================================
from fastapi import APIRouter, Depends

from jobboard.database.models.user import User
from jobboard.services.user_service import UserService
from jobboard.schemas.user import ProfileUpdate, UserResponse
from jobboard.api.v1.endpoints.auth import get_current_user, get_user_service

router = APIRouter()

@router.put("", response_model=UserResponse)
async def update_profile(
    profile_data: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """
    Update the caller's own profile

    Recruiters fill in company details, applicants their contact details,
    resume and background. Role, approval state and email cannot be changed.

    **Requires a valid session**
    """
    return await user_service.update_profile(current_user.id, profile_data)
