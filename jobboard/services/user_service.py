# =============================================
# jobboard/services/user_service.py
# =============================================
from typing import List, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from jobboard.repositories.user_repository import UserRepository
from jobboard.schemas.enums import UserRole
from jobboard.schemas.user import UserUpsert, ProfileUpdate, UserResponse
from jobboard.schemas.base import MessageResponse
from jobboard.core.security import identity_from_claims
from jobboard.core.exceptions import UserNotFoundError, RecruiterNotFoundError

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, db: AsyncSession):
        self.user_repo = UserRepository(db)

    async def get_user(self, user_id: str) -> UserResponse:
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)
        return UserResponse.model_validate(user)

    async def sync_from_claims(self, user_id: str, claims: Dict[str, Any]) -> UserResponse:
        """Create or refresh the caller's row from identity provider claims"""
        role = UserRole.APPLICANT
        claimed_role = claims.get("role")
        if claimed_role in {r.value for r in UserRole}:
            role = UserRole(claimed_role)

        user_data = UserUpsert(id=user_id, role=role, **identity_from_claims(claims))
        user = await self.user_repo.upsert(user_data)
        return UserResponse.model_validate(user)

    async def update_profile(self, user_id: str, profile_data: ProfileUpdate) -> UserResponse:
        fields = profile_data.model_dump(exclude_unset=True)
        user = await self.user_repo.update(user_id, fields)
        if not user:
            raise UserNotFoundError(user_id)

        logger.info(f"Profile updated for user {user_id}: {sorted(fields)}")
        return UserResponse.model_validate(user)

    # =============================================
    # RECRUITER APPROVAL
    # =============================================

    async def get_pending_recruiters(self) -> List[UserResponse]:
        recruiters = await self.user_repo.get_pending_recruiters()
        return [UserResponse.model_validate(user) for user in recruiters]

    async def approve_recruiter(self, user_id: str) -> MessageResponse:
        if not await self.user_repo.approve_recruiter(user_id):
            raise RecruiterNotFoundError(user_id)

        logger.info(f"Recruiter approved: {user_id}")
        return MessageResponse(message="Recruiter approved successfully")

    async def reject_recruiter(self, user_id: str) -> MessageResponse:
        if not await self.user_repo.reject_recruiter(user_id):
            raise RecruiterNotFoundError(user_id)

        logger.info(f"Recruiter rejected and removed: {user_id}")
        return MessageResponse(message="Recruiter rejected successfully")
