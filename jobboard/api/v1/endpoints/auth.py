# =============================================
# jobboard/api/v1/endpoints/auth.py
# =============================================
from fastapi import APIRouter, Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import logging

from jobboard.config.database import get_db
from jobboard.config.settings import get_settings
from jobboard.database.models.user import User
from jobboard.repositories.user_repository import UserRepository
from jobboard.services.user_service import UserService
from jobboard.schemas.enums import UserRole
from jobboard.schemas.user import UserResponse
from jobboard.core.security import verify_session_token
from jobboard.core.exceptions import (
    AppException,
    NotAuthenticatedError,
    InsufficientPermissionsError,
    RecruiterNotApprovedError,
    UserNotFoundError
)

logger = logging.getLogger(__name__)

# =============================================
# ROUTER AND DEPENDENCIES
# =============================================
router = APIRouter()
security = HTTPBearer(auto_error=False)
settings = get_settings()

@dataclass(frozen=True)
class AuthContext:
    """Verified caller identity, resolved once per request"""
    user_id: str
    claims: Dict[str, Any] = field(default_factory=dict)

async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)

def _extract_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    """Bearer header first, then the session cookie"""
    if credentials and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)

async def get_auth_context(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> AuthContext:
    """Require a valid session; 401 otherwise"""
    token = _extract_token(request, credentials)
    if not token:
        raise NotAuthenticatedError()

    claims = verify_session_token(token)
    return AuthContext(user_id=claims["sub"], claims=claims)

async def get_optional_auth_context(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[AuthContext]:
    """Same as get_auth_context, but an absent or bad session yields None"""
    token = _extract_token(request, credentials)
    if not token:
        return None

    try:
        claims = verify_session_token(token)
    except AppException:
        return None
    return AuthContext(user_id=claims["sub"], claims=claims)

async def _load_user_with_role(
    auth: AuthContext,
    db: AsyncSession,
    role: UserRole
) -> User:
    user = await UserRepository(db).get_by_id(auth.user_id)
    if not user or user.role != role:
        logger.warning(f"User {auth.user_id} lacks role '{role.value}'")
        raise InsufficientPermissionsError(role.value)
    return user

async def get_current_user(
    auth: AuthContext = Depends(get_auth_context),
    db: AsyncSession = Depends(get_db)
) -> User:
    """The caller's row, whatever the role"""
    user = await UserRepository(db).get_by_id(auth.user_id)
    if not user:
        logger.warning(f"Session for unknown user {auth.user_id}")
        raise UserNotFoundError(auth.user_id)
    return user

async def require_superadmin(
    auth: AuthContext = Depends(get_auth_context),
    db: AsyncSession = Depends(get_db)
) -> User:
    return await _load_user_with_role(auth, db, UserRole.SUPERADMIN)

async def require_recruiter(
    auth: AuthContext = Depends(get_auth_context),
    db: AsyncSession = Depends(get_db)
) -> User:
    return await _load_user_with_role(auth, db, UserRole.RECRUITER)

async def require_applicant(
    auth: AuthContext = Depends(get_auth_context),
    db: AsyncSession = Depends(get_db)
) -> User:
    return await _load_user_with_role(auth, db, UserRole.APPLICANT)

async def require_approved_recruiter(
    recruiter: User = Depends(require_recruiter)
) -> User:
    if not recruiter.is_approved:
        logger.warning(f"Unapproved recruiter {recruiter.id} attempted a gated action")
        raise RecruiterNotApprovedError(recruiter.id)
    return recruiter

# =============================================
# AUTHENTICATION ROUTES
# =============================================

@router.post("/callback", response_model=UserResponse)
async def auth_callback(
    auth: AuthContext = Depends(get_auth_context),
    user_service: UserService = Depends(get_user_service)
):
    """
    Login hook for the identity provider

    Creates the user on first sign-in (as an applicant unless the token
    carries a ``role`` claim) and refreshes email, name and avatar on
    every later sign-in. Role and approval state are never changed here.
    """
    return await user_service.sync_from_claims(auth.user_id, auth.claims)

@router.get("/user", response_model=UserResponse)
async def get_current_user_info(
    current_user: User = Depends(get_current_user)
):
    """
    Get the signed-in user's profile

    **Requires a valid session**
    """
    return UserResponse.model_validate(current_user)
