# =============================================
# jobboard/core/security.py
# =============================================
"""Session token utilities.

Sessions are issued by the external identity provider as signed JWTs. The
API only verifies them; ``create_session_token`` mints compatible tokens for
local development and tests.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
import logging

from jose import ExpiredSignatureError, JWTError, jwt

from jobboard.config.settings import get_settings
from jobboard.core.exceptions import InvalidTokenError, TokenExpiredError

logger = logging.getLogger(__name__)

# Claims copied onto the user row when the identity provider signs someone in
IDENTITY_CLAIMS = ("email", "first_name", "last_name", "profile_image_url")

# =============================================
# SESSION TOKEN MANAGEMENT
# =============================================

def create_session_token(
    subject: str,
    claims: Optional[Dict[str, Any]] = None,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Create a session token in the identity provider's format"""
    settings = get_settings()
    now = datetime.now(timezone.utc)

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)

    to_encode = dict(claims or {})
    to_encode.update({
        "sub": subject,
        "iat": now,
        "exp": now + expires_delta,
    })
    if settings.TOKEN_ISSUER:
        to_encode.setdefault("iss", settings.TOKEN_ISSUER)
    if settings.TOKEN_AUDIENCE:
        to_encode.setdefault("aud", settings.TOKEN_AUDIENCE)

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def verify_session_token(token: str) -> Dict[str, Any]:
    """Verify and decode a session token, returning its claims"""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            audience=settings.TOKEN_AUDIENCE,
            issuer=settings.TOKEN_ISSUER,
            options=settings.get_token_options()
        )
    except ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError as e:
        logger.info(f"Rejected session token: {e}")
        raise InvalidTokenError()

    if not payload.get("sub"):
        raise InvalidTokenError()

    return payload

def identity_from_claims(claims: Dict[str, Any]) -> Dict[str, Any]:
    """Pick the profile fields the identity provider is authoritative for"""
    return {key: claims[key] for key in IDENTITY_CLAIMS if key in claims}
