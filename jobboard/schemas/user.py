# =============================================
# jobboard/schemas/user.py
# =============================================
from pydantic import Field, field_validator
from typing import Optional, List
from datetime import datetime

from jobboard.schemas.base import CamelModel
from jobboard.schemas.enums import UserRole

# =============================================
# IDENTITY SCHEMA (login upsert)
# =============================================
class UserUpsert(CamelModel):
    """Fields the identity provider supplies on login"""
    id: str = Field(..., min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    first_name: Optional[str] = Field(None, max_length=255)
    last_name: Optional[str] = Field(None, max_length=255)
    profile_image_url: Optional[str] = Field(None, max_length=1024)
    # Only applied when the row is first inserted
    role: UserRole = UserRole.APPLICANT

# =============================================
# PROFILE UPDATE SCHEMA
# =============================================
class ProfileUpdate(CamelModel):
    """Profile fields a user may change on their own record.

    Identity fields, role and approval state are deliberately absent, so
    unknown keys such as ``role`` in the request body are ignored.
    """
    first_name: Optional[str] = Field(None, max_length=255)
    last_name: Optional[str] = Field(None, max_length=255)
    profile_image_url: Optional[str] = Field(None, max_length=1024)

    # Recruiter
    company_name: Optional[str] = Field(None, max_length=255)
    company_website: Optional[str] = Field(None, max_length=1024)

    # Applicant
    phone: Optional[str] = Field(None, max_length=50)
    location: Optional[str] = Field(None, max_length=255)
    resume_url: Optional[str] = Field(None, max_length=1024)
    skills: Optional[List[str]] = None
    experience: Optional[str] = None
    education: Optional[str] = None
    bio: Optional[str] = None

    @field_validator('resume_url')
    @classmethod
    def validate_resume_url(cls, v):
        """Blank resume URL clears the stored one"""
        if v is None:
            return v
        v = v.strip()
        return v or None

    @field_validator('skills')
    @classmethod
    def validate_skills(cls, v):
        if v is None:
            return v
        return [skill.strip() for skill in v if skill and skill.strip()]

# =============================================
# RESPONSE SCHEMA
# =============================================
class UserResponse(CamelModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: UserRole

    company_name: Optional[str] = None
    company_website: Optional[str] = None
    is_approved: bool = False

    phone: Optional[str] = None
    location: Optional[str] = None
    resume_url: Optional[str] = None
    skills: Optional[List[str]] = None
    experience: Optional[str] = None
    education: Optional[str] = None
    bio: Optional[str] = None

    created_at: datetime
    updated_at: datetime
