# =============================================
# jobboard/schemas/application.py
# =============================================
from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from jobboard.schemas.base import CamelModel
from jobboard.schemas.job import JobResponse

# =============================================
# REQUEST SCHEMAS
# =============================================
class ApplicationCreate(CamelModel):
    """Body of an apply request. The resume is taken from the applicant's profile."""
    cover_letter: Optional[str] = Field(None, max_length=10000)

    @field_validator('cover_letter')
    @classmethod
    def validate_cover_letter(cls, v):
        if v is None:
            return v
        v = v.strip()
        return v or None

class ApplicationStatusUpdate(CamelModel):
    # Checked against ApplicationStatus in the service so a missing value
    # gets its own error message
    status: Optional[str] = None

# =============================================
# RESPONSE SCHEMAS
# =============================================
class ApplicationResponse(CamelModel):
    id: str
    job_id: str
    applicant_id: str
    resume_url: str
    cover_letter: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime

class ApplicationWithJob(ApplicationResponse):
    """Application joined with the job it was submitted to"""
    job: Optional[JobResponse] = None
