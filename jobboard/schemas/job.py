# =============================================
# jobboard/schemas/job.py
# =============================================
from pydantic import Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime

from jobboard.schemas.base import CamelModel
from jobboard.schemas.enums import JobType, ExperienceLevel

def _clean_items(items: List[str], field_name: str) -> List[str]:
    """Strip entries, drop blank ones and require at least one"""
    cleaned = [item.strip() for item in items if item and item.strip()]
    if not cleaned:
        raise ValueError(f"{field_name} must contain at least one entry")
    return cleaned

# =============================================
# BASE SCHEMA
# =============================================
class JobBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=200, description="Job title")
    company_name: str = Field(..., min_length=1, max_length=200, description="Hiring company")
    company_logo: Optional[str] = Field(None, max_length=1024, description="Logo URL")
    location: str = Field(..., min_length=1, max_length=200)
    job_type: JobType
    experience_level: ExperienceLevel
    description: str = Field(..., min_length=1)
    requirements: List[str] = Field(..., description="Ordered list of requirements")
    responsibilities: List[str] = Field(..., description="Ordered list of responsibilities")
    skills: List[str] = Field(..., description="Ordered list of skills")
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    salary_currency: str = Field("USD", min_length=1, max_length=10)
    is_active: bool = True

    @field_validator('title', 'company_name', 'location', 'description')
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator('requirements', 'responsibilities', 'skills')
    @classmethod
    def validate_lists(cls, v, info):
        return _clean_items(v, info.field_name)

    @model_validator(mode='after')
    def validate_salary_range(self):
        if self.salary_min is not None and self.salary_max is not None and self.salary_max < self.salary_min:
            raise ValueError("salary_max must be greater than or equal to salary_min")
        return self

# =============================================
# CREATE SCHEMA
# =============================================
class JobCreate(JobBase):
    """Schema for job creation (owner comes from the session)"""
    pass

# =============================================
# UPDATE SCHEMA
# =============================================
class JobUpdate(CamelModel):
    """Schema for partial job updates. Only fields that are sent are changed."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    company_name: Optional[str] = Field(None, min_length=1, max_length=200)
    company_logo: Optional[str] = Field(None, max_length=1024)
    location: Optional[str] = Field(None, min_length=1, max_length=200)
    job_type: Optional[JobType] = None
    experience_level: Optional[ExperienceLevel] = None
    description: Optional[str] = Field(None, min_length=1)
    requirements: Optional[List[str]] = None
    responsibilities: Optional[List[str]] = None
    skills: Optional[List[str]] = None
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    salary_currency: Optional[str] = Field(None, min_length=1, max_length=10)
    is_active: Optional[bool] = None

    @field_validator('title', 'company_name', 'location', 'description', 'salary_currency')
    @classmethod
    def validate_text_columns(cls, v, info):
        # Sent explicitly as null or blank for a column that cannot be empty
        if v is None or not v.strip():
            raise ValueError(f"{info.field_name} must not be blank")
        return v.strip()

    @field_validator('job_type', 'experience_level', 'is_active')
    @classmethod
    def validate_not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator('requirements', 'responsibilities', 'skills')
    @classmethod
    def validate_lists(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return _clean_items(v, info.field_name)

    @model_validator(mode='after')
    def validate_salary_range(self):
        if self.salary_min is not None and self.salary_max is not None and self.salary_max < self.salary_min:
            raise ValueError("salary_max must be greater than or equal to salary_min")
        return self

# =============================================
# RESPONSE SCHEMAS
# =============================================
class JobResponse(CamelModel):
    """Schema for API responses"""
    id: str
    recruiter_id: str
    title: str
    company_name: str
    company_logo: Optional[str] = None
    location: str
    job_type: JobType
    experience_level: ExperienceLevel
    description: str
    requirements: List[str]
    responsibilities: List[str]
    skills: List[str]
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    salary_currency: Optional[str] = "USD"
    is_active: bool = True
    created_at: datetime
    updated_at: datetime

class JobDetail(JobResponse):
    """Job plus whether the current caller has applied"""
    has_applied: bool = False
