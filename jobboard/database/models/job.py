# =============================================
# jobboard/database/models/job.py
# =============================================
from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, JSON, Enum, ForeignKey, func
from sqlalchemy.orm import relationship
from jobboard.config.database import Base, utcnow
from jobboard.schemas.enums import JobType, ExperienceLevel
import uuid

def _enum_values(enum_cls):
    return [member.value for member in enum_cls]

class Job(Base):
    __tablename__ = "jobs"

    # Primary Key
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Foreign Keys
    recruiter_id = Column(
        String(255),
        ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )

    # Basic Info
    title = Column(String(200), nullable=False, index=True)
    company_name = Column(String(200), nullable=False)
    company_logo = Column(String(1024), nullable=True)
    location = Column(String(200), nullable=False)
    job_type = Column(
        Enum(JobType, native_enum=False, length=50, values_callable=_enum_values),
        nullable=False
    )
    experience_level = Column(
        Enum(ExperienceLevel, native_enum=False, length=50, values_callable=_enum_values),
        nullable=False
    )

    # Details (ordered lists stored as JSON arrays)
    description = Column(Text, nullable=False)
    requirements = Column(JSON, nullable=False)
    responsibilities = Column(JSON, nullable=False)
    skills = Column(JSON, nullable=False)

    # Compensation
    salary_min = Column(Integer, nullable=True)
    salary_max = Column(Integer, nullable=True)
    salary_currency = Column(String(10), nullable=True, default="USD")

    is_active = Column(Boolean, nullable=False, default=True, index=True)

    # Audit Fields
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    # =============================================
    # RELATIONSHIPS
    # =============================================

    recruiter = relationship("User", back_populates="jobs", lazy="select")

    applications = relationship(
        "Application",
        back_populates="job",
        lazy="select",
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', recruiter_id={self.recruiter_id})>"
