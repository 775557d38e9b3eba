# =============================================
# jobboard/database/models/application.py
# =============================================
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from jobboard.config.database import Base, utcnow
from jobboard.schemas.enums import ApplicationStatus
import uuid

class Application(Base):
    __tablename__ = "applications"

    # Primary Key
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Foreign Keys
    job_id = Column(
        String(36),
        ForeignKey('jobs.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    applicant_id = Column(
        String(255),
        ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )

    resume_url = Column(String(1024), nullable=False)
    cover_letter = Column(Text, nullable=True)
    # Any string is stored here; the service checks it against ApplicationStatus
    status = Column(String(50), nullable=False, default=ApplicationStatus.SUBMITTED.value)

    # Audit Fields
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    # Constraints
    __table_args__ = (
        UniqueConstraint('job_id', 'applicant_id', name='uq_application_job_applicant'),
    )

    # Relationships
    job = relationship("Job", back_populates="applications", lazy="select")
    applicant = relationship("User", back_populates="applications", lazy="select")

    def __repr__(self):
        return f"<Application(id={self.id}, job_id={self.job_id}, applicant_id={self.applicant_id}, status='{self.status}')>"
