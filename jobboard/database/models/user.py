# =============================================
# jobboard/database/models/user.py
# =============================================
from sqlalchemy import Column, String, Boolean, Text, DateTime, JSON, Enum, func
from sqlalchemy.orm import relationship
from jobboard.config.database import Base, utcnow
from jobboard.schemas.enums import UserRole
import uuid

class User(Base):
    __tablename__ = "users"

    # Primary Key (subject identifier issued by the identity provider)
    id = Column(String(255), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Identity
    email = Column(String(255), unique=True, nullable=True, index=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    profile_image_url = Column(String(1024), nullable=True)
    role = Column(
        Enum(UserRole, native_enum=False, length=20, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserRole.APPLICANT,
        index=True
    )

    # Recruiter-specific fields
    company_name = Column(String(255), nullable=True)
    company_website = Column(String(1024), nullable=True)
    is_approved = Column(Boolean, nullable=False, default=False)

    # Applicant-specific fields
    phone = Column(String(50), nullable=True)
    location = Column(String(255), nullable=True)
    resume_url = Column(String(1024), nullable=True)
    skills = Column(JSON, nullable=True)
    experience = Column(Text, nullable=True)
    education = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)

    # Audit Fields
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    # =============================================
    # RELATIONSHIPS
    # =============================================

    jobs = relationship(
        "Job",
        back_populates="recruiter",
        lazy="select",
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    applications = relationship(
        "Application",
        back_populates="applicant",
        lazy="select",
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
