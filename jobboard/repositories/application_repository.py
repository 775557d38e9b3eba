# =============================================
# jobboard/repositories/application_repository.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import selectinload
from typing import Optional, List
import logging

from jobboard.config.database import utcnow
from jobboard.database.models.application import Application
from jobboard.database.models.job import Job
from jobboard.schemas.enums import IN_REVIEW_STATUSES
from jobboard.core.exceptions import ApplicationAlreadyExistsError, DatabaseError

logger = logging.getLogger(__name__)

UNIQUE_CONSTRAINT = "uq_application_job_applicant"
UNIQUE_COLUMNS = "applications.job_id, applications.applicant_id"

def _is_duplicate(error: IntegrityError) -> bool:
    # PostgreSQL names the constraint, SQLite names the columns
    message = str(error.orig).lower()
    return UNIQUE_CONSTRAINT in message or UNIQUE_COLUMNS in message

class ApplicationRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    # =============================================
    # BASIC CRUD OPERATIONS
    # =============================================

    async def create(
        self,
        job_id: str,
        applicant_id: str,
        resume_url: str,
        cover_letter: Optional[str] = None
    ) -> Application:
        """Submit an application. A second one for the same job is rejected."""
        db_application = Application(
            job_id=job_id,
            applicant_id=applicant_id,
            resume_url=resume_url,
            cover_letter=cover_letter
        )

        try:
            self.db.add(db_application)
            await self.db.commit()
            await self.db.refresh(db_application)

            logger.info(f"Application created: {db_application.id} (job {job_id}, applicant {applicant_id})")
            return db_application

        except IntegrityError as e:
            await self.db.rollback()
            if _is_duplicate(e):
                logger.warning(f"Duplicate application rejected: job {job_id}, applicant {applicant_id}")
                raise ApplicationAlreadyExistsError(applicant_id, job_id)
            logger.error(f"Integrity error creating application: {e}")
            raise
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error creating application: {e}")
            raise DatabaseError("create", str(e))

    async def get_by_id(self, application_id: str) -> Optional[Application]:
        """Get application by ID with its job loaded"""
        stmt = select(Application).options(
            selectinload(Application.job)
        ).where(Application.id == application_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_job(self, job_id: str) -> List[Application]:
        """Applications for a job, newest first"""
        stmt = select(Application).where(
            Application.job_id == job_id
        ).order_by(Application.created_at.desc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_applicant(self, applicant_id: str, with_job: bool = False) -> List[Application]:
        """Applications submitted by an applicant, newest first"""
        stmt = select(Application).where(
            Application.applicant_id == applicant_id
        ).order_by(Application.created_at.desc())

        if with_job:
            stmt = stmt.options(selectinload(Application.job))

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def has_applied(self, job_id: str, applicant_id: str) -> bool:
        stmt = select(Application.id).where(
            and_(Application.job_id == job_id, Application.applicant_id == applicant_id)
        ).limit(1)
        result = await self.db.execute(stmt)
        return result.first() is not None

    async def update_status(self, application_id: str, status: str) -> Optional[Application]:
        """Store a new status. Callers validate the value."""
        application = await self.get_by_id(application_id)
        if not application:
            return None

        application.status = status
        application.updated_at = utcnow()

        try:
            await self.db.commit()
            logger.info(f"Application {application_id} status set to '{status}'")
            return application
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error updating application {application_id}: {e}")
            raise DatabaseError("update", str(e))

    # =============================================
    # COUNTS
    # =============================================

    async def count_by_applicant(self, applicant_id: str) -> int:
        stmt = select(func.count()).select_from(Application).where(
            Application.applicant_id == applicant_id
        )
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def count_in_review_by_applicant(self, applicant_id: str) -> int:
        stmt = select(func.count()).select_from(Application).where(
            and_(
                Application.applicant_id == applicant_id,
                Application.status.in_(IN_REVIEW_STATUSES)
            )
        )
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def count_for_recruiter_jobs(self, recruiter_id: str) -> int:
        """Applications received across every job the recruiter posted"""
        stmt = select(func.count(Application.id)).select_from(Application).join(
            Job, Application.job_id == Job.id
        ).where(Job.recruiter_id == recruiter_id)
        result = await self.db.execute(stmt)
        return result.scalar_one()
