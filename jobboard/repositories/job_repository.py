# =============================================
# jobboard/repositories/job_repository.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Optional, List, Dict, Any
import logging

from jobboard.config.database import utcnow
from jobboard.database.models.job import Job
from jobboard.schemas.job import JobCreate
from jobboard.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

class JobRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    # =============================================
    # BASIC CRUD OPERATIONS
    # =============================================

    async def create(self, recruiter_id: str, job_data: JobCreate) -> Job:
        """Create a new job owned by the recruiter"""
        db_job = Job(recruiter_id=recruiter_id, **job_data.model_dump())

        try:
            self.db.add(db_job)
            await self.db.commit()
            await self.db.refresh(db_job)

            logger.info(f"Job created successfully: {db_job.id}")
            return db_job

        except IntegrityError as e:
            await self.db.rollback()
            logger.error(f"Integrity error creating job: {e}")
            raise
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error creating job: {e}")
            raise DatabaseError("create", str(e))

    async def get_by_id(self, job_id: str) -> Optional[Job]:
        """Get job by ID, active or not"""
        stmt = select(Job).where(Job.id == job_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active(self) -> List[Job]:
        """Active jobs, newest first"""
        stmt = select(Job).where(
            Job.is_active.is_(True)
        ).order_by(Job.created_at.desc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_recruiter(self, recruiter_id: str) -> List[Job]:
        """Every job the recruiter posted, newest first"""
        stmt = select(Job).where(
            Job.recruiter_id == recruiter_id
        ).order_by(Job.created_at.desc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def update(self, job_id: str, fields: Dict[str, Any]) -> Optional[Job]:
        """Merge the given fields into the job"""
        job = await self.get_by_id(job_id)
        if not job:
            return None

        for key, value in fields.items():
            setattr(job, key, value)
        job.updated_at = utcnow()

        try:
            await self.db.commit()
            logger.info(f"Job updated: {job_id}")
            return job
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error updating job {job_id}: {e}")
            raise DatabaseError("update", str(e))

    async def delete(self, job_id: str) -> bool:
        """Delete a job. Its applications go with it."""
        try:
            result = await self.db.execute(delete(Job).where(Job.id == job_id))
            await self.db.commit()

            success = result.rowcount > 0
            if success:
                logger.info(f"Job deleted: {job_id}")
            return success

        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error deleting job {job_id}: {e}")
            raise DatabaseError("delete", str(e))

    # =============================================
    # COUNTS
    # =============================================

    async def count_active(self) -> int:
        stmt = select(func.count()).select_from(Job).where(Job.is_active.is_(True))
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def count_by_recruiter(self, recruiter_id: str) -> int:
        stmt = select(func.count()).select_from(Job).where(Job.recruiter_id == recruiter_id)
        result = await self.db.execute(stmt)
        return result.scalar_one()
