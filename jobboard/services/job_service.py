# =============================================
# jobboard/services/job_service.py
# =============================================
from typing import Any, Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from jobboard.repositories.job_repository import JobRepository
from jobboard.repositories.application_repository import ApplicationRepository
from jobboard.database.models.job import Job
from jobboard.schemas.job import JobCreate, JobUpdate, JobResponse, JobDetail
from jobboard.schemas.application import ApplicationResponse
from jobboard.schemas.base import MessageResponse, parse_body
from jobboard.core.exceptions import JobNotFoundError, NotResourceOwnerError, ValidationError

logger = logging.getLogger(__name__)

class JobService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.job_repo = JobRepository(db)
        self.application_repo = ApplicationRepository(db)

    async def _get_owned_job(self, job_id: str, recruiter_id: str) -> Job:
        """Load a job the recruiter owns: 404 before 403"""
        job = await self.job_repo.get_by_id(job_id)
        if not job:
            raise JobNotFoundError(job_id)

        if job.recruiter_id != recruiter_id:
            logger.warning(f"Recruiter {recruiter_id} denied access to job {job_id}")
            raise NotResourceOwnerError("Forbidden: Not your job")

        return job

    # =============================================
    # PUBLIC LISTING
    # =============================================

    async def get_active_jobs(self) -> List[JobResponse]:
        jobs = await self.job_repo.get_active()
        return [JobResponse.model_validate(job) for job in jobs]

    async def get_job(self, job_id: str, viewer_id: Optional[str] = None) -> JobDetail:
        """Job detail; ``has_applied`` is only computed for a signed-in viewer"""
        job = await self.job_repo.get_by_id(job_id)
        if not job:
            raise JobNotFoundError(job_id)

        job_detail = JobDetail.model_validate(job)
        if viewer_id:
            job_detail.has_applied = await self.application_repo.has_applied(job_id, viewer_id)

        return job_detail

    # =============================================
    # RECRUITER OPERATIONS
    # =============================================

    async def get_recruiter_jobs(self, recruiter_id: str) -> List[JobResponse]:
        jobs = await self.job_repo.get_by_recruiter(recruiter_id)
        return [JobResponse.model_validate(job) for job in jobs]

    async def create_job(self, recruiter_id: str, job_data: JobCreate) -> JobResponse:
        job = await self.job_repo.create(recruiter_id, job_data)
        logger.info(f"Job created: '{job.title}' (ID: {job.id}) by recruiter {recruiter_id}")
        return JobResponse.model_validate(job)

    async def update_job(self, job_id: str, recruiter_id: str, payload: Any) -> JobResponse:
        """Partial update: 404, then 403, then the body is validated"""
        current = await self._get_owned_job(job_id, recruiter_id)
        fields = parse_body(JobUpdate, payload).model_dump(exclude_unset=True)

        # The range is checked against stored values for the side not sent
        salary_min = fields.get("salary_min", current.salary_min)
        salary_max = fields.get("salary_max", current.salary_max)
        if salary_min is not None and salary_max is not None and salary_max < salary_min:
            raise ValidationError("salary_max", "salary_max must be greater than or equal to salary_min")

        job = await self.job_repo.update(job_id, fields)
        if not job:
            raise JobNotFoundError(job_id)
        return JobResponse.model_validate(job)

    async def delete_job(self, job_id: str, recruiter_id: str) -> MessageResponse:
        await self._get_owned_job(job_id, recruiter_id)

        if not await self.job_repo.delete(job_id):
            raise JobNotFoundError(job_id)
        return MessageResponse(message="Job deleted successfully")

    async def get_job_applications(self, job_id: str, recruiter_id: str) -> List[ApplicationResponse]:
        await self._get_owned_job(job_id, recruiter_id)

        applications = await self.application_repo.get_by_job(job_id)
        return [ApplicationResponse.model_validate(application) for application in applications]
