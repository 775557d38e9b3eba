# =============================================
# jobboard/services/application_service.py
# =============================================
from typing import Any, List
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from jobboard.repositories.application_repository import ApplicationRepository
from jobboard.repositories.job_repository import JobRepository
from jobboard.repositories.user_repository import UserRepository
from jobboard.database.models.user import User
from jobboard.schemas.enums import UserRole, ApplicationStatus
from jobboard.schemas.application import (
    ApplicationCreate,
    ApplicationStatusUpdate,
    ApplicationResponse,
    ApplicationWithJob
)
from jobboard.schemas.base import parse_body
from jobboard.core.exceptions import (
    JobNotFoundError,
    ApplicationNotFoundError,
    ApplicationAlreadyExistsError,
    ResumeRequiredError,
    NotResourceOwnerError,
    ValidationError
)

logger = logging.getLogger(__name__)

VALID_STATUSES = [status.value for status in ApplicationStatus]

class ApplicationService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.application_repo = ApplicationRepository(db)
        self.job_repo = JobRepository(db)
        self.user_repo = UserRepository(db)

    async def apply(self, job_id: str, applicant: User, application_data: ApplicationCreate) -> ApplicationResponse:
        """
        Submit an application for the applicant.

        Checks run in order: the job exists, no earlier application, a resume
        on the profile. The unique constraint catches a concurrent duplicate.
        """
        job = await self.job_repo.get_by_id(job_id)
        if not job:
            raise JobNotFoundError(job_id)

        if await self.application_repo.has_applied(job_id, applicant.id):
            raise ApplicationAlreadyExistsError(applicant.id, job_id)

        if not applicant.resume_url:
            raise ResumeRequiredError(applicant.id)

        application = await self.application_repo.create(
            job_id=job_id,
            applicant_id=applicant.id,
            resume_url=applicant.resume_url,
            cover_letter=application_data.cover_letter
        )
        return ApplicationResponse.model_validate(application)

    async def get_application(self, application_id: str, caller: User) -> ApplicationResponse:
        """Applicants see their own, recruiters those on their jobs, superadmins all"""
        application = await self.application_repo.get_by_id(application_id)
        if not application:
            raise ApplicationNotFoundError(application_id)

        if caller.role == UserRole.APPLICANT and application.applicant_id != caller.id:
            logger.warning(f"Applicant {caller.id} denied access to application {application_id}")
            raise NotResourceOwnerError()

        if caller.role == UserRole.RECRUITER and application.job.recruiter_id != caller.id:
            logger.warning(f"Recruiter {caller.id} denied access to application {application_id}")
            raise NotResourceOwnerError()

        return ApplicationResponse.model_validate(application)

    async def get_applicant_applications(self, applicant_id: str) -> List[ApplicationWithJob]:
        applications = await self.application_repo.get_by_applicant(applicant_id, with_job=True)
        return [ApplicationWithJob.model_validate(application) for application in applications]

    async def update_status(
        self,
        application_id: str,
        recruiter_id: str,
        payload: Any
    ) -> ApplicationResponse:
        """404, then 403, then the body is validated"""
        application = await self.application_repo.get_by_id(application_id)
        if not application:
            raise ApplicationNotFoundError(application_id)

        if application.job.recruiter_id != recruiter_id:
            logger.warning(f"Recruiter {recruiter_id} denied status change on application {application_id}")
            raise NotResourceOwnerError("Forbidden: Not your job")

        status_data = parse_body(ApplicationStatusUpdate, payload)
        new_status = (status_data.status or "").strip()
        if not new_status:
            raise ValidationError("status", "Status is required")

        if new_status not in VALID_STATUSES:
            raise ValidationError(
                "status",
                f"Invalid status. Must be one of: {', '.join(VALID_STATUSES)}"
            )

        application = await self.application_repo.update_status(application_id, new_status)
        if not application:
            raise ApplicationNotFoundError(application_id)
        return ApplicationResponse.model_validate(application)
