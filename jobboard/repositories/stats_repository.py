# =============================================
# jobboard/repositories/stats_repository.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Dict

from jobboard.repositories.user_repository import UserRepository
from jobboard.repositories.job_repository import JobRepository
from jobboard.repositories.application_repository import ApplicationRepository
from jobboard.schemas.enums import UserRole

class StatsRepository:
    """Dashboard counters, built from the per-entity count queries"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.user_repo = UserRepository(db)
        self.job_repo = JobRepository(db)
        self.application_repo = ApplicationRepository(db)

    async def get_superadmin_stats(self) -> Dict[str, int]:
        return {
            "total_recruiters": await self.user_repo.count_by_role(UserRole.RECRUITER),
            "pending_recruiters": await self.user_repo.count_pending_recruiters(),
            "active_jobs": await self.job_repo.count_active(),
            "total_applicants": await self.user_repo.count_by_role(UserRole.APPLICANT),
        }

    async def get_recruiter_stats(self, recruiter_id: str) -> Dict[str, int]:
        return {
            "jobs_posted": await self.job_repo.count_by_recruiter(recruiter_id),
            "active_applications": await self.application_repo.count_for_recruiter_jobs(recruiter_id),
            "total_views": 0,
        }

    async def get_applicant_stats(self, applicant_id: str) -> Dict[str, int]:
        return {
            "applications_submitted": await self.application_repo.count_by_applicant(applicant_id),
            "in_review": await self.application_repo.count_in_review_by_applicant(applicant_id),
            "profile_views": 0,
        }
