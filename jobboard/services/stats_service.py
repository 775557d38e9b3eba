# =============================================
# jobboard/services/stats_service.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.repositories.stats_repository import StatsRepository
from jobboard.schemas.stats import SuperadminStats, RecruiterStats, ApplicantStats

class StatsService:
    def __init__(self, db: AsyncSession):
        self.stats_repo = StatsRepository(db)

    async def get_superadmin_stats(self) -> SuperadminStats:
        return SuperadminStats(**await self.stats_repo.get_superadmin_stats())

    async def get_recruiter_stats(self, recruiter_id: str) -> RecruiterStats:
        return RecruiterStats(**await self.stats_repo.get_recruiter_stats(recruiter_id))

    async def get_applicant_stats(self, applicant_id: str) -> ApplicantStats:
        return ApplicantStats(**await self.stats_repo.get_applicant_stats(applicant_id))
