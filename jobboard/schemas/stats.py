# =============================================
# jobboard/schemas/stats.py
# =============================================
from jobboard.schemas.base import CamelModel

class SuperadminStats(CamelModel):
    total_recruiters: int = 0
    pending_recruiters: int = 0
    active_jobs: int = 0
    total_applicants: int = 0

class RecruiterStats(CamelModel):
    jobs_posted: int = 0
    active_applications: int = 0
    # Not tracked yet
    total_views: int = 0

class ApplicantStats(CamelModel):
    applications_submitted: int = 0
    in_review: int = 0
    # Not tracked yet
    profile_views: int = 0
