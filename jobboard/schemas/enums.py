# jobboard/schemas/enums.py
from enum import Enum

class UserRole(str, Enum):
    SUPERADMIN = "superadmin"
    RECRUITER = "recruiter"
    APPLICANT = "applicant"

class JobType(str, Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    INTERNSHIP = "Internship"

class ExperienceLevel(str, Enum):
    ENTRY = "Entry Level"
    MID = "Mid Level"
    SENIOR = "Senior Level"
    LEAD = "Lead"

class ApplicationStatus(str, Enum):
    SUBMITTED = "Submitted"
    UNDER_REVIEW = "Under Review"
    INTERVIEWING = "Interviewing"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"

# Statuses counted as "in review" on the applicant dashboard
IN_REVIEW_STATUSES = (
    ApplicationStatus.SUBMITTED.value,
    ApplicationStatus.UNDER_REVIEW.value,
    ApplicationStatus.INTERVIEWING.value,
)
