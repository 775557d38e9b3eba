# =============================================
# jobboard/api/v1/router.py
# =============================================
from fastapi import APIRouter

from jobboard.api.v1.endpoints import (
    auth,
    superadmin,
    recruiter,
    applicant,
    profile,
    jobs,
    applications
)

# =============================================
# API ROUTER
# =============================================
api_router = APIRouter()

# =============================================
# AUTHENTICATION ROUTES
# =============================================
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
    responses={
        401: {"description": "Unauthorized"},
        404: {"description": "User not found"}
    }
)

# =============================================
# DASHBOARD ROUTES
# =============================================
api_router.include_router(
    superadmin.router,
    prefix="/superadmin",
    tags=["Superadmin"],
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Superadmin role required"},
        404: {"description": "Recruiter not found"}
    }
)

api_router.include_router(
    recruiter.router,
    prefix="/recruiter",
    tags=["Recruiter"],
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Recruiter role required"}
    }
)

api_router.include_router(
    applicant.router,
    prefix="/applicant",
    tags=["Applicant"],
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Applicant role required"}
    }
)

# =============================================
# PROFILE ROUTES
# =============================================
api_router.include_router(
    profile.router,
    prefix="/profile",
    tags=["Profile"],
    responses={
        400: {"description": "Invalid profile data"},
        401: {"description": "Unauthorized"}
    }
)

# =============================================
# JOB ROUTES
# =============================================
api_router.include_router(
    jobs.router,
    prefix="/jobs",
    tags=["Jobs"],
    responses={
        403: {"description": "Forbidden: Not your job"},
        404: {"description": "Job not found"}
    }
)

# =============================================
# APPLICATION ROUTES
# =============================================
api_router.include_router(
    applications.router,
    prefix="/applications",
    tags=["Job Applications"],
    responses={
        400: {"description": "Invalid status"},
        403: {"description": "Forbidden"},
        404: {"description": "Application not found"}
    }
)
