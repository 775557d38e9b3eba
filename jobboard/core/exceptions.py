# =============================================
# jobboard/core/exceptions.py
# =============================================
from fastapi import status
from typing import Any, Dict, Optional


class AppException(Exception):
    """Base exception class for application-specific errors"""

    def __init__(
        self,
        message: str = "An application error occurred",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# =============================================
# AUTHENTICATION (401)
# =============================================

class NotAuthenticatedError(AppException):
    """Exception raised when a request carries no session"""

    def __init__(self):
        super().__init__(
            message="Unauthorized",
            status_code=status.HTTP_401_UNAUTHORIZED,
            details={"error_type": "NOT_AUTHENTICATED"}
        )


class InvalidTokenError(AppException):
    """Exception raised when a session token is invalid"""

    def __init__(self):
        super().__init__(
            message="Unauthorized",
            status_code=status.HTTP_401_UNAUTHORIZED,
            details={"error_type": "INVALID_TOKEN"}
        )


class TokenExpiredError(AppException):
    """Exception raised when a session token has expired"""

    def __init__(self):
        super().__init__(
            message="Unauthorized",
            status_code=status.HTTP_401_UNAUTHORIZED,
            details={"error_type": "TOKEN_EXPIRED"}
        )


# =============================================
# AUTHORIZATION (403)
# =============================================

class InsufficientPermissionsError(AppException):
    """Exception raised when user lacks the required role"""

    def __init__(self, required_role: Optional[str] = None):
        super().__init__(
            message="Forbidden",
            status_code=status.HTTP_403_FORBIDDEN,
            details={
                "required_role": required_role,
                "error_type": "INSUFFICIENT_PERMISSIONS"
            }
        )


class NotResourceOwnerError(AppException):
    """Exception raised when a caller acts on an entity they do not own"""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details={"error_type": "NOT_RESOURCE_OWNER"}
        )


class RecruiterNotApprovedError(AppException):
    """Exception raised when an unapproved recruiter tries to post a job"""

    def __init__(self, user_id: str):
        super().__init__(
            message="Recruiter account is pending approval",
            status_code=status.HTTP_403_FORBIDDEN,
            details={
                "user_id": user_id,
                "error_type": "RECRUITER_NOT_APPROVED"
            }
        )


# =============================================
# NOT FOUND (404)
# =============================================

class UserNotFoundError(AppException):
    """Exception raised when a user is not found"""

    def __init__(self, user_id: Optional[str] = None):
        super().__init__(
            message="User not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={
                "user_id": user_id,
                "error_type": "USER_NOT_FOUND"
            }
        )


class RecruiterNotFoundError(AppException):
    """Exception raised when a recruiter id does not match a recruiter account"""

    def __init__(self, user_id: str):
        super().__init__(
            message="Recruiter not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={
                "user_id": user_id,
                "error_type": "RECRUITER_NOT_FOUND"
            }
        )


class JobNotFoundError(AppException):
    """Exception raised when a job is not found"""

    def __init__(self, job_id: str):
        super().__init__(
            message="Job not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={
                "job_id": job_id,
                "error_type": "JOB_NOT_FOUND"
            }
        )


class ApplicationNotFoundError(AppException):
    """Exception raised when an application is not found"""

    def __init__(self, application_id: str):
        super().__init__(
            message="Application not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={
                "application_id": application_id,
                "error_type": "APPLICATION_NOT_FOUND"
            }
        )


# =============================================
# BUSINESS RULES AND VALIDATION (400)
# =============================================

class ApplicationAlreadyExistsError(AppException):
    """Exception raised when an applicant applies to the same job twice"""

    def __init__(self, applicant_id: str, job_id: str):
        super().__init__(
            message="You have already applied to this job",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={
                "applicant_id": applicant_id,
                "job_id": job_id,
                "error_type": "APPLICATION_ALREADY_EXISTS"
            }
        )


class ResumeRequiredError(AppException):
    """Exception raised when an applicant applies without a resume on file"""

    def __init__(self, applicant_id: str):
        super().__init__(
            message="Please upload your resume in your profile before applying",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={
                "applicant_id": applicant_id,
                "error_type": "RESUME_REQUIRED"
            }
        )


class ValidationError(AppException):
    """Exception raised when request data fails a business validation"""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details={
                "field": field,
                "error_type": "VALIDATION_ERROR"
            }
        )


class DatabaseError(AppException):
    """Exception raised when database operations fail"""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            message=f"Database {operation} failed",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={
                "operation": operation,
                "reason": reason,
                "error_type": "DATABASE_ERROR"
            }
        )
