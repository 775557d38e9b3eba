# =============================================
# jobboard/core/exception_handlers.py
# =============================================
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging

from jobboard.core.exceptions import AppException

logger = logging.getLogger(__name__)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions"""
    log_extra = {
        "path": request.url.path,
        "method": request.method,
        "details": exc.details
    }
    if exc.status_code >= 500:
        logger.error(f"Application exception: {exc.message}", extra=log_extra)
        message = "Internal server error"
    else:
        logger.warning(f"Application exception: {exc.message}", extra=log_extra)
        message = exc.message

    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message}
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle malformed request payloads"""
    logger.warning(f"Validation error: {exc.errors()}", extra={
        "path": request.url.path,
        "method": request.method
    })

    errors = []
    for error in exc.errors():
        field_path = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        errors.append({
            "field": field_path,
            "message": error["msg"],
            "type": error["type"]
        })

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Validation error",
            "errors": errors
        }
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Handle SQLAlchemy integrity constraint violations"""
    logger.error(f"Database integrity error: {str(exc)}", extra={
        "path": request.url.path,
        "method": request.method
    })

    error_msg = str(getattr(exc, "orig", exc)).lower()

    if "unique" in error_msg and "email" in error_msg:
        message = "Email is already linked to another account"
    elif "unique" in error_msg:
        message = "Duplicate record"
    elif "foreign key" in error_msg:
        # e.g. applying to a job deleted between the lookup and the insert
        message = "Referenced record no longer exists"
    else:
        message = "Database constraint violation"

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message}
    )


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle general SQLAlchemy database errors"""
    logger.error(f"Database error: {str(exc)}", extra={
        "path": request.url.path,
        "method": request.method
    }, exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"}
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle FastAPI/Starlette HTTP exceptions"""
    logger.warning(f"HTTP exception: {exc.detail}", extra={
        "path": request.url.path,
        "method": request.method,
        "status_code": exc.status_code
    })

    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None)
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions"""
    logger.error(f"Unhandled exception: {str(exc)}", extra={
        "path": request.url.path,
        "method": request.method,
        "exception_type": type(exc).__name__
    }, exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"}
    )
