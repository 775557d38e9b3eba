# =============================================
# jobboard/main.py
# =============================================
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from contextlib import asynccontextmanager
import logging
import time
import uvicorn

from jobboard.config.settings import get_settings, validate_environment
from jobboard.config.database import create_tables, check_database_health, close_database
from jobboard.api.v1.router import api_router
from jobboard.core.exceptions import AppException
from jobboard.core.exception_handlers import (
    app_exception_handler,
    request_validation_error_handler,
    integrity_error_handler,
    sqlalchemy_error_handler,
    http_exception_handler,
    global_exception_handler
)

# =============================================
# SETTINGS
# =============================================
settings = get_settings()

# =============================================
# LOGGING CONFIGURATION
# =============================================
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format=settings.LOG_FORMAT
)
logger = logging.getLogger(__name__)

# =============================================
# LIFESPAN CONTEXT MANAGER
# =============================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events"""
    # Startup
    logger.info(f"Starting {settings.APP_NAME} v{settings.VERSION} ({settings.ENVIRONMENT})")
    validate_environment()

    # Schemas outside SQLite are managed by Alembic
    if settings.is_sqlite:
        logger.info("Creating database tables...")
        await create_tables()

    logger.info(f"{settings.APP_NAME} started successfully")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME}...")
    await close_database()
    logger.info(f"{settings.APP_NAME} shut down successfully")

# =============================================
# FASTAPI APPLICATION
# =============================================
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    Job board where applicants browse and apply to jobs, recruiters post
    jobs and manage applications, and a superadmin approves recruiters.

    ## Roles

    * **Applicant**: default role; applies with the resume stored on their profile
    * **Recruiter**: posts jobs once approved, reviews applications to their jobs
    * **Superadmin**: approves or rejects recruiter accounts

    ## Authentication

    Sessions are issued by an external identity provider. Send the token as
    `Authorization: Bearer <token>` or in the session cookie.
    """,
    version=settings.VERSION,
    openapi_tags=[
        {"name": "Authentication", "description": "Session and current user"},
        {"name": "Superadmin", "description": "Recruiter approval and platform stats"},
        {"name": "Recruiter", "description": "Recruiter dashboard"},
        {"name": "Applicant", "description": "Applicant dashboard"},
        {"name": "Profile", "description": "Own profile management"},
        {"name": "Jobs", "description": "Job listings and management"},
        {"name": "Job Applications", "description": "Applications and their status"},
        {"name": "Health", "description": "Health checks"},
    ],
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# =============================================
# MIDDLEWARE CONFIGURATION
# =============================================

# Request logging and timing middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests and add processing time to the response"""
    start_time = time.time()

    logger.info(f"Request: {request.method} {request.url.path}")

    response = await call_next(request)

    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(
        f"Response: {request.method} {request.url.path} - "
        f"Status: {response.status_code} - Time: {process_time:.4f}s"
    )

    return response

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Process-Time"],
)

# ==========================================
# EXCEPTION HANDLERS
# ==========================================

@app.exception_handler(AppException)
async def handle_app_exception(request, exc):
    return await app_exception_handler(request, exc)

@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request, exc):
    return await request_validation_error_handler(request, exc)

# Database exceptions
@app.exception_handler(IntegrityError)
async def handle_integrity_error(request, exc):
    return await integrity_error_handler(request, exc)

@app.exception_handler(SQLAlchemyError)
async def handle_sqlalchemy_error(request, exc):
    return await sqlalchemy_error_handler(request, exc)

# Routing errors (404/405) and HTTPException raised by FastAPI itself
@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request, exc):
    return await http_exception_handler(request, exc)

# Global handler (must be last)
@app.exception_handler(Exception)
async def handle_global_exception(request, exc):
    return await global_exception_handler(request, exc)

# ==========================================
# ROUTERS
# ==========================================
app.include_router(api_router, prefix="/api")

# ==========================================
# BASIC ROUTES
# ==========================================
@app.get("/health", tags=["Health"])
async def health():
    """Liveness check including database connectivity"""
    database_ok = await check_database_health()
    return {
        "status": "healthy" if database_ok else "degraded",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "database": "connected" if database_ok else "disconnected"
    }

# =============================================
# DEVELOPMENT SERVER
# =============================================
if __name__ == "__main__":
    uvicorn.run(
        "jobboard.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info" if settings.DEBUG else "warning",
        access_log=settings.DEBUG
    )
