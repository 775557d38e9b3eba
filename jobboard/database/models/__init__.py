# =============================================
# jobboard/database/models/__init__.py
# =============================================
"""
Database Models Package

Imports every model so it is registered on Base.metadata.
Alembic relies on this to detect all tables for migrations.
"""

from .user import User
from .job import Job
from .application import Application

__all__ = [
    "User",
    "Job",
    "Application",
]
