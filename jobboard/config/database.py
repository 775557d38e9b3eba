# =============================================
# jobboard/config/database.py
# =============================================
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy import MetaData, event, text
from typing import AsyncGenerator
from datetime import datetime, timezone
import logging
from jobboard.config.settings import get_settings

logger = logging.getLogger(__name__)

# Get settings instance
settings = get_settings()

# Base Model with metadata
metadata = MetaData()

class Base(DeclarativeBase):
    metadata = metadata

# =============================================
# ENGINE FACTORY
# =============================================

def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine configured for the given backend"""
    if url.startswith("sqlite"):
        async_engine = create_async_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )
        event.listen(async_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return async_engine

    return create_async_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=3600,
        pool_size=10,
        max_overflow=20
    )

# Async Engine
engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

# Session Factory
async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

# =============================================
# DATABASE FUNCTIONS
# =============================================

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields one database session per request"""
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()

async def create_tables(bind: AsyncEngine = None):
    """
    Create every table registered on Base.metadata.

    Production schemas are managed with Alembic; this is used for SQLite
    development databases and for tests.
    """
    # Models must be imported so their tables are registered
    import jobboard.database.models  # noqa: F401

    target = bind or engine
    try:
        async with target.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Database tables ready: {sorted(Base.metadata.tables)}")
    except Exception as e:
        logger.error(f"Error creating tables: {e}")
        raise

async def drop_all_tables(bind: AsyncEngine = None):
    """
    Drop every table (use with care!)
    """
    target = bind or engine
    try:
        logger.warning("Dropping all tables")
        async with target.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.info("All tables dropped")
    except Exception as e:
        logger.error(f"Error dropping tables: {e}")
        raise

# Health check function
async def check_database_health() -> bool:
    """Check if database is accessible"""
    try:
        async with async_session() as session:
            result = await session.execute(text("SELECT 1"))
            return result.scalar() == 1
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False

async def close_database():
    """Close database connections"""
    try:
        await engine.dispose()
        logger.info("Database connections closed")
    except Exception as e:
        logger.error(f"Error closing database connections: {e}")

# =============================================
# UTILITY FUNCTIONS
# =============================================

def utcnow() -> datetime:
    """Timezone-aware current time used for created/updated timestamps"""
    return datetime.now(timezone.utc)
