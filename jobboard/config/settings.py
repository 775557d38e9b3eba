# =============================================
# jobboard/config/settings.py
# =============================================
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import List, Optional
from functools import lru_cache

class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =============================================
    # APP CONFIGURATION
    # =============================================
    APP_NAME: str = Field(default="Job Board API", description="Application name")
    VERSION: str = Field(default="1.0.0", description="Application version")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # =============================================
    # DATABASE CONFIGURATION
    # =============================================
    DATABASE_URL: str = Field(..., description="Async database URL")

    @field_validator('DATABASE_URL')
    @classmethod
    def validate_database_url(cls, v):
        if not v.startswith(('postgresql+asyncpg://', 'sqlite+aiosqlite://')):
            raise ValueError('DATABASE_URL must be a postgresql+asyncpg or sqlite+aiosqlite URL')
        return v

    # =============================================
    # IDENTITY PROVIDER / SESSION CONFIGURATION
    # =============================================
    SECRET_KEY: str = Field(..., description="Key shared with the identity provider to verify session tokens")
    ALGORITHM: str = Field(default="HS256", description="Session token signing algorithm")
    TOKEN_ISSUER: Optional[str] = Field(default=None, description="Expected 'iss' claim, if any")
    TOKEN_AUDIENCE: Optional[str] = Field(default=None, description="Expected 'aud' claim, if any")
    SESSION_COOKIE_NAME: str = Field(default="session", description="Cookie carrying the session token")
    SESSION_EXPIRE_MINUTES: int = Field(default=60 * 24 * 7, description="Lifetime of locally minted session tokens")

    @field_validator('SECRET_KEY')
    @classmethod
    def validate_secret_key(cls, v):
        if len(v) < 32:
            raise ValueError('SECRET_KEY must be at least 32 characters long')
        return v

    # =============================================
    # CORS CONFIGURATION
    # =============================================
    ALLOWED_HOSTS: List[str] = Field(
        default=["http://localhost:5000", "http://localhost:8000"],
        description="Allowed hosts for CORS"
    )

    # =============================================
    # LOGGING CONFIGURATION
    # =============================================
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format"
    )

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'LOG_LEVEL must be one of: {valid_levels}')
        return v.upper()

    # =============================================
    # ENVIRONMENT CONFIGURATION
    # =============================================
    ENVIRONMENT: str = Field(default="development", description="Environment name")

    @field_validator('ENVIRONMENT')
    @classmethod
    def validate_environment(cls, v):
        valid_envs = ['development', 'testing', 'staging', 'production']
        if v not in valid_envs:
            raise ValueError(f'ENVIRONMENT must be one of: {valid_envs}')
        return v

    # =============================================
    # COMPUTED PROPERTIES
    # =============================================

    @property
    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def get_token_options(self) -> dict:
        """Claims verification options passed to the JWT decoder"""
        return {
            "verify_aud": self.TOKEN_AUDIENCE is not None,
            "verify_iss": self.TOKEN_ISSUER is not None,
            "require_sub": True,
            "require_exp": True,
        }

# =============================================
# SETTINGS INSTANCE
# =============================================
@lru_cache()
def get_settings() -> Settings:
    """Get settings instance (cached)"""
    return Settings()

# =============================================
# ENVIRONMENT VALIDATION
# =============================================
def validate_environment():
    """Validate environment configuration"""
    current_settings = get_settings()

    errors = []

    if current_settings.is_production:
        if current_settings.DEBUG:
            errors.append("DEBUG must be False in production")

        if any("localhost" in host for host in current_settings.ALLOWED_HOSTS):
            errors.append("ALLOWED_HOSTS should not include localhost in production")

        if current_settings.is_sqlite:
            errors.append("SQLite is not supported in production")

    if errors:
        raise ValueError("Environment validation failed:\n" + "\n".join(f"- {error}" for error in errors))

    return True
