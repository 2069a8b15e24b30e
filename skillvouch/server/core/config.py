"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.

The database variables accept both the ``DB_*`` and the ``MYSQL_*`` spellings;
when both are set the ``DB_*`` value wins.
"""

from typing import Optional
from urllib.parse import quote_plus

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class MySQLConfig(BaseModel):
    """MySQL database configuration."""

    host: str = Field(default="localhost", description="MySQL database host address")
    port: int = Field(default=3306, description="MySQL database port number")
    user: str = Field(default="skillvouch", description="MySQL database user")
    password: str = Field(default="", description="MySQL database password")
    database: str = Field(default="skillvouch", description="MySQL database name")
    pool_size: int = Field(default=10, ge=1, description="Connection pool size")
    pool_timeout: float = Field(default=60.0, gt=0, description="Seconds to wait for a pooled connection")

    @property
    def url(self) -> str:
        """Build an async SQLAlchemy URL for this MySQL configuration."""
        credentials = quote_plus(self.user)
        if self.password:
            credentials = f"{credentials}:{quote_plus(self.password)}"
        return f"mysql+aiomysql://{credentials}@{self.host}:{self.port}/{self.database}?charset=utf8mb4"


class DatabaseMonitorConfig(BaseModel):
    """Connection-health monitor configuration."""

    max_retries: int = Field(default=5, ge=1, description="Connection attempts per retry cycle")
    retry_delay: float = Field(default=5.0, ge=0, description="Base delay in seconds between attempts")
    backoff: float = Field(default=1.0, ge=1.0, description="Multiplier applied to the delay after each attempt")
    poll_interval: float = Field(default=30.0, gt=0, description="Seconds between periodic health polls")


class MistralConfig(BaseModel):
    """Mistral AI configuration."""

    api_key: Optional[str] = Field(default=None, description="Mistral API key for authentication")
    model: str = Field(default="mistral-small-latest", description="Mistral model used for generation")
    max_retries: int = Field(default=3, ge=1, description="Attempts per AI call before giving up")
    retry_delay: float = Field(default=1.0, ge=0, description="Linear backoff step in seconds between attempts")

    @property
    def model_name(self) -> str:
        """Model identifier without the optional ``mistral:`` provider prefix."""
        return self.model.removeprefix("mistral:")

    @property
    def configured(self) -> bool:
        return bool(self.api_key)


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(default=True, description="Allow credentials in CORS requests")
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE"], description="Allowed HTTP methods"
    )


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # SkillVouch Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="SkillVouch server host address to bind to",
        alias="SKILLVOUCH_SERVER_HOST",
    )
    server_port: int = Field(
        default=5000,
        description="SkillVouch server port number",
        alias="SKILLVOUCH_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="SkillVouch server logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="SKILLVOUCH_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format: simple, detailed or json",
        alias="LOG_FORMAT",
    )
    enable_file_logging: bool = Field(default=False, alias="ENABLE_FILE_LOGGING")
    log_file_dir: str = Field(default="logs", alias="LOG_FILE_DIR")
    environment: str = Field(
        default="development",
        description="Deployment environment name",
        alias="SKILLVOUCH_ENVIRONMENT",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: Optional[str] = Field(
        default=None,
        description="Full database URL; overrides the DB_* variables when set",
        alias="DATABASE_URL",
    )
    db_host: str = Field(default="localhost", validation_alias=AliasChoices("DB_HOST", "MYSQL_HOST"))
    db_port: int = Field(default=3306, validation_alias=AliasChoices("DB_PORT", "MYSQL_PORT"))
    db_user: str = Field(default="skillvouch", validation_alias=AliasChoices("DB_USER", "MYSQL_USER"))
    db_password: str = Field(default="", validation_alias=AliasChoices("DB_PASS", "MYSQL_PASSWORD"))
    db_name: str = Field(default="skillvouch", validation_alias=AliasChoices("DB_NAME", "MYSQL_DATABASE"))
    db_pool_size: int = Field(default=10, alias="DB_POOL_SIZE")
    db_pool_timeout: float = Field(default=60.0, alias="DB_POOL_TIMEOUT")

    # =====================================================================
    # Connection Monitor Configuration
    # =====================================================================
    db_max_retries: int = Field(default=5, alias="DB_MAX_RETRIES")
    db_retry_delay: float = Field(default=5.0, alias="DB_RETRY_DELAY")
    db_retry_backoff: float = Field(default=1.0, alias="DB_RETRY_BACKOFF")
    db_poll_interval: float = Field(default=30.0, alias="DB_POLL_INTERVAL")

    # =====================================================================
    # AI Configuration
    # =====================================================================
    mistral_api_key: Optional[str] = Field(default=None, alias="MISTRAL_API_KEY")
    mistral_model: str = Field(default="mistral-small-latest", alias="MISTRAL_MODEL")
    ai_max_retries: int = Field(default=3, alias="AI_MAX_RETRIES")
    ai_retry_delay: float = Field(default=1.0, alias="AI_RETRY_DELAY")

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    frontend_url: Optional[str] = Field(default=None, alias="FRONTEND_URL")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def mysql(self) -> MySQLConfig:
        """Get MySQL configuration from environment variables."""
        return MySQLConfig(
            host=self.db_host,
            port=self.db_port,
            user=self.db_user,
            password=self.db_password,
            database=self.db_name,
            pool_size=self.db_pool_size,
            pool_timeout=self.db_pool_timeout,
        )

    @property
    def sqlalchemy_url(self) -> str:
        """Get the database URL the engine should connect to."""
        return self.database_url or self.mysql.url

    @property
    def db_monitor(self) -> DatabaseMonitorConfig:
        """Get connection monitor configuration from environment variables."""
        return DatabaseMonitorConfig(
            max_retries=self.db_max_retries,
            retry_delay=self.db_retry_delay,
            backoff=self.db_retry_backoff,
            poll_interval=self.db_poll_interval,
        )

    @property
    def mistral(self) -> MistralConfig:
        """Get Mistral AI configuration from environment variables."""
        return MistralConfig(
            api_key=self.mistral_api_key,
            model=self.mistral_model,
            max_retries=self.ai_max_retries,
            retry_delay=self.ai_retry_delay,
        )

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        if self.frontend_url:
            return CORSConfig(origins=[self.frontend_url])
        return CORSConfig(allow_credentials=False)


settings = Settings()
