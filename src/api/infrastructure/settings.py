"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        FIRMDESK_DB_HOST: Database host (default: localhost)
        FIRMDESK_DB_PORT: Database port (default: 5432)
        FIRMDESK_DB_DATABASE: Database name (default: firmdesk)
        FIRMDESK_DB_USERNAME: Database user (default: firmdesk)
        FIRMDESK_DB_PASSWORD: Database password (required in production)
        FIRMDESK_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        FIRMDESK_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
        FIRMDESK_DB_ECHO: Log SQL statements (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="FIRMDESK_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="firmdesk", description="Database name")
    username: str = Field(default="firmdesk", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )
    echo: bool = Field(default=False, description="Log SQL statements")

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


DEFAULT_SECRET_KEY = "change-me"


class AuthSettings(BaseSettings):
    """Bearer token settings.

    Tokens are issued by the identity provider and signed with a shared
    secret; the API only verifies them. Production refuses to start with
    the development secret, since anyone could sign tokens with it.

    Environment variables:
        FIRMDESK_AUTH_SECRET_KEY: Token signing secret
        FIRMDESK_AUTH_ALGORITHM: Signing algorithm (default: HS256)
        FIRMDESK_AUTH_USER_ID_CLAIM: Claim carrying the user id (default: id)
        FIRMDESK_ENVIRONMENT: Shared with Settings; selects the secret check
    """

    model_config = SettingsConfigDict(
        env_prefix="FIRMDESK_AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    secret_key: SecretStr = Field(
        default=SecretStr(DEFAULT_SECRET_KEY),
        description="Token signing secret",
    )
    algorithm: str = Field(default="HS256", description="Token signing algorithm")
    user_id_claim: str = Field(
        default="id",
        description="JWT claim holding the user id (falls back to 'sub')",
    )
    environment: str = Field(
        default="development",
        validation_alias="FIRMDESK_ENVIRONMENT",
        description="Deployment environment",
    )

    @model_validator(mode="after")
    def validate_secret_key(self) -> "AuthSettings":
        """Reject the development secret in production."""
        if (
            self.environment.strip().lower() == "production"
            and self.secret_key.get_secret_value() in ("", DEFAULT_SECRET_KEY)
        ):
            raise ValueError(
                "FIRMDESK_AUTH_SECRET_KEY must be set to a non-default value "
                "in production"
            )
        return self


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections.

    Environment variables:
        FIRMDESK_APP_NAME: Application name
        FIRMDESK_ENVIRONMENT: Deployment environment (default: development)
        FIRMDESK_ENFORCE_AUTHORIZATION: Force authorization enforcement on
            or off regardless of environment (default: unset)
        FIRMDESK_LOG_LEVEL: Minimum log level (default: info)
    """

    model_config = SettingsConfigDict(
        env_prefix="FIRMDESK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Firmdesk API", description="Application name")
    environment: str = Field(
        default="development",
        description="Deployment environment; 'production' enforces authorization",
    )
    enforce_authorization: bool | None = Field(
        default=None,
        description="Override for authorization enforcement",
    )
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="info", description="Minimum log level")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def auth(self) -> AuthSettings:
        """Get auth settings."""
        return get_auth_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_auth_settings() -> AuthSettings:
    """Get cached auth settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return AuthSettings()
