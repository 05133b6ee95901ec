"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="TaskFlow", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=True, alias="DEBUG")

    # API Service
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=3300, alias="API_PORT")
    api_reload: bool = Field(default=True, alias="API_RELOAD")
    api_workers: int = Field(default=1, alias="API_WORKERS")
    api_prefix: str = Field(default="/api/v1", alias="API_PREFIX")

    # Uncaught exception messages are only sent to clients when enabled
    expose_error_details: bool = Field(default=False, alias="EXPOSE_ERROR_DETAILS")

    # MongoDB Settings (document store)
    mongodb_url: str = Field(default="mongodb://localhost:27017", alias="MONGODB_URL")
    mongodb_database: str = Field(default="taskflow", alias="MONGODB_DATABASE")
    mongodb_root_user: Optional[str] = Field(default=None, alias="MONGODB_ROOT_USER")
    mongodb_root_password: Optional[str] = Field(
        default=None, alias="MONGODB_ROOT_PASSWORD"
    )
    mongodb_max_pool_size: int = Field(default=10, alias="MONGODB_MAX_POOL_SIZE")
    mongodb_min_pool_size: int = Field(default=1, alias="MONGODB_MIN_POOL_SIZE")
    mongodb_operation_timeout: float = Field(
        default=10.0, alias="MONGODB_OPERATION_TIMEOUT"
    )  # seconds, applied to every collection call

    # Identity provider (Firebase Identity Toolkit REST API)
    firebase_api_key: str = Field(default="", alias="FIREBASE_API_KEY")
    identity_base_url: str = Field(
        default="https://identitytoolkit.googleapis.com/v1",
        alias="IDENTITY_BASE_URL",
    )
    identity_timeout: float = Field(default=10.0, alias="IDENTITY_TIMEOUT")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: str = Field(default="logs", alias="LOG_DIR")
    log_to_file: bool = Field(default=False, alias="LOG_TO_FILE")

    @property
    def mongodb_connection_url(self) -> str:
        """Construct MongoDB connection URL with authentication if credentials provided."""
        # If MONGODB_URL already contains credentials (@), use it as-is
        if "@" in self.mongodb_url:
            return self.mongodb_url

        if self.mongodb_root_user and self.mongodb_root_password:
            url_without_protocol = self.mongodb_url.replace("mongodb://", "")
            host_port = url_without_protocol.split("/")[0]

            auth_url = f"mongodb://{self.mongodb_root_user}:{self.mongodb_root_password}@{host_port}"

            # Root users are created in the admin database
            if self.mongodb_database:
                auth_url += f"/{self.mongodb_database}?authSource=admin"

            return auth_url

        return self.mongodb_url


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
