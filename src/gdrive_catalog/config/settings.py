"""Application settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..common.constants import (
    AUTH_URI,
    DEFAULT_USER_KEY,
    HTTP_TIMEOUT,
    MAX_FOLDER_DEPTH,
    PAGE_SIZE,
    TOKEN_URI,
)


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GDRIVE_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # OAuth client
    client_id: str = Field(
        default="",
        description="OAuth 2.0 client ID",
    )
    client_secret: SecretStr = Field(
        default=SecretStr(""),
        description="OAuth 2.0 client secret",
    )
    redirect_uri: str = Field(
        default="",
        description="Redirect URI registered for the OAuth client",
    )
    auth_uri: str = Field(
        default=AUTH_URI,
        description="Authorization endpoint",
    )
    token_uri: str = Field(
        default=TOKEN_URI,
        description="Token endpoint",
    )
    user_key: str = Field(
        default=DEFAULT_USER_KEY,
        description="Correlation label bound to the Drive credentials",
    )

    # API settings
    page_size: int = Field(
        default=PAGE_SIZE,
        ge=1,
        le=1000,
        description="Number of files fetched by a catalog listing",
    )
    http_timeout: float = Field(
        default=HTTP_TIMEOUT,
        gt=0,
        description="Timeout in seconds for token endpoint requests",
    )
    max_folder_depth: int = Field(
        default=MAX_FOLDER_DEPTH,
        ge=1,
        description="Maximum folder levels climbed when resolving a path",
    )

    # Downloads
    download_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory where downloaded files are written",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file path",
    )

    @property
    def has_oauth_client(self) -> bool:
        """Whether client id, secret and redirect URI are all configured."""
        return bool(
            self.client_id
            and self.client_secret.get_secret_value()
            and self.redirect_uri
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset global settings instance."""
    global _settings
    _settings = None
