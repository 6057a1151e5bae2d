import os
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from .base import DBBaseSettings
from .client import ClientSettings
from .secrets import SecretsManagerSettings


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def is_test_mode() -> bool:
    """Check if the application is running in test mode.
    
    In test mode the static secret provider is used instead of the
    simulated secrets manager, so no latency or faults are injected.
    
    Test mode is controlled by the DBCLIENTS_TEST_MODE environment variable.
    
    Returns:
        bool: True if DBCLIENTS_TEST_MODE="true" (case-insensitive), False otherwise
    """
    return os.getenv("DBCLIENTS_TEST_MODE", "").lower() == "true"


class _Settings(DBBaseSettings):
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )
    
    log_level: str = Field(
        default="INFO",
        description="Base log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    secrets: SecretsManagerSettings = Field(
        default_factory=SecretsManagerSettings,
        description="Secrets manager configuration"
    )
    client: ClientSettings = Field(
        default_factory=ClientSettings,
        description="Client handle configuration"
    )
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Expected one of: {', '.join(sorted(_LOG_LEVELS))}"
            )
        return level


# Singleton instance
_settings: Optional[_Settings] = None


def get_settings(force_reload: bool = False) -> _Settings:
    """Get the singleton settings instance for the application.
    
    Settings are loaded from environment variables (and ``.env``) on
    first access and reused afterwards.
    
    Args:
        force_reload: If True, creates a new Settings instance even if
                     one already exists. Useful for testing or when
                     environment variables have changed.
        
    Returns:
        Settings: The singleton Settings instance
        
    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()
        
        new_settings = get_settings(force_reload=True)
        assert new_settings is not settings
        ```
    """
    global _settings
    
    if _settings is None or force_reload:
        _settings = _Settings()
    
    return _settings

