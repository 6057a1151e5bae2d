"""Secrets manager configuration settings.

This module contains only the configuration of the secrets manager used
at startup. The provider implementations live in the secret_vault
package.
"""

from typing import Dict, Optional
from pydantic import Field, model_validator
from pydantic_settings import SettingsConfigDict

from dbclients.constants.secrets import (
    DEFAULT_FAILURE_WINDOW_HIGH,
    DEFAULT_FAILURE_WINDOW_LOW,
    DEFAULT_FETCH_DELAY_SECONDS,
    DEFAULT_SETUP_DELAY_SECONDS,
    SecretProviderType,
)
from .base import DBBaseSettings


class SecretsManagerSettings(DBBaseSettings):
    """Configuration for the secrets manager resolved at startup.
    
    The delays and the failure window drive the fault injector of the
    simulated provider. ``timeout_seconds`` bounds provider setup and
    every secret fetch when set.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="SECRETS_",
        case_sensitive=False
    )
    
    provider: SecretProviderType = Field(
        default=SecretProviderType.SIMULATED,
        description="Secret provider implementation: 'simulated' or 'static'"
    )
    setup_delay_seconds: float = Field(
        default=DEFAULT_SETUP_DELAY_SECONDS,
        ge=0.0,
        description="Simulated latency of secrets manager initialization"
    )
    fetch_delay_seconds: float = Field(
        default=DEFAULT_FETCH_DELAY_SECONDS,
        ge=0.0,
        description="Simulated latency of each secret retrieval"
    )
    failure_window_low: float = Field(
        default=DEFAULT_FAILURE_WINDOW_LOW,
        ge=0.0,
        le=1.0,
        description="Exclusive lower bound of the random draw that triggers a simulated fault"
    )
    failure_window_high: float = Field(
        default=DEFAULT_FAILURE_WINDOW_HIGH,
        ge=0.0,
        le=1.0,
        description="Exclusive upper bound of the random draw that triggers a simulated fault"
    )
    fault_injection_enabled: bool = Field(
        default=True,
        description="Whether simulated faults are injected at all"
    )
    timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0.0,
        description="Optional time budget for provider setup and each secret fetch"
    )
    static_values: Dict[str, str] = Field(
        default_factory=dict,
        description="Secret values served by the static provider (JSON object in the environment)"
    )
    
    @model_validator(mode="after")
    def validate_failure_window(self) -> "SecretsManagerSettings":
        """Ensure the failure window is a non-empty interval."""
        if self.failure_window_low >= self.failure_window_high:
            raise ValueError(
                f"failure_window_low ({self.failure_window_low}) must be lower than "
                f"failure_window_high ({self.failure_window_high})"
            )
        return self
    
    @property
    def is_static(self) -> bool:
        """Check if the static provider is selected."""
        return self.provider == SecretProviderType.STATIC
