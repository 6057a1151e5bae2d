"""Static secret provider for testing and development.

This module provides the StaticSecrets class which implements the
SecretProvider protocol from an in-memory mapping, without latency or
injected faults.
"""

from typing import Dict, Optional

from dbclients.common.exceptions import ErrorCode, secret_retrieval_error
from dbclients.constants.secrets import (
    READ_ONLY_URL_SECRET,
    READ_WRITE_URL_SECRET,
    SECRET_VALUE_PREFIX,
    SecretProviderType,
)


class StaticSecrets:
    """Static secret provider for testing and development.
    
    Attributes:
        values: Dictionary mapping secret names to values
    """
    
    name = SecretProviderType.STATIC.value
    
    def __init__(self, values: Optional[Dict[str, str]] = None):
        """Initialize static secret provider.
        
        Args:
            values: Dictionary of secret_name -> value mappings.
                    If None or empty, default values are used.
        """
        self.values = dict(values) if values else self._get_defaults()
    
    def _get_defaults(self) -> Dict[str, str]:
        """Get the same placeholder values the simulated manager produces."""
        return {
            READ_WRITE_URL_SECRET: f"{SECRET_VALUE_PREFIX}{READ_WRITE_URL_SECRET}",
            READ_ONLY_URL_SECRET: f"{SECRET_VALUE_PREFIX}{READ_ONLY_URL_SECRET}",
        }
    
    async def get_secret(self, key: str) -> str:
        """Get a static secret value.
        
        Raises:
            SecretRetrievalError: If no value is configured for ``key``
        """
        if key not in self.values:
            raise secret_retrieval_error(
                key,
                f"Secret '{key}' not found",
                error_code=ErrorCode.SECRET_NOT_FOUND,
            )
        return self.values[key]
