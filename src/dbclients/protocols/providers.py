"""Provider protocol definitions.

This module defines the protocols for the collaborators of the startup
chain. These protocols keep the resolution stages independent of any
concrete provider implementation.
"""

from typing import Awaitable, Callable, Protocol, runtime_checkable


Sleep = Callable[[float], Awaitable[None]]
RandomSource = Callable[[], float]


@runtime_checkable
class SecretProvider(Protocol):
    """Protocol defining the interface for secret providers.
    
    All secret providers must implement this interface to be usable by
    client resolution. The core treats a provider as a black box.
    
    The protocol is marked as runtime_checkable to allow isinstance()
    checks at runtime, which is useful for validation and testing.
    """
    
    async def get_secret(self, key: str) -> str:
        """Retrieve a secret value.
        
        Args:
            key: Name of the secret to retrieve
            
        Returns:
            The secret value
            
        Raises:
            ClientInitError: If the secret cannot be retrieved
        """
        ...
