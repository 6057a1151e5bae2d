"""Fault injection hooks for the simulated secrets manager.

The simulated provider models a slow, occasionally failing external
service. Latency and failures are produced by a ``FaultInjector`` whose
clock and random source are injectable, so tests can force either branch
deterministically instead of relying on a probability draw.
"""

import asyncio
import random
from typing import Callable, Optional, TYPE_CHECKING

from dbclients.common.exceptions import ClientInitError, SimulatedFaultError
from dbclients.constants.secrets import DEFAULT_FAILURE_WINDOW_HIGH, DEFAULT_FAILURE_WINDOW_LOW
from dbclients.logging import get_logger
from dbclients.protocols.providers import RandomSource, Sleep

if TYPE_CHECKING:
    from dbclients.settings.secrets import SecretsManagerSettings

logger = get_logger(__name__)


class FaultInjector:
    """Source of simulated latency and transient failures.
    
    A draw from the random source fails when it lies strictly inside
    ``(window_low, window_high)``. With the default window this is a
    10% failure rate that excludes the lowest 1% of draws.
    
    Attributes:
        window_low: Exclusive lower bound of the failing draws
        window_high: Exclusive upper bound of the failing draws
        enabled: Whether failures are injected at all
    """
    
    def __init__(
        self,
        sleep: Optional[Sleep] = None,
        random_source: Optional[RandomSource] = None,
        window_low: float = DEFAULT_FAILURE_WINDOW_LOW,
        window_high: float = DEFAULT_FAILURE_WINDOW_HIGH,
        enabled: bool = True,
    ):
        """Initialize the fault injector.
        
        Args:
            sleep: Async delay function, defaults to ``asyncio.sleep``
            random_source: Uniform [0, 1) source, defaults to ``random.random``
            window_low: Exclusive lower bound of the failure window
            window_high: Exclusive upper bound of the failure window
            enabled: If False, ``maybe_fail`` never raises
        """
        if window_low >= window_high:
            raise ValueError(
                f"window_low ({window_low}) must be lower than window_high ({window_high})"
            )
        self._sleep = sleep or asyncio.sleep
        self._random = random_source or random.random
        self.window_low = window_low
        self.window_high = window_high
        self.enabled = enabled
    
    @classmethod
    def from_settings(
        cls,
        settings: 'SecretsManagerSettings',
        sleep: Optional[Sleep] = None,
        random_source: Optional[RandomSource] = None,
    ) -> "FaultInjector":
        """Build an injector from secrets manager settings."""
        return cls(
            sleep=sleep,
            random_source=random_source,
            window_low=settings.failure_window_low,
            window_high=settings.failure_window_high,
            enabled=settings.fault_injection_enabled,
        )
    
    async def wait(self, seconds: float) -> None:
        """Simulate latency of an external call."""
        if seconds > 0:
            await self._sleep(seconds)
    
    def should_fail(self) -> bool:
        """Draw once and report whether the draw lands in the failure window."""
        if not self.enabled:
            return False
        draw = self._random()
        return self.window_low < draw < self.window_high
    
    def maybe_fail(
        self,
        descriptor: str,
        error_factory: Callable[[str], ClientInitError] = SimulatedFaultError,
    ) -> None:
        """Raise a simulated fault carrying ``descriptor`` when the draw fails.
        
        Args:
            descriptor: Message of the raised fault
            error_factory: Builds the exception from the message
            
        Raises:
            ClientInitError: Built by ``error_factory`` when the draw fails
        """
        if self.should_fail():
            logger.debug(f"Injecting simulated fault: {descriptor}")
            raise error_factory(descriptor)


def no_faults() -> FaultInjector:
    """Injector that never sleeps and never fails."""

    async def _no_sleep(seconds: float) -> None:
        return None

    return FaultInjector(sleep=_no_sleep, enabled=False)
