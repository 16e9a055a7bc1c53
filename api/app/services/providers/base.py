"""
Base Provider - Shared plumbing for third-party HTTP APIs
"""
from typing import Optional
from enum import Enum
import logging

import httpx

logger = logging.getLogger(__name__)


class ProviderStatus(Enum):
    """Provider health status"""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNAVAILABLE = "unavailable"


class ExternalProvider:
    """
    Base class for outbound API clients (Amadeus, Supabase Auth).

    A custom httpx transport can be injected, which is how tests stand in
    for the remote service.
    """

    # Provider identification
    name: str = "base"

    # Current state
    _status: ProviderStatus = ProviderStatus.HEALTHY
    _consecutive_failures: int = 0
    _max_failures_before_degraded: int = 3
    _max_failures_before_unavailable: int = 10

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._transport = transport

    @property
    def status(self) -> ProviderStatus:
        """Get current provider status"""
        return self._status

    @property
    def is_configured(self) -> bool:
        """Check if provider has required configuration (API keys, etc.)"""
        return True  # Override in subclasses

    def client(self, timeout: Optional[float] = None) -> httpx.AsyncClient:
        """New HTTP client bound to the injected transport, if any"""
        if timeout is None:
            return httpx.AsyncClient(transport=self._transport)
        return httpx.AsyncClient(transport=self._transport, timeout=timeout)

    def record_success(self):
        """Record a successful request"""
        self._consecutive_failures = 0
        self._status = ProviderStatus.HEALTHY

    def record_failure(self, error: Exception):
        """Record a failed request"""
        self._consecutive_failures += 1
        logger.warning(f"{self.name} provider failure #{self._consecutive_failures}: {error}")

        if self._consecutive_failures >= self._max_failures_before_unavailable:
            self._status = ProviderStatus.UNAVAILABLE
            logger.error(f"{self.name} provider marked as UNAVAILABLE after {self._consecutive_failures} failures")
        elif self._consecutive_failures >= self._max_failures_before_degraded:
            self._status = ProviderStatus.DEGRADED
            logger.warning(f"{self.name} provider marked as DEGRADED after {self._consecutive_failures} failures")


class ProviderError(Exception):
    """Exception raised when a provider fails"""
    def __init__(self, provider_name: str, message: str, original_error: Optional[Exception] = None,
                 status_code: Optional[int] = None):
        self.provider_name = provider_name
        self.message = message
        self.original_error = original_error
        self.status_code = status_code
        super().__init__(f"{provider_name}: {message}")
