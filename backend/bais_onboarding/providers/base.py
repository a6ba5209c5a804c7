"""Base Registration Provider Interface.

This module defines the abstract interface for submitting a wire payload to
the BAIS registration API. Keeping transport behind this interface lets the
registration service run against a real HTTP endpoint or a test double
without changing its flow.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..schemas.registration import RegistrationResult


class RegistrationProvider(ABC):
    """Abstract base class for registration providers."""

    def __init__(self, provider_name: str):
        """Initialize the registration provider.

        Args:
            provider_name: Name of the provider (e.g., "HTTP")
        """
        self.provider_name = provider_name

    @abstractmethod
    async def submit(self, payload: dict[str, Any]) -> RegistrationResult:
        """Submit a registration payload.

        Implementations make a single attempt; retrying is the caller's
        decision.

        Args:
            payload: Wire payload produced by to_wire_format

        Returns:
            RegistrationResult parsed from the API response

        Raises:
            RegistrationError: If the API rejects the request or cannot be reached
        """
        pass

    def get_provider_name(self) -> str:
        """Get the provider name."""
        return self.provider_name
