"""Registration Providers.

This module provides abstractions for submitting onboarding payloads. It
allows switching between the HTTP provider and test doubles without
changing the registration service.
"""

from .base import RegistrationProvider
from .http import HttpRegistrationProvider

__all__ = [
    "HttpRegistrationProvider",
    "RegistrationProvider",
]
