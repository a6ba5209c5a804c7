"""Custom Exceptions for Onboarding Errors.

Validation failures are never raised: they are returned as a list of messages
by the validation engine. The exceptions below signal the remaining cases:

Programming errors (contract violations by the caller):
- Transforming a configuration that is structurally incomplete
- Loading a wire payload that lacks a required section

Submission errors:
- Submitting a configuration that does not pass validation
- Transport or HTTP failures from the registration API
"""


class OnboardingError(Exception):
    """Base exception for all onboarding errors."""
    pass


class TransformationError(OnboardingError):
    """Input to a transform violates its contract.

    Raised when a required nested object is missing. This is a caller bug,
    not a recoverable runtime condition.
    """
    pass


class ConfigurationInvalidError(OnboardingError):
    """Configuration failed validation and cannot be submitted."""

    def __init__(self, message: str, errors: list[str] | tuple[str, ...]):
        super().__init__(message)
        self.errors = list(errors)


class RegistrationError(OnboardingError):
    """Registration API rejected the request or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
