from ..core.constants import ErrorMessages
from ..core.exceptions import ConfigurationInvalidError
from ..core.logging import get_logger
from ..domain.transformers import to_wire_format
from ..domain.validators import validate_configuration
from ..providers import HttpRegistrationProvider, RegistrationProvider
from ..schemas.configuration import BusinessConfiguration
from ..schemas.registration import RegistrationResult

logger = get_logger(__name__)


class RegistrationService:
    """Validates, transforms and submits a business configuration."""

    def __init__(self, provider: RegistrationProvider | None = None):
        self.provider = provider or HttpRegistrationProvider()

    async def register(self, config: BusinessConfiguration) -> RegistrationResult:
        """Register a business with the BAIS platform.

        The flow stops at the first failing stage:

        1. Validation: every rule is checked; any violation aborts before I/O
        2. Transformation: the configuration becomes the wire payload
        3. Submission: one attempt through the provider, no retries

        Args:
            config: Configuration to register

        Returns:
            RegistrationResult from the provider

        Raises:
            ConfigurationInvalidError: If validation reports errors (carries them)
            RegistrationError: If the provider fails
        """
        result = validate_configuration(config)

        if not result.is_valid:
            logger.info(
                "Registration blocked by validation errors",
                extra={'error_count': len(result.errors)}
            )
            raise ConfigurationInvalidError(
                ErrorMessages.CONFIGURATION_INVALID.format(count=len(result.errors)),
                result.errors
            )

        payload = to_wire_format(config)

        logger.info(
            "Submitting registration",
            extra={
                'provider': self.provider.get_provider_name(),
                'service_count': len(payload["services_config"])
            }
        )

        return await self.provider.submit(payload)
