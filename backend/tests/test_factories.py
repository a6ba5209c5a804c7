"""
Unit Tests for Default Configuration Factories
"""

from bais_onboarding.core.constants import DefaultValues, WebhookEvent
from bais_onboarding.domain.factories import (
    create_default_configuration,
    create_empty_parameter,
    create_empty_service,
    create_workflow_step,
)


class TestConfigurationFactories:
    """Test suite for new onboarding trees"""

    def test_default_configuration(self):
        """Test a new session starts with one empty service and default settings"""
        config = create_default_configuration()

        assert len(config.services) == 1
        assert config.location.country == "US"
        assert config.location.timezone == "UTC"
        assert config.integration.mcp.auto_generate is True
        assert config.integration.a2a.auto_generate is True
        assert config.integration.webhooks.events == WebhookEvent.DEFAULT
        assert config.ap2.enabled is True
        assert config.ap2.mandate_expiry_hours == 24

    def test_empty_service_defaults(self):
        """Test service blocks are seeded from schema defaults"""
        service = create_empty_service()

        assert service.parameters == []
        assert service.workflow.pattern == DefaultValues.WORKFLOW_PATTERN
        assert service.availability.cache_timeout_seconds == 300
        assert service.availability.advance_booking_days == 365
        assert service.cancellation_policy.type == "flexible"
        assert service.cancellation_policy.free_until_hours == 24
        assert service.payment.methods == ["credit_card"]
        assert service.payment.timing == "at_booking"
        assert service.policies.no_show_penalty == 0

    def test_trees_are_independent(self):
        """Test mutating one tree does not affect the next"""
        first = create_default_configuration()
        first.services[0].payment.methods.append("cash")
        first.integration.webhooks.events.clear()

        second = create_default_configuration()

        assert second.services[0].payment.methods == ["credit_card"]
        assert second.integration.webhooks.events == WebhookEvent.DEFAULT
        assert DefaultValues.PAYMENT_METHODS == ["credit_card"]

    def test_parameter_and_step(self):
        """Test parameter and workflow step defaults"""
        parameter = create_empty_parameter("guests")
        step = create_workflow_step("Confirm booking")

        assert parameter.name == "guests"
        assert parameter.type == "string"
        assert parameter.required is False
        assert step.required is True
        assert step.timeout_minutes == 30
        assert step.retry_attempts == 3
