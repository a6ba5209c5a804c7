"""
Pytest Configuration and Shared Fixtures

This module contains shared test fixtures and configuration for all test modules.
"""

import os

import pytest

os.environ["ENVIRONMENT"] = "test"

from bais_onboarding.schemas.configuration import (  # noqa: E402
    AP2Config,
    Availability,
    BusinessConfiguration,
    BusinessInfo,
    CancellationPolicy,
    ContactInfo,
    IntegrationConfig,
    Location,
    Parameter,
    PaymentConfig,
    ServiceConfiguration,
    ServicePolicies,
    Workflow,
)


def build_service(service_id: str = "room_booking", **overrides) -> ServiceConfiguration:
    """Build a service that passes validation on its own."""
    fields = {
        "service_id": service_id,
        "name": "Room Booking",
        "description": "Book a room at the lodge",
        "category": "accommodation",
        "workflow": Workflow(),
        "parameters": [
            Parameter(
                name="check_in_date",
                type="string",
                description="Check-in date",
                required=True,
            )
        ],
        "availability": Availability(),
        "cancellation_policy": CancellationPolicy(type="flexible", description="No charges"),
        "payment": PaymentConfig(methods=["credit_card"]),
        "policies": ServicePolicies(),
    }
    fields.update(overrides)
    return ServiceConfiguration(**fields)


def build_configuration(**overrides) -> BusinessConfiguration:
    """Build a configuration that passes validation."""
    fields = {
        "business_info": BusinessInfo(
            name="Zion Adventure Lodge",
            type="hospitality",
            description="Lodge at the entrance of Zion National Park",
            website="https://zionlodge.com",
        ),
        "location": Location(
            address="1 Canyon Road",
            city="Springdale",
            state="UT",
            postal_code="84767",
            country="US",
            timezone="America/Denver",
        ),
        "contact": ContactInfo(email="info@zionlodge.com", phone="+1-435-555-0100"),
        "services": [build_service()],
        "integration": IntegrationConfig(),
        "ap2": AP2Config(),
    }
    fields.update(overrides)
    return BusinessConfiguration(**fields)


@pytest.fixture
def valid_config() -> BusinessConfiguration:
    """Configuration with one room_booking service and all required fields."""
    return build_configuration()


@pytest.fixture
def make_service():
    """Factory fixture: build_service(service_id, **overrides)."""
    return build_service


@pytest.fixture
def make_config():
    """Factory fixture: build_configuration(**overrides)."""
    return build_configuration
