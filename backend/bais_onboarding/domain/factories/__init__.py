from .configuration_factory import (
    create_default_configuration,
    create_empty_parameter,
    create_empty_service,
    create_workflow_step,
)

__all__ = [
    "create_default_configuration",
    "create_empty_parameter",
    "create_empty_service",
    "create_workflow_step",
]
