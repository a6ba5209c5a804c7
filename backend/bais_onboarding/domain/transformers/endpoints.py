"""Preview of auto-generated integration endpoints.

When an integration is left on auto-generate, the registration API hosts the
endpoint under the business slug. The preview shows the owner those URLs
before submission.
"""

from ...core.config import settings
from ...core.constants import IntegrationEndpoints
from ...schemas.configuration import BusinessConfiguration, IntegrationConfig
from ...utils.strings import slugify_business_name


def preview_integration_endpoints(
    config: BusinessConfiguration,
    base_url: str | None = None
) -> dict[str, str]:
    """Build the endpoints the registration API will generate.

    Only integrations with ``auto_generate`` on are included; manual endpoints
    are sent as entered and need no preview.

    Args:
        config: Configuration being onboarded
        base_url: API base URL (defaults to settings.API_BASE_URL)

    Returns:
        Dict keyed like the wire integration block (mcp_endpoint,
        a2a_discovery_url, webhook_endpoint)

    Examples:
        >>> preview_integration_endpoints(config, "https://api.bais.io")
        {'mcp_endpoint': 'https://api.bais.io/businesses/zion-adventure-lodge/mcp', ...}
    """
    root = (base_url or settings.API_BASE_URL).rstrip('/')
    slug = slugify_business_name(config.business_info.name)
    business_url = f"{root}{IntegrationEndpoints.BUSINESS_PATH_PREFIX}/{slug}"

    integration = config.integration or IntegrationConfig()
    preview: dict[str, str] = {}

    if integration.mcp is None or integration.mcp.auto_generate:
        preview["mcp_endpoint"] = f"{business_url}{IntegrationEndpoints.MCP_SUFFIX}"

    if integration.a2a is None or integration.a2a.auto_generate:
        preview["a2a_discovery_url"] = f"{business_url}{IntegrationEndpoints.A2A_DISCOVERY_PATH}"

    if integration.webhooks is None or integration.webhooks.auto_generate:
        preview["webhook_endpoint"] = f"{business_url}{IntegrationEndpoints.WEBHOOK_PATH}"

    return preview
