"""Pydantic Schemas for Registration Responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class RegistrationResult(BaseModel):
    """Outcome of a successful business registration."""
    model_config = ConfigDict(frozen=True)

    business_id: str
    api_key: str | None = None
    mcp_endpoint: str | None = None
    a2a_endpoint: str | None = None

    @classmethod
    def from_response(cls, body: dict[str, Any]) -> "RegistrationResult":
        """Build a result from the registration API response body.

        The primary API key is nested under ``api_keys.primary``.
        """
        api_keys = body.get("api_keys") or {}
        return cls(
            business_id=str(body["business_id"]),
            api_key=api_keys.get("primary"),
            mcp_endpoint=body.get("mcp_endpoint"),
            a2a_endpoint=body.get("a2a_endpoint"),
        )
