"""HTTP registration provider backed by httpx."""

from typing import Any

import httpx

from ..core.config import settings
from ..core.constants import ErrorMessages
from ..core.exceptions import RegistrationError
from ..core.logging import get_logger, get_session_id
from ..schemas.registration import RegistrationResult
from ..utils.converters import canonical_json_dumps, safe_json_loads
from .base import RegistrationProvider

logger = get_logger(__name__)


class HttpRegistrationProvider(RegistrationProvider):
    """Posts the payload as JSON to ``{API_BASE_URL}{REGISTRATION_PATH}``."""

    def __init__(
        self,
        base_url: str | None = None,
        path: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None
    ):
        """Initialize the HTTP provider.

        Args:
            base_url: API base URL (defaults to settings.API_BASE_URL)
            path: Registration path (defaults to settings.REGISTRATION_PATH)
            timeout: Request timeout in seconds (defaults to settings.REQUEST_TIMEOUT_SECONDS)
            transport: Optional httpx transport (used by tests)
        """
        super().__init__("HTTP")
        self.base_url = (base_url or settings.API_BASE_URL).rstrip('/')
        self.path = path or settings.REGISTRATION_PATH
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT_SECONDS
        self.transport = transport

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"

    async def submit(self, payload: dict[str, Any]) -> RegistrationResult:
        """POST the payload once and parse the response.

        Raises:
            RegistrationError: On transport failure, non-2xx status, or a
                success body without ``business_id``
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(
                    self.url,
                    content=canonical_json_dumps(payload),
                    headers={
                        'Content-Type': 'application/json',
                        'X-Session-ID': get_session_id()
                    }
                )
            except httpx.HTTPError as e:
                logger.error(
                    "Registration request failed",
                    extra={'url': self.url, 'error': str(e), 'error_type': type(e).__name__}
                )
                raise RegistrationError(ErrorMessages.REGISTRATION_FAILED.format(detail=str(e))) from e

        body = safe_json_loads(response.text)

        if not response.is_success:
            detail = body.get("detail") if isinstance(body, dict) else None
            detail = detail or f"HTTP {response.status_code}"
            logger.warning(
                "Registration rejected",
                extra={'url': self.url, 'status_code': response.status_code, 'detail': str(detail)}
            )
            raise RegistrationError(
                ErrorMessages.REGISTRATION_FAILED.format(detail=detail),
                status_code=response.status_code
            )

        if not isinstance(body, dict) or body.get("business_id") is None:
            raise RegistrationError(
                ErrorMessages.REGISTRATION_FAILED.format(detail="response has no business_id"),
                status_code=response.status_code
            )

        result = RegistrationResult.from_response(body)
        logger.info(
            "Business registered",
            extra={'business_id': result.business_id, 'status_code': response.status_code}
        )
        return result
