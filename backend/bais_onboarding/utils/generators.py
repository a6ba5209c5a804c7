"""ID generation utilities."""

import uuid


def generate_session_id(prefix: str | None = None) -> str:
    """Generate a unique onboarding session ID.

    Args:
        prefix: Optional prefix for the session ID (e.g., "FORM", "IMPORT")

    Returns:
        Session ID string (UUID)

    Examples:
        >>> generate_session_id()
        "a1b2c3d4-e5f6-7890-abcd-ef1234567890"
        >>> generate_session_id("FORM")
        "FORM-a1b2c3d4-e5f6-7890-abcd-ef1234567890"
    """
    session_id = str(uuid.uuid4())
    if prefix:
        return f"{prefix}-{session_id}"
    return session_id
