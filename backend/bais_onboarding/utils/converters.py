"""Type conversion utilities."""

import json
from typing import Any


def canonical_json_dumps(obj: Any) -> str:
    """Serialize a wire payload to a canonical JSON string.

    Keys keep their insertion order (parameter order is significant), and no
    whitespace variation is introduced, so equal payloads produce
    byte-identical output.

    Args:
        obj: JSON-serializable object

    Returns:
        JSON string
    """
    return json.dumps(obj, ensure_ascii=False, separators=(',', ':'))


def safe_json_loads(json_string: str, default: Any = None) -> Any:
    """Safely parse JSON string, returning default on error.

    Args:
        json_string: JSON string to parse
        default: Default value to return on error

    Returns:
        Parsed JSON object or default value
    """
    try:
        return json.loads(json_string)
    except (json.JSONDecodeError, TypeError):
        return default
