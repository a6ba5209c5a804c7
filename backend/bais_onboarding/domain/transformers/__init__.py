"""Data transformers.

Responsible for converting between the editable configuration and the
registration payload:
- BusinessConfiguration → wire payload (to_wire_format)
- wire payload → BusinessConfiguration (from_wire_format)
- BusinessConfiguration → generated endpoint preview
"""

from .endpoints import preview_integration_endpoints
from .mapping import FieldMapping
from .wire_format import from_wire_format, to_wire_format

__all__ = [
    "FieldMapping",
    "from_wire_format",
    "preview_integration_endpoints",
    "to_wire_format",
]
