from typing import Any
import json

from .binding import classify, is_scalar
from .types import BindingKind

__all__ = ["coerce_to_string", "is_scalar"]


def coerce_to_string(value: Any) -> str:
    """Convert a resolved value to string for template replacement."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")

    kind = classify(value)
    if kind in (BindingKind.MAPPING, BindingKind.SEQUENCE):
        # Best effort for structured values
        try:
            return json.dumps(value, default=str)
        except (TypeError, ValueError):
            return str(value)
    return str(value)
