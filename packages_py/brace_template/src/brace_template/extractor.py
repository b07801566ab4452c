from typing import Any, Dict, List

from .compiler import find_placeholder_spans


def extract_placeholders(template: str) -> List[Dict[str, Any]]:
    """Extract all top-level placeholders from a template string."""
    placeholders = []

    for start, end in find_placeholder_spans(template):
        interior = template[start + 1:end - 1]
        placeholders.append({
            "raw": template[start:end],
            "expression": interior,
            "start": start,
            "end": end,
            "nested": bool(find_placeholder_spans(interior)),
        })

    return placeholders
