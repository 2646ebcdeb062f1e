"""
Uniform text rendering for tool results.
"""

import json
from typing import Any


def as_text(data: Any) -> str:
    """Strings pass through verbatim; everything else becomes indented JSON."""
    if isinstance(data, str):
        return data
    return json.dumps(data, indent=2, ensure_ascii=False)


def filter_by_active(data: Any, active: bool) -> Any:
    """
    Keep workflows whose `active` flag equals `active`.

    A missing flag counts as inactive. Non-list payloads are returned as-is.
    """
    if not isinstance(data, list):
        return data
    return [w for w in data if bool(isinstance(w, dict) and w.get("active")) == active]
