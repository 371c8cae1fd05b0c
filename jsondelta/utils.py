"""Utility functions for jsondelta."""

from __future__ import annotations

import json
from typing import Any, Optional

from .exceptions import InvalidJsonInput


def pretty_print(value: Any, indent: int = 2) -> str:
    """Stable pretty serialization compared line by line.

    Keys keep their current order, non-ASCII text is written as-is and
    there is no trailing newline.
    """
    return json.dumps(value, indent=indent, ensure_ascii=False)


def _try_parse(text: Optional[str]) -> tuple[Any, Optional[str]]:
    if text is None or not text.strip():
        return None, "Empty document"
    try:
        return json.loads(text), None
    except json.JSONDecodeError as e:
        return None, f"{e.msg} at line {e.lineno} column {e.colno}"


def parse_json_pair(left_text: str, right_text: str) -> tuple[Any, Any]:
    """
    Parse both documents, reporting each side's validity independently.

    Raises:
        InvalidJsonInput: if either side is empty or malformed
    """
    left, left_error = _try_parse(left_text)
    right, right_error = _try_parse(right_text)
    if left_error or right_error:
        raise InvalidJsonInput(left_error=left_error, right_error=right_error)
    return left, right


def get_type_name(value: Any) -> str:
    """Get a friendly type name for a value."""
    if value is None:
        return "null"
    elif isinstance(value, bool):
        return "boolean"
    elif isinstance(value, (int, float)):
        return "number"
    elif isinstance(value, str):
        return "string"
    elif isinstance(value, list):
        return "array"
    elif isinstance(value, dict):
        return "object"
    return type(value).__name__
