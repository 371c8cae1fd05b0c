"""Order normalization ("ignore key order") for jsondelta.

Rebuilds a JSON value so that documents which differ only in object key
order or array element order serialize identically:

- object keys are sorted by code point
- array elements are canonicalized, then sorted by their own compact
  canonical serialization

Sorting arrays also reorders arrays whose position is meaningful; callers
opt into this through ``DiffOptions.ignore_order``.
"""

from __future__ import annotations

import json
from typing import Any


def canonical_dumps(value: Any) -> str:
    """Compact serialization used as the array element sort key."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def canonicalize(value: Any) -> Any:
    """Return a new value with keys and array elements in canonical order.

    The input is never mutated. Scalars are returned unchanged.
    """
    if isinstance(value, dict):
        return {
            key: canonicalize(value[key])
            for key in sorted(value.keys())
        }
    elif isinstance(value, list):
        items = [canonicalize(item) for item in value]
        return sorted(items, key=canonical_dumps)
    return value
