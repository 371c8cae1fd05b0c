"""Example usage of the jsondelta diff engine."""

import json
from jsondelta import JsonDeltaEngine, DiffOptions, DiffLineKind, redact_value
from jsondelta.formatters import format_inline, format_stats

# Response from the staging environment
staging_response = {
    "id": "ORD-1001",
    "status": "shipped",
    "requestId": "c1f9a8e2",  # Differs on every call
    "customer": {"name": "Ada", "tier": "gold"},
    "items": [
        {"sku": "WIDGET-001", "quantity": 5, "etag": "a1"},
        {"sku": "GADGET-002", "quantity": 2, "etag": "b7"},
    ],
    "tags": ["priority", "gift"],
}

# Response from the production environment
production_response = {
    "status": "shipped",
    "id": "ORD-1001",  # Same value, different position
    "requestId": "77d0b3c4",
    "customer": {"name": "Ada", "tier": "platinum"},
    "items": [
        {"sku": "WIDGET-001", "quantity": 5, "etag": "f3"},
        {"sku": "GADGET-002", "quantity": 3, "etag": "09"},
    ],
    "tags": ["gift", "priority"],
}

# Fields that are expected to differ between environments
exclusion_paths = ["requestId", "items[*].etag"]

print("Redacted staging payload:")
print(json.dumps(redact_value(staging_response, exclusion_paths), indent=2))

engine = JsonDeltaEngine()

print("\n" + "=" * 60)
print("Comparison keeping key order (moves are reported)")
print("=" * 60)
result = engine.compare(
    staging_response,
    production_response,
    DiffOptions(exclusion_paths=exclusion_paths, ignore_order=False),
)
print(format_inline(result, line_numbers=True))
print(format_stats(result))

print("\n" + "=" * 60)
print("Comparison ignoring key and array order")
print("=" * 60)
result = engine.compare(
    staging_response,
    production_response,
    DiffOptions(exclusion_paths=exclusion_paths, ignore_order=True),
)
print(format_inline(result, only_changes=True))
print(format_stats(result))

moved = [line for line in result.lines if line.kind == DiffLineKind.MOVED_FROM]
print(f"\nMoved lines: {len(moved)}")

print("\n" + "=" * 60)
print("Full result (JSON)")
print("=" * 60)
print(json.dumps(result.to_dict(), indent=2))
