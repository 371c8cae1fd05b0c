"""
jsondelta - Line diff engine for JSON documents

Compares two JSON documents as pretty-printed text and classifies every
line as unchanged, added, removed or moved. Key/array order can be
normalized before comparison and fields can be excluded by path.
"""

from .engine import (
    JsonDeltaEngine,
    compute_diff,
    redact_value,
    canonicalize_value,
)
from .models import (
    EngineConfig,
    DiffOptions,
    DiffLine,
    DiffLineKind,
    DiffResult,
    ErrorResponse,
    PathSegment,
)
from .canonicalizer import canonicalize
from .redactor import Redactor, redact
from .line_differ import DiffPart, diff_lines
from .move_detector import MoveDetector, detect_moves
from .exceptions import (
    JsonDeltaError,
    InvalidJsonInput,
    SettingsError,
)
from .settings import DiffSettings, load_settings
from .runner import (
    ComparisonRunner,
    ScenarioResult,
    GlobalReport,
    run_comparisons,
)

__version__ = "1.0.0"
__all__ = [
    # Engine
    "JsonDeltaEngine",
    "EngineConfig",
    "compute_diff",
    "redact_value",
    "canonicalize_value",
    # Results
    "DiffOptions",
    "DiffLine",
    "DiffLineKind",
    "DiffResult",
    "ErrorResponse",
    # Pipeline stages
    "canonicalize",
    "PathSegment",
    "Redactor",
    "redact",
    "DiffPart",
    "diff_lines",
    "MoveDetector",
    "detect_moves",
    # Errors
    "JsonDeltaError",
    "InvalidJsonInput",
    "SettingsError",
    # Settings
    "DiffSettings",
    "load_settings",
    # Batch runner
    "ComparisonRunner",
    "ScenarioResult",
    "GlobalReport",
    "run_comparisons",
]
