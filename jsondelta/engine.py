"""Main comparison engine for jsondelta."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from .models import (
    EngineConfig,
    DiffOptions,
    DiffResult,
    ErrorResponse,
    JsonValue,
)
from .canonicalizer import canonicalize
from .redactor import Redactor
from .line_differ import diff_lines, align_trailing_commas
from .move_detector import MoveDetector
from .exceptions import InvalidJsonInput
from .utils import pretty_print, parse_json_pair

logger = logging.getLogger(__name__)

OptionsLike = Union[DiffOptions, dict, None]


class JsonDeltaEngine:
    """
    Comparison engine that orchestrates the pipeline:

    1. Redaction: remove excluded paths from copies of both documents
    2. Canonicalization: sort keys and array elements (ignore_order only)
    3. Serialization: pretty-print both documents
    4. Line diffing: edit script over the two texts
    5. Move detection: classify lines and number them

    The engine holds configuration only; every comparison is independent.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Initialize the engine.

        Args:
            config: Engine configuration (uses defaults if not provided)
        """
        self.config = config or EngineConfig()
        self.detector = MoveDetector(self.config.ignore_trailing_comma)

    def compare(
        self,
        left: JsonValue,
        right: JsonValue,
        options: OptionsLike = None
    ) -> DiffResult:
        """
        Compare two parsed JSON documents.

        Args:
            left: The original (left) document
            right: The modified (right) document
            options: Exclusion paths and order-insensitivity flag

        Returns:
            DiffResult with classified lines and added/removed counts
        """
        options = _coerce_options(options)

        redactor = Redactor(options.exclusion_paths)
        left_doc, right_doc = redactor.redact_pair(left, right)

        if options.ignore_order:
            left_doc = canonicalize(left_doc)
            right_doc = canonicalize(right_doc)

        left_text = pretty_print(left_doc, self.config.indent)
        right_text = pretty_print(right_doc, self.config.indent)

        parts = diff_lines(left_text, right_text)
        if self.config.ignore_trailing_comma:
            parts = align_trailing_commas(parts)

        lines = self.detector.detect(parts)
        result = DiffResult.from_lines(lines, left_text, right_text)

        logger.debug(
            "Compared documents: %d lines, +%d -%d (%d moved)",
            len(result.lines),
            result.added_count,
            result.removed_count,
            result.moved_count,
        )
        return result

    def compare_text(
        self,
        left_text: str,
        right_text: str,
        options: OptionsLike = None
    ) -> Union[DiffResult, ErrorResponse]:
        """
        Parse and compare two raw JSON texts.

        Returns:
            DiffResult on success, ErrorResponse when either side is invalid
        """
        try:
            left, right = parse_json_pair(left_text, right_text)
        except InvalidJsonInput as e:
            logger.debug("Skipping comparison: %s", e.message)
            return ErrorResponse(
                success=False,
                error={
                    "code": "INVALID_JSON",
                    "message": e.message,
                    "details": e.details,
                },
            )
        return self.compare(left, right, options)

    def redact(self, value: JsonValue, exclusion_paths: Iterable[str]) -> JsonValue:
        return Redactor(exclusion_paths).redact(value)

    def canonicalize(self, value: JsonValue) -> JsonValue:
        return canonicalize(value)


def _coerce_options(options: OptionsLike) -> DiffOptions:
    if options is None:
        return DiffOptions()
    if isinstance(options, dict):
        return DiffOptions.from_dict(options)
    return options


def compute_diff(
    left: JsonValue,
    right: JsonValue,
    options: OptionsLike = None,
    *,
    exclusion_paths: Optional[Iterable[str]] = None,
    ignore_order: Optional[bool] = None,
    config: Optional[EngineConfig] = None
) -> DiffResult:
    """
    Convenience function to diff two JSON documents.

    Args:
        left: The original document
        right: The modified document
        options: DiffOptions (or a dict of the same fields)
        exclusion_paths: Overrides options.exclusion_paths
        ignore_order: Overrides options.ignore_order
        config: Optional engine configuration

    Returns:
        DiffResult
    """
    resolved = _coerce_options(options)
    if exclusion_paths is not None or ignore_order is not None:
        resolved = DiffOptions(
            exclusion_paths=list(exclusion_paths) if exclusion_paths is not None else resolved.exclusion_paths,
            ignore_order=resolved.ignore_order if ignore_order is None else ignore_order,
        )
    return JsonDeltaEngine(config).compare(left, right, resolved)


def redact_value(value: JsonValue, exclusion_paths: Iterable[str]) -> JsonValue:
    """Redacted copy of a value, for previewing exclusions without diffing."""
    return Redactor(exclusion_paths).redact(value)


def canonicalize_value(value: JsonValue) -> JsonValue:
    """Canonical (order-normalized) copy of a value."""
    return canonicalize(value)
