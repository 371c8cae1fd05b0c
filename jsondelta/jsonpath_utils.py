"""Exclusion path parsing and JSONPath utilities for jsondelta."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Optional

from jsonpath_ng import parse as jsonpath_parse
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError
from jsonpath_ng.jsonpath import Fields, Index

from .models import PathSegment

logger = logging.getLogger(__name__)

WILDCARD = "*"


def parse_segment(segment: str) -> PathSegment:
    """
    Parse one dotted segment into a PathSegment.

    ``name[3]`` carries an index, ``name[*]`` a wildcard. Anything else,
    including a subscript with an empty name or a non-numeric subscript,
    is a plain key taken literally.
    """
    if segment.endswith("]"):
        open_at = segment.rfind("[")
        if open_at > 0:
            name = segment[:open_at]
            subscript = segment[open_at + 1:-1]
            if subscript == WILDCARD:
                return PathSegment(name=name, wildcard=True)
            if subscript.isdigit() and subscript.isascii():
                return PathSegment(name=name, index=int(subscript))
    return PathSegment(name=segment)


def parse_exclusion_path(path: str) -> list[PathSegment]:
    """Split a dotted exclusion path into parsed segments."""
    path = path.strip()
    if not path:
        return []
    return [parse_segment(segment) for segment in path.split(".")]


def is_jsonpath(path: str) -> bool:
    """
    Paths shaped like ``$``, ``$.a``, ``$..a`` or ``$[0]`` are JSONPath.

    A key that merely starts with ``$`` (``$schema``, ``$ref.id``) is a
    dotted path.
    """
    path = path.strip()
    return path == "$" or path.startswith(("$.", "$["))


# Cache for compiled JSONPath expressions
@lru_cache(maxsize=256)
def _compile_jsonpath(path: str):
    """Compile and cache a JSONPath expression."""
    try:
        return jsonpath_parse(path)
    except (JsonPathLexerError, JsonPathParserError) as e:
        raise ValueError(f"Invalid JSONPath expression '{path}': {e}")


class JSONPathMatcher:
    """Deletes every location matched by a JSONPath expression."""

    @classmethod
    def compile(cls, path: str):
        """Compile a JSONPath expression, raising ValueError if invalid."""
        return _compile_jsonpath(path.strip())

    @classmethod
    def delete_paths(cls, data: Any, paths: list[str]) -> Any:
        """
        Delete all locations matching the given JSONPath expressions.

        Args:
            data: The data to modify (will be modified in place)
            paths: List of JSONPath expressions

        Returns:
            Modified data. Invalid expressions are logged and skipped.
        """
        for path in paths:
            try:
                expr = cls.compile(path.strip())
            except ValueError as e:
                logger.warning("Skipping exclusion path: %s", e)
                continue
            cls._delete_matches(expr.find(data))
        return data

    @classmethod
    def _delete_matches(cls, matches: list) -> None:
        # List indices are removed highest first so earlier removals
        # do not shift the positions of later ones.
        list_removals: dict[int, tuple[list, set]] = {}

        for match in matches:
            if match.context is None:
                continue
            parent = match.context.value
            step = match.path

            if isinstance(step, Fields) and isinstance(parent, dict):
                for name in step.fields:
                    parent.pop(name, None)
            elif isinstance(step, Index) and isinstance(parent, list):
                index = _index_of(step)
                if index is not None and 0 <= index < len(parent):
                    _, indices = list_removals.setdefault(id(parent), (parent, set()))
                    indices.add(index)

        for parent, indices in list_removals.values():
            for index in sorted(indices, reverse=True):
                del parent[index]


def _index_of(step: Index) -> Optional[int]:
    """Concrete index of an Index step across jsonpath-ng releases."""
    index = getattr(step, "index", None)
    if index is None:
        indices = getattr(step, "indices", None) or ()
        index = indices[0] if len(indices) == 1 else None
    return index
