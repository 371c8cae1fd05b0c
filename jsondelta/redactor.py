"""Path exclusion ("The Filter") for jsondelta."""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Iterable

from .models import PathSegment
from .jsonpath_utils import JSONPathMatcher, is_jsonpath, parse_exclusion_path

logger = logging.getLogger(__name__)


class Redactor:
    """
    Removes the values at a set of exclusion paths before comparison.

    Path forms:
    - ``a.b.c``: delete key ``c`` of ``a.b``
    - ``items.id``: a plain segment that lands on an array applies the rest
      of the path to every element
    - ``items[*].id``: same, explicit wildcard
    - ``items[3]`` / ``items[3].id``: a single element or a field inside it
    - ``$..id``: JSONPath expression (jsonpath-ng), every match deleted.
      An expression that does not compile is read as a dotted path, so keys
      like ``$schema`` work as plain keys

    Paths that do not resolve are no-ops. Redaction never raises.
    """

    def __init__(self, paths: Iterable[str] = ()):
        self.paths = [path.strip() for path in paths if path and path.strip()]
        self.jsonpaths = []
        self.dotted = []
        for path in self.paths:
            if is_jsonpath(path) and self._compiles(path):
                self.jsonpaths.append(path)
            else:
                self.dotted.append(parse_exclusion_path(path))

    @staticmethod
    def _compiles(path: str) -> bool:
        try:
            JSONPathMatcher.compile(path)
        except ValueError as e:
            logger.debug("Treating %r as a dotted path: %s", path, e)
            return False
        return True

    def redact(self, value: Any) -> Any:
        """Return a redacted deep copy of ``value``."""
        data = deepcopy(value)
        if not self.paths:
            return data

        for segments in self.dotted:
            self._delete_path(data, segments)

        if self.jsonpaths:
            data = JSONPathMatcher.delete_paths(data, self.jsonpaths)

        return data

    def redact_pair(self, left: Any, right: Any) -> tuple[Any, Any]:
        """Apply the same exclusions to both documents."""
        return self.redact(left), self.redact(right)

    def _delete_path(self, node: Any, segments: list[PathSegment]) -> None:
        """Delete the remaining path below ``node`` (mutates the working copy)."""
        if not segments or not isinstance(node, dict):
            return

        segment, rest = segments[0], segments[1:]

        if segment.has_subscript:
            self._delete_subscripted(node, segment, rest)
            return

        if segment.name not in node:
            return

        if not rest:
            del node[segment.name]
            return

        child = node[segment.name]
        if isinstance(child, list):
            for item in child:
                self._delete_path(item, rest)
        else:
            self._delete_path(child, rest)

    def _delete_subscripted(
        self,
        node: dict,
        segment: PathSegment,
        rest: list[PathSegment]
    ) -> None:
        array = node.get(segment.name)
        if not isinstance(array, list):
            return

        if segment.wildcard:
            # A terminal wildcard deletes nothing
            for item in array:
                self._delete_path(item, rest)
            return

        if not 0 <= segment.index < len(array):
            return

        if not rest:
            del array[segment.index]
        else:
            self._delete_path(array[segment.index], rest)


def redact(value: Any, paths: Iterable[str]) -> Any:
    """
    Convenience function to redact a single value.

    Args:
        value: The JSON value (never mutated)
        paths: Exclusion paths, applied in order

    Returns:
        Redacted copy of value
    """
    return Redactor(paths).redact(value)
