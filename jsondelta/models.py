"""Data models for jsondelta."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

JsonValue = Union[None, bool, int, float, str, list, dict]


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class DiffLineKind(Enum):
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"
    MOVED_FROM = "moved-from"
    MOVED_TO = "moved-to"


# Kinds that belong to the old (left) and new (right) document respectively
OLD_SIDE_KINDS = (DiffLineKind.REMOVED, DiffLineKind.MOVED_FROM)
NEW_SIDE_KINDS = (DiffLineKind.ADDED, DiffLineKind.MOVED_TO)


@dataclass
class EngineConfig:
    """Global configuration for the diff engine."""
    indent: int = 2
    ignore_trailing_comma: bool = True
    log_level: LogLevel = LogLevel.INFO


@dataclass
class DiffOptions:
    """Per-comparison options owned by the caller."""
    exclusion_paths: list[str] = field(default_factory=list)
    ignore_order: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> DiffOptions:
        """Accepts snake_case or the application's camelCase keys."""
        paths = data.get("exclusion_paths", data.get("exclusionPaths", []))
        if isinstance(paths, str):
            paths = [paths]
        ignore_order = data.get("ignore_order", data.get("ignoreOrder", True))
        return cls(exclusion_paths=list(paths or []), ignore_order=bool(ignore_order))


@dataclass(frozen=True)
class PathSegment:
    """One dotted segment of an exclusion path, e.g. ``items[*]``."""
    name: str
    index: Optional[int] = None
    wildcard: bool = False

    @property
    def has_subscript(self) -> bool:
        return self.wildcard or self.index is not None

    def __str__(self) -> str:
        if self.wildcard:
            return f"{self.name}[*]"
        if self.index is not None:
            return f"{self.name}[{self.index}]"
        return self.name


@dataclass
class DiffLine:
    """A single rendered row of the comparison."""
    content: str
    kind: DiffLineKind
    old_line_number: Optional[int] = None
    new_line_number: Optional[int] = None
    move_group: Optional[int] = None

    @property
    def is_change(self) -> bool:
        return self.kind != DiffLineKind.UNCHANGED

    def to_dict(self) -> dict:
        result = {
            "content": self.content,
            "kind": self.kind.value,
        }
        if self.old_line_number is not None:
            result["old_line_number"] = self.old_line_number
        if self.new_line_number is not None:
            result["new_line_number"] = self.new_line_number
        if self.move_group is not None:
            result["move_group"] = self.move_group
        return result


@dataclass
class DiffResult:
    """Complete line-level comparison of two documents."""
    lines: list[DiffLine] = field(default_factory=list)
    added_count: int = 0
    removed_count: int = 0
    left_text: str = ""
    right_text: str = ""

    @classmethod
    def from_lines(
        cls,
        lines: list[DiffLine],
        left_text: str = "",
        right_text: str = ""
    ) -> DiffResult:
        """Build a result and tally the added/removed counts."""
        added = sum(1 for line in lines if line.kind in NEW_SIDE_KINDS)
        removed = sum(1 for line in lines if line.kind in OLD_SIDE_KINDS)
        return cls(
            lines=lines,
            added_count=added,
            removed_count=removed,
            left_text=left_text,
            right_text=right_text,
        )

    @property
    def unchanged_count(self) -> int:
        return sum(1 for line in self.lines if line.kind == DiffLineKind.UNCHANGED)

    @property
    def moved_count(self) -> int:
        """Number of moved pairs (each pair has one moved-from line)."""
        return sum(1 for line in self.lines if line.kind == DiffLineKind.MOVED_FROM)

    @property
    def has_differences(self) -> bool:
        return self.added_count > 0 or self.removed_count > 0

    def changes(self) -> list[DiffLine]:
        """Only the changed lines ("show only differences")."""
        return [line for line in self.lines if line.is_change]

    def to_dict(self) -> dict:
        return {
            "has_differences": self.has_differences,
            "stats": {
                "added": self.added_count,
                "removed": self.removed_count,
                "moved": self.moved_count,
                "unchanged": self.unchanged_count,
            },
            "lines": [line.to_dict() for line in self.lines],
        }


@dataclass
class ErrorResponse:
    """Error response structure."""
    success: bool = False
    error: Optional[dict] = None

    def to_dict(self) -> dict:
        result: dict[str, Any] = {"success": self.success}
        if self.error:
            result["error"] = self.error
        return result
