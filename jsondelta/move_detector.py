"""Move detection over a raw line diff.

A removed line and an added line whose trimmed text is identical describe
content that was relocated rather than changed. Pairing is greedy and in
document order: each removed line takes the first still-unpaired added
line with the same key. With several identical lines the pairing is one
valid choice among many, not an optimal matching.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional

from .line_differ import DiffPart
from .models import DiffLine, DiffLineKind

CONTEXT = "context"
REMOVED = "removed"
ADDED = "added"


@dataclass
class FlatLine:
    """One line of a diff part, before classification."""
    content: str
    status: str
    part_index: int
    move_group: Optional[int] = None


def flatten_parts(parts: Iterable[DiffPart]) -> list[FlatLine]:
    """Split diff parts into individual lines.

    The empty fragment after a part's final newline is not a line.
    """
    flat: list[FlatLine] = []
    for part_index, part in enumerate(parts):
        if part.removed:
            status = REMOVED
        elif part.added:
            status = ADDED
        else:
            status = CONTEXT

        lines = part.value.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        for line in lines:
            flat.append(FlatLine(content=line, status=status, part_index=part_index))
    return flat


class MoveDetector:
    """
    Turns raw diff parts into classified DiffLine records.

    Lines are emitted in the order the diff presents them; moved pairs are
    not collated. Old/new line counters advance with every line that exists
    in the old/new document.
    """

    def __init__(self, ignore_trailing_comma: bool = True):
        self.ignore_trailing_comma = ignore_trailing_comma

    def move_key(self, content: str) -> str:
        """Text compared when looking for moves."""
        key = content.strip()
        if self.ignore_trailing_comma and key.endswith(","):
            key = key[:-1].rstrip()
        return key

    def detect(self, parts: Iterable[DiffPart]) -> list[DiffLine]:
        flat = flatten_parts(parts)
        self._pair_moves(flat)
        return self._emit(flat)

    def _pair_moves(self, flat: list[FlatLine]) -> None:
        """Assign move groups to paired removed/added lines."""
        added_by_key: dict[str, deque] = {}
        for line in flat:
            if line.status != ADDED:
                continue
            key = self.move_key(line.content)
            if key:
                added_by_key.setdefault(key, deque()).append(line)

        groups: dict[str, int] = {}
        for line in flat:
            if line.status != REMOVED:
                continue
            key = self.move_key(line.content)
            candidates = added_by_key.get(key)
            if not key or not candidates:
                continue

            match = candidates.popleft()
            group = groups.setdefault(key, len(groups))
            line.move_group = group
            match.move_group = group

    def _emit(self, flat: list[FlatLine]) -> list[DiffLine]:
        result: list[DiffLine] = []
        old_line = 0
        new_line = 0

        for line in flat:
            if line.status == REMOVED:
                old_line += 1
                kind = DiffLineKind.REMOVED if line.move_group is None else DiffLineKind.MOVED_FROM
                result.append(DiffLine(
                    content=line.content,
                    kind=kind,
                    old_line_number=old_line,
                    move_group=line.move_group,
                ))
            elif line.status == ADDED:
                new_line += 1
                kind = DiffLineKind.ADDED if line.move_group is None else DiffLineKind.MOVED_TO
                result.append(DiffLine(
                    content=line.content,
                    kind=kind,
                    new_line_number=new_line,
                    move_group=line.move_group,
                ))
            else:
                old_line += 1
                new_line += 1
                result.append(DiffLine(
                    content=line.content,
                    kind=DiffLineKind.UNCHANGED,
                    old_line_number=old_line,
                    new_line_number=new_line,
                ))

        return result


def detect_moves(parts: Iterable[DiffPart], ignore_trailing_comma: bool = True) -> list[DiffLine]:
    """Convenience function around MoveDetector.detect."""
    return MoveDetector(ignore_trailing_comma).detect(parts)
