"""Plain-text rendering of diff results."""

from __future__ import annotations

from .models import DiffLine, DiffLineKind, DiffResult

MARKERS = {
    DiffLineKind.UNCHANGED: " ",
    DiffLineKind.ADDED: "+",
    DiffLineKind.REMOVED: "-",
    DiffLineKind.MOVED_FROM: "<",
    DiffLineKind.MOVED_TO: ">",
}


def format_line(line: DiffLine, line_numbers: bool = False, width: int = 4) -> str:
    """Render one line as ``<marker> <content>``, optionally numbered."""
    text = f"{MARKERS[line.kind]} {line.content}"
    if line.move_group is not None:
        text = f"{text}  (move {line.move_group})"
    if not line_numbers:
        return text

    old = str(line.old_line_number) if line.old_line_number is not None else ""
    new = str(line.new_line_number) if line.new_line_number is not None else ""
    return f"{old:>{width}} {new:>{width}} {text}"


def format_inline(
    result: DiffResult,
    only_changes: bool = False,
    line_numbers: bool = False
) -> str:
    """
    Unified (inline) view of a diff.

    Args:
        result: The diff to render
        only_changes: Skip unchanged lines
        line_numbers: Prefix old/new line numbers

    Returns:
        Rendered text, one row per line
    """
    lines = result.changes() if only_changes else result.lines
    if not lines:
        return ""
    width = max(len(str(len(result.lines))), 3)
    return "\n".join(format_line(line, line_numbers, width) for line in lines)


def format_stats(result: DiffResult) -> str:
    """GitHub-style ``+added -removed`` summary."""
    stats = f"+{result.added_count} -{result.removed_count}"
    if result.moved_count:
        stats += f" ({result.moved_count} moved)"
    return stats
