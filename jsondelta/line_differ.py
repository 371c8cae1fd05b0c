"""Line-level diff of two text blocks."""

from __future__ import annotations

from dataclasses import dataclass
from difflib import SequenceMatcher


@dataclass
class DiffPart:
    """A run of consecutive lines sharing one status.

    ``value`` may span several lines; every line but possibly the last of
    the whole text ends with a newline.
    """
    value: str
    added: bool = False
    removed: bool = False

    @property
    def unchanged(self) -> bool:
        return not self.added and not self.removed


def diff_lines(old_text: str, new_text: str) -> list[DiffPart]:
    """
    Compute the line edit script between two texts.

    Joining every part that is not ``added`` reproduces ``old_text``;
    joining every part that is not ``removed`` reproduces ``new_text``.
    Within a replaced block the removed part comes before the added part.
    """
    old_lines = split_keep_newlines(old_text)
    new_lines = split_keep_newlines(new_text)

    matcher = SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    parts: list[DiffPart] = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _append(parts, "".join(old_lines[i1:i2]))
            continue
        if tag in ("delete", "replace"):
            _append(parts, "".join(old_lines[i1:i2]), removed=True)
        if tag in ("insert", "replace"):
            _append(parts, "".join(new_lines[j1:j2]), added=True)

    return parts


def split_keep_newlines(text: str) -> list[str]:
    """Split on line feeds only, keeping the line feed on each line."""
    lines = text.split("\n")
    result = [line + "\n" for line in lines[:-1]]
    if lines[-1]:
        result.append(lines[-1])
    return result


def _append(parts: list[DiffPart], value: str, added: bool = False, removed: bool = False) -> None:
    """Append a part, merging it into the previous one when the status matches."""
    if not value:
        return
    if parts and parts[-1].added == added and parts[-1].removed == removed:
        parts[-1].value += value
        return
    parts.append(DiffPart(value=value, added=added, removed=removed))


def strip_trailing_comma(line: str) -> str:
    """Line text without its line feed and one trailing comma."""
    text = line.rstrip("\n")
    return text[:-1] if text.endswith(",") else text


def align_trailing_commas(parts: list[DiffPart]) -> list[DiffPart]:
    """
    Fold replaced lines that differ only by a trailing comma into context.

    Appending or removing the last member of a pretty-printed object or
    array toggles the comma on the member before it. Within each
    removed+added pair of parts, the leading and trailing lines that are
    equal apart from that comma become unchanged (new side text is kept).
    The result no longer reproduces the old text exactly.
    """
    aligned: list[DiffPart] = []
    i = 0
    while i < len(parts):
        part = parts[i]
        following = parts[i + 1] if i + 1 < len(parts) else None
        if not (part.removed and following is not None and following.added):
            _append(aligned, part.value, added=part.added, removed=part.removed)
            i += 1
            continue

        old_lines = split_keep_newlines(part.value)
        new_lines = split_keep_newlines(following.value)
        limit = min(len(old_lines), len(new_lines))

        head = 0
        while head < limit and strip_trailing_comma(old_lines[head]) == strip_trailing_comma(new_lines[head]):
            head += 1
        tail = 0
        while (
            tail < limit - head
            and strip_trailing_comma(old_lines[-1 - tail]) == strip_trailing_comma(new_lines[-1 - tail])
        ):
            tail += 1

        _append(aligned, "".join(new_lines[:head]))
        _append(aligned, "".join(old_lines[head:len(old_lines) - tail]), removed=True)
        _append(aligned, "".join(new_lines[head:len(new_lines) - tail]), added=True)
        _append(aligned, "".join(new_lines[len(new_lines) - tail:]))
        i += 2

    return aligned
