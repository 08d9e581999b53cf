"""
Text layout helpers for console output: word wrapping and two-column tables.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

BREAKING_CHARS = (" ", ",")


@dataclass(frozen=True)
class TableRow:
    """A two-column console table row."""

    column1: str
    column2: str


def _split_overflow(text: str, available: int) -> tuple[str, str]:
    """Cut ``text`` to at most ``available`` characters.

    Breaks after the last space or comma that fits; hard-breaks when there is
    none.
    """
    if len(text) <= available:
        return text, ""

    head = text[:available]
    break_index = max(head.rfind(char) for char in BREAKING_CHARS)
    if break_index <= 0:
        return head, text[available:]
    return text[: break_index + 1], text[break_index + 1 :]


def wrap_message(
    message: str, width: int, indent: int = 0, overflow_indent: int = 0
) -> list[str]:
    """Wrap ``message`` to lines shorter than ``width``.

    Explicit newlines are kept. Continuation lines of a wrapped line are
    indented by ``indent + overflow_indent``.
    """
    max_chars = width - 1
    lines: list[str] = []

    for line in message.replace("\r\n", "\n").split("\n"):
        part = line
        effective_indent = indent
        while True:
            available = max(max_chars - effective_indent, 1)
            head, part = _split_overflow(part, available)
            lines.append((" " * effective_indent + head).rstrip())
            part = part.lstrip(" ")
            if not part:
                break
            effective_indent = indent + overflow_indent

    return lines


def format_table(
    rows: Iterable[TableRow],
    width: int,
    indent: int = 2,
    column_spacing: int = 4,
) -> list[str]:
    """Lay out rows in two columns.

    The second column starts after the longest first column plus
    ``column_spacing``; its overflow wraps back to that position.
    """
    row_list = list(rows)
    if not row_list:
        return []

    column2_start = max(indent + len(row.column1) + column_spacing for row in row_list)
    column2_width = max(width - column2_start, 2)

    lines: list[str] = []
    for row in row_list:
        prefix = (" " * indent + row.column1).ljust(column2_start)
        wrapped = wrap_message(row.column2, column2_width) or [""]
        lines.append((prefix + wrapped[0]).rstrip())
        for continuation in wrapped[1:]:
            lines.append((" " * column2_start + continuation).rstrip())
    return lines
