"""Cursor helpers shared by the sub-scanners.

Each helper takes the buffer and a position and returns a new position
that is never smaller than the one given.
"""

from __future__ import annotations

from tinta.scanner.charsets import END, LINE_BLANKS


def peek(data: bytes, pos: int) -> int:
    """Return the byte at ``pos``, or END past the end of the buffer."""
    if pos < len(data):
        return data[pos]
    return END


def find_line_end(data: bytes, pos: int) -> int:
    """Find the end of the line containing ``pos`` (position of \\n or EOF).

    Uses bytes.find for O(n) with low constant factor (C implementation).
    """
    idx = data.find(b"\n", pos)
    return idx if idx != -1 else len(data)


def next_line_start(data: bytes, line_end: int) -> int:
    """Step over the line terminator at ``line_end``, if any."""
    return min(line_end + 1, len(data))


def skip_blanks(data: bytes, pos: int) -> int:
    """Skip tabs, spaces and carriage returns (but not newlines)."""
    data_len = len(data)
    while pos < data_len and data[pos] in LINE_BLANKS:
        pos += 1
    return pos


def skip_run(data: bytes, pos: int, byte: int) -> int:
    """Skip a run of consecutive ``byte`` values."""
    data_len = len(data)
    while pos < data_len and data[pos] == byte:
        pos += 1
    return pos
