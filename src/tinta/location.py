"""Source location tracking for error messages and debugging.

Tokens only record byte offsets. Line and column numbers are resolved on
demand with ``locate``, so a scan never pays for locations nobody reads.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    All positions are 1-indexed (lineno and col_offset start at 1).
    Columns count bytes, not characters.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source buffer
        end_offset: Absolute end offset in source buffer
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column offset (optional)
        source_file: Source file path (optional)

    Examples:
        >>> loc = SourceLocation(1, 1, 0, 10, source_file="docs/guide.md")
        >>> str(loc)
        'docs/guide.md:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.md:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"


def _line_and_col(data: bytes, offset: int) -> tuple[int, int]:
    lineno = data.count(b"\n", 0, offset) + 1
    col = offset - (data.rfind(b"\n", 0, offset) + 1) + 1
    return lineno, col


def locate(
    data: bytes,
    offset: int,
    end_offset: int | None = None,
    source_file: str | None = None,
) -> SourceLocation:
    """Resolve byte offsets in ``data`` to a SourceLocation.

    O(n) in the offset; meant for diagnostics, not the scanning hot path.

    Args:
        data: The scanned buffer
        offset: Start offset (clamped to the buffer)
        end_offset: Optional end offset; defaults to ``offset``
        source_file: Optional source file path

    Returns:
        SourceLocation for the span.
    """
    offset = max(0, min(offset, len(data)))
    end = offset if end_offset is None else max(offset, min(end_offset, len(data)))
    lineno, col = _line_and_col(data, offset)
    end_lineno, end_col = _line_and_col(data, end)
    return SourceLocation(
        lineno=lineno,
        col_offset=col,
        offset=offset,
        end_offset=end,
        end_lineno=end_lineno,
        end_col_offset=end_col,
        source_file=source_file,
    )
