"""Unordered list scanner."""

from __future__ import annotations

from tinta.scanner.charsets import SPACE
from tinta.scanner.cursor import find_line_end, next_line_start, peek, skip_blanks
from tinta.scanner.decode import Decode, decode_utf8
from tinta.scanner.paragraph import scan_paragraph
from tinta.tokens import Token, UnorderedList


def is_list_item(data: bytes, pos: int, delimiter: int) -> bool:
    """Check for ``delimiter`` followed by a space at ``pos``."""
    return peek(data, pos) == delimiter and peek(data, pos + 1) == SPACE


def scan_unordered_list(
    data: bytes,
    start: int,
    pos: int,
    delimiter: int,
    decode: Decode = decode_utf8,
) -> tuple[int, Token | None]:
    """Scan a run of consecutive list items sharing ``delimiter``.

    The list continues while the next line (after leading blanks) starts
    with the same delimiter followed by a space. A blank line or any other
    delimiter ends it. Item text is everything after "<delimiter> ",
    trimmed.

    Args:
        data: Buffer being scanned
        start: Offset of the first delimiter
        pos: Current cursor (just past the first delimiter)
        delimiter: ``*``, ``-`` or ``+`` as an int
        decode: Span decoder

    Returns:
        (cursor at the first byte not part of the list, UnorderedList
        token or None). Undecodable items are dropped; if none remain, no
        token is produced. A delimiter without a following space is
        scanned as a paragraph.
    """
    if not is_list_item(data, start, delimiter):
        return scan_paragraph(data, start, pos, decode)

    lines: list[str] = []
    line_start = start
    while True:
        line_end = find_line_end(data, line_start)
        item = decode(data, line_start + 2, line_end)
        if item is not None:
            lines.append(item.strip())

        pos = skip_blanks(data, next_line_start(data, line_end))
        if not is_list_item(data, pos, delimiter):
            break
        line_start = pos

    if not lines:
        return pos, None
    return pos, Token("", UnorderedList(tuple(lines)), start, line_end)
