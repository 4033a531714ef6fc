"""Paragraph scanner."""

from __future__ import annotations

from tinta.scanner.cursor import find_line_end
from tinta.scanner.decode import Decode, decode_utf8
from tinta.tokens import Paragraph, Token


def scan_paragraph(
    data: bytes, start: int, pos: int, decode: Decode = decode_utf8
) -> tuple[int, Token | None]:
    """Scan one line of plain text starting at ``start``.

    Paragraphs never span lines: every non-blank, non-special line
    becomes its own token.

    Args:
        data: Buffer being scanned
        start: Offset of the first byte of the paragraph
        pos: Current cursor (already past ``start``)
        decode: Span decoder

    Returns:
        (cursor at the line terminator, Paragraph token or None)
    """
    line_end = find_line_end(data, pos)
    text = decode(data, start, line_end)
    if text is None:
        return line_end, None
    return line_end, Token(text.strip(), Paragraph(), start, line_end)
