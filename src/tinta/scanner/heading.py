"""ATX header scanner."""

from __future__ import annotations

from tinta.scanner.charsets import HASH, LINE_BLANKS, SPACE
from tinta.scanner.cursor import find_line_end, peek, skip_run
from tinta.scanner.decode import Decode, decode_utf8
from tinta.scanner.paragraph import scan_paragraph
from tinta.tokens import MAX_HEADER_LEVEL, Header, Token


def scan_header(
    data: bytes, start: int, pos: int, decode: Decode = decode_utf8
) -> tuple[int, Token | None]:
    """Scan a header whose first ``#`` is at ``start``.

    A header is a run of 1-6 ``#`` followed by a space. A closing run of
    ``#`` at the end of the line is decoration and is dropped. Anything
    else (no space after the run, or more than six markers) is scanned
    as a paragraph, hash run included.

    Args:
        data: Buffer being scanned
        start: Offset of the first ``#``
        pos: Current cursor (just past the first ``#``)
        decode: Span decoder

    Returns:
        (cursor at the line terminator, Header/Paragraph token or None)
    """
    run_end = skip_run(data, pos, HASH)
    level = run_end - start

    # "#hashtag" and a bare "###" are plain text
    if peek(data, run_end) != SPACE:
        return scan_paragraph(data, start, run_end, decode)

    if level > MAX_HEADER_LEVEL:
        return scan_paragraph(data, start, run_end, decode)

    content_start = run_end + 1
    line_end = find_line_end(data, content_start)

    end = line_end
    while end > content_start and data[end - 1] in LINE_BLANKS:
        end -= 1
    while end > content_start and data[end - 1] == HASH:
        end -= 1

    text = decode(data, content_start, end)
    if text is None:
        return line_end, None
    return line_end, Token(text.strip(), Header(level), start, line_end)
