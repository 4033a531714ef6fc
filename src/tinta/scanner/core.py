"""Single-pass markdown scanner with O(n) guaranteed performance.

Walks the buffer byte by byte and dispatches on the current byte to one
of the sub-scanners (header, paragraph, unordered list) or skips it.
Every branch advances the cursor, so the scan always terminates.

No regex in the hot path. No backtracking beyond fixed one- or two-byte
lookaheads.

Thread Safety:
Scanner instances are single-use. Create one per source buffer.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from tinta.config import check_encoding, get_scan_config
from tinta.location import SourceLocation, locate
from tinta.scanner.charsets import DASH, HASH, PLUS, SPACE, STAR, WHITESPACE
from tinta.scanner.cursor import peek, skip_run
from tinta.scanner.decode import SpanDecoder
from tinta.scanner.heading import scan_header
from tinta.scanner.lists import scan_unordered_list
from tinta.scanner.paragraph import scan_paragraph
from tinta.tokens import EndOfInput, Token


class Scanner:
    """Byte-dispatch scanner for headers, paragraphs and unordered lists.

    ``str`` sources are encoded as UTF-8 before scanning. ``bytes``
    sources are decoded span by span with the encoding of the active
    ScanConfig.

    Usage:
            >>> scanner = Scanner("# Hello\\n\\nWorld")
            >>> for token in scanner.tokenize():
            ...     print(token)
        Token(Header(level=1), 'Hello', 0:7)
        Token(Paragraph(), 'World', 9:14)
        Token(EndOfInput(), '', 14:14)

    Thread Safety:
        Scanner instances are single-use. Create one per source buffer.
        Config is read once, at construction.

    """

    __slots__ = (
        "_data",
        "_data_len",  # Cached len(data)
        "_pos",
        "_source_file",
        "_decode",
    )

    def __init__(self, source: str | bytes, source_file: str | None = None) -> None:
        """Initialize scanner with a source buffer.

        Args:
            source: Markdown source, as text or raw bytes
            source_file: Optional source file path for diagnostics

        Raises:
            LookupError: If the configured encoding is unknown
            EncodingError: If the configured encoding is not ASCII-compatible
        """
        config = get_scan_config()
        if isinstance(source, str):
            # Lone surrogates survive encoding and are dropped at decode time
            data = source.encode("utf-8", "surrogatepass")
            encoding = "utf-8"
        else:
            data = bytes(source)
            encoding = check_encoding(config.encoding)

        self._data = data
        self._data_len = len(data)
        self._pos = 0
        self._source_file = source_file
        self._decode = SpanDecoder(
            encoding,
            strict=config.strict_decoding,
            source_file=source_file,
        )

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, then one EndOfInput token

        Complexity: O(n) where n = len(data)
        """
        data = self._data
        data_len = self._data_len
        while self._pos < data_len:
            start = self._pos
            self._pos = start + 1
            token = self._dispatch(data[start], start)
            if token is not None:
                yield token

        yield Token("", EndOfInput(), data_len, data_len)

    def scan(self) -> list[Token]:
        """Tokenize the whole source into a list."""
        return list(self.tokenize())

    def _dispatch(self, byte: int, start: int) -> Token | None:
        """Run the sub-scanner selected by ``byte`` and commit its cursor.

        Args:
            byte: The byte at ``start``
            start: Offset of ``byte``; the cursor is already one past it

        Returns:
            The token produced, if any.
        """
        data = self._data
        pos = self._pos
        decode = self._decode
        token: Token | None = None

        if byte == HASH:
            pos, token = scan_header(data, start, pos, decode)
        elif byte == STAR:
            # "*" without a space is reserved for emphasis
            if peek(data, pos) == SPACE:
                pos, token = scan_unordered_list(data, start, pos, STAR, decode)
        elif byte == DASH:
            if data.startswith(b"--", pos):
                # Reserved for horizontal rules: consume the run, emit nothing
                pos = skip_run(data, pos, DASH)
            else:
                pos, token = scan_unordered_list(data, start, pos, DASH, decode)
        elif byte == PLUS:
            pos, token = scan_unordered_list(data, start, pos, PLUS, decode)
        elif byte not in WHITESPACE:
            pos, token = scan_paragraph(data, start, pos, decode)

        self._pos = pos
        return token

    def location_of(self, token: Token) -> SourceLocation:
        """Resolve a token's byte span to line/column coordinates.

        Args:
            token: A token produced by this scanner

        Returns:
            SourceLocation of the token within this scanner's source.
        """
        return locate(self._data, token.start_offset, token.end_offset, self._source_file)
