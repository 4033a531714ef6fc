"""Span decoding for the sub-scanners.

Every construct decodes its byte span through a Decode callable. A span
that is not valid text yields None and the construct produces no token,
unless the decoder is strict, in which case DecodeError is raised.
"""

from __future__ import annotations

from collections.abc import Callable

from tinta.errors import DecodeError
from tinta.location import locate
from tinta.utils.logger import get_logger

logger = get_logger(__name__)

# (data, start, end) -> text, or None when the span is dropped
Decode = Callable[[bytes, int, int], str | None]


class SpanDecoder:
    """Decode ``data[start:end]`` with a fixed encoding.

    Thread Safety:
        Instances hold only immutable settings and may be shared.

    """

    __slots__ = ("_encoding", "_source_file", "_strict")

    def __init__(
        self,
        encoding: str = "utf-8",
        *,
        strict: bool = False,
        source_file: str | None = None,
    ) -> None:
        self._encoding = encoding
        self._strict = strict
        self._source_file = source_file

    def __call__(self, data: bytes, start: int, end: int) -> str | None:
        try:
            return data[start:end].decode(self._encoding)
        except UnicodeDecodeError as e:
            loc = locate(data, start, end, self._source_file)
            if self._strict:
                raise DecodeError(
                    f"invalid {self._encoding} text: {e.reason}",
                    start,
                    end,
                    lineno=loc.lineno,
                    col_offset=loc.col_offset,
                    source_file=self._source_file,
                ) from e
            logger.debug("Dropping undecodable span at %s (%s)", loc, e.reason)
            return None


# Default used when a sub-scanner is called directly
decode_utf8: Decode = SpanDecoder()
