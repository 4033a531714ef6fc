"""File loading for Tinta.

Reads a whole document into memory and hands it to the scanner. A
document that cannot be read (missing, unreadable, or not valid text in
the configured encoding) is logged and scanned as empty, so callers
still get a token list ending in EndOfInput.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from tinta.config import check_encoding, get_scan_config
from tinta.errors import LoadError
from tinta.scanner import Scanner
from tinta.tokens import Token
from tinta.utils.logger import get_logger

logger = get_logger(__name__)


def read_source(path: str | PathLike[str], encoding: str | None = None) -> bytes:
    """Read a document and check that it is valid text.

    Args:
        path: Path to the document
        encoding: Encoding to validate against (defaults to the active
            ScanConfig encoding)

    Returns:
        Raw document bytes

    Raises:
        LoadError: If the file cannot be read or is not valid text
        EncodingError: If the encoding is not ASCII-compatible
    """
    encoding = encoding or get_scan_config().encoding
    check_encoding(encoding)
    try:
        data = Path(path).read_bytes()
        data.decode(encoding)
    except OSError as e:
        raise LoadError(str(path), e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise LoadError(str(path), f"invalid {encoding} text at byte {e.start}") from e
    return data


def scan_file(path: str | PathLike[str], *, strict: bool = False) -> list[Token]:
    """Load a document from disk and scan it.

    Args:
        path: Path to the document
        strict: Raise LoadError instead of falling back to an empty document

    Returns:
        Token list, always ending in exactly one EndOfInput token

    Raises:
        LoadError: Only when ``strict`` is True and loading fails
        EncodingError: If the configured encoding is not ASCII-compatible
    """
    try:
        data = read_source(path)
    except LoadError as e:
        if strict:
            raise
        logger.error("%s; scanning an empty document instead", e)
        data = b""
    return Scanner(data, source_file=str(path)).scan()
