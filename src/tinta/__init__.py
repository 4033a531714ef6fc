"""
Tinta — Minimal Markdown Scanner for Python

Turns a markdown document into a flat list of typed tokens for a small
dialect: ATX headers (levels 1-6), single-line paragraphs, and unordered
lists with ``-``, ``*`` or ``+`` bullets. O(n) single pass, zero runtime
dependencies.

Quick Start:
    >>> from tinta import scan
    >>> for token in scan("# Hello\\n\\n- one\\n- two"):
    ...     print(token.type.name, token.text or token.tag)
    HEADER Hello
    UNORDERED_LIST UnorderedList(lines=('one', 'two'))
    EOF EndOfInput()

    >>> # Scan a file; unreadable files yield only EndOfInput
    >>> from tinta import scan_file
    >>> tokens = scan_file("README.md")

Installation:
    pip install tinta
"""

from tinta.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from tinta.errors import DecodeError, EncodingError, LoadError, ScanError, TintaError
from tinta.loader import read_source, scan_file
from tinta.location import SourceLocation, locate
from tinta.scanner import Scanner
from tinta.tokens import (
    Anchor,
    EndOfInput,
    Header,
    Image,
    OrderedList,
    Paragraph,
    Tag,
    Token,
    TokenType,
    UnorderedList,
)

__version__ = "0.1.0"


def scan(source: str | bytes, *, source_file: str | None = None) -> list[Token]:
    """Scan Markdown source into a token list.

    Args:
        source: Markdown source, as text or raw bytes. Bytes are decoded
            with the encoding of the active ScanConfig.
        source_file: Optional source file path for diagnostics

    Returns:
        Tokens in document order, always ending in exactly one EndOfInput

    Raises:
        DecodeError: Only with ``ScanConfig(strict_decoding=True)``, when a
            span is not valid text

    Example:
        >>> scan("## header 2 ##")[0]
        Token(Header(level=2), 'header 2', 0:14)
    """
    return Scanner(source, source_file=source_file).scan()


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "scan",
    "scan_file",
    "read_source",
    "Scanner",
    # Tokens
    "Token",
    "TokenType",
    "Tag",
    "Header",
    "Paragraph",
    "UnorderedList",
    "OrderedList",
    "Anchor",
    "Image",
    "EndOfInput",
    # Errors
    "TintaError",
    "ScanError",
    "DecodeError",
    "LoadError",
    "EncodingError",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Location
    "SourceLocation",
    "locate",
]
