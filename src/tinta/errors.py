"""Exception classes for Tinta.

Provides standardized exceptions for error handling throughout Tinta.
"""

from __future__ import annotations


class TintaError(Exception):
    """Base exception for all Tinta errors.

    Subclass this for specific error categories.
    """

    pass


class ScanError(TintaError):
    """Error during scanning.

    Only raised when the active ScanConfig asks for strict behavior;
    by default the scanner is total over any input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class DecodeError(ScanError):
    """A scanned byte span is not valid text in the configured encoding."""

    def __init__(
        self,
        message: str,
        start_offset: int,
        end_offset: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.start_offset = start_offset
        self.end_offset = end_offset
        super().__init__(message, lineno, col_offset, source_file)


class LoadError(TintaError):
    """A document could not be read from storage.

    Raised by the loader in strict mode; otherwise load failures are
    logged and the document is treated as empty.
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize load error.

        Args:
            path: Path of the document that failed to load
            message: Description of the failure
        """
        self.path = path
        super().__init__(f"Cannot load '{path}': {message}")


class EncodingError(TintaError, ValueError):
    """The configured encoding cannot be scanned byte-wise.

    Markers are matched as single ASCII bytes, so the encoding must map
    them to themselves (utf-8, latin-1, cp1252, ...; not utf-16).
    """

    def __init__(self, encoding: str) -> None:
        self.encoding = encoding
        super().__init__(
            f"Encoding '{encoding}' is not ASCII-compatible; markers are matched byte-wise"
        )
