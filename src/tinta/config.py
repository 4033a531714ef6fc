"""ContextVar-based scan configuration for Tinta.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read by every Scanner created in the context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from tinta.config import set_scan_config, reset_scan_config, ScanConfig

    set_scan_config(ScanConfig(strict_decoding=True))
    try:
        tokens = Scanner(data).scan()
    finally:
        reset_scan_config()

    # Or use the context manager
    with scan_config_context(ScanConfig(encoding="latin-1")):
        tokens = Scanner(data).scan()

"""

import codecs
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from tinta.errors import EncodingError

# Bytes the scanner matches on; they must decode to themselves
_MARKER_BYTES = b"\n\r\t #*-+"


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Note: source_file is intentionally excluded—it's per-call state,
    not configuration. It remains on the Scanner instance.

    Attributes:
        encoding: Encoding used to decode bytes input and loaded files.
            Must be ASCII-compatible; markers are matched byte-wise.
        strict_decoding: Raise DecodeError on undecodable spans instead
            of dropping the token

    """

    encoding: str = "utf-8"
    strict_decoding: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "strict_decoding": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_decoding
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


def check_encoding(encoding: str) -> str:
    """Validate that ``encoding`` can be scanned byte-wise.

    Args:
        encoding: Codec name

    Returns:
        The normalized codec name

    Raises:
        LookupError: If the codec is unknown
        EncodingError: If the marker bytes do not decode to themselves
    """
    name = codecs.lookup(encoding).name
    try:
        decoded = _MARKER_BYTES.decode(name)
    except UnicodeDecodeError:
        raise EncodingError(encoding) from None
    if decoded != _MARKER_BYTES.decode("ascii"):
        raise EncodingError(encoding)
    return name


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "check_encoding",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
