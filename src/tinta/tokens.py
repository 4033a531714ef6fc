"""Token and tag definitions for the Tinta scanner.

The scanner produces a flat list of Token objects. Each Token carries the
trimmed text of the construct and a tag describing its kind.

Tag Hierarchy:
Tag (base)
├── Header          # level 1-6
├── Paragraph
├── UnorderedList   # lines, one per item
├── OrderedList     # reserved
├── Anchor          # reserved
├── Image           # reserved
└── EndOfInput      # sentinel, always last

Thread Safety:
Tags and Tokens are frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar

# Header levels accepted by the dialect
MIN_HEADER_LEVEL = 1
MAX_HEADER_LEVEL = 6


class TokenType(Enum):
    """Token kinds, one per tag variant."""

    HEADER = auto()  # # Title
    PARAGRAPH = auto()  # plain line
    UNORDERED_LIST = auto()  # - item, * item, + item
    ORDERED_LIST = auto()  # reserved
    ANCHOR = auto()  # reserved
    IMAGE = auto()  # reserved
    EOF = auto()


# =============================================================================
# Tags
# =============================================================================


@dataclass(frozen=True, slots=True)
class Tag:
    """Base class for all token tags."""

    kind: ClassVar[TokenType]

    def __post_init__(self) -> None:
        if type(self) is Tag:
            raise TypeError("Tag is abstract; use one of its variants")


@dataclass(frozen=True, slots=True)
class Header(Tag):
    """ATX header.

    Markdown: ## Title  or  ## Title ##

    """

    kind: ClassVar[TokenType] = TokenType.HEADER

    level: int

    def __post_init__(self) -> None:
        if not MIN_HEADER_LEVEL <= self.level <= MAX_HEADER_LEVEL:
            raise ValueError(
                f"header level must be between {MIN_HEADER_LEVEL} and "
                f"{MAX_HEADER_LEVEL}, got {self.level}"
            )


@dataclass(frozen=True, slots=True)
class Paragraph(Tag):
    """A single non-blank line of plain text."""

    kind: ClassVar[TokenType] = TokenType.PARAGRAPH


@dataclass(frozen=True, slots=True)
class UnorderedList(Tag):
    """Run of consecutive bullet lines sharing one delimiter.

    Markdown: - item  /  * item  /  + item

    """

    kind: ClassVar[TokenType] = TokenType.UNORDERED_LIST

    lines: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class OrderedList(Tag):
    """Reserved. Never produced by the scanner."""

    kind: ClassVar[TokenType] = TokenType.ORDERED_LIST

    lines: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Anchor(Tag):
    """Reserved. Never produced by the scanner."""

    kind: ClassVar[TokenType] = TokenType.ANCHOR


@dataclass(frozen=True, slots=True)
class Image(Tag):
    """Reserved. Never produced by the scanner."""

    kind: ClassVar[TokenType] = TokenType.IMAGE


@dataclass(frozen=True, slots=True)
class EndOfInput(Tag):
    """Sentinel closing every token sequence."""

    kind: ClassVar[TokenType] = TokenType.EOF


# =============================================================================
# Token
# =============================================================================


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        text: Decoded, trimmed content (empty for lists and EOF)
        tag: Kind of the token and its payload
        start_offset: Byte offset where the construct starts
        end_offset: Byte offset just past the construct

    Offsets are excluded from comparison and hashing: two tokens are
    equal when their text and tag are equal.

    """

    text: str
    tag: Tag
    start_offset: int = field(default=0, compare=False)
    end_offset: int = field(default=0, compare=False)

    @property
    def type(self) -> TokenType:
        """Token kind (convenience accessor)."""
        return self.tag.kind

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.tag!r}, {val!r}, {self.start_offset}:{self.end_offset})"
