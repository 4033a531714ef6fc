"""Byte sets for O(1) classification.

The scanner walks a ``bytes`` buffer, so indexing yields ints. All
markers are therefore stored as ints, and sets are frozensets of ints.

Usage:
    from tinta.scanner.charsets import LINE_BLANKS

    if data[pos] in LINE_BLANKS:  # O(1) lookup
        ...
"""

HASH: int = ord("#")
STAR: int = ord("*")
DASH: int = ord("-")
PLUS: int = ord("+")
SPACE: int = ord(" ")
NEWLINE: int = ord("\n")

# Returned by peek() past the end of the buffer; never equal to a byte
END: int = -1

# Bytes skipped by the dispatch loop without producing a token
WHITESPACE: frozenset[int] = frozenset(b" \t\r\n")

# Blanks skipped at the start of a line while looking for the next list item
LINE_BLANKS: frozenset[int] = frozenset(b" \t\r")

# Unordered list delimiters
LIST_DELIMITERS: frozenset[int] = frozenset(b"*-+")
