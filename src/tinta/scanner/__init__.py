"""Byte-dispatch scanner for the Tinta markdown dialect.

The scanner walks the buffer once and hands each significant byte to a
sub-scanner. Sub-scanners are plain functions with the signature
``(data, start, pos, decode) -> (new_pos, Token | None)``, so each one
can be exercised on its own.

Architecture:
scanner/
├── __init__.py      # Re-exports Scanner and the sub-scanners
├── core.py          # Scanner class (dispatch loop)
├── heading.py       # # Header
├── paragraph.py     # Plain text line
├── lists.py         # - / * / + items
├── cursor.py        # peek, line end, blank skipping
├── decode.py        # Span decoding (drop or raise)
└── charsets.py      # Byte constants

Usage:
    >>> from tinta.scanner import Scanner
    >>> Scanner("- a\\n- b").scan()[0].tag
    UnorderedList(lines=('a', 'b'))

"""

from tinta.scanner.core import Scanner
from tinta.scanner.decode import Decode, SpanDecoder
from tinta.scanner.heading import scan_header
from tinta.scanner.lists import scan_unordered_list
from tinta.scanner.paragraph import scan_paragraph

__all__ = [
    "Decode",
    "Scanner",
    "SpanDecoder",
    "scan_header",
    "scan_paragraph",
    "scan_unordered_list",
]
