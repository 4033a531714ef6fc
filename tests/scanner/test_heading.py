"""Tests for ATX header scanning."""

from __future__ import annotations

import pytest

from tinta import Header, Paragraph, Token, scan
from tinta.scanner import scan_header
from tinta.tokens import TokenType


class TestHeaderLevels:
    """Marker count maps to header level."""

    @pytest.mark.parametrize("level", range(1, 7))
    def test_level_matches_marker_count(self, level: int) -> None:
        tokens = scan("#" * level + f" header {level}")
        assert tokens[0] == Token(f"header {level}", Header(level))

    @pytest.mark.parametrize("level", range(1, 7))
    def test_closing_run_is_stripped(self, level: int) -> None:
        marks = "#" * level
        tokens = scan(f"{marks} header {level} {marks}")
        assert tokens[0] == Token(f"header {level}", Header(level))

    def test_longer_header(self) -> None:
        tokens = scan("### this is a longer header")
        assert tokens[0] == Token("this is a longer header", Header(3))

    def test_closing_run_of_different_length(self) -> None:
        tokens = scan("## header 2 #####")
        assert tokens[0] == Token("header 2", Header(2))


class TestNotAHeader:
    """Hash runs that fall back to paragraphs."""

    def test_seven_markers_is_paragraph(self) -> None:
        tokens = scan("####### not a header")
        assert tokens[0] == Token("####### not a header", Paragraph())

    def test_bare_marker_run_is_paragraph(self) -> None:
        tokens = scan("#######")
        assert tokens[0] == Token("#######", Paragraph())

    def test_hash_without_space_is_paragraph(self) -> None:
        tokens = scan("#not a header")
        assert tokens[0] == Token("#not a header", Paragraph())

    def test_space_checked_after_whole_run(self) -> None:
        tokens = scan("###tag")
        assert tokens[0] == Token("###tag", Paragraph())

    def test_single_hash_at_end_of_input(self) -> None:
        tokens = scan("#")
        assert tokens[0] == Token("#", Paragraph())


class TestHeaderText:
    """Header text extraction."""

    def test_surrounding_whitespace_trimmed(self) -> None:
        tokens = scan("#    spaced out   ")
        assert tokens[0].text == "spaced out"

    def test_crlf_line_ending(self) -> None:
        tokens = scan("## Title ##\r\nnext")
        assert tokens[0] == Token("Title", Header(2))
        assert tokens[1] == Token("next", Paragraph())

    def test_empty_header(self) -> None:
        tokens = scan("# ")
        assert tokens[0] == Token("", Header(1))

    def test_trailing_hashes_trimmed_without_space(self) -> None:
        tokens = scan("# C#")
        assert tokens[0] == Token("C", Header(1))

    def test_unicode_text(self) -> None:
        tokens = scan("# Café ☕")
        assert tokens[0] == Token("Café ☕", Header(1))

    def test_header_ends_at_newline(self) -> None:
        tokens = scan("# a\nb")
        assert [t.type for t in tokens] == [
            TokenType.HEADER,
            TokenType.PARAGRAPH,
            TokenType.EOF,
        ]

    def test_indented_header(self) -> None:
        tokens = scan("   ## indented")
        assert tokens[0] == Token("indented", Header(2))


class TestScanHeaderFunction:
    """scan_header called directly."""

    def test_returns_cursor_at_line_end(self) -> None:
        pos, token = scan_header(b"## two\nrest", 0, 1)
        assert pos == 6
        assert token == Token("two", Header(2))

    def test_records_byte_span(self) -> None:
        _, token = scan_header(b"x\n# one\n", 2, 3)
        assert token is not None
        assert (token.start_offset, token.end_offset) == (2, 7)

    def test_undecodable_text_yields_no_token(self) -> None:
        pos, token = scan_header(b"# \xff\xfe\nnext", 0, 1)
        assert token is None
        assert pos == 4

    def test_overflow_delegates_to_paragraph(self) -> None:
        pos, token = scan_header(b"######## eight", 0, 1)
        assert pos == 14
        assert token == Token("######## eight", Paragraph())
