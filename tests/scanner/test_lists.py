"""Tests for unordered list scanning."""

from __future__ import annotations

import pytest

from tinta import Paragraph, Token, UnorderedList, scan
from tinta.scanner import scan_unordered_list
from tinta.tokens import TokenType


def _lists(source: str | bytes) -> list[tuple[str, ...]]:
    return [t.tag.lines for t in scan(source) if t.type == TokenType.UNORDERED_LIST]


class TestListGrouping:
    """Consecutive items sharing a delimiter form one list."""

    def test_three_delimiters_three_lists(self) -> None:
        source = """
    - this a dash list
    - to make a dash list
    - use dashes

    * this a star list
    * to make a star list
    * use stars

    + this a plus list
    + to make a plus list
    + use pluses
    """
        tokens = scan(source)
        assert tokens == [
            Token(
                "",
                UnorderedList(("this a dash list", "to make a dash list", "use dashes")),
            ),
            Token(
                "",
                UnorderedList(("this a star list", "to make a star list", "use stars")),
            ),
            Token(
                "",
                UnorderedList(("this a plus list", "to make a plus list", "use pluses")),
            ),
            tokens[-1],
        ]
        assert tokens[-1].type == TokenType.EOF

    def test_delimiter_switch_starts_new_list(self) -> None:
        assert _lists("- a\n- b\n* c\n+ d") == [("a", "b"), ("c",), ("d",)]

    def test_blank_line_ends_list(self) -> None:
        assert _lists("- a\n\n- b") == [("a",), ("b",)]

    def test_indentation_is_ignored(self) -> None:
        assert _lists("  - a\n\t- b\n    - c") == [("a", "b", "c")]

    def test_crlf_line_endings(self) -> None:
        assert _lists("- a\r\n- b\r\n") == [("a", "b")]

    def test_list_text_is_empty(self) -> None:
        tokens = scan("+ one")
        assert tokens[0].text == ""

    def test_paragraph_after_list(self) -> None:
        tokens = scan("- a\n- b\nafter")
        assert tokens[1] == Token("after", Paragraph())

    def test_empty_item(self) -> None:
        assert _lists("- a\n- ") == [("a", "")]

    def test_long_list_does_not_recurse(self) -> None:
        source = "\n".join(f"- item {i}" for i in range(5000))
        (lines,) = _lists(source)
        assert len(lines) == 5000
        assert lines[-1] == "item 4999"


class TestNotAList:
    """Delimiters that do not start a list."""

    @pytest.mark.parametrize("source", ["-a", "+a", "-", "--"])
    def test_dash_or_plus_without_space_is_paragraph(self, source: str) -> None:
        tokens = scan(source)
        assert tokens[0] == Token(source, Paragraph())

    def test_star_without_space_produces_nothing(self) -> None:
        tokens = scan("*a")
        assert tokens[0] == Token("a", Paragraph())

    @pytest.mark.parametrize("source", ["---", "-----", "---\n"])
    def test_horizontal_rule_is_reserved(self, source: str) -> None:
        tokens = scan(source)
        assert [t.type for t in tokens] == [TokenType.EOF]

    def test_text_after_rule_marker(self) -> None:
        tokens = scan("--- text")
        assert tokens[0] == Token("text", Paragraph())

    def test_next_line_without_space_ends_list(self) -> None:
        tokens = scan("- a\n-b")
        assert tokens[0].tag == UnorderedList(("a",))
        assert tokens[1] == Token("-b", Paragraph())


class TestScanUnorderedListFunction:
    """scan_unordered_list called directly."""

    def test_cursor_stops_at_first_non_item(self) -> None:
        pos, token = scan_unordered_list(b"+ x\n+ y\nz", 0, 1, ord("+"))
        assert pos == 8
        assert token == Token("", UnorderedList(("x", "y")))
        assert (token.start_offset, token.end_offset) == (0, 7)

    def test_undecodable_item_is_dropped(self) -> None:
        _, token = scan_unordered_list(b"- ok\n- \xff\n- fine", 0, 1, ord("-"))
        assert token == Token("", UnorderedList(("ok", "fine")))

    def test_all_items_undecodable_yields_no_token(self) -> None:
        pos, token = scan_unordered_list(b"- \xff\n- \xfe", 0, 1, ord("-"))
        assert token is None
        assert pos == 7

    def test_missing_space_falls_back_to_paragraph(self) -> None:
        _, token = scan_unordered_list(b"+x", 0, 1, ord("+"))
        assert token == Token("+x", Paragraph())
