"""Tests for the argument and count grammar."""

import pytest

from parse_fmt_str import Identifier
from parse_fmt_str import Index
from parse_fmt_str import Integer
from parse_fmt_str import MalformedSlotError
from parse_fmt_str import Parameter
from parse_fmt_str import parse_argument
from parse_fmt_str import parse_count
from parse_fmt_str.syntax.arguments import is_xid_continue
from parse_fmt_str.syntax.arguments import is_xid_start
from parse_fmt_str.syntax.arguments import read_count
from parse_fmt_str.syntax.arguments import read_identifier
from parse_fmt_str.syntax.arguments import read_integer
from parse_fmt_str.syntax.cursor import Cursor


class TestCharacterClasses:
    """Test identifier character predicates."""

    @pytest.mark.parametrize("char", ["a", "Z", "é", "名"])
    def test_xid_start(self, char: str) -> None:
        """Test characters that may start an identifier."""
        assert is_xid_start(char)
        assert is_xid_continue(char)

    @pytest.mark.parametrize("char", ["_", "0", "9"])
    def test_continue_only(self, char: str) -> None:
        """Test characters that may only follow the first."""
        assert not is_xid_start(char)
        assert is_xid_continue(char)

    @pytest.mark.parametrize("char", ["$", ":", "-", " ", "{"])
    def test_neither(self, char: str) -> None:
        """Test characters that never appear in identifiers."""
        assert not is_xid_start(char)
        assert not is_xid_continue(char)


class TestParseArgument:
    """Test whole-string argument parsing."""

    def test_identifier(self) -> None:
        """Test a named argument."""
        assert parse_argument("name") == Identifier(name="name")

    def test_identifier_with_digits_and_underscore(self) -> None:
        """Test that later characters may be digits or underscores."""
        assert parse_argument("a_1") == Identifier(name="a_1")

    def test_unicode_identifier(self) -> None:
        """Test a non-ASCII name."""
        assert parse_argument("名前") == Identifier(name="名前")

    @pytest.mark.parametrize(("text", "value"), [("0", 0), ("42", 42), ("007", 7)])
    def test_index(self, text: str, value: int) -> None:
        """Test positional arguments."""
        assert parse_argument(text) == Index(value=value)

    @pytest.mark.parametrize("text", ["", "_x", "+", "a-b", "1a"])
    def test_invalid(self, text: str) -> None:
        """Test text that is not exactly one argument."""
        with pytest.raises(MalformedSlotError):
            parse_argument(text)


class TestParseCount:
    """Test whole-string count parsing."""

    def test_parameter(self) -> None:
        """Test a count bound to a named argument."""
        assert parse_count("wide$") == Parameter(argument=Identifier(name="wide"))

    def test_integer(self) -> None:
        """Test a literal count."""
        assert parse_count("10") == Integer(value=10)

    @pytest.mark.parametrize("text", ["", "wide", "$", "10$", "wide$$"])
    def test_invalid(self, text: str) -> None:
        """Test text that is not exactly one count."""
        with pytest.raises(MalformedSlotError):
            parse_count(text)


class TestReaders:
    """Test cursor-level readers and their backtracking."""

    def test_read_identifier_stops_at_symbol(self) -> None:
        """Test that an identifier ends at the first non-XID character."""
        cursor = Cursor("ab1_c d")
        assert read_identifier(cursor) == "ab1_c"
        assert cursor.pos == 5

    def test_read_identifier_fails_without_moving(self) -> None:
        """Test that a failed identifier leaves the cursor in place."""
        cursor = Cursor("1abc")
        assert read_identifier(cursor) is None
        assert cursor.pos == 0

    def test_read_integer_ascii_only(self) -> None:
        """Test that only ASCII digits form integers."""
        cursor = Cursor("١٢")
        assert read_integer(cursor) is None
        assert cursor.pos == 0

    def test_read_count_backtracks_without_dollar(self) -> None:
        """Test that an identifier without '$' is fully rewound."""
        cursor = Cursor("wide.3")
        assert read_count(cursor) is None
        assert cursor.pos == 0

    def test_read_count_consumes_dollar(self) -> None:
        """Test that a parameter count consumes its '$'."""
        cursor = Cursor("w$.3")
        assert read_count(cursor) == Parameter(argument=Identifier(name="w"))
        assert cursor.remaining() == ".3"
