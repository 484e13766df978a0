"""Tests for the rewindable cursor."""

from parse_fmt_str.syntax.cursor import Cursor


class TestCursor:
    """Test cursor movement and lookahead."""

    def test_peek_does_not_consume(self) -> None:
        """Test lookahead by zero and one characters."""
        cursor = Cursor("ab")
        assert cursor.peek() == "a"
        assert cursor.peek(1) == "b"
        assert cursor.peek(2) is None
        assert cursor.pos == 0

    def test_peek_counts_characters(self) -> None:
        """Test that multi-byte characters take one position each."""
        cursor = Cursor("é😀>")
        assert cursor.peek(1) == "😀"
        assert cursor.peek(2) == ">"

    def test_eat(self) -> None:
        """Test conditional consumption of a literal."""
        cursor = Cursor("x?y")
        assert not cursor.eat("?")
        assert cursor.eat("x?")
        assert cursor.remaining() == "y"

    def test_eat_one_of(self) -> None:
        """Test consuming one character from a set."""
        cursor = Cursor("^5")
        assert cursor.eat_one_of("+-") is None
        assert cursor.eat_one_of("<^>") == "^"
        assert cursor.pos == 1

    def test_eat_one_of_at_end(self) -> None:
        """Test that nothing is consumed at the end of input."""
        cursor = Cursor("")
        assert cursor.at_end
        assert cursor.eat_one_of("<^>") is None

    def test_take_while_and_until(self) -> None:
        """Test run consumption."""
        cursor = Cursor("123abc{x}")
        assert cursor.take_while(str.isdigit) == "123"
        assert cursor.take_until("{}") == "abc"
        assert cursor.peek() == "{"
        assert cursor.take_while(str.isdigit) == ""

    def test_find(self) -> None:
        """Test searching forward from the position."""
        cursor = Cursor("}{a}")
        cursor.pos = 1
        assert cursor.find("}") == 3
        assert cursor.find("z") == -1

    def test_offset_includes_base(self) -> None:
        """Test positions relative to an enclosing template."""
        cursor = Cursor("x:>4", base=3, template="ab {x:>4}")
        cursor.pos = 2
        assert cursor.offset == 5
        assert cursor.template == "ab {x:>4}"

    def test_template_defaults_to_text(self) -> None:
        """Test that a standalone cursor reports its own text."""
        assert Cursor("abc").template == "abc"
