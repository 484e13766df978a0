"""Argument and count grammar.

An argument is an identifier or a decimal index. A count is a decimal
integer or an identifier followed by ``$``, which binds the count to an
argument at format time. Each ``read_*`` function leaves the cursor where it
found it when it fails.
"""

from parse_fmt_str.core.errors import MalformedSlotError
from parse_fmt_str.syntax.cursor import Cursor
from parse_fmt_str.syntax.nodes import Argument
from parse_fmt_str.syntax.nodes import Count
from parse_fmt_str.syntax.nodes import Identifier
from parse_fmt_str.syntax.nodes import Index
from parse_fmt_str.syntax.nodes import Integer
from parse_fmt_str.syntax.nodes import Parameter


def is_xid_start(char: str) -> bool:
    """Whether ``char`` has the Unicode XID_Start property.

    ``str.isidentifier`` also admits ``_`` as a first character, which is
    XID_Continue only.
    """
    return char != "_" and char.isidentifier()


def is_xid_continue(char: str) -> bool:
    """Whether ``char`` has the Unicode XID_Continue property."""
    return f"a{char}".isidentifier()


def is_ascii_digit(char: str) -> bool:
    """Whether ``char`` is one of ``0`` to ``9``."""
    return "0" <= char <= "9"


def read_identifier(cursor: Cursor) -> str | None:
    """Consume an identifier and return it, or None."""
    first = cursor.peek()
    if first is None or not is_xid_start(first):
        return None
    cursor.pos += 1
    return first + cursor.take_while(is_xid_continue)


def read_integer(cursor: Cursor) -> int | None:
    """Consume a run of ASCII digits and return its value, or None.

    Raises:
        MalformedSlotError: When the run is too long to convert to an int

    """
    start = cursor.offset
    digits = cursor.take_while(is_ascii_digit)
    if not digits:
        return None
    try:
        return int(digits)
    except ValueError as e:
        msg = f"Invalid format string: integer of {len(digits)} digits is too long"
        raise MalformedSlotError(msg, offset=start, template=cursor.template) from e


def read_argument(cursor: Cursor) -> Argument | None:
    """Consume an argument reference, trying an identifier first."""
    name = read_identifier(cursor)
    if name is not None:
        return Identifier(name=name)
    value = read_integer(cursor)
    if value is not None:
        return Index(value=value)
    return None


def read_count(cursor: Cursor) -> Count | None:
    """Consume a count.

    ``name$`` is tried before a bare integer. An identifier without the
    ``$`` is not a count, and the cursor is rewound to before it.
    """
    start = cursor.pos
    name = read_identifier(cursor)
    if name is not None:
        if cursor.eat("$"):
            return Parameter(argument=Identifier(name=name))
        cursor.pos = start
        return None
    value = read_integer(cursor)
    if value is not None:
        return Integer(value=value)
    return None


def parse_argument(text: str) -> Argument:
    """Parse ``text`` as exactly one argument reference.

    Args:
        text: Identifier or decimal index

    Returns:
        The argument

    Raises:
        MalformedSlotError: When ``text`` is not entirely an argument

    """
    cursor = Cursor(text)
    argument = read_argument(cursor)
    if argument is None or not cursor.at_end:
        msg = f"Invalid argument reference: {text!r}"
        raise MalformedSlotError(msg, offset=cursor.offset, template=text)
    return argument


def parse_count(text: str) -> Count:
    """Parse ``text`` as exactly one count.

    Args:
        text: Decimal integer or ``name$``

    Returns:
        The count

    Raises:
        MalformedSlotError: When ``text`` is not entirely a count

    """
    cursor = Cursor(text)
    count = read_count(cursor)
    if count is None or not cursor.at_end:
        msg = f"Invalid count: {text!r}"
        raise MalformedSlotError(msg, offset=cursor.offset, template=text)
    return count
