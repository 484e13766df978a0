"""Slot body and format specification grammar.

A slot body is an optional argument, optionally followed by ``:`` and a
format specification. The specification is read as seven optional fields in
a fixed order::

    [[fill]align][sign]['#']['0'][width]['.' precision][kind]

Every field that does not match is left absent and the next one is tried
from the same position. Whatever is left after the last field is an error.
"""

from parse_fmt_str.core.config import DEFAULT_CONFIG
from parse_fmt_str.core.config import ParseConfig
from parse_fmt_str.core.errors import MalformedSlotError
from parse_fmt_str.core.errors import TrailingSlotDataError
from parse_fmt_str.syntax.arguments import read_argument
from parse_fmt_str.syntax.arguments import read_count
from parse_fmt_str.syntax.cursor import Cursor
from parse_fmt_str.syntax.enums import ALIGN_CHARS
from parse_fmt_str.syntax.enums import KIND_CHARS
from parse_fmt_str.syntax.enums import SIGN_CHARS
from parse_fmt_str.syntax.enums import Align
from parse_fmt_str.syntax.enums import Kind
from parse_fmt_str.syntax.enums import Sign
from parse_fmt_str.syntax.nodes import FormatSlot
from parse_fmt_str.syntax.nodes import FormatSpec
from parse_fmt_str.syntax.nodes import Precision
from parse_fmt_str.syntax.nodes import SpecifiedPrecision


def read_fill_align(cursor: Cursor) -> tuple[str | None, Align | None]:
    """Consume an optional fill character and alignment.

    The fill may itself be ``<``, ``^`` or ``>``, so the character after the
    next one decides: if it is an alignment symbol, the next character is
    the fill. Otherwise a lone alignment symbol is tried.
    """
    second = cursor.peek(1)
    if second is not None and second in ALIGN_CHARS:
        fill = cursor.peek()
        cursor.pos += 2
        return fill, Align(second)
    align = cursor.eat_one_of(ALIGN_CHARS)
    return None, Align(align) if align is not None else None


def read_precision(cursor: Cursor, config: ParseConfig) -> Precision | None:
    """Consume an optional ``.`` followed by a count or ``*``.

    A ``.`` with neither after it is dropped unless strict precision is on.
    """
    dot = cursor.offset
    if not cursor.eat("."):
        return None
    precision = read_count(cursor)
    if precision is not None:
        return precision
    if cursor.eat("*"):
        return SpecifiedPrecision()
    if config.strict_precision:
        msg = "Invalid format string: expected a count or '*' after '.'"
        raise MalformedSlotError(msg, offset=dot, template=cursor.template)
    return None


def read_kind(cursor: Cursor) -> Kind:
    """Consume an optional presentation kind.

    ``x`` and ``X`` look one character further for the ``?`` of the debug
    hex variants.
    """
    char = cursor.eat_one_of(KIND_CHARS)
    if char is None:
        return Kind.NONE
    if char in "xX" and cursor.eat("?"):
        return Kind(f"{char}?")
    return Kind(char)


def read_format_spec(
    cursor: Cursor, config: ParseConfig = DEFAULT_CONFIG
) -> FormatSpec:
    """Consume as much of a format specification as matches.

    Leftover characters are left for the caller to reject.
    """
    fill, align = read_fill_align(cursor)
    sign = cursor.eat_one_of(SIGN_CHARS)
    alternate = cursor.eat("#")
    pad_with_zeros = cursor.eat("0")
    width = read_count(cursor)
    precision = read_precision(cursor, config)
    kind = read_kind(cursor)
    return FormatSpec(
        fill=fill,
        align=align,
        sign=Sign(sign) if sign is not None else None,
        alternate=alternate,
        pad_with_zeros=pad_with_zeros,
        width=width,
        precision=precision,
        kind=kind,
    )


def _check_consumed(cursor: Cursor) -> None:
    if not cursor.at_end:
        msg = (
            "Invalid format string: slot had additional data "
            f"{cursor.remaining()!r}"
        )
        raise TrailingSlotDataError(
            msg, offset=cursor.offset, template=cursor.template
        )


def read_format_slot(
    cursor: Cursor, config: ParseConfig = DEFAULT_CONFIG
) -> FormatSlot:
    """Parse a whole slot body at ``cursor``.

    Args:
        cursor: Cursor over the text between the braces
        config: Parse configuration

    Returns:
        The slot, without source information

    Raises:
        MalformedSlotError: When the body starts with neither an argument nor
            ``:``
        TrailingSlotDataError: When the argument or specification leaves
            characters

    """
    arg = read_argument(cursor)
    if not cursor.eat(":"):
        if arg is not None:
            _check_consumed(cursor)
        elif not cursor.at_end:
            msg = (
                "Invalid format string: slot didn't parse, expected ':' "
                f"but found {cursor.peek()!r}"
            )
            raise MalformedSlotError(
                msg, offset=cursor.offset, template=cursor.template
            )
        return FormatSlot(arg=arg)
    fmt_spec = read_format_spec(cursor, config)
    _check_consumed(cursor)
    return FormatSlot(arg=arg, fmt_spec=fmt_spec)


def parse_format_slot(body: str, config: ParseConfig | None = None) -> FormatSlot:
    """Parse the text between a slot's braces.

    Args:
        body: Slot body such as ``name:>8.3``
        config: Optional parse configuration

    Returns:
        The parsed slot

    Raises:
        MalformedSlotError: When the body cannot be parsed
        TrailingSlotDataError: When the body has characters left over

    """
    return read_format_slot(Cursor(body), config or DEFAULT_CONFIG)


def parse_format_spec(text: str, config: ParseConfig | None = None) -> FormatSpec:
    """Parse a format specification, the part of a slot after ``:``.

    Args:
        text: Specification such as ``*^+#010.3x?``
        config: Optional parse configuration

    Returns:
        The parsed specification

    Raises:
        MalformedSlotError: When strict precision rejects a bare ``.``
        TrailingSlotDataError: When the text has characters left over

    """
    cursor = Cursor(text)
    fmt_spec = read_format_spec(cursor, config or DEFAULT_CONFIG)
    _check_consumed(cursor)
    return fmt_spec
