"""Format-string grammar: scanner, slot grammar and syntax tree."""

from parse_fmt_str.syntax.arguments import parse_argument
from parse_fmt_str.syntax.arguments import parse_count
from parse_fmt_str.syntax.enums import Align
from parse_fmt_str.syntax.enums import Kind
from parse_fmt_str.syntax.enums import Sign
from parse_fmt_str.syntax.nodes import Argument
from parse_fmt_str.syntax.nodes import Count
from parse_fmt_str.syntax.nodes import FormatSlot
from parse_fmt_str.syntax.nodes import FormatSpec
from parse_fmt_str.syntax.nodes import FormatString
from parse_fmt_str.syntax.nodes import Identifier
from parse_fmt_str.syntax.nodes import Index
from parse_fmt_str.syntax.nodes import Integer
from parse_fmt_str.syntax.nodes import LeftBrace
from parse_fmt_str.syntax.nodes import Parameter
from parse_fmt_str.syntax.nodes import PossibleFormatSlot
from parse_fmt_str.syntax.nodes import Precision
from parse_fmt_str.syntax.nodes import RightBrace
from parse_fmt_str.syntax.nodes import SpecifiedPrecision
from parse_fmt_str.syntax.scanner import parse_format_string
from parse_fmt_str.syntax.spec import parse_format_slot
from parse_fmt_str.syntax.spec import parse_format_spec

__all__ = [
    "Align",
    "Argument",
    "Count",
    "FormatSlot",
    "FormatSpec",
    "FormatString",
    "Identifier",
    "Index",
    "Integer",
    "Kind",
    "LeftBrace",
    "Parameter",
    "PossibleFormatSlot",
    "Precision",
    "RightBrace",
    "Sign",
    "SpecifiedPrecision",
    "parse_argument",
    "parse_count",
    "parse_format_slot",
    "parse_format_spec",
    "parse_format_string",
]
