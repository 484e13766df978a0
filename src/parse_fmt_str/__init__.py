"""parse-fmt-str - parse format-string templates into a typed syntax tree.

This package reads ``format!``-style templates such as
``"Hello, {name:>8.3}!"`` and returns the literal text and replacement slots
they contain, each slot with its argument reference and format
specification. Rendering values is left to the caller.
"""

from parse_fmt_str.analysis import collect_arguments
from parse_fmt_str.analysis import collect_parameters
from parse_fmt_str.analysis import count_implicit_slots
from parse_fmt_str.analysis import needs_runtime_precision
from parse_fmt_str.core import FormatStringError
from parse_fmt_str.core import MalformedSlotError
from parse_fmt_str.core import ParseConfig
from parse_fmt_str.core import TrailingSlotDataError
from parse_fmt_str.core import UnmatchedBraceError
from parse_fmt_str.project_info import ProjectInfo
from parse_fmt_str.project_info import get_project_info
from parse_fmt_str.syntax import Align
from parse_fmt_str.syntax import Argument
from parse_fmt_str.syntax import Count
from parse_fmt_str.syntax import FormatSlot
from parse_fmt_str.syntax import FormatSpec
from parse_fmt_str.syntax import FormatString
from parse_fmt_str.syntax import Identifier
from parse_fmt_str.syntax import Index
from parse_fmt_str.syntax import Integer
from parse_fmt_str.syntax import Kind
from parse_fmt_str.syntax import LeftBrace
from parse_fmt_str.syntax import Parameter
from parse_fmt_str.syntax import PossibleFormatSlot
from parse_fmt_str.syntax import Precision
from parse_fmt_str.syntax import RightBrace
from parse_fmt_str.syntax import Sign
from parse_fmt_str.syntax import SpecifiedPrecision
from parse_fmt_str.syntax import parse_argument
from parse_fmt_str.syntax import parse_count
from parse_fmt_str.syntax import parse_format_slot
from parse_fmt_str.syntax import parse_format_spec
from parse_fmt_str.syntax import parse_format_string

# Public API - supports both direct and module imports
__all__ = [
    "Align",
    "Argument",
    "Count",
    "FormatSlot",
    "FormatSpec",
    "FormatString",
    "FormatStringError",
    "Identifier",
    "Index",
    "Integer",
    "Kind",
    "LeftBrace",
    "MalformedSlotError",
    "Parameter",
    "ParseConfig",
    "PossibleFormatSlot",
    "Precision",
    "ProjectInfo",
    "RightBrace",
    "Sign",
    "SpecifiedPrecision",
    "TrailingSlotDataError",
    "UnmatchedBraceError",
    "collect_arguments",
    "collect_parameters",
    "count_implicit_slots",
    "get_project_info",
    "needs_runtime_precision",
    "parse_argument",
    "parse_count",
    "parse_format_slot",
    "parse_format_spec",
    "parse_format_string",
]
__version__ = get_project_info().version
