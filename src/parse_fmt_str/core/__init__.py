"""Core functionality for parse-fmt-str.

This module contains the error types and configuration shared by the parsers.
"""

from parse_fmt_str.core.config import DEFAULT_CONFIG
from parse_fmt_str.core.config import ParseConfig
from parse_fmt_str.core.errors import FormatStringError
from parse_fmt_str.core.errors import MalformedSlotError
from parse_fmt_str.core.errors import TrailingSlotDataError
from parse_fmt_str.core.errors import UnmatchedBraceError

__all__ = [
    "DEFAULT_CONFIG",
    "FormatStringError",
    "MalformedSlotError",
    "ParseConfig",
    "TrailingSlotDataError",
    "UnmatchedBraceError",
]
