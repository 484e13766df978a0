"""Custom exceptions for parse-fmt-str.

This module provides the closed set of failures a template parse can end in.
Every exception records where in the input the problem was found.
"""


class FormatStringError(ValueError):
    """Base exception for template parse failures.

    Attributes:
        message: Human-readable description of the failure.
        offset: Character index into ``template`` where the failure was found.
        template: The text that was being parsed.

    """

    def __init__(self, message: str, *, offset: int, template: str = "") -> None:
        """Initialize with message, offset and the text being parsed."""
        self.message = message
        self.offset = offset
        self.template = template
        super().__init__(f"{message} (at offset {offset})")


class MalformedSlotError(FormatStringError):
    """Raised when a slot body cannot be parsed at all.

    This occurs when:
    - The argument is followed by something other than ``:``
    - The body starts with a character that can begin neither an argument
      nor a format specification
    - Strict precision is enabled and a ``.`` has no precision after it
    """


class TrailingSlotDataError(FormatStringError):
    """Raised when a format specification leaves unconsumed characters.

    Fields supplied out of their fixed order end up here, since the parser
    stops at the first field it cannot place.
    """


class UnmatchedBraceError(FormatStringError):
    """Raised when a ``}`` appears outside a slot without being doubled."""
