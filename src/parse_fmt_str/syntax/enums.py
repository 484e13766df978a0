"""Enumerations for format specification fields.

Each member's value is the exact text it is spelled with in a template, so
``Align("^")`` and ``str(Kind.DEBUG_UPPER_HEX)`` both work as expected.
"""

from enum import StrEnum


class Align(StrEnum):
    """Where a value sits inside its padded field."""

    LEFT = "<"
    CENTER = "^"
    RIGHT = ">"


class Sign(StrEnum):
    """Forced sign prefix."""

    POSITIVE = "+"
    NEGATIVE = "-"


class Kind(StrEnum):
    """Presentation kind selected by the trailing type character.

    Attributes:
        DEBUG: ``?``
        DEBUG_LOWER_HEX: ``x?``
        DEBUG_UPPER_HEX: ``X?``
        OCTAL: ``o``
        LOWER_HEX: ``x``
        UPPER_HEX: ``X``
        POINTER: ``p``
        BINARY: ``b``
        LOWER_EXP: ``e``
        UPPER_EXP: ``E``
        NONE: no type character, the default display form.

    """

    DEBUG = "?"
    DEBUG_LOWER_HEX = "x?"
    DEBUG_UPPER_HEX = "X?"
    OCTAL = "o"
    LOWER_HEX = "x"
    UPPER_HEX = "X"
    POINTER = "p"
    BINARY = "b"
    LOWER_EXP = "e"
    UPPER_EXP = "E"
    NONE = ""

    @property
    def is_debug(self) -> bool:
        """Whether this kind renders through the debug representation."""
        return self in (Kind.DEBUG, Kind.DEBUG_LOWER_HEX, Kind.DEBUG_UPPER_HEX)


ALIGN_CHARS = "<^>"
SIGN_CHARS = "+-"
KIND_CHARS = "?oxXpbeE"
