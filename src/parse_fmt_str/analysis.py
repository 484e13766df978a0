"""Queries over parsed format strings.

These only extract references. Whether the referenced arguments exist, or
suit the requested presentation kind, is for the caller to decide.
"""

from parse_fmt_str.syntax.nodes import Argument
from parse_fmt_str.syntax.nodes import FormatString
from parse_fmt_str.syntax.nodes import Parameter
from parse_fmt_str.syntax.nodes import SpecifiedPrecision


def collect_arguments(format_string: FormatString) -> list[Argument]:
    """Extract the value arguments slots refer to explicitly.

    Args:
        format_string: Parsed template

    Returns:
        Arguments in order of first appearance, without duplicates

    """
    found: list[Argument] = []
    for slot in format_string.format_slots:
        if slot.arg is not None and slot.arg not in found:
            found.append(slot.arg)
    return found


def collect_parameters(format_string: FormatString) -> list[Argument]:
    """Extract the arguments bound to widths and precisions with ``$``.

    Args:
        format_string: Parsed template

    Returns:
        Arguments in order of first appearance, without duplicates

    """
    found: list[Argument] = []
    for slot in format_string.format_slots:
        if slot.fmt_spec is None:
            continue
        for count in (slot.fmt_spec.width, slot.fmt_spec.precision):
            if isinstance(count, Parameter) and count.argument not in found:
                found.append(count.argument)
    return found


def count_implicit_slots(format_string: FormatString) -> int:
    """Count the slots that take the next positional argument."""
    return sum(1 for slot in format_string.format_slots if slot.arg is None)


def needs_runtime_precision(format_string: FormatString) -> bool:
    """Whether any slot takes its precision from ``.*``."""
    return any(
        slot.fmt_spec is not None
        and isinstance(slot.fmt_spec.precision, SpecifiedPrecision)
        for slot in format_string.format_slots
    )
