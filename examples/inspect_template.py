"""Example walking through a parsed format-string template.

This example shows how to parse a template, iterate its pieces, and list
the arguments a caller has to supply before rendering it.
"""

from parse_fmt_str import FormatSlot
from parse_fmt_str import FormatStringError
from parse_fmt_str import collect_arguments
from parse_fmt_str import collect_parameters
from parse_fmt_str import count_implicit_slots
from parse_fmt_str import parse_format_string

TEMPLATES = [
    "Hello, {name}!",
    "{0:>8.3e} +/- {err:.prec$}",
    "{state:#?} at {addr:#x?}",
    "{{literal braces}} and {:#010x}",
    "{value:x!}",
]


def describe(template: str) -> None:
    """Print the pieces of one template."""
    print(f"Template: {template!r}")
    try:
        fs = parse_format_string(template)
    except FormatStringError as e:
        print(f"  error at {e.offset}: {e.message}")
        return

    for piece in fs.pieces():
        match piece:
            case str():
                print(f"  text   {piece!r}")
            case FormatSlot(arg=arg, fmt_spec=spec):
                arg_text = arg.to_template() if arg is not None else "<next>"
                spec_text = spec.to_template() if spec is not None else "<default>"
                debug = " (debug)" if spec is not None and spec.kind.is_debug else ""
                print(f"  slot   arg={arg_text} spec={spec_text!r}{debug}")
            case _:
                print(f"  escape {piece.literal!r}")

    names = [a.to_template() for a in collect_arguments(fs)]
    params = [a.to_template() for a in collect_parameters(fs)]
    print(f"  arguments={names} parameters={params}")
    print(f"  implicit slots={count_implicit_slots(fs)}")


def main() -> None:
    """Describe each sample template."""
    for template in TEMPLATES:
        describe(template)


if __name__ == "__main__":
    main()
