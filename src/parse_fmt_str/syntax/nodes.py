"""Syntax tree for parsed format strings.

This module defines the immutable values a parse produces. Every node can
render itself back to template syntax with ``to_template()``.
"""

from collections.abc import Iterator
from typing import Annotated
from typing import Literal
from typing import Self

from pydantic import BaseModel
from pydantic import Field
from pydantic import model_validator

from parse_fmt_str.syntax.enums import Align
from parse_fmt_str.syntax.enums import Kind
from parse_fmt_str.syntax.enums import Sign


class SyntaxNode(BaseModel):
    """Base class for all syntax tree nodes."""

    model_config = {"frozen": True}

    def to_template(self) -> str:
        """Render this node in template syntax."""
        raise NotImplementedError


class Identifier(SyntaxNode):
    """Argument referenced by name.

    Attributes:
        name: The identifier, an XID_Start character followed by XID_Continue
            characters.

    """

    node: Literal["identifier"] = "identifier"
    name: str = Field(min_length=1)

    def to_template(self) -> str:
        """Return the name."""
        return self.name


class Index(SyntaxNode):
    """Argument referenced by zero-based position.

    Attributes:
        value: Position of the argument.

    """

    node: Literal["index"] = "index"
    value: int = Field(ge=0)

    def to_template(self) -> str:
        """Return the position in decimal."""
        return str(self.value)


Argument = Annotated[Identifier | Index, Field(discriminator="node")]


class Integer(SyntaxNode):
    """Literal width or precision."""

    node: Literal["integer"] = "integer"
    value: int = Field(ge=0)

    def to_template(self) -> str:
        """Return the value in decimal."""
        return str(self.value)


class Parameter(SyntaxNode):
    """Width or precision taken from an argument at format time.

    Attributes:
        argument: The argument holding the count, spelled ``name$``.

    """

    node: Literal["parameter"] = "parameter"
    argument: Argument

    def to_template(self) -> str:
        """Return the argument followed by ``$``."""
        return f"{self.argument.to_template()}$"


class SpecifiedPrecision(SyntaxNode):
    """Precision supplied separately at format time, spelled ``.*``."""

    node: Literal["specified"] = "specified"

    def to_template(self) -> str:
        """Return ``*``."""
        return "*"


Count = Annotated[Integer | Parameter, Field(discriminator="node")]
Precision = Annotated[
    Integer | Parameter | SpecifiedPrecision, Field(discriminator="node")
]


class FormatSpec(SyntaxNode):
    """Everything after the ``:`` of a slot.

    Attributes:
        fill: Padding character, or None for the default space.
        align: Alignment inside the padded field.
        sign: Forced sign prefix.
        alternate: Whether the ``#`` alternate form was requested.
        pad_with_zeros: Whether the ``0`` flag was given.
        width: Minimum field width.
        precision: Digits after the point, or maximum length for strings.
        kind: Presentation kind.

    """

    fill: str | None = Field(default=None, min_length=1, max_length=1)
    align: Align | None = None
    sign: Sign | None = None
    alternate: bool = False
    pad_with_zeros: bool = False
    width: Count | None = None
    precision: Precision | None = None
    kind: Kind = Kind.NONE

    @property
    def is_default(self) -> bool:
        """Whether every field holds its default value."""
        return self == FormatSpec()

    def to_template(self) -> str:
        """Return the canonical spelling of this specification.

        A fill is only written together with an alignment, since a lone fill
        character cannot be told apart from the fields that follow it.
        """
        parts: list[str] = []
        if self.align is not None:
            if self.fill is not None:
                parts.append(self.fill)
            parts.append(self.align.value)
        if self.sign is not None:
            parts.append(self.sign.value)
        if self.alternate:
            parts.append("#")
        if self.pad_with_zeros:
            parts.append("0")
        if self.width is not None:
            parts.append(self.width.to_template())
        if self.precision is not None:
            parts.append(f".{self.precision.to_template()}")
        parts.append(self.kind.value)
        return "".join(parts)


class FormatSlot(SyntaxNode):
    """A replacement slot.

    Attributes:
        arg: The value to format, or None for the next implicit argument.
        fmt_spec: The specification, present only if the body had a ``:``.
        source: Raw slot text including both braces, when parsed.
        offset: Character index of the opening brace, when parsed.

    """

    node: Literal["slot"] = "slot"
    arg: Argument | None = None
    fmt_spec: FormatSpec | None = None
    source: str | None = None
    offset: int | None = Field(default=None, ge=0)

    def to_template(self) -> str:
        """Return the canonical spelling of this slot, braces included."""
        arg = self.arg.to_template() if self.arg is not None else ""
        spec = f":{self.fmt_spec.to_template()}" if self.fmt_spec is not None else ""
        return f"{{{arg}{spec}}}"


class LeftBrace(SyntaxNode):
    """Escaped ``{{``."""

    node: Literal["left_brace"] = "left_brace"

    @property
    def source(self) -> str:
        """Raw template text of the escape."""
        return "{{"

    @property
    def literal(self) -> str:
        """The character the escape stands for."""
        return "{"

    def to_template(self) -> str:
        """Return ``{{``."""
        return self.source


class RightBrace(SyntaxNode):
    """Escaped ``}}``."""

    node: Literal["right_brace"] = "right_brace"

    @property
    def source(self) -> str:
        """Raw template text of the escape."""
        return "}}"

    @property
    def literal(self) -> str:
        """The character the escape stands for."""
        return "}"

    def to_template(self) -> str:
        """Return ``}}``."""
        return self.source


PossibleFormatSlot = Annotated[
    FormatSlot | LeftBrace | RightBrace, Field(discriminator="node")
]


class FormatString(SyntaxNode):
    """A parsed template.

    ``text`` and ``slots`` interleave as ``text[0], slots[0], text[1], ...``
    and there is always exactly one more text segment than slots.

    Attributes:
        text: Literal text segments, possibly empty.
        slots: Slots and escaped braces between the segments.

    """

    text: tuple[str, ...] = ("",)
    slots: tuple[PossibleFormatSlot, ...] = ()

    @model_validator(mode="after")
    def check_interleaving(self) -> Self:
        """Require one more text segment than slots."""
        if len(self.text) != len(self.slots) + 1:
            msg = (
                f"Expected {len(self.slots) + 1} text segments for "
                f"{len(self.slots)} slots, got {len(self.text)}"
            )
            raise ValueError(msg)
        return self

    @property
    def format_slots(self) -> list[FormatSlot]:
        """Real replacement slots, without the escaped braces."""
        return [slot for slot in self.slots if isinstance(slot, FormatSlot)]

    def pieces(self) -> Iterator[str | FormatSlot | LeftBrace | RightBrace]:
        """Yield segments and slots in template order, skipping empty text."""
        for segment, slot in zip(self.text, self.slots, strict=False):
            if segment:
                yield segment
            yield slot
        if self.text[-1]:
            yield self.text[-1]

    def literal_text(self) -> str:
        """Join the text segments with escaped braces unescaped.

        Replacement slots contribute nothing.
        """
        parts = [self.text[0]]
        for slot, segment in zip(self.slots, self.text[1:], strict=True):
            if not isinstance(slot, FormatSlot):
                parts.append(slot.literal)
            parts.append(segment)
        return "".join(parts)

    def to_template(self) -> str:
        """Reassemble the template.

        Parsed slots contribute their raw source, so the result equals the
        parsed input exactly.
        """
        parts = [self.text[0]]
        for slot, segment in zip(self.slots, self.text[1:], strict=True):
            if isinstance(slot, FormatSlot) and slot.source is None:
                parts.append(slot.to_template())
            else:
                parts.append(slot.source)
            parts.append(segment)
        return "".join(parts)
