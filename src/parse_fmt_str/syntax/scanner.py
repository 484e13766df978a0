"""Top-level template scanner.

Splits a template into literal text and brace-delimited slots in a single
left-to-right pass, and hands each slot body to the slot grammar.
"""

import hashlib
import time

from opentelemetry import trace

from parse_fmt_str.core.config import DEFAULT_CONFIG
from parse_fmt_str.core.config import ParseConfig
from parse_fmt_str.core.errors import FormatStringError
from parse_fmt_str.core.errors import UnmatchedBraceError
from parse_fmt_str.syntax.cursor import Cursor
from parse_fmt_str.syntax.nodes import FormatString
from parse_fmt_str.syntax.nodes import LeftBrace
from parse_fmt_str.syntax.nodes import PossibleFormatSlot
from parse_fmt_str.syntax.nodes import RightBrace
from parse_fmt_str.syntax.spec import read_format_slot

tracer = trace.get_tracer(__name__)


def scan(template: str, config: ParseConfig = DEFAULT_CONFIG) -> FormatString:
    """Scan ``template`` into a ``FormatString``.

    An opening brace with no closing brace after it, or with nothing between
    the two, ends structured parsing: the brace and the rest of the input
    become literal text.

    Raises:
        MalformedSlotError: When a slot body cannot be parsed
        TrailingSlotDataError: When a slot body has characters left over
        UnmatchedBraceError: When a lone ``}`` appears outside a slot

    """
    cursor = Cursor(template)
    text: list[str] = []
    slots: list[PossibleFormatSlot] = []
    segment = ""

    while not cursor.at_end:
        if cursor.startswith("{{") or cursor.startswith("}}"):
            slots.append(LeftBrace() if cursor.peek() == "{" else RightBrace())
            text.append(segment)
            segment = ""
            cursor.pos += 2
        elif cursor.peek() == "{":
            start = cursor.pos
            close = cursor.find("}")
            if close == -1 or close == start + 1:
                segment += cursor.remaining()
                break
            body = template[start + 1 : close]
            slot = read_format_slot(
                Cursor(body, base=start + 1, template=template), config
            )
            slots.append(
                slot.model_copy(
                    update={"source": template[start : close + 1], "offset": start}
                )
            )
            text.append(segment)
            segment = ""
            cursor.pos = close + 1
        elif cursor.peek() == "}":
            msg = "Invalid format string: unmatched '}' outside a slot"
            raise UnmatchedBraceError(msg, offset=cursor.offset, template=template)
        else:
            segment += cursor.take_until("{}")

    text.append(segment)
    return FormatString(text=tuple(text), slots=tuple(slots))


def parse_format_string(
    template: str, config: ParseConfig | None = None
) -> FormatString:
    """Parse a format-string template.

    Args:
        template: Template text such as ``"Hello, {name:>8}!"``
        config: Optional parse configuration

    Returns:
        The literal segments and slots of the template

    Raises:
        TypeError: When template is not a string
        ValueError: When template exceeds the configured maximum length
        FormatStringError: When the template is not a valid format string

    """
    if not isinstance(template, str):
        msg = f"Format string template must be str, got {type(template).__name__}"
        raise TypeError(msg)

    config = config or DEFAULT_CONFIG
    limit = config.max_template_length
    if limit is not None and len(template) > limit:
        msg = f"Template of length {len(template)} exceeds the limit of {limit}"
        raise ValueError(msg)

    if not config.trace_parsing:
        return scan(template, config)

    with tracer.start_as_current_span("format_string.parse") as span:
        start_time = time.perf_counter()

        span.set_attribute("format_string.template_hash", _hash_template(template))
        span.set_attribute("format_string.length", len(template))

        try:
            result = scan(template, config)
        except FormatStringError as e:
            span.set_attribute("format_string.error", type(e).__name__)
            span.set_attribute("format_string.error_offset", e.offset)
            raise

        parse_ms = (time.perf_counter() - start_time) * 1000
        span.set_attribute("format_string.slot_count", len(result.format_slots))
        span.set_attribute("format_string.parse_ms", parse_ms)

        return result


def _hash_template(template: str) -> str:
    """Generate hash of template for telemetry."""
    return hashlib.sha256(template[:500].encode()).hexdigest()[:16]
