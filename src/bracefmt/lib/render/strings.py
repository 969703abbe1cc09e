"""String, boolean and character rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bracefmt.lib.flags import FLOAT_TYPES, INTEGER_TYPES
from bracefmt.lib.render._common import as_text_flags, parse_flags, write_field
from bracefmt.lib.render.integers import render_integer_flags, write_codepoint, write_integer

if TYPE_CHECKING:
    from bracefmt.lib.flags import FormatFlags
    from bracefmt.lib.sink import Sink
    from bracefmt.lib.values import Char


def write_text(sink: Sink, flags: FormatFlags, text: str) -> bool:
    if flags.type not in (None, "s"):
        return False
    # Precision truncates; it never pads.
    if flags.precision is not None:
        text = text[: flags.precision]
    write_field(sink, as_text_flags(flags), text, default_align="<")
    return True


def render_str(sink: Sink, spec: str, value: str) -> bool:
    flags = parse_flags(spec)
    if flags is None:
        return False
    return write_text(sink, flags, value)


def render_bool(sink: Sink, spec: str, value: bool) -> bool:
    flags = parse_flags(spec)
    if flags is None:
        return False
    if flags.type in INTEGER_TYPES or flags.type in FLOAT_TYPES or flags.type == "c":
        return render_integer_flags(sink, flags, int(value))
    return write_text(sink, flags, "true" if value else "false")


def render_char(sink: Sink, spec: str, value: Char) -> bool:
    flags = parse_flags(spec)
    if flags is None or flags.precision is not None:
        return False
    if flags.type in INTEGER_TYPES:
        write_integer(sink, flags, False, value.codepoint)
        return True
    if flags.type not in (None, "c", "s"):
        return False
    write_codepoint(sink, flags, False, value.codepoint)
    return True
