"""Field layout shared by every value renderer."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from bracefmt.lib.flags import FormatFlags, FormatSpecError, parse_format_spec

if TYPE_CHECKING:
    from bracefmt.lib.flags import Align
    from bracefmt.lib.sink import Sink

logger = logging.getLogger(__name__)


def split_padding(align: Align, padding: int) -> tuple[int, int]:
    """Split `padding` fill units into (lead, tail) for one alignment mode."""

    if padding <= 0:
        return 0, 0
    if align == "<":
        return 0, padding
    if align == "^":
        # Odd remainder goes to the tail.
        lead = padding // 2
        return lead, padding - lead
    return padding, 0


def write_field(
    sink: Sink,
    flags: FormatFlags,
    body: str,
    *,
    default_align: Align,
    prefix: str = "",
) -> None:
    """Write `prefix + body` padded out to the flags' width.

    `prefix` carries the sign and any radix marker. In sign-aware (`=`) mode
    it is written before the padding; otherwise it stays attached to `body`.
    """

    content = len(prefix) + len(body)
    width = max(flags.width or 0, content)
    align = flags.align or default_align
    lead, tail = split_padding(align, width - content)

    if prefix and align == "=":
        sink.write(prefix)
        prefix = ""
    if lead:
        sink.write(flags.fill * lead)
    if prefix:
        sink.write(prefix)
    sink.write(body)
    if tail:
        sink.write(flags.fill * tail)


def parse_flags(spec: str) -> FormatFlags | None:
    """Parse spec text for a renderer, or None when the grammar rejects it."""

    try:
        return parse_format_spec(spec)
    except FormatSpecError as error:
        logger.debug("Rejected format spec: %s", error)
        return None


def as_text_flags(flags: FormatFlags) -> FormatFlags:
    """Text has no sign to be aware of, so `=` lays out like `<`."""

    if flags.align == "=":
        return replace(flags, align="<")
    return flags
