"""Format-spec grammar: `[[fill]align][sign]['#'][0][width]['.'precision][type]`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, cast

Align = Literal["<", ">", "^", "="]
Sign = Literal["+", "-", " "]

ALIGN_MARKERS = frozenset("<>^=")
SIGN_MARKERS = frozenset("+- ")
INTEGER_TYPES = frozenset("bodxX")
FLOAT_TYPES = frozenset("eEfFgG%")
TYPE_MARKERS = INTEGER_TYPES | FLOAT_TYPES | frozenset("sc")


class FormatSpecError(ValueError):
    """Spec text does not follow the format-spec grammar."""


@dataclass(frozen=True, slots=True)
class FormatFlags:
    """Parsed rendering flags for one placeholder.

    Every field is optional; renderers supply their own defaults for the
    ones left unset.
    """

    fill: str = " "
    align: Align | None = None
    sign: Sign | None = None
    alternate: bool = False
    width: int | None = None
    precision: int | None = None
    type: str | None = None

    def positive_sign(self) -> str:
        """Sign character shown for non-negative values, if any."""

        if self.sign == "+" or self.sign == " ":
            return self.sign
        return ""


def _scan_digits(text: str, pos: int) -> int:
    end = pos
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    return end


def parse_format_spec(text: str) -> FormatFlags:
    """Parse one literal spec string, left to right, each field at most once."""

    length = len(text)
    pos = 0
    fill = " "
    fill_explicit = False
    align: Align | None = None
    sign: Sign | None = None
    alternate = False
    width: int | None = None
    precision: int | None = None
    spec_type: str | None = None

    if pos + 1 < length and text[pos + 1] in ALIGN_MARKERS:
        fill = text[pos]
        fill_explicit = True
        align = cast("Align", text[pos + 1])
        pos += 2
    elif pos < length and text[pos] in ALIGN_MARKERS:
        align = cast("Align", text[pos])
        pos += 1

    if pos < length and text[pos] in SIGN_MARKERS:
        sign = cast("Sign", text[pos])
        pos += 1

    if pos < length and text[pos] == "#":
        alternate = True
        pos += 1

    end = _scan_digits(text, pos)
    if end > pos:
        # A leading zero is shorthand for zero fill with sign-aware alignment,
        # but never overrides an explicitly given fill or align.
        if text[pos] == "0":
            if not fill_explicit:
                fill = "0"
            if align is None:
                align = "="
        width = int(text[pos:end])
        pos = end

    if pos < length and text[pos] == ".":
        end = _scan_digits(text, pos + 1)
        precision = int(text[pos + 1 : end]) if end > pos + 1 else 0
        pos = end

    if pos < length:
        if text[pos] not in TYPE_MARKERS:
            raise FormatSpecError(f"Unknown format type {text[pos]!r} in spec {text!r}.")
        spec_type = text[pos]
        pos += 1

    if pos < length:
        raise FormatSpecError(f"Unexpected trailing text {text[pos:]!r} in spec {text!r}.")

    return FormatFlags(
        fill=fill,
        align=align,
        sign=sign,
        alternate=alternate,
        width=width,
        precision=precision,
        type=spec_type,
    )


def is_valid_format_spec(text: str) -> bool:
    try:
        parse_format_spec(text)
    except FormatSpecError:
        return False
    return True
