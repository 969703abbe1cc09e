"""Integer rendering: radix conversion, sign, alternate-form prefixes.

Codepoints and pointers are integers with a different default presentation,
so they are rendered here too.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from bracefmt.lib.flags import FLOAT_TYPES, INTEGER_TYPES
from bracefmt.lib.render._common import as_text_flags, parse_flags, write_field
from bracefmt.lib.render.floats import write_float

if TYPE_CHECKING:
    from bracefmt.lib.flags import FormatFlags
    from bracefmt.lib.sink import Sink
    from bracefmt.lib.values import Pointer

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_RADIX_BY_TYPE: dict[str, int] = {"b": 2, "o": 8, "x": 16, "X": 16}
_ALTERNATE_PREFIX: dict[str, str] = {"b": "0b", "o": "0o", "x": "0x", "X": "0X"}

# Codepoints at or above this are shown escaped rather than emitted raw.
_RAW_CODEPOINT_LIMIT = 0x80


def to_radix_digits(magnitude: int, radix: int, *, upper: bool = False) -> str:
    """Digits of a non-negative integer in `radix`, most significant first."""

    if magnitude < 0:
        raise ValueError(f"Expected a non-negative magnitude, got {magnitude}.")
    digit_chars = _UPPER_DIGITS if upper else _LOWER_DIGITS
    digits: list[str] = []
    value = magnitude
    # Least significant digit first; reversed once at the end.
    while True:
        value, remainder = divmod(value, radix)
        digits.append(digit_chars[remainder])
        if not value:
            break
    digits.reverse()
    return "".join(digits)


def write_integer(sink: Sink, flags: FormatFlags, is_negative: bool, magnitude: int) -> None:
    spec_type = flags.type or "d"
    radix = _RADIX_BY_TYPE.get(spec_type, 10)
    digits = to_radix_digits(magnitude, radix, upper=spec_type == "X")
    radix_prefix = _ALTERNATE_PREFIX.get(spec_type, "") if flags.alternate else ""
    sign = "-" if is_negative else flags.positive_sign()
    write_field(sink, flags, digits, default_align=">", prefix=sign + radix_prefix)


def write_codepoint(sink: Sink, flags: FormatFlags, is_negative: bool, magnitude: int) -> None:
    """Write a codepoint as its character, or as `(hex)` when not plain ASCII."""

    if not is_negative and magnitude < _RAW_CODEPOINT_LIMIT:
        body = chr(magnitude)
    else:
        sign = "-" if is_negative else flags.positive_sign()
        marker = "0x" if flags.alternate else ""
        body = f"({sign}{marker}{to_radix_digits(magnitude, 16)})"
    write_field(sink, as_text_flags(flags), body, default_align="<")


def render_integer_flags(sink: Sink, flags: FormatFlags, value: int) -> bool:
    """Render an integer with already-parsed flags."""

    spec_type = flags.type
    if spec_type in FLOAT_TYPES:
        try:
            as_float = float(value)
        except OverflowError:
            return False
        return write_float(sink, flags, as_float)
    if flags.precision is not None:
        return False
    if spec_type == "c":
        write_codepoint(sink, flags, value < 0, abs(value))
        return True
    if spec_type is not None and spec_type not in INTEGER_TYPES:
        return False
    write_integer(sink, flags, value < 0, abs(value))
    return True


def render_int(sink: Sink, spec: str, value: int) -> bool:
    flags = parse_flags(spec)
    if flags is None:
        return False
    return render_integer_flags(sink, flags, value)


def _render_address(sink: Sink, spec: str, address: int) -> bool:
    flags = parse_flags(spec)
    if flags is None:
        return False
    if flags.type is None:
        flags = replace(flags, type="x")
    if flags.type not in INTEGER_TYPES or flags.precision is not None:
        return False
    write_integer(sink, flags, False, address)
    return True


def render_pointer(sink: Sink, spec: str, value: Pointer) -> bool:
    return _render_address(sink, spec, value.address)


def render_none(sink: Sink, spec: str, value: None) -> bool:
    """`None` is the null pointer."""

    return _render_address(sink, spec, 0)
