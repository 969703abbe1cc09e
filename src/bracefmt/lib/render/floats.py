"""Floating-point rendering.

Digit generation is left to Python's correctly rounded `format()`; this module
only picks the mode and precision, then lays the result out like any other
signed number.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from bracefmt.lib.flags import FLOAT_TYPES
from bracefmt.lib.render._common import parse_flags, write_field

if TYPE_CHECKING:
    from bracefmt.lib.flags import FormatFlags
    from bracefmt.lib.sink import Sink

DEFAULT_PRECISION = 6
# Unset type renders in general mode with every digit a double reliably holds.
NATURAL_PRECISION = sys.float_info.dig


def float_digits(flags: FormatFlags, magnitude: float) -> str:
    """Unsigned digit string for `magnitude` under the flags' mode."""

    spec_type = flags.type
    precision = flags.precision

    if spec_type is None:
        if precision is None:
            precision = NATURAL_PRECISION
        return format(magnitude, f".{precision}g")

    if precision is None:
        precision = DEFAULT_PRECISION
    if spec_type in ("g", "G") and precision == 0:
        precision = 1
    if spec_type == "%":
        return format(magnitude * 100, f".{precision}f") + "%"
    return format(magnitude, f".{precision}{spec_type}")


def write_float(sink: Sink, flags: FormatFlags, value: float) -> bool:
    if flags.type is not None and flags.type not in FLOAT_TYPES:
        return False
    is_negative = value < 0
    digits = float_digits(flags, abs(value))
    sign = "-" if is_negative else flags.positive_sign()
    write_field(sink, flags, digits, default_align=">", prefix=sign)
    return True


def render_float(sink: Sink, spec: str, value: float) -> bool:
    flags = parse_flags(spec)
    if flags is None:
        return False
    return write_float(sink, flags, value)
