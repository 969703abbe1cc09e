"""Float renderer: modes, default precision, sign and padding."""

from __future__ import annotations

import io
import math

import pytest

from bracefmt.lib.flags import parse_format_spec
from bracefmt.lib.render import render_float
from bracefmt.lib.render.floats import NATURAL_PRECISION, float_digits
from bracefmt.lib.sink import StreamSink


def _render(spec: str, value: float) -> str | None:
    stream = io.BytesIO()
    if not render_float(StreamSink(stream), spec, value):
        assert stream.getvalue() == b""
        return None
    return stream.getvalue().decode("utf-8")


@pytest.mark.parametrize(
    ("spec", "value", "expected"),
    [
        ("", 1.5, "1.5"),
        ("", 0.1, "0.1"),
        ("", 100.0, "100"),
        ("", -2.25, "-2.25"),
        (".2", 3.14159, "3.1"),
        ("f", 3.14159, "3.141590"),
        (".2f", 3.14159, "3.14"),
        ("+.1f", 2.34, "+2.3"),
        (" .1f", 2.34, " 2.3"),
        ("e", 12345.678, "1.234568e+04"),
        (".3E", 0.000123, "1.230E-04"),
        ("g", 1234567.0, "1.23457e+06"),
        (".0g", 123.0, "1e+02"),
        ("%", 0.25, "25.000000%"),
        (".1%", 0.5, "50.0%"),
        ("F", math.inf, "INF"),
        ("", -math.inf, "-inf"),
        ("", math.nan, "nan"),
    ],
)
def test_float_modes(spec: str, value: float, expected: str) -> None:
    assert _render(spec, value) == expected


def test_unset_type_uses_natural_precision() -> None:
    assert NATURAL_PRECISION == 15
    assert _render("", 1 / 3) == "0.333333333333333"


def test_negative_zero_renders_without_sign() -> None:
    assert _render("", -0.0) == "0"


@pytest.mark.parametrize(
    ("spec", "value", "expected"),
    [
        ("08.2f", -3.5, "-0003.50"),
        ("+09.3f", 1.0, "+0001.000"),
        ("^10.1f", 2.0, "   2.0    "),
        ("<8.1f", 2.0, "2.0     "),
        ("*>7.1%", 0.5, "**50.0%"),
    ],
)
def test_float_padding(spec: str, value: float, expected: str) -> None:
    assert _render(spec, value) == expected


@pytest.mark.parametrize("spec", ["d", "x", "b", "s", "c", "q", "f!"])
def test_rejects_non_float_types(spec: str) -> None:
    assert _render(spec, 1.0) is None


def test_float_digits_clamps_zero_general_precision() -> None:
    assert float_digits(parse_format_spec(".0G"), 0.5) == "0.5"
    assert float_digits(parse_format_spec(".0f"), 0.5) == "0"
