"""Integer renderer: radix, sign, alternate prefixes and padding."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from bracefmt.lib.render import render_int
from bracefmt.lib.render._common import split_padding
from bracefmt.lib.render.integers import to_radix_digits
from bracefmt.lib.sink import StreamSink

if TYPE_CHECKING:
    from bracefmt.lib.dispatch import Renderer


def _render(renderer: Renderer, spec: str, value: object) -> str | None:
    stream = io.BytesIO()
    if not renderer(StreamSink(stream), spec, value):
        assert stream.getvalue() == b""
        return None
    return stream.getvalue().decode("utf-8")


@pytest.mark.parametrize(
    ("spec", "value", "expected"),
    [
        ("", 42, "42"),
        ("", -42, "-42"),
        ("", 0, "0"),
        ("d", 7, "7"),
        ("+", 5, "+5"),
        (" ", 5, " 5"),
        ("-", 5, "5"),
        ("-", -5, "-5"),
        ("x", 255, "ff"),
        ("X", 255, "FF"),
        ("#x", 255, "0xff"),
        ("#X", 255, "0XFF"),
        ("b", 5, "101"),
        ("#b", 5, "0b101"),
        ("o", 8, "10"),
        ("#o", 8, "0o10"),
        ("x", -255, "-ff"),
    ],
)
def test_radix_sign_and_prefix(spec: str, value: int, expected: str) -> None:
    assert _render(render_int, spec, value) == expected


@pytest.mark.parametrize(
    ("spec", "value", "expected"),
    [
        ("5", 42, "   42"),
        ("<5", 42, "42   "),
        (">5", 42, "   42"),
        ("^5", 42, " 42  "),
        ("^6", 42, "  42  "),
        ("*^7", -3, "**-3***"),
        ("=6", -42, "-   42"),
        ("+08", 512, "+0000512"),
        ("08", -7, "-0000007"),
        ("1", 12345, "12345"),
    ],
)
def test_width_and_alignment(spec: str, value: int, expected: str) -> None:
    assert _render(render_int, spec, value) == expected


@pytest.mark.parametrize(
    ("spec", "value", "expected"),
    [
        ("#08x", 1, "0x000001"),
        ("-#08x", -1, "-0x00001"),
        ("<#08x", 1, "0x100000"),
        ("^#08x", 1, "000x1000"),
        (">#8x", 1, "     0x1"),
    ],
)
def test_sign_aware_padding_goes_after_radix_prefix(
    spec: str, value: int, expected: str
) -> None:
    assert _render(render_int, spec, value) == expected


def test_arbitrary_size_integers() -> None:
    assert _render(render_int, "x", 2**64 - 1) == "f" * 16
    assert _render(render_int, "", -(2**63)) == "-9223372036854775808"
    assert _render(render_int, "", 10**30) == "1" + "0" * 30


def test_float_types_delegate_to_float_rendering() -> None:
    assert _render(render_int, "f", 2) == "2.000000"
    assert _render(render_int, ".1e", 1500) == "1.5e+03"
    assert _render(render_int, "%", 1) == "100.000000%"


def test_float_type_rejects_integers_too_large_for_a_double() -> None:
    assert _render(render_int, "e", 10**400) is None


@pytest.mark.parametrize(
    ("spec", "value", "expected"),
    [
        ("c", 65, "A"),
        ("5c", 65, "A    "),
        ("=5c", 65, "A    "),
        (">3c", 65, "  A"),
        ("c", 0x80, "(80)"),
        ("#c", 0x80, "(0x80)"),
        ("^+9c", 0x80, "  (+80)  "),
        ("c", -1, "(-1)"),
        ("#c", -0x41, "(-0x41)"),
    ],
)
def test_codepoint_type(spec: str, value: int, expected: str) -> None:
    assert _render(render_int, spec, value) == expected


@pytest.mark.parametrize("spec", [".2", ".", "5.1d", "s", "q", "d!"])
def test_rejected_specs_write_nothing(spec: str) -> None:
    assert _render(render_int, spec, 1) is None


def test_to_radix_digits() -> None:
    assert to_radix_digits(0, 2) == "0"
    assert to_radix_digits(255, 16, upper=True) == "FF"
    assert to_radix_digits(8, 8) == "10"
    with pytest.raises(ValueError):
        to_radix_digits(-1, 10)


@pytest.mark.parametrize(
    ("align", "padding", "expected"),
    [
        ("<", 4, (0, 4)),
        (">", 4, (4, 0)),
        ("=", 4, (4, 0)),
        ("^", 4, (2, 2)),
        ("^", 5, (2, 3)),
        ("^", 0, (0, 0)),
        (">", -3, (0, 0)),
    ],
)
def test_split_padding(align: str, padding: int, expected: tuple[int, int]) -> None:
    assert split_padding(align, padding) == expected  # type: ignore[arg-type]
