"""String, bool, char, pointer and None renderers."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from bracefmt.lib.render import (
    render_bool,
    render_char,
    render_none,
    render_pointer,
    render_str,
)
from bracefmt.lib.sink import StreamSink
from bracefmt.lib.values import Char, Pointer

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
        ("", "hi", "hi"),
        ("s", "hi", "hi"),
        ("5", "hi", "hi   "),
        (">5", "hi", "   hi"),
        ("^6", "hi", "  hi  "),
        ("^5", "hi", " hi  "),
        ("=5", "hi", "hi   "),
        (".2", "hello", "he"),
        (".0", "hello", ""),
        (".9", "hello", "hello"),
        ("*<7.3s", "hello", "hel****"),
        ("3", "hello", "hello"),
        ("", "", ""),
        ("4", "é", "é   "),
    ],
)
def test_render_str(spec: str, value: str, expected: str) -> None:
    assert _render(render_str, spec, value) == expected


@pytest.mark.parametrize("spec", ["d", "x", "f", "c", "q"])
def test_render_str_rejects_non_string_types(spec: str) -> None:
    assert _render(render_str, spec, "hi") is None


@pytest.mark.parametrize(
    ("spec", "value", "expected"),
    [
        ("", True, "true"),
        ("", False, "false"),
        ("s", True, "true"),
        (">6", False, " false"),
        (".2", True, "tr"),
        ("d", True, "1"),
        ("#x", True, "0x1"),
        ("03d", False, "000"),
        ("f", False, "0.000000"),
        ("c", True, "\x01"),
    ],
)
def test_render_bool(spec: str, value: bool, expected: str) -> None:
    assert _render(render_bool, spec, value) == expected


def test_render_bool_rejects_precision_on_integer_types() -> None:
    assert _render(render_bool, ".1d", True) is None


@pytest.mark.parametrize(
    ("spec", "value", "expected"),
    [
        ("", Char.of("A"), "A"),
        ("c", Char.of("A"), "A"),
        ("s", Char.of("A"), "A"),
        ("3", Char.of("A"), "A  "),
        (">3", Char.of("A"), "  A"),
        ("d", Char.of("A"), "65"),
        ("#x", Char.of("A"), "0x41"),
        ("04d", Char.of("A"), "0065"),
        ("", Char(0x263A), "(263a)"),
        ("#c", Char(0x263A), "(0x263a)"),
        ("X", Char(0x263A), "263A"),
    ],
)
def test_render_char(spec: str, value: Char, expected: str) -> None:
    assert _render(render_char, spec, value) == expected


@pytest.mark.parametrize("spec", [".1", ".1c", "f", "%"])
def test_render_char_rejects_precision_and_float_types(spec: str) -> None:
    assert _render(render_char, spec, Char.of("A")) is None


def test_char_construction() -> None:
    assert Char.of("é").codepoint == 0xE9
    with pytest.raises(ValueError, match="exactly one character"):
        Char.of("ab")
    with pytest.raises(ValueError, match="non-negative"):
        Char(-1)


@pytest.mark.parametrize(
    ("spec", "expected"),
    [
        ("", "1000"),
        ("x", "1000"),
        ("#x", "0x1000"),
        ("#018x", "0x0000000000001000"),
        ("X", "1000"),
        ("d", "4096"),
        ("#b", "0b1000000000000"),
        (">8", "    1000"),
    ],
)
def test_render_pointer(spec: str, expected: str) -> None:
    assert _render(render_pointer, spec, Pointer(0x1000)) == expected


@pytest.mark.parametrize("spec", ["s", "c", "f", ".2", ".2x"])
def test_render_pointer_rejects_non_integer_specs(spec: str) -> None:
    assert _render(render_pointer, spec, Pointer(0x1000)) is None


def test_pointer_of_uses_object_identity() -> None:
    target = object()

    assert Pointer.of(target).address == id(target)
    with pytest.raises(ValueError):
        Pointer(-4)


def test_render_none_is_null_pointer() -> None:
    assert _render(render_none, "", None) == "0"
    assert _render(render_none, "#x", None) == "0x0"
    assert _render(render_none, "s", None) is None
