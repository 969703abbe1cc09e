"""Parse command-line value tokens into typed format arguments.

Tokens may carry an explicit `kind:` prefix (`int:0x80`, `char:x`, `ptr:4096`,
`none:`). Unprefixed tokens are inferred: integer, then float, then the
literals `true`/`false`, otherwise the token is a string.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from bracefmt.lib.values import Char, Pointer

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?$")
_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})


def _parse_int(raw: str) -> int:
    try:
        return int(raw.strip(), 0)
    except ValueError as error:
        raise ValueError(f"Invalid int value {raw!r}.") from error


def _parse_float(raw: str) -> float:
    try:
        return float(raw.strip())
    except ValueError as error:
        raise ValueError(f"Invalid float value {raw!r}.") from error


def _parse_bool(raw: str) -> bool:
    normalized = raw.strip().lower()
    if normalized in _TRUE_WORDS:
        return True
    if normalized in _FALSE_WORDS:
        return False
    raise ValueError(f"Invalid bool value {raw!r}. Expected true or false.")


def _parse_char(raw: str) -> Char:
    if len(raw) == 1:
        return Char.of(raw)
    return Char(_parse_int(raw))


def _parse_pointer(raw: str) -> Pointer:
    return Pointer(_parse_int(raw))


def _parse_none(raw: str) -> None:
    if raw:
        raise ValueError(f"Invalid none value {raw!r}. Use 'none:' with nothing after it.")


_TYPED_PARSERS: dict[str, Callable[[str], object]] = {
    "int": _parse_int,
    "float": _parse_float,
    "str": str,
    "bool": _parse_bool,
    "char": _parse_char,
    "ptr": _parse_pointer,
    "none": _parse_none,
}


def parse_value_token(token: str) -> object:
    kind, separator, raw = token.partition(":")
    parser = _TYPED_PARSERS.get(kind) if separator else None
    if parser is not None:
        return parser(raw)

    if _INT_RE.match(token):
        return int(token)
    if _FLOAT_RE.match(token):
        return float(token)
    if token == "true":
        return True
    if token == "false":
        return False
    return token


def parse_value_tokens(tokens: tuple[str, ...]) -> tuple[object, ...]:
    return tuple(parse_value_token(token) for token in tokens)
