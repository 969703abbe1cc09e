"""CLI output payloads and emit helpers."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Protocol, cast, runtime_checkable

from bracefmt.lib.flags import FormatFlags


@runtime_checkable
class TextFormattable(Protocol):
    """Payload that knows its own human-readable rendering."""

    def format_text(self) -> str: ...


@dataclass(frozen=True, slots=True)
class RenderOutput:
    """Result of rendering one template into a captured destination."""

    text: str
    length: int
    capacity: int | None = None
    truncated: bool = False

    def format_text(self) -> str:
        if not self.truncated:
            return self.text
        return (
            f"{self.text}\n"
            f"[truncated: {self.length} bytes needed, capacity {self.capacity}]"
        )


@dataclass(frozen=True, slots=True)
class FlagsOutput:
    """Parsed flags for one spec string."""

    spec: str
    flags: FormatFlags

    def format_text(self) -> str:
        lines = [f"spec: {self.spec!r}"]
        for key, value in asdict(self.flags).items():
            lines.append(f"{key}: {value!r}")
        return "\n".join(lines)


def to_jsonable(value: Any) -> Any:
    """Convert payload dataclasses to JSON-serializable values."""

    if is_dataclass(value) and not isinstance(value, type):
        return to_jsonable(asdict(value))
    if isinstance(value, dict):
        typed_dict = cast("dict[object, object]", value)
        return {str(key): to_jsonable(item) for key, item in typed_dict.items()}
    if isinstance(value, (list, tuple)):
        typed_seq = cast("list[object] | tuple[object, ...]", value)
        return [to_jsonable(item) for item in typed_seq]
    return value


def emit(value: Any, *, json_mode: bool) -> None:
    """Print one payload as JSON or as text."""

    if json_mode:
        print(json.dumps(to_jsonable(value), sort_keys=True))
        return
    if isinstance(value, TextFormattable):
        print(value.format_text())
    else:
        print(json.dumps(to_jsonable(value), sort_keys=True, indent=2))
