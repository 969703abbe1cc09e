"""Argument dispatch: map a placeholder index to a value and its renderer."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from bracefmt.lib.render import (
    render_bool,
    render_char,
    render_float,
    render_int,
    render_none,
    render_pointer,
    render_str,
)
from bracefmt.lib.values import Char, Pointer

if TYPE_CHECKING:
    from bracefmt.lib.sink import Sink

Renderer = Callable[["Sink", str, Any], bool]


@runtime_checkable
class Renderable(Protocol):
    """Custom argument type that renders itself against a literal spec."""

    def render(self, sink: Sink, spec: str) -> bool: ...


def _render_custom(sink: Sink, spec: str, value: Renderable) -> bool:
    return bool(value.render(sink, spec))


def _empty_renderers() -> dict[type, Renderer]:
    return {}


@dataclass(slots=True)
class RendererRegistry:
    """Renderers keyed by value type, resolved along the value's MRO."""

    _renderers: dict[type, Renderer] = field(default_factory=_empty_renderers)

    @classmethod
    def with_defaults(cls) -> RendererRegistry:
        registry = cls()
        registry.register(bool, render_bool)
        registry.register(int, render_int)
        registry.register(float, render_float)
        registry.register(str, render_str)
        registry.register(Char, render_char)
        registry.register(Pointer, render_pointer)
        registry.register(type(None), render_none)
        return registry

    def register(self, value_type: type, renderer: Renderer) -> None:
        self._renderers[value_type] = renderer

    def copy(self) -> RendererRegistry:
        return RendererRegistry(dict(self._renderers))

    def types(self) -> tuple[type, ...]:
        return tuple(self._renderers)

    def resolve(self, value: object) -> Renderer | None:
        if isinstance(value, Renderable):
            return _render_custom
        for klass in type(value).__mro__:
            renderer = self._renderers.get(klass)
            if renderer is not None:
                return renderer
        return None


_DEFAULT_REGISTRY = RendererRegistry.with_defaults()


def get_default_renderer_registry() -> RendererRegistry:
    """Return built-in registry initialized at import time."""

    return _DEFAULT_REGISTRY


@dataclass(frozen=True, slots=True)
class FormatArguments:
    """The argument list of one format call, bound to a registry."""

    values: Sequence[object]
    registry: RendererRegistry = field(default_factory=get_default_renderer_registry)

    def render(self, sink: Sink, spec: str, index: int) -> bool:
        """Render argument `index` with `spec`; False if it cannot be rendered."""

        if not 0 <= index < len(self.values):
            return False
        value = self.values[index]
        renderer = self.registry.resolve(value)
        if renderer is None:
            return False
        return renderer(sink, spec, value)
