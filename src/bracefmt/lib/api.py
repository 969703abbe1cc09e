"""Entry points for formatting into each kind of destination."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from bracefmt.lib.config.settings import DEFAULT_CONFIG, FormatterConfig
from bracefmt.lib.dispatch import FormatArguments, RendererRegistry, get_default_renderer_registry
from bracefmt.lib.scanner import TemplateScanner
from bracefmt.lib.sink import BufferSink, StreamSink

if TYPE_CHECKING:
    from typing import BinaryIO

    from bracefmt.lib.sink import Sink


def _scanner(
    args: tuple[object, ...],
    registry: RendererRegistry | None,
    config: FormatterConfig | None,
) -> TemplateScanner:
    if registry is None:
        registry = get_default_renderer_registry()
    arguments = FormatArguments(args, registry)
    return TemplateScanner(arguments, config=config or DEFAULT_CONFIG)


def format_to(
    sink: Sink,
    template: str,
    *args: object,
    registry: RendererRegistry | None = None,
    config: FormatterConfig | None = None,
) -> int:
    """Format into an existing sink.

    Returns the bytes this call added, or a negative value if the sink failed.
    """

    return _scanner(args, registry, config).scan(sink, template)


def format_stream(
    stream: BinaryIO,
    template: str,
    *args: object,
    registry: RendererRegistry | None = None,
    config: FormatterConfig | None = None,
) -> int:
    resolved = config or DEFAULT_CONFIG
    sink = StreamSink(stream, encoding=resolved.encoding)
    format_to(sink, template, *args, registry=registry, config=resolved)
    return sink.result()


def format_buffer(
    buffer: bytearray | memoryview,
    template: str,
    *args: object,
    registry: RendererRegistry | None = None,
    config: FormatterConfig | None = None,
) -> int:
    """Format into a fixed-size buffer, `snprintf` style.

    The return value is the full length of the result, which exceeds
    `len(buffer) - 1` when the output was truncated.
    """

    resolved = config or DEFAULT_CONFIG
    sink = BufferSink(buffer, encoding=resolved.encoding)
    format_to(sink, template, *args, registry=registry, config=resolved)
    return sink.result()


def print_formatted(
    template: str,
    *args: object,
    registry: RendererRegistry | None = None,
    config: FormatterConfig | None = None,
) -> int:
    """Format to standard output."""

    resolved = config or DEFAULT_CONFIG
    sink = StreamSink.stdout(encoding=resolved.encoding)
    format_to(sink, template, *args, registry=registry, config=resolved)
    sink.flush()
    return sink.result()


def format_text(
    template: str,
    *args: object,
    registry: RendererRegistry | None = None,
    config: FormatterConfig | None = None,
) -> str:
    resolved = config or DEFAULT_CONFIG
    stream = io.BytesIO()
    format_stream(stream, template, *args, registry=registry, config=resolved)
    return stream.getvalue().decode(resolved.encoding)
