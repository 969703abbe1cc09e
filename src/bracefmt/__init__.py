"""Compact brace-template formatting engine."""

from bracefmt.lib.api import (
    format_buffer,
    format_stream,
    format_text,
    format_to,
    print_formatted,
)
from bracefmt.lib.config import FormatterConfig, load_config
from bracefmt.lib.dispatch import (
    FormatArguments,
    Renderable,
    RendererRegistry,
    get_default_renderer_registry,
)
from bracefmt.lib.flags import FormatFlags, FormatSpecError, parse_format_spec
from bracefmt.lib.sink import BufferSink, Sink, SinkError, StreamSink
from bracefmt.lib.values import Char, Pointer

__version__ = "0.3.0"

__all__ = [
    "BufferSink",
    "Char",
    "FormatArguments",
    "FormatFlags",
    "FormatSpecError",
    "FormatterConfig",
    "Pointer",
    "Renderable",
    "RendererRegistry",
    "Sink",
    "SinkError",
    "StreamSink",
    "__version__",
    "format_buffer",
    "format_stream",
    "format_text",
    "format_to",
    "get_default_renderer_registry",
    "load_config",
    "parse_format_spec",
    "print_formatted",
]
