"""Core bracefmt library exports."""

from bracefmt.lib.flags import FormatFlags, FormatSpecError, parse_format_spec
from bracefmt.lib.sink import BufferSink, Sink, SinkError, StreamSink
from bracefmt.lib.values import Char, Pointer

__all__ = [
    "BufferSink",
    "Char",
    "FormatFlags",
    "FormatSpecError",
    "Pointer",
    "Sink",
    "SinkError",
    "StreamSink",
    "parse_format_spec",
]
