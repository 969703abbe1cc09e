"""Output sinks shared by the template scanner and value renderers."""

from __future__ import annotations

import logging
import sys
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from typing import BinaryIO

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class SinkError(StrEnum):
    """Why a sink stopped accepting output."""

    STREAM_IO = "stream_io"
    SHORT_WRITE = "short_write"
    ENCODING = "encoding"


class Sink(Protocol):
    """Destination for rendered text.

    `result()` is the logical length written so far in encoded bytes, or
    `-1` once the sink has failed.
    """

    @property
    def error(self) -> SinkError | None: ...

    def write(self, text: str) -> int: ...

    def result(self) -> int: ...


class _SinkBase:
    __slots__ = ("_encoding", "_error", "_length")

    def __init__(self, encoding: str) -> None:
        self._encoding = encoding
        self._error: SinkError | None = None
        self._length = 0

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def error(self) -> SinkError | None:
        return self._error

    @property
    def failed(self) -> bool:
        return self._error is not None

    def result(self) -> int:
        if self._error is not None:
            return -1
        return self._length

    def _fail(self, error: SinkError) -> None:
        # First error wins; later failures never overwrite it.
        if self._error is None:
            self._error = error

    def _encode(self, text: str) -> bytes | None:
        try:
            return text.encode(self._encoding)
        except UnicodeEncodeError:
            logger.warning(
                "Sink cannot encode output as %s; dropping remaining output.",
                self._encoding,
            )
            self._fail(SinkError.ENCODING)
            return None


class StreamSink(_SinkBase):
    """Sink that hands every chunk to a binary stream."""

    __slots__ = ("_stream",)

    def __init__(self, stream: BinaryIO, *, encoding: str = DEFAULT_ENCODING) -> None:
        super().__init__(encoding)
        self._stream = stream

    @classmethod
    def stdout(cls, *, encoding: str = DEFAULT_ENCODING) -> StreamSink:
        """Write to the binary layer underneath `sys.stdout`."""

        # Anything already printed through the text layer must land first.
        sys.stdout.flush()
        return cls(sys.stdout.buffer, encoding=encoding)

    def write(self, text: str) -> int:
        if self._error is not None or not text:
            return 0
        data = self._encode(text)
        if data is None:
            return 0

        try:
            written = self._stream.write(data)
        except OSError:
            logger.warning("Stream write failed; dropping remaining output.", exc_info=True)
            self._fail(SinkError.STREAM_IO)
            return 0

        # Raw non-blocking streams report None when nothing could be written.
        if written is None or written != len(data):
            logger.warning(
                "Short stream write (%s of %d bytes); dropping remaining output.",
                written,
                len(data),
            )
            self._fail(SinkError.SHORT_WRITE)
            return 0

        self._length += written
        return written

    def flush(self) -> None:
        if self._error is not None:
            return
        try:
            self._stream.flush()
        except OSError:
            logger.warning("Stream flush failed.", exc_info=True)
            self._fail(SinkError.STREAM_IO)


class BufferSink(_SinkBase):
    """Sink over a caller-owned fixed-capacity byte buffer.

    The logical length always advances by the full size of each write, so a
    truncated result reports how large the buffer would have needed to be.
    One byte is always held back for the NUL terminator, which is rewritten
    after every copy.
    """

    __slots__ = ("_buffer", "_capacity", "_offset", "_remaining")

    def __init__(
        self,
        buffer: bytearray | memoryview,
        *,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        super().__init__(encoding)
        self._buffer = buffer
        self._capacity = len(buffer)
        self._offset = 0
        self._remaining = self._capacity
        # An empty result is still a terminated buffer.
        if self._capacity:
            self._buffer[0] = 0

    @classmethod
    def with_capacity(cls, capacity: int, *, encoding: str = DEFAULT_ENCODING) -> BufferSink:
        if capacity < 0:
            raise ValueError(f"Buffer capacity must be non-negative, got {capacity}.")
        return cls(bytearray(capacity), encoding=encoding)

    @property
    def buffer(self) -> bytearray | memoryview:
        return self._buffer

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def truncated(self) -> bool:
        return self._error is None and self._length > self._offset

    @property
    def value(self) -> bytes:
        """Bytes physically copied into the buffer, without the terminator."""

        return bytes(self._buffer[: self._offset])

    def text(self) -> str:
        # Truncation may split a multi-byte sequence; the partial tail is dropped.
        return self.value.decode(self._encoding, errors="ignore")

    def write(self, text: str) -> int:
        if self._error is not None:
            return 0
        data = self._encode(text)
        if data is None:
            return 0

        self._length += len(data)
        if not self._remaining:
            return 0

        to_copy = min(self._remaining - 1, len(data))
        end = self._offset + to_copy
        self._buffer[self._offset : end] = data[:to_copy]
        self._buffer[end] = 0
        self._offset = end
        self._remaining -= to_copy
        return to_copy
