"""Template scanner: literal runs, escapes, index inference, nested specs.

A template is one forward pass through four states. Placeholder spec text may
itself contain placeholders; it is expanded by scanning it with the same
arguments and the same index cursor into a small bounded buffer, and the
expanded text is what the renderer sees.

A placeholder that cannot be rendered (bad grammar, missing argument,
unexpandable spec) is left in the output exactly as written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from bracefmt.lib.config.settings import DEFAULT_CONFIG, FormatterConfig
from bracefmt.lib.sink import BufferSink

if TYPE_CHECKING:
    from bracefmt.lib.dispatch import FormatArguments
    from bracefmt.lib.sink import Sink

logger = logging.getLogger(__name__)


class ScanState(StrEnum):
    LITERAL = "literal"
    PLACEHOLDER_INDEX = "placeholder_index"
    PLACEHOLDER_SPEC = "placeholder_spec"
    PLACEHOLDER_CLOSE = "placeholder_close"


@dataclass(slots=True)
class IndexCursor:
    """Running argument index for one top-level scan, shared by nested specs."""

    previous: int = -1

    def resolve(self, explicit: int | None) -> int:
        index = self.previous + 1 if explicit is None else explicit
        self.previous = index
        return index


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class TemplateScanner:
    """Formats templates against one argument list."""

    def __init__(
        self,
        arguments: FormatArguments,
        *,
        config: FormatterConfig = DEFAULT_CONFIG,
    ) -> None:
        self._arguments = arguments
        self._config = config

    def scan(self, sink: Sink, template: str) -> int:
        """Format `template` into `sink`.

        Returns the number of bytes this template produced, or a negative
        value if the sink failed at any point.
        """

        return self._scan(sink, template, IndexCursor(), depth=0)

    def _scan(self, sink: Sink, template: str, cursor: IndexCursor, *, depth: int) -> int:
        before = sink.result()
        length = len(template)
        state = ScanState.LITERAL
        pos = 0
        # Start of the pending literal run. While inside a placeholder it
        # stays on the opening brace so a failed placeholder passes through.
        start = 0
        index = 0
        spec_start = 0
        nesting = 0

        while pos < length:
            ch = template[pos]

            if state is ScanState.LITERAL:
                if ch == "{":
                    if pos > start:
                        sink.write(template[start:pos])
                    if pos + 1 < length and template[pos + 1] == "{":
                        # Keep the second brace as the start of the next run.
                        start = pos + 1
                        pos += 2
                        continue
                    start = pos
                    state = ScanState.PLACEHOLDER_INDEX
                elif ch == "}":
                    # A lone `}` is literal; `}}` collapses to one.
                    sink.write(template[start : pos + 1])
                    if pos + 1 < length and template[pos + 1] == "}":
                        pos += 1
                    start = pos + 1
                pos += 1
                continue

            if state is ScanState.PLACEHOLDER_INDEX:
                end = pos
                while end < length and _is_digit(template[end]):
                    end += 1
                index = cursor.resolve(int(template[pos:end]) if end > pos else None)
                pos = end
                if pos < length and template[pos] == ":":
                    pos += 1
                    spec_start = pos
                    nesting = 0
                    state = ScanState.PLACEHOLDER_SPEC
                elif pos < length and template[pos] == "}":
                    spec_start = pos
                    state = ScanState.PLACEHOLDER_CLOSE
                else:
                    # Malformed (`{0!s}`, `{name}`): the brace becomes literal
                    # text and the offending character is scanned as literal.
                    logger.debug("Malformed placeholder at offset %d.", start)
                    state = ScanState.LITERAL
                continue

            if state is ScanState.PLACEHOLDER_SPEC:
                if ch == "{":
                    if pos + 1 < length and template[pos + 1] == "{":
                        pos += 2
                        continue
                    nesting += 1
                elif ch == "}":
                    if nesting == 0:
                        state = ScanState.PLACEHOLDER_CLOSE
                        continue
                    nesting -= 1
                pos += 1
                continue

            # PLACEHOLDER_CLOSE: `pos` is on the closing brace.
            raw_spec = template[spec_start:pos]
            pos += 1
            state = ScanState.LITERAL
            spec = self._expand(raw_spec, cursor, depth=depth)
            if spec is not None and self._arguments.render(sink, spec, index):
                start = pos
            else:
                logger.debug(
                    "Placeholder %r left unrendered (argument %d).",
                    template[start:pos],
                    index,
                )

        if start < length:
            sink.write(template[start:])

        after = sink.result()
        if after < 0:
            return after
        return after - before

    def _expand(self, raw_spec: str, cursor: IndexCursor, *, depth: int) -> str | None:
        """Resolve placeholders inside spec text; None if it cannot be done."""

        if "{" not in raw_spec:
            return raw_spec
        if depth >= self._config.max_nesting_depth:
            logger.debug("Nested spec %r exceeds depth %d.", raw_spec, depth)
            return None

        capacity = self._config.nested_spec_capacity
        local = BufferSink.with_capacity(capacity, encoding=self._config.encoding)
        produced = self._scan(local, raw_spec, cursor, depth=depth + 1)
        if produced < 0 or produced >= capacity:
            logger.debug(
                "Nested spec %r does not fit in %d bytes (needs %d).",
                raw_spec,
                capacity,
                produced,
            )
            return None
        return local.text()
