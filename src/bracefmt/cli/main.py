"""Cyclopts CLI entry point for bracefmt."""

from __future__ import annotations

import io
import sys
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import structlog
from cyclopts import App, Parameter

from bracefmt import __version__
from bracefmt.cli.output import FlagsOutput, RenderOutput, emit
from bracefmt.cli.values import parse_value_tokens
from bracefmt.lib.api import format_to, print_formatted
from bracefmt.lib.config import load_config
from bracefmt.lib.flags import parse_format_spec
from bracefmt.lib.sink import BufferSink, StreamSink

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger(__name__)

# Exit code when the output destination failed mid-format.
SINK_FAILURE_EXIT_CODE = 2


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Top-level options that apply to all commands."""

    json_mode: bool = False
    verbosity: int = 0


_GLOBAL_OPTIONS: ContextVar[GlobalOptions | None] = ContextVar("_GLOBAL_OPTIONS", default=None)


def get_global_options() -> GlobalOptions:
    return _GLOBAL_OPTIONS.get() or GlobalOptions()


def _extract_global_options(argv: Sequence[str]) -> tuple[list[str], GlobalOptions]:
    json_mode = False
    verbosity = 0
    cleaned: list[str] = []

    for position, arg in enumerate(argv):
        if arg == "--":
            # Everything after the separator belongs to the command.
            cleaned.extend(argv[position:])
            break
        if arg == "--json":
            json_mode = True
            continue
        if arg == "--no-json":
            json_mode = False
            continue
        if arg in {"--verbose", "-v"}:
            verbosity += 1
            continue
        if arg == "-vv":
            verbosity += 2
            continue
        cleaned.append(arg)

    return cleaned, GlobalOptions(json_mode=json_mode, verbosity=verbosity)


app = App(
    name="bracefmt",
    help="Format brace templates from the command line.",
    version=__version__,
)


@app.command(name="render")
def render(
    template: str,
    *values: str,
    capacity: Annotated[
        int | None,
        Parameter(
            name="--capacity",
            help="Format into a fixed buffer of this many bytes and report truncation.",
        ),
    ] = None,
) -> None:
    """Render TEMPLATE with VALUES (prefix with int:, float:, char:, ptr:, ...)."""

    config = load_config(Path.cwd())
    arguments = parse_value_tokens(values)
    options = get_global_options()

    if capacity is not None:
        sink = BufferSink.with_capacity(capacity, encoding=config.encoding)
        format_to(sink, template, *arguments, config=config)
        result = sink.result()
        emit(
            RenderOutput(
                text=sink.text(),
                length=result,
                capacity=capacity,
                truncated=sink.truncated,
            ),
            json_mode=options.json_mode,
        )
        target = "buffer"
    elif options.json_mode:
        stream = io.BytesIO()
        stream_sink = StreamSink(stream, encoding=config.encoding)
        format_to(stream_sink, template, *arguments, config=config)
        result = stream_sink.result()
        emit(
            RenderOutput(
                text=stream.getvalue().decode(config.encoding, errors="replace"),
                length=result,
            ),
            json_mode=True,
        )
        target = "memory"
    else:
        result = print_formatted(template, *arguments, config=config)
        target = "stdout"

    if result < 0:
        logger.error("Output failed while rendering.", target=target)
        raise SystemExit(SINK_FAILURE_EXIT_CODE)
    logger.info("Rendered template.", target=target, length=result)


@app.command(name="flags")
def flags(spec: str) -> None:
    """Parse one literal SPEC and show the resulting flags."""

    emit(
        FlagsOutput(spec=spec, flags=parse_format_spec(spec)),
        json_mode=get_global_options().json_mode,
    )


def _error_message(exc: Exception) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    message = str(exc).strip()
    if message:
        return message
    return exc.__class__.__name__


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `bracefmt` and `python -m bracefmt`."""

    from bracefmt.lib.logging import configure_logging

    args = list(sys.argv[1:] if argv is None else argv)
    cleaned_args, options = _extract_global_options(args)

    # Configure logging early so diagnostics go to stderr, not stdout.
    configure_logging(json_mode=options.json_mode, verbosity=options.verbosity)

    token = _GLOBAL_OPTIONS.set(options)
    try:
        try:
            app(cleaned_args)
        except (KeyError, ValueError, OSError) as exc:
            print(f"error: {_error_message(exc)}", file=sys.stderr)
            raise SystemExit(1) from None
    finally:
        _GLOBAL_OPTIONS.reset(token)
