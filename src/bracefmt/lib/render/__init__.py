"""Built-in value renderers.

Each renderer takes `(sink, spec, value)`, parses the literal spec text, and
returns False without writing anything when the spec text does not apply to the
value.
"""

from bracefmt.lib.render.floats import render_float
from bracefmt.lib.render.integers import render_int, render_none, render_pointer
from bracefmt.lib.render.strings import render_bool, render_char, render_str

__all__ = [
    "render_bool",
    "render_char",
    "render_float",
    "render_int",
    "render_none",
    "render_pointer",
    "render_str",
]
