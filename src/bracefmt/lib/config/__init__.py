"""Configuration discovery and parsing helpers."""

from bracefmt.lib.config.settings import (
    CONFIG_FILENAME,
    DEFAULT_CONFIG,
    FormatterConfig,
    load_config,
)

__all__ = ["CONFIG_FILENAME", "DEFAULT_CONFIG", "FormatterConfig", "load_config"]
