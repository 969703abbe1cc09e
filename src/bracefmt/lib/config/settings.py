"""Formatter configuration loader."""

from __future__ import annotations

import codecs
import logging
import os
import tomllib
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "bracefmt.toml"


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Resolved engine configuration."""

    max_nesting_depth: int = 16
    nested_spec_capacity: int = 256
    encoding: str = "utf-8"


DEFAULT_CONFIG = FormatterConfig()

_SECTION_KEY_MAP: dict[str, dict[str, str]] = {
    "engine": {
        "max_nesting_depth": "max_nesting_depth",
        "max_depth": "max_nesting_depth",
        "nested_spec_capacity": "nested_spec_capacity",
        "spec_capacity": "nested_spec_capacity",
    },
    "output": {
        "encoding": "encoding",
    },
}

_TOP_LEVEL_KEY_MAP: dict[str, str] = {
    "max_nesting_depth": "max_nesting_depth",
    "nested_spec_capacity": "nested_spec_capacity",
    "encoding": "encoding",
}

_ENV_OVERRIDE_MAP: dict[str, str] = {
    "BRACEFMT_MAX_NESTING_DEPTH": "max_nesting_depth",
    "BRACEFMT_NESTED_SPEC_CAPACITY": "nested_spec_capacity",
    "BRACEFMT_ENCODING": "encoding",
}

_INT_FIELDS = frozenset({"max_nesting_depth", "nested_spec_capacity"})
# A nested spec needs room for at least one byte plus the terminator.
_MIN_SPEC_CAPACITY = 2


def _coerce_file_value(*, field_name: str, raw_value: object, source: str) -> object:
    if field_name in _INT_FIELDS:
        if isinstance(raw_value, bool) or not isinstance(raw_value, int):
            raise ValueError(
                f"Invalid value for '{source}': expected int, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return raw_value

    if not isinstance(raw_value, str):
        raise ValueError(
            f"Invalid value for '{source}': expected str, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    normalized = raw_value.strip()
    if not normalized:
        raise ValueError(f"Invalid value for '{source}': expected non-empty string.")
    return normalized


def _coerce_env_value(*, field_name: str, raw_value: str, env_name: str) -> object:
    if field_name in _INT_FIELDS:
        try:
            return int(raw_value.strip())
        except ValueError as error:
            raise ValueError(
                f"Invalid environment override '{env_name}': expected int, got {raw_value!r}."
            ) from error

    normalized = raw_value.strip()
    if not normalized:
        raise ValueError(
            f"Invalid environment override '{env_name}': expected non-empty string."
        )
    return normalized


def _default_values() -> dict[str, object]:
    return {field.name: getattr(DEFAULT_CONFIG, field.name) for field in fields(FormatterConfig)}


def _apply_toml_payload(
    *,
    values: dict[str, object],
    payload: dict[str, object],
    path: Path,
) -> None:
    for key, raw_value in payload.items():
        section_map = _SECTION_KEY_MAP.get(key)
        if section_map is not None:
            if not isinstance(raw_value, dict):
                raise ValueError(f"Invalid value for '{key}' in '{path}': expected table.")
            for section_key, section_value in cast("dict[str, object]", raw_value).items():
                field_name = section_map.get(section_key)
                if field_name is None:
                    logger.warning(
                        "Ignoring unknown bracefmt config key '%s.%s'.",
                        key,
                        section_key,
                    )
                    continue
                values[field_name] = _coerce_file_value(
                    field_name=field_name,
                    raw_value=section_value,
                    source=f"{key}.{section_key}",
                )
            continue

        field_name = _TOP_LEVEL_KEY_MAP.get(key)
        if field_name is None:
            logger.warning("Ignoring unknown bracefmt config key '%s'.", key)
            continue
        values[field_name] = _coerce_file_value(
            field_name=field_name,
            raw_value=raw_value,
            source=key,
        )


def _apply_env_overrides(values: dict[str, object]) -> None:
    for env_name, field_name in _ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        values[field_name] = _coerce_env_value(
            field_name=field_name,
            raw_value=raw_value,
            env_name=env_name,
        )


def _build_config(values: dict[str, object]) -> FormatterConfig:
    config = FormatterConfig(
        max_nesting_depth=cast("int", values["max_nesting_depth"]),
        nested_spec_capacity=cast("int", values["nested_spec_capacity"]),
        encoding=cast("str", values["encoding"]),
    )
    if config.max_nesting_depth < 0:
        raise ValueError(
            "Invalid max_nesting_depth: expected a non-negative int, "
            f"got {config.max_nesting_depth}."
        )
    if config.nested_spec_capacity < _MIN_SPEC_CAPACITY:
        raise ValueError(
            f"Invalid nested_spec_capacity: expected at least {_MIN_SPEC_CAPACITY}, "
            f"got {config.nested_spec_capacity}."
        )
    try:
        codecs.lookup(config.encoding)
    except LookupError as error:
        raise ValueError(f"Invalid encoding: unknown codec {config.encoding!r}.") from error
    return config


def load_config(root: Path) -> FormatterConfig:
    """Load `bracefmt.toml` from `root` and apply environment overrides."""

    values = _default_values()
    path = root / CONFIG_FILENAME
    if path.is_file():
        payload_obj = tomllib.loads(path.read_text(encoding="utf-8"))
        payload = cast("dict[str, object]", payload_obj)
        _apply_toml_payload(values=values, payload=payload, path=path)

    _apply_env_overrides(values)
    return _build_config(values)
