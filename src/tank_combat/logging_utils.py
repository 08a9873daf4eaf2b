"""Logging helpers for run context and episode summaries."""

from __future__ import annotations

from collections import OrderedDict
from enum import Enum
import logging
from typing import Any

from tank_combat.config import FLAGS


def configure_logging(level: str | None = None) -> None:
    level_name = (level or FLAGS.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(message)s",
        force=True,
    )


def _format_context_value(value: Any) -> str:
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, float):
        return f"{value:.3f}"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _format_mode_label(mode: str) -> str:
    return " ".join(word.title() for word in mode.replace("-", " ").split())


def format_key_values(
    values: dict[str, Any],
    *,
    prefix: str | None = None,
    key_value_separator: str = "=",
) -> str:
    ordered = OrderedDict((key, value) for key, value in values.items() if value is not None)
    segments: list[str] = [str(prefix)] if prefix else []
    for key, value in ordered.items():
        value_text = _format_context_value(value)
        if key_value_separator == ":":
            segments.append(f"{key}: {value_text}")
        else:
            segments.append(f"{key}{key_value_separator}{value_text}")
    return "\t".join(segments)


def log_key_values(
    logger_name: str,
    values: dict[str, Any],
    *,
    prefix: str | None = None,
    key_value_separator: str = "=",
) -> None:
    logging.getLogger(logger_name).info(
        format_key_values(values, prefix=prefix, key_value_separator=key_value_separator)
    )


def log_run_context(mode: str, context: dict[str, Any]) -> None:
    titled_context = {key.replace("_", " ").title(): value for key, value in context.items()}
    log_key_values(
        "tank_combat.run",
        titled_context,
        prefix=_format_mode_label(mode),
        key_value_separator=":",
    )
