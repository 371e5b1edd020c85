"""Helpers for reading settings from the environment."""

from __future__ import annotations

import os
from typing import Any


def _coerce_value(raw: str, value_type: str, default: Any) -> Any:
    if raw is None or raw == "":
        return default
    try:
        if value_type == "int":
            return int(raw)
        return raw
    except ValueError:
        return default


def get_setting(env_var: str, default: Any, value_type: str = "string") -> Any:
    """Get a setting value from an environment variable, or the default."""
    raw = os.getenv(env_var)
    if raw is not None and raw != "":
        return _coerce_value(raw, value_type, default)
    return default


def get_int_setting(env_var: str, default: int) -> int:
    return int(get_setting(env_var, default, "int"))
