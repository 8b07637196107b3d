# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Utility helpers for genro-headers.

Exports:
    split_and_strip: Split comma-separated string and strip whitespace.
    parse_flag: Parse on/off/true/false style values to bool.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

_TRUE_VALUES = frozenset({"on", "true", "yes", "1"})
_FALSE_VALUES = frozenset({"off", "false", "no", "0", ""})


def split_and_strip(
    value: str | Iterable[str] | None, default: list[str] | None = None
) -> list[str]:
    """Split comma-separated string and strip whitespace from each item.

    If value is already a sequence, returns a list copy. If None, returns default.
    Empty items are dropped.

    Examples:
        split_and_strip("GET, POST")  # ["GET", "POST"]
        split_and_strip(["x", "y"])  # ["x", "y"]
        split_and_strip(None, ["default"])  # ["default"]
    """
    if value is None:
        return list(default) if default is not None else []
    if isinstance(value, str):
        return [v.strip() for v in value.split(",") if v.strip()]
    return list(value)


def parse_flag(value: Any, default: bool | None = None) -> bool | None:
    """Parse on/off/true/false value to bool.

    None yields ``default``. Unrecognized strings raise ValueError.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"Invalid flag value: {value!r}")
    return bool(value)


__all__ = ["parse_flag", "split_and_strip"]
