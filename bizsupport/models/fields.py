# Copyright 2026 BizSupport
# SPDX-License-Identifier: MIT
"""Lenient coercion helpers for building models from rows / JSON payloads."""

from __future__ import annotations

import math
from typing import Any, Optional, Tuple


def optional_float(x: Any, *, allow_negative: bool = False) -> Optional[float]:
    """Parse a number; None for missing, blank, NaN or unparsable values."""
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, str):
        x = x.strip().replace(" ", "").replace(",", ".")
        if not x:
            return None
    try:
        val = float(x)
    except (TypeError, ValueError):
        return None
    if math.isnan(val) or math.isinf(val):
        return None
    if val < 0 and not allow_negative:
        return None
    return val


def optional_int(x: Any) -> Optional[int]:
    val = optional_float(x)
    if val is None:
        return None
    return int(val)


def string_tuple(x: Any) -> Optional[Tuple[str, ...]]:
    """Normalize a list-ish value to a tuple of non-empty stripped strings.

    A bare string is treated as a single element ("ALL" stays "ALL").
    None stays None so callers can tell "no list" from "empty list".
    """
    if x is None:
        return None
    if isinstance(x, str):
        items = [x]
    else:
        try:
            items = list(x)
        except TypeError:
            return None
    return tuple(str(i).strip() for i in items if i is not None and str(i).strip())


def text(x: Any) -> str:
    if x is None:
        return ""
    return str(x)
