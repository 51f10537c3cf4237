"""Normalization helpers.

Centralizes defensive parsing of loosely-typed snapshot values. The rules
mirror the lenient integer lookup of the platform JSON library the widget
host used: numbers are truncated, numeric strings are accepted, anything
else counts as missing.
"""

from __future__ import annotations

import math
import re
from typing import Any

# Placeholder strings that mean "not available".
_PLACEHOLDERS = frozenset({"", "--"})

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def safe_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        # float() would accept digit separators; JSON producers never emit them.
        if value in _PLACEHOLDERS or "_" in value:
            return None
    elif not isinstance(value, (int, float)):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    """Coerce *value* to an integer, truncating toward zero.

    Returns ``None`` for booleans, containers, non-numeric strings,
    NaN and infinities.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_RE.fullmatch(text):
            try:
                return int(text)
            except ValueError:
                # Beyond the interpreter's integer string conversion limit.
                return None
    parsed = safe_float(value)
    if parsed is None:
        return None
    return int(parsed)


def safe_str(value: Any) -> str | None:
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (str, int, float)):
        return None
    text = str(value)
    return text if text else None

