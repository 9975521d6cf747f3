"""Coercion helpers for loosely-typed form values.

Form data arrives as a bag of strings, booleans, numbers, lists (multi-select)
and dicts (name / postcode-address compounds). Operators compare these through
the helpers below so the truthiness, stringification and numeric rules live in
one place.
"""

from __future__ import annotations

import math
from typing import Any

FormValue = str | bool | int | float | list[Any] | dict[str, Any] | None

NAN = float("nan")

_INFINITY_LITERALS = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def is_falsy(value: Any) -> bool:
    """Falsy means None, False, zero, NaN or the empty string.

    Lists and dicts always count as present, even when empty.
    """
    if value is None or value is False:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, int | float):
        return value == 0 or math.isnan(value)
    if isinstance(value, str):
        return value == ""
    return False


def to_text(value: Any) -> str:
    """Stringify a form value."""
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, list):
        return ",".join("" if item is None else to_text(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def to_number(value: Any) -> float:
    """Numeric coercion; anything unparseable becomes NaN."""
    if value is None:
        return NAN
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        return _parse_number(value)
    if isinstance(value, list):
        if not value:
            return 0.0
        if len(value) == 1:
            return to_number(to_text(value[0]) if value[0] is not None else "")
        return NAN
    return NAN


def _parse_number(text: str) -> float:
    stripped = text.strip()
    if stripped == "":
        return 0.0
    if stripped in _INFINITY_LITERALS:
        return _INFINITY_LITERALS[stripped]
    lowered = stripped.lower()
    if lowered.startswith(("0x", "0o", "0b")):
        base = {"x": 16, "o": 8, "b": 2}[lowered[1]]
        if not stripped[2:].isalnum():
            return NAN
        try:
            return float(int(stripped[2:], base))
        except ValueError:
            return NAN
    # float() also accepts "inf", "nan" and digit separators, which are not numbers here
    if "_" in stripped or lowered.lstrip("+-").startswith(("inf", "nan")):
        return NAN
    try:
        return float(stripped)
    except ValueError:
        return NAN
