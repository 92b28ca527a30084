"""Lenient coercion helpers for user-entered and AI-extracted values.

Numbers typed into forms or returned by an extraction service arrive either
already parsed or as loose strings ("$2.50", "2 pcs", "9.5\""). These helpers
never raise; every failure resolves to a caller-chosen fallback.
"""
import math
import re
from typing import Any, Optional

_NON_NUMERIC_CHARS = re.compile(r"[^0-9.\-]")
# Leading float, parseFloat style: "1.2.3" -> 1.2, "12-3" -> 12
_LEADING_FLOAT = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)")
_SIGNED_FLOAT = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)")
_LEADING_INT = re.compile(r"^[+-]?\d+")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_numeric_value(value: Any) -> float:
    """Return ``value`` as a number, stripping currency symbols and units from strings.

    Numbers are returned as-is. Strings keep only digits, ``.`` and ``-``
    and the leading number is parsed; anything that does not parse is 0.
    """
    if _is_number(value):
        return value
    if isinstance(value, str):
        cleaned = _NON_NUMERIC_CHARS.sub("", value)
        match = _LEADING_FLOAT.match(cleaned)
        if match:
            return float(match.group(0))
    return 0


def finite_float(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    """float(value), or ``default`` when it is NaN, infinite or too large for a float."""
    try:
        number = float(value)
    except (OverflowError, TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def coerce_float(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    """parseFloat semantics for form fields: unparseable, NaN or infinite -> ``default``."""
    if _is_number(value):
        return finite_float(value, default)
    if isinstance(value, str):
        match = _SIGNED_FLOAT.match(value.strip())
        if match:
            return finite_float(match.group(0), default)
    return default


def coerce_int(value: Any, default: Optional[int] = 0) -> Optional[int]:
    """parseInt semantics for form fields (truncates, never rounds)."""
    if _is_number(value):
        if isinstance(value, float) and not math.isfinite(value):
            return default
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value.strip())
        if match:
            return int(match.group(0))
    return default


def coerce_text(value: Any) -> str:
    """str() + strip, with None treated as empty."""
    if value is None:
        return ""
    return str(value).strip()


__all__ = ["parse_numeric_value", "finite_float", "coerce_float", "coerce_int", "coerce_text"]
