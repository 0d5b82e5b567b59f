"""Lenient number parsing and SGF number formatting shared by the parsers."""

from typing import Any, Optional


def parse_int(value: Any) -> Optional[int]:
    """int conversion of a text field. None when missing or not an integer.

    Surrounding whitespace is ignored; bool is rejected on purpose so that a
    stray True never becomes 1.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def parse_float(value: Any) -> Optional[float]:
    """float conversion of a text field. None when missing, not a number, or not finite."""
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(str(value).strip())
    except ValueError:
        return None
    if result != result or result in (float("inf"), float("-inf")):
        return None
    return result


def format_number(value: float) -> str:
    """Shortest text for a number as stored in SGF: 6.0 -> "6", 6.5 -> "6.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_value(value: Any) -> str:
    """Text form of a property value. Numbers go through format_number, everything else str()."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)
