# csvtable/core/functions/utils.py
"""
Common field value utilities.

Fields are stored as plain strings. These helpers reinterpret them as
int/float/bool with fixed fallbacks and turn typed values back into field
text. Parsing is locale independent: '.' is the only decimal point.
"""
import math
import re
from typing import Any, Optional

TRUE_STRING = "true"
FALSE_STRING = "false"

# Leading numeric prefixes, so "12abc" -> 12 and "3.5kg" -> 3.5
_INT_PREFIX = re.compile(r'[+-]?\d+')
_FLOAT_PREFIX = re.compile(
    r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf(?:inity)?|nan)',
    re.IGNORECASE,
)


def to_int(value: Optional[str], default: int = 0) -> int:
    """
    Reinterpret a field as an integer.

    Args:
        value: Field text
        default: Value returned when no integer prefix is found

    Returns:
        Parsed integer or default
    """
    if not value:
        return default
    match = _INT_PREFIX.match(value.strip())
    if not match:
        return default
    return int(match.group())


def to_float(value: Optional[str], default: float = 0.0) -> float:
    """
    Reinterpret a field as a float.

    Args:
        value: Field text
        default: Value returned when no numeric prefix is found

    Returns:
        Parsed float or default
    """
    if not value:
        return default
    match = _FLOAT_PREFIX.match(value.strip())
    if not match:
        return default
    return float(match.group())


def to_bool(value: Optional[str], default: bool = False) -> bool:
    """
    Reinterpret a field as a boolean.

    "true"/"false" match case-insensitively. Anything else is true when it
    starts with a non-zero number.
    """
    if not value:
        return default
    text = value.strip().lower()
    if text == TRUE_STRING:
        return True
    if text == FALSE_STRING:
        return False
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return default
    number = float(match.group())
    return not math.isnan(number) and number != 0.0


def to_field(value: Any) -> str:
    """Convert a typed value into field text."""
    if isinstance(value, bool):
        return TRUE_STRING if value else FALSE_STRING
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
