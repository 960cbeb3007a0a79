"""
Numeric Utilities - Centralized numeric value handling.

Provides standardized functions for:
1. Cleaning numeric values (handling NaN/Inf/None)
2. Null-safe averaging and division
3. Safe formatting for display/reporting

Insight records come from a language-model extraction step, so any numeric
field may be missing, NaN, or a stray string. Every aggregate goes through
these helpers so that bad values are skipped rather than propagated.
"""

import math
from typing import Any, Iterable, Optional


def is_valid_number(value: Any) -> bool:
    """
    Check if a value is a valid, finite number.

    Examples:
        >>> is_valid_number(3.14)
        True
        >>> is_valid_number(float('nan'))
        False
        >>> is_valid_number(None)
        False
    """
    return clean_numeric(value) is not None


def clean_numeric(value: Any) -> Optional[float]:
    """
    Clean a numeric value, returning None for invalid values.

    Booleans are rejected: a stray ``true`` in a numeric field is not a number.

    Args:
        value: Raw value (can be float, int, string number, or None/NaN)

    Returns:
        Float value if valid, None if value is missing/invalid

    Examples:
        >>> clean_numeric("42.5")
        42.5
        >>> clean_numeric(float('nan'))
        None
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        float_value = float(value)
        if math.isnan(float_value) or math.isinf(float_value):
            return None
        return float_value
    except (ValueError, TypeError):
        return None


def safe_divide(
    numerator: Any,
    denominator: Any,
    default: Optional[float] = None
) -> Optional[float]:
    """
    Safely perform division, handling None/NaN/zero denominators.

    Examples:
        >>> safe_divide(10, 2)
        5.0
        >>> safe_divide(10, 0)
        None
        >>> safe_divide(10, 0, default=0.0)
        0.0
    """
    clean_num = clean_numeric(numerator)
    clean_den = clean_numeric(denominator)

    if clean_num is None or clean_den is None or clean_den == 0:
        return default

    return clean_num / clean_den


def safe_mean(values: Iterable[Any], default: Optional[float] = None) -> Optional[float]:
    """
    Average the valid numbers in ``values``, skipping None/NaN/Inf.

    Args:
        values: Raw values
        default: Returned when no valid value is present

    Examples:
        >>> safe_mean([10, None, float('nan'), 20])
        15.0
        >>> safe_mean([], default=0.0)
        0.0
    """
    cleaned = [v for v in (clean_numeric(x) for x in values) if v is not None]
    if not cleaned:
        return default
    return sum(cleaned) / len(cleaned)


def safe_format(
    value: Any,
    format_spec: str = ".2f",
    default: str = "N/A",
    suffix: str = ""
) -> str:
    """
    Safely format a numeric value for display/reporting.

    Examples:
        >>> safe_format(12.345, ".1f", suffix="%")
        '12.3%'
        >>> safe_format(None)
        'N/A'
    """
    cleaned = clean_numeric(value)
    if cleaned is None:
        return default

    try:
        return f"{format(cleaned, format_spec)}{suffix}"
    except (ValueError, TypeError):
        return str(cleaned)
