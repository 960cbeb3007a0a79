"""
Common helper utilities for the application.
"""

from datetime import datetime
from typing import Any, Optional
import pandas as pd


def format_large_number(value: Any, decimals: int = 2) -> str:
    """
    Format a value given in millions of USD with a B/T/M suffix.

    Args:
        value: Amount in millions
        decimals: Number of decimal places

    Returns:
        Formatted string (e.g. 1530.0 -> "$1.53B"), "N/A" when missing
    """
    try:
        if value is None or pd.isna(value):
            return "N/A"
        value = float(value)
    except (ValueError, TypeError):
        return "N/A"

    if abs(value) >= 1e6:
        return f"${value / 1e6:.{decimals}f}T"
    elif abs(value) >= 1e3:
        return f"${value / 1e3:.{decimals}f}B"
    return f"${value:.{decimals}f}M"


def parse_date(date_str: Optional[str]) -> Optional[datetime]:
    """
    Parse date string to datetime object.

    Args:
        date_str: Date string to parse

    Returns:
        Datetime object or None if parsing fails
    """
    if not date_str:
        return None

    try:
        parsed = pd.to_datetime(date_str)
    except (ValueError, TypeError):
        return None
    if pd.isna(parsed):
        return None
    return parsed.to_pydatetime()
