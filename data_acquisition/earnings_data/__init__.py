from .earnings_store import (
    load_all_earnings_data,
    get_cached_earnings,
    has_cached_earnings,
    save_macro_analysis,
)
from .unit_validator import (
    normalize_to_millions,
    validate_and_normalize_financial_units,
    detect_unit_issues,
)

__all__ = [
    'load_all_earnings_data',
    'get_cached_earnings',
    'has_cached_earnings',
    'save_macro_analysis',
    'normalize_to_millions',
    'validate_and_normalize_financial_units',
    'detect_unit_issues',
]
