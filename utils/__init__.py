"""
Utilities module for the Earnings Trends system.

=== DEVELOPER GUIDE ===

--- Quick Reference ---

1. Numeric handling (numeric_utils.py) - most used
   from utils.numeric_utils import clean_numeric, safe_divide, safe_mean, safe_format
   - clean_numeric(value)        NaN/Inf/None/bool/garbage -> None
   - safe_divide(a, b)           division with zero/None protection
   - safe_mean(values)           mean of the valid numbers only
   - safe_format(val, ".2f")     invalid -> "N/A"

2. Helpers (helpers.py)
   from utils.helpers import format_large_number, parse_date
   - format_large_number(1530.0) -> "$1.53B" (input in millions)
   - parse_date(date_str)

3. Logging (logger.py)
   from utils.logger import setup_logger
   - logger = setup_logger('module_name')
   - LoggingContext / set_logging_mode: quiet library loggers under run_*.py

4. Console output (console_utils.py)
   from utils.console_utils import symbol, print_step, print_separator

--- Data architecture ---

5. unified_schema.py    pydantic models for stored records and analysis results

=== Notes ===
- Never average or divide raw insight values; use safe_mean() / safe_divide()
- Use setup_logger() rather than print() for diagnostics in library code
"""

from .logger import setup_logger, LoggingContext, set_logging_mode, get_logging_mode
from .helpers import format_large_number, parse_date

__all__ = [
    'setup_logger',
    'LoggingContext',
    'set_logging_mode',
    'get_logging_mode',
    'format_large_number',
    'parse_date',
]
