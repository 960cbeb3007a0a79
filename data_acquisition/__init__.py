"""
Data Acquisition Module

Reference data and stored earnings insights.

Main Entry Points:
    - company_directory: static registry of tracked companies
    - load_all_earnings_data: per-company insight records from the store
    - save_macro_analysis: persist the latest macro analysis
"""

from .companies import company_directory, get_company_by_ticker
from .earnings_data import load_all_earnings_data, get_cached_earnings, save_macro_analysis

__all__ = [
    'company_directory',
    'get_company_by_ticker',
    'load_all_earnings_data',
    'get_cached_earnings',
    'save_macro_analysis',
]
