from .company_directory import (
    COMPANIES,
    CompanyDirectory,
    company_directory,
    get_all_companies,
    get_company_by_ticker,
    get_company_by_cik,
    get_companies_by_category,
    get_companies_by_sector,
)

__all__ = [
    'COMPANIES',
    'CompanyDirectory',
    'company_directory',
    'get_all_companies',
    'get_company_by_ticker',
    'get_company_by_cik',
    'get_companies_by_category',
    'get_companies_by_sector',
]
