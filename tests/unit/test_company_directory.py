"""Unit tests for the Company Directory."""

import pytest

from data_acquisition.companies import (
    COMPANIES,
    CompanyDirectory,
    company_directory,
    get_companies_by_category,
    get_companies_by_sector,
    get_company_by_cik,
    get_company_by_ticker,
)
from utils.unified_schema import Company


class TestTrackedUniverse:

    def test_tickers_are_unique(self):
        tickers = [c.ticker for c in COMPANIES]
        assert len(tickers) == len(set(tickers)) == len(company_directory)

    def test_every_company_has_sector_and_sub_category(self):
        assert all(c.sector and c.sub_category for c in COMPANIES)

    def test_fiscal_year_end_format(self):
        for company in COMPANIES:
            if company.fiscal_year_end:
                month, day = company.fiscal_year_end.split('-')
                assert 1 <= int(month) <= 12 and 1 <= int(day) <= 31

    def test_mag7(self):
        assert len(get_companies_by_category("Mag7")) == 7


class TestLookups:

    def test_ticker_lookup_case_insensitive(self):
        assert get_company_by_ticker("nvda").name == "NVIDIA Corporation"
        assert get_company_by_ticker(" NVDA ").ticker == "NVDA"

    @pytest.mark.parametrize("ticker", ["NONEXISTENT", "", None, 123])
    def test_unknown_ticker(self, ticker):
        assert get_company_by_ticker(ticker) is None

    def test_cik_lookup(self):
        assert get_company_by_cik("0000320193").ticker == "AAPL"
        assert get_company_by_cik("0000000000") is None

    def test_sector_lookup(self):
        semis = get_companies_by_sector("Technology", "Semiconductors")
        assert "NVDA" in [c.ticker for c in semis]
        assert all(c.sub_category == "Semiconductors" for c in semis)
        assert len(get_companies_by_sector("Technology")) >= len(semis)

    def test_unknown_category(self):
        assert get_companies_by_category("Crypto Miners of Mars") == []

    def test_contains(self):
        assert "aapl" in company_directory
        assert "NONEXISTENT" not in company_directory


class TestCustomDirectory:

    def test_independent_universe(self):
        directory = CompanyDirectory([Company(ticker="X", name="X Corp", sector="Technology")])
        assert len(directory) == 1
        assert directory.get_company_by_ticker("x").name == "X Corp"
        assert directory.get_company_by_ticker("NVDA") is None

    def test_companies_are_read_only(self):
        with pytest.raises(Exception):
            COMPANIES[0].sector = "Utilities"
