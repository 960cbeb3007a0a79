"""
Company Directory - static registry of tracked companies.

Reference data only: tickers, names, dashboard categories, sector and
sub-category, SEC CIK and fiscal-year-end. Never mutated at runtime.
"""

from typing import Dict, Iterable, List, Optional

from utils.unified_schema import Company

# Raw registry rows. Omit fiscal_year_end for calendar-year companies (Dec 31).
_COMPANY_ROWS = [
    # --- Mag7 ---
    dict(ticker="AAPL", name="Apple Inc.", category=["Mag7", "Tech"], sector="Technology",
         sub_category="Enterprise Software", cik="0000320193", fiscal_year_end="09-30"),
    dict(ticker="MSFT", name="Microsoft Corporation", category=["Mag7", "Tech"], sector="Technology",
         sub_category="Cloud Infrastructure", cik="0000789019", fiscal_year_end="06-30"),
    dict(ticker="GOOGL", name="Alphabet Inc.", category=["Mag7", "Tech"], sector="Technology",
         sub_category="Cloud Infrastructure", cik="0001652044"),
    dict(ticker="AMZN", name="Amazon.com Inc.", category=["Mag7", "Tech"], sector="Technology",
         sub_category="E-commerce", cik="0001018724"),
    dict(ticker="META", name="Meta Platforms Inc.", category=["Mag7", "Tech"], sector="Technology",
         sub_category="Social Media", cik="0001326801"),
    dict(ticker="TSLA", name="Tesla Inc.", category=["Mag7", "Tech"], sector="Technology",
         sub_category="AI/ML", cik="0001318605"),
    dict(ticker="NVDA", name="NVIDIA Corporation", category=["Mag7", "Tech"], sector="Technology",
         sub_category="Semiconductors", cik="0001045810", fiscal_year_end="01-31"),

    # --- High-growth Tech ---
    dict(ticker="SNOW", name="Snowflake Inc.", category=["Tech"], sector="Technology",
         sub_category="Cloud Infrastructure", cik="0001640147"),
    dict(ticker="PLTR", name="Palantir Technologies Inc.", category=["Tech"], sector="Technology",
         sub_category="AI/ML", cik="0001321655"),
    dict(ticker="NET", name="Cloudflare Inc.", category=["Tech"], sector="Technology",
         sub_category="Cloud Infrastructure", cik="0001477333"),
    dict(ticker="CRWD", name="CrowdStrike Holdings Inc.", category=["Tech"], sector="Technology",
         sub_category="Cybersecurity", cik="0001535527"),
    dict(ticker="DDOG", name="Datadog Inc.", category=["Tech"], sector="Technology",
         sub_category="Cloud Infrastructure", cik="0001561550"),
    dict(ticker="ZS", name="Zscaler Inc.", category=["Tech"], sector="Technology",
         sub_category="Cybersecurity", cik="0001713683"),
    dict(ticker="OKTA", name="Okta Inc.", category=["Tech"], sector="Technology",
         sub_category="Cybersecurity", cik="0001660134"),
    dict(ticker="MDB", name="MongoDB Inc.", category=["Tech"], sector="Technology",
         sub_category="Cloud Infrastructure", cik="0001441110"),
    dict(ticker="TEAM", name="Atlassian Corporation", category=["Tech"], sector="Technology",
         sub_category="SaaS", cik="0001650372"),
    dict(ticker="U", name="Unity Software Inc.", category=["Tech"], sector="Technology",
         sub_category="Gaming", cik="0001810806"),
    dict(ticker="RBLX", name="Roblox Corporation", category=["Tech"], sector="Technology",
         sub_category="Gaming", cik="0001315098"),

    # --- Semiconductors ---
    dict(ticker="AMD", name="Advanced Micro Devices Inc.", category=["Tech"], sector="Technology",
         sub_category="Semiconductors", cik="0000002488"),
    dict(ticker="INTC", name="Intel Corporation", category=["Tech"], sector="Technology",
         sub_category="Semiconductors", cik="0000050863"),
    dict(ticker="QCOM", name="QUALCOMM Inc.", category=["Tech"], sector="Technology",
         sub_category="Semiconductors", cik="0000804328"),
    dict(ticker="AVGO", name="Broadcom Inc.", category=["Tech"], sector="Technology",
         sub_category="Semiconductors", cik="0001730168"),

    # --- Biotech ---
    dict(ticker="MRNA", name="Moderna Inc.", category=["Biotech"], sector="Healthcare",
         sub_category="Biotech", cik="0001682852"),
    dict(ticker="BNTX", name="BioNTech SE", category=["Biotech"], sector="Healthcare",
         sub_category="Biotech", cik="0001776985"),
    dict(ticker="GILD", name="Gilead Sciences Inc.", category=["Biotech"], sector="Healthcare",
         sub_category="Biotech", cik="0000882095"),
    dict(ticker="VRTX", name="Vertex Pharmaceuticals Inc.", category=["Biotech"], sector="Healthcare",
         sub_category="Biotech", cik="0000875320"),
    dict(ticker="REGN", name="Regeneron Pharmaceuticals Inc.", category=["Biotech"], sector="Healthcare",
         sub_category="Biotech", cik="0000872589"),
    dict(ticker="BIIB", name="Biogen Inc.", category=["Biotech"], sector="Healthcare",
         sub_category="Biotech", cik="0000875045"),
    dict(ticker="CRSP", name="CRISPR Therapeutics AG", category=["Biotech"], sector="Healthcare",
         sub_category="Biotech", cik="0001674384"),
    dict(ticker="BEAM", name="Beam Therapeutics Inc.", category=["Biotech"], sector="Healthcare",
         sub_category="Biotech", cik="0001747769"),

    # --- WSB favourites ---
    dict(ticker="GME", name="GameStop Corp.", category=["WSB"], sector="Consumer",
         sub_category="Other", cik="0001326380"),
    dict(ticker="AMC", name="AMC Entertainment Holdings Inc.", category=["WSB"], sector="Consumer",
         sub_category="Other", cik="0001411579"),
    dict(ticker="BBBY", name="Bed Bath & Beyond Inc.", category=["WSB"], sector="Consumer",
         sub_category="Other", cik="0000886158"),
    dict(ticker="COIN", name="Coinbase Global Inc.", category=["WSB", "Tech"], sector="Technology",
         sub_category="FinTech", cik="0001679788"),
    dict(ticker="HOOD", name="Robinhood Markets Inc.", category=["WSB", "Tech"], sector="Technology",
         sub_category="FinTech", cik="0001783879"),

    # --- Energy ---
    dict(ticker="CEG", name="Constellation Energy Corporation", category=["Energy"], sector="Energy",
         sub_category="Utilities", cik="0001868275"),
    dict(ticker="VST", name="Vistra Corp.", category=["Energy"], sector="Energy",
         sub_category="Utilities", cik="0001692819"),

    # --- Infrastructure / Data Centers ---
    dict(ticker="CORZ", name="Core Scientific Inc.", category=["Infrastructure", "Tech"], sector="Technology",
         sub_category="Data Centers", cik="0001839341"),
    dict(ticker="DOCN", name="DigitalOcean Holdings Inc.", category=["Infrastructure", "Tech"], sector="Technology",
         sub_category="Cloud Infrastructure", cik="0001582961"),

    # --- Quantum Computing ---
    dict(ticker="IONQ", name="IonQ Inc.", category=["Infrastructure", "Tech"], sector="Technology",
         sub_category="Quantum Computing", cik="0001822928"),
]


class CompanyDirectory:
    """
    Read-only lookup over a fixed set of companies.

    The module-level ``company_directory`` wraps the tracked universe; tests
    and alternative universes build their own instance.
    """

    def __init__(self, companies: Iterable[Company]):
        self._companies: tuple = tuple(companies)
        self._by_ticker: Dict[str, Company] = {c.ticker.upper(): c for c in self._companies}

    def __len__(self) -> int:
        return len(self._companies)

    def __contains__(self, ticker: str) -> bool:
        return self.get_company_by_ticker(ticker) is not None

    def get_all_companies(self) -> List[Company]:
        return list(self._companies)

    def get_company_by_ticker(self, ticker: str) -> Optional[Company]:
        """Case-insensitive ticker lookup; None when not tracked."""
        if not isinstance(ticker, str):
            return None
        return self._by_ticker.get(ticker.strip().upper())

    def get_company_by_cik(self, cik: str) -> Optional[Company]:
        for company in self._companies:
            if company.cik == cik:
                return company
        return None

    def get_companies_by_category(self, category: str) -> List[Company]:
        return [c for c in self._companies if category in c.category]

    def get_companies_by_sector(self, sector: str, sub_category: Optional[str] = None) -> List[Company]:
        """Companies in ``sector``, optionally narrowed to one sub-category."""
        return [
            c for c in self._companies
            if c.sector == sector and (sub_category is None or c.sub_category == sub_category)
        ]


COMPANIES: List[Company] = [Company(**row) for row in _COMPANY_ROWS]

# Global directory instance
company_directory = CompanyDirectory(COMPANIES)


def get_all_companies() -> List[Company]:
    return company_directory.get_all_companies()


def get_company_by_ticker(ticker: str) -> Optional[Company]:
    return company_directory.get_company_by_ticker(ticker)


def get_company_by_cik(cik: str) -> Optional[Company]:
    return company_directory.get_company_by_cik(cik)


def get_companies_by_category(category: str) -> List[Company]:
    return company_directory.get_companies_by_category(category)


def get_companies_by_sector(sector: str, sub_category: Optional[str] = None) -> List[Company]:
    return company_directory.get_companies_by_sector(sector, sub_category)
