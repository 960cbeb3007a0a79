"""
Sector Comparator - one company's metrics against its peers for a period.

Peers are companies in the same sector (and, for the narrower set, the same
sub-category) that have an analyzed report for the same quarter. Averages
skip missing values and are None when no peer reports the metric. Ranks are
1-based positions by revenue, descending.
"""

from typing import List, Mapping, Optional

import pandas as pd

from config.settings import settings
from data_acquisition.companies import CompanyDirectory, company_directory
from fundamentals.macro_trends.quarter_selector import (
    QuarterSelection,
    find_report,
    resolve_latest_quarter,
    select_quarter_reports,
)
from utils.logger import setup_logger
from utils.numeric_utils import clean_numeric
from utils.unified_schema import (
    Company,
    CompanyEarningsData,
    ComparisonResult,
    PeerAverages,
    PeerRanking,
)

logger = setup_logger('sector_comparator')

PEER_COLUMNS = ['ticker', 'sector', 'sub_category', 'revenue', 'capex_growth']


def build_peer_frame(selections: List[QuarterSelection], directory: CompanyDirectory) -> pd.DataFrame:
    """One row per company with a report for the quarter."""
    rows = []
    for selection in selections:
        company = selection.company or directory.get_company_by_ticker(selection.ticker)
        rows.append({
            'ticker': selection.ticker,
            'sector': company.sector if company else None,
            'sub_category': company.sub_category if company else None,
            'revenue': selection.insights.revenue,
            'capex_growth': selection.insights.capex_growth,
        })

    frame = pd.DataFrame(rows, columns=PEER_COLUMNS)
    for column in ('revenue', 'capex_growth'):
        frame[column] = pd.to_numeric(frame[column], errors='coerce')
    return frame


def peer_averages(peers: pd.DataFrame) -> PeerAverages:
    """Null-safe means; NaN (no peer reports the metric) becomes None."""
    return PeerAverages(
        capex_growth=clean_numeric(peers['capex_growth'].mean()),
        revenue=clean_numeric(peers['revenue'].mean()),
    )


def revenue_rank(peers: pd.DataFrame, ticker: str) -> int:
    """1-based revenue position of ``ticker``; 0 when it is not in ``peers``."""
    # Missing revenue sorts as 0; the averages still skip it
    ranked = peers.assign(_sort_revenue=peers['revenue'].fillna(0)).sort_values(
        '_sort_revenue', ascending=False, kind='stable'
    )
    tickers = ranked['ticker'].tolist()
    return tickers.index(ticker) + 1 if ticker in tickers else 0


def _same_value(series: pd.Series, value) -> pd.Series:
    if value is None:
        return series.isna()
    return series == value


def get_sector_comparison(
    ticker: str,
    records: Mapping[str, CompanyEarningsData],
    target_quarter: Optional[str] = None,
    ordering: Optional[str] = None,
    directory: Optional[CompanyDirectory] = None,
) -> Optional[ComparisonResult]:
    """
    Compare a company with its sector and sub-category peers.

    Args:
        ticker: Company to compare
        records: Per-company earnings data keyed by ticker
        target_quarter: Period label; defaults to the company's own most
            recent quarter (not the market-wide latest)
        ordering: Quarter ordering used to find the most recent quarter
        directory: Company Directory to resolve the company from

    Returns:
        ComparisonResult, or None when the ticker is unknown, has no data,
        or has no analyzed report for the quarter

    Raises:
        TypeError: if ``records`` is not a mapping
    """
    if not isinstance(records, Mapping):
        raise TypeError(f"records must be a mapping of ticker -> CompanyEarningsData, got {type(records).__name__}")

    directory = directory or company_directory
    ordering = ordering or settings.quarter_ordering

    company: Optional[Company] = directory.get_company_by_ticker(ticker)
    if company is None:
        logger.debug(f"{ticker}: not in company directory")
        return None

    company_data = records.get(company.ticker)
    if company_data is None:
        logger.debug(f"{company.ticker}: no earnings data")
        return None

    quarter = target_quarter or resolve_latest_quarter(
        (report.quarter for report in company_data.reports), ordering
    )
    report = find_report(company_data, quarter) if quarter else None
    if report is None or report.insights is None:
        logger.debug(f"{company.ticker}: no analyzed report for {quarter}")
        return None

    frame = build_peer_frame(select_quarter_reports(records, quarter), directory)
    sector_peers = frame[_same_value(frame['sector'], company.sector)]
    sub_category_peers = sector_peers[_same_value(sector_peers['sub_category'], company.sub_category)]

    return ComparisonResult(
        company=company,
        quarter=quarter,
        company_metrics=report.insights,
        sector_averages=peer_averages(sector_peers),
        sub_category_averages=peer_averages(sub_category_peers),
        ranking=PeerRanking(
            in_sector=revenue_rank(sector_peers, company.ticker),
            total_in_sector=len(sector_peers),
            in_sub_category=revenue_rank(sub_category_peers, company.ticker),
            total_in_sub_category=len(sub_category_peers),
        ),
    )
