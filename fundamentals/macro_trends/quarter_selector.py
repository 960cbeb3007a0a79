"""
Quarter Selector - resolves the analysis period and picks each company's
report for it.

Period labels look like ``"Q4 2024"``. Two orderings are supported:

- ``lexicographic`` (default): plain descending string sort. This is the
  historical behaviour the dashboard snapshots were built with. It is only
  chronological within one calendar year ("Q4 2023" sorts after "Q1 2024").
- ``chronological``: parses ``Q<n> <year>`` into ``(year, n)``; labels that
  do not parse sort before every parsed label.
"""

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, List, Mapping, Optional, Tuple

from config.constants import UNKNOWN_PERIOD
from utils.helpers import parse_date
from utils.unified_schema import Company, CompanyEarningsData, EarningsReport, QuarterInfo

QUARTER_LABEL_PATTERN = re.compile(r'^\s*Q([1-4])\s+(\d{4})\s*$', re.IGNORECASE)

# Step back from the period end to the middle of the reporting period
PERIOD_MIDPOINT_OFFSET_DAYS = 45


@dataclass(frozen=True)
class QuarterSelection:
    """One company's report for the resolved quarter."""
    ticker: str
    company: Optional[Company]
    report: EarningsReport

    @property
    def insights(self):
        return self.report.insights


def parse_quarter_label(label: str) -> Optional[Tuple[int, int]]:
    """Parse ``"Q<n> <year>"`` into ``(year, n)``; None if it does not match."""
    if not isinstance(label, str):
        return None
    match = QUARTER_LABEL_PATTERN.match(label)
    if not match:
        return None
    return int(match.group(2)), int(match.group(1))


def quarter_sort_key(label: str, ordering: str = 'lexicographic'):
    """Sort key for quarter labels; larger means more recent."""
    if ordering == 'chronological':
        parsed = parse_quarter_label(label)
        # label breaks ties between spellings of the same quarter
        return (1, parsed, label) if parsed else (0, (0, 0), label)
    if ordering != 'lexicographic':
        raise ValueError(f"Unknown quarter ordering: {ordering}")
    return label


def resolve_latest_quarter(labels: Iterable[str], ordering: str = 'lexicographic') -> Optional[str]:
    """Most recent label among ``labels``; None when there are none."""
    distinct = {label for label in labels if isinstance(label, str)}
    if not distinct:
        return None
    return sorted(distinct, key=lambda label: quarter_sort_key(label, ordering), reverse=True)[0]


def resolve_target_quarter(
    records: Mapping[str, CompanyEarningsData],
    target_quarter: Optional[str] = None,
    ordering: str = 'lexicographic',
) -> str:
    """
    Resolve the period to analyze.

    An explicit ``target_quarter`` wins. Otherwise the most recent label
    present across every company's reports is used, or "Unknown" when no
    company has any report.
    """
    if target_quarter:
        return target_quarter

    labels = (report.quarter for data in records.values() for report in data.reports)
    return resolve_latest_quarter(labels, ordering) or UNKNOWN_PERIOD


def find_report(data: CompanyEarningsData, quarter: str) -> Optional[EarningsReport]:
    """First report whose label matches ``quarter`` exactly."""
    for report in data.reports:
        if report.quarter == quarter:
            return report
    return None


def select_quarter_reports(
    records: Mapping[str, CompanyEarningsData],
    quarter: str,
) -> List[QuarterSelection]:
    """
    Pick each company's report for ``quarter``.

    Companies without a matching report, or whose report carries no
    insights, are left out. No interpolation or carry-forward.
    """
    selections = []
    for ticker, data in records.items():
        report = find_report(data, quarter)
        if report is None or report.insights is None:
            continue
        selections.append(QuarterSelection(ticker=ticker, company=data.company, report=report))
    return selections


def get_quarter_info(report_date: str, fiscal_year_end: Optional[str] = None) -> QuarterInfo:
    """
    Derive period labels from a filing's report (period end) date.

    The calendar quarter is taken from the middle of the reporting period,
    45 days before the period end, so filings dated a few days into the
    next quarter still land in the quarter they cover. Fiscal quarter and
    year follow the company's fiscal-year-end (``MM-DD``); without one they
    equal the calendar values of the period end.

    Raises:
        ValueError: if ``report_date`` cannot be parsed
    """
    date = parse_date(report_date)
    if date is None:
        raise ValueError(f"Unparseable report date: {report_date!r}")

    middle = date - timedelta(days=PERIOD_MIDPOINT_OFFSET_DAYS)
    calendar_quarter = (middle.month - 1) // 3 + 1
    calendar_year = middle.year

    fiscal_year = date.year
    fiscal_quarter = calendar_quarter

    if fiscal_year_end:
        fy_end_month, fy_end_day = (int(part) for part in fiscal_year_end.split('-'))

        if date.month > fy_end_month or (date.month == fy_end_month and date.day > fy_end_day):
            fiscal_year = date.year + 1

        months_since_fy_end = date.month - fy_end_month
        if months_since_fy_end <= 0:
            months_since_fy_end += 12
        fiscal_quarter = min(4, (months_since_fy_end - 1) // 3 + 1)

    return QuarterInfo(
        calendar_quarter=calendar_quarter,
        calendar_year=calendar_year,
        fiscal_quarter=fiscal_quarter,
        fiscal_year=fiscal_year,
        quarter=f"Q{calendar_quarter} {calendar_year}",
        report_date=report_date,
    )
