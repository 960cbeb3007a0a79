"""
Partnership audit across every stored quarter.

Data-quality view of the normalizer: which canonical partners the stored
mentions resolve to, and how many distinct companies mention each one over
all reports (not just one period).
"""

from typing import Mapping

import pandas as pd

from utils.unified_schema import CompanyEarningsData
from .partner_normalizer import normalize

AUDIT_COLUMNS = ['partner', 'companies', 'tickers']


def build_partner_audit(records: Mapping[str, CompanyEarningsData]) -> pd.DataFrame:
    """
    Canonical partner -> distinct mentioning companies, across all quarters.

    Returns:
        DataFrame with columns ``partner``, ``companies`` (distinct count) and
        ``tickers`` (comma-separated, first-seen order), sorted by
        ``companies`` descending; ties keep first-seen partner order.
    """
    connected = {}
    for ticker, data in records.items():
        for report in data.reports:
            if report.insights is None:
                continue
            for raw_name in report.insights.partnerships:
                partner = normalize(raw_name)
                if partner is not None:
                    connected.setdefault(partner, {})[ticker] = None

    frame = pd.DataFrame(
        [
            {'partner': partner, 'companies': len(tickers), 'tickers': ', '.join(tickers)}
            for partner, tickers in connected.items()
        ],
        columns=AUDIT_COLUMNS,
    )
    return frame.sort_values('companies', ascending=False, kind='stable').reset_index(drop=True)
