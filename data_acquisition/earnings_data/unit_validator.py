"""
Financial unit validation.

All monetary insight fields are stored in millions of USD, but the
extraction step occasionally reports raw dollars or thousands. This module
normalizes fresh extractions and audits stored records for values that are
off by a factor of 1,000 or 1,000,000.
"""

from typing import Iterable, List, Optional

from pydantic.alias_generators import to_camel

from config.analysis_config import (
    FINANCIAL_FIELD_RANGES,
    UNIT_AUDIT_THRESHOLDS,
    UNIT_CONVERSION_THRESHOLDS,
)
from utils.logger import setup_logger
from utils.numeric_utils import clean_numeric
from utils.unified_schema import EarningsInsights, EarningsReport, UnitIssue

logger = setup_logger('unit_validator')

MONETARY_FIELDS = (
    'revenue',
    'net_income',
    'operating_cash_flow',
    'free_cash_flow',
    'capex_amount',
    'deferred_revenue',
)


def normalize_to_millions(value, field_name: str = 'value') -> Optional[float]:
    """
    Convert a value to millions if it looks like dollars or thousands.

    Args:
        value: Raw amount
        field_name: Used in log messages only

    Returns:
        Amount in millions, or None if the value is missing/invalid
    """
    amount = clean_numeric(value)
    if amount is None:
        return None

    magnitude = abs(amount)
    dollars_above = UNIT_CONVERSION_THRESHOLDS["DOLLARS_ABOVE"]
    if magnitude > dollars_above:
        logger.warning(f"{field_name}: {amount:,.0f} looks like dollars, converting to millions")
        return amount / 1_000_000
    # exactly 1M is left as is
    if UNIT_CONVERSION_THRESHOLDS["THOUSANDS_ABOVE"] < magnitude < dollars_above:
        logger.warning(f"{field_name}: {amount:,.0f} looks like thousands, converting to millions")
        return amount / 1_000
    return amount


def is_reasonable(field_name: str, value: float) -> bool:
    """Check a normalized value against its expected range."""
    bounds = FINANCIAL_FIELD_RANGES.get(field_name)
    if bounds is None:
        return True
    ok = bounds['min'] <= value <= bounds['max']
    if not ok:
        logger.warning(
            f"{field_name}: {value:,.2f} is outside reasonable range [{bounds['min']}, {bounds['max']}]"
        )
    return ok


def validate_and_normalize_financial_units(
    insights: EarningsInsights,
    company_name: str,
    quarter: str,
) -> EarningsInsights:
    """
    Normalize every monetary field of a fresh extraction to millions.

    The input is not modified; a new insights object is returned.
    """
    logger.info(f"Validating financial units for {company_name} {quarter}")

    updates = {}
    for field_name in MONETARY_FIELDS:
        normalized = normalize_to_millions(getattr(insights, field_name), field_name)
        if normalized is not None:
            updates[field_name] = normalized

    for field_name in ('revenue', 'net_income'):
        if field_name in updates and not is_reasonable(field_name, updates[field_name]):
            logger.warning(f"{company_name} {quarter}: {field_name} still unreasonable after normalization")

    return insights.model_copy(update=updates)


def issue_field_name(field_name: str) -> str:
    """Name of an insights field as it appears in the stored JSON (camelCase)."""
    return to_camel(field_name)


def _scale_issue(ticker, quarter, field_name, value, expected_range, severity,
                 use_magnitude: bool = False) -> Optional[UnitIssue]:
    # signed unless use_magnitude
    measured = abs(value) if use_magnitude else value
    if measured > UNIT_AUDIT_THRESHOLDS["DOLLARS_ABOVE"]:
        fix = value / 1_000_000
    elif measured > UNIT_AUDIT_THRESHOLDS["THOUSANDS_ABOVE"]:
        fix = value / 1_000
    else:
        return None
    return UnitIssue(
        ticker=ticker, quarter=quarter, field=issue_field_name(field_name), value=value,
        expected_range=expected_range, severity=severity, suggested_fix=fix,
    )


# (field, expected range, compare absolute value)
WARNING_FIELDS = (
    ('operating_cash_flow', '-50,000 to 50,000 million', True),
    ('capex_amount', '0-50,000 million', False),
    ('deferred_revenue', '0-50,000 million', False),
)


def detect_unit_issues(ticker: str, reports: Iterable[EarningsReport]) -> List[UnitIssue]:
    """
    Scan stored reports for values that are likely in the wrong unit.

    Revenue and net income problems are critical; cash flow, capex and
    deferred revenue are warnings. Only net income and operating cash flow
    are checked by magnitude, the other fields are compared signed. Revenue
    is also compared against the previous report in the list to catch 100x
    jumps. Issues name fields in camelCase, as stored.
    """
    issues: List[UnitIssue] = []
    previous_revenue: Optional[float] = None

    for report in reports:
        insights = report.insights
        if insights is None:
            previous_revenue = None
            continue
        quarter = report.quarter

        revenue = insights.revenue
        if revenue is not None:
            issue = _scale_issue(ticker, quarter, 'revenue', revenue, '10-100,000 million', 'critical')
            if issue:
                issues.append(issue)
            if previous_revenue and revenue > UNIT_AUDIT_THRESHOLDS["THOUSANDS_ABOVE"]:
                if revenue / previous_revenue > UNIT_AUDIT_THRESHOLDS["QOQ_JUMP_RATIO"]:
                    issues.append(UnitIssue(
                        ticker=ticker, quarter=quarter, field=issue_field_name('revenue'), value=revenue,
                        expected_range=f"close to previous quarter ({previous_revenue})",
                        severity='critical', suggested_fix=revenue / 1_000,
                    ))

        if insights.net_income is not None:
            issue = _scale_issue(
                ticker, quarter, 'net_income', insights.net_income,
                '-50,000 to 50,000 million', 'critical', use_magnitude=True,
            )
            if issue:
                issues.append(issue)

        for field_name, expected, use_magnitude in WARNING_FIELDS:
            value = getattr(insights, field_name)
            if value is None:
                continue
            measured = abs(value) if use_magnitude else value
            if measured > UNIT_AUDIT_THRESHOLDS["THOUSANDS_ABOVE"]:
                issues.append(UnitIssue(
                    ticker=ticker, quarter=quarter, field=issue_field_name(field_name), value=value,
                    expected_range=expected, severity='warning', suggested_fix=value / 1_000,
                ))

        previous_revenue = revenue

    return issues
