"""
Financial Data Audit CLI
========================

Scans stored earnings insights for monetary values that look like they are
in the wrong unit (dollars or thousands instead of millions).

Usage:
    python run_data_audit.py
    python run_data_audit.py --ticker COIN
"""

import sys
import argparse
from pathlib import Path

import pandas as pd

# IMPORTANT: Set logging mode BEFORE importing modules
from utils import LoggingContext, set_logging_mode
set_logging_mode(LoggingContext.ORCHESTRATED)

from data_acquisition.earnings_data import detect_unit_issues, load_all_earnings_data
from utils.console_utils import symbol as ICON, print_header, print_separator
from utils.logger import setup_logger

logger = setup_logger('run_data_audit')

ISSUE_COLUMNS = ['ticker', 'quarter', 'field', 'value', 'expectedRange', 'severity', 'suggestedFix']


def collect_issues(records, ticker=None) -> pd.DataFrame:
    rows = []
    for symbol, data in records.items():
        if ticker and symbol != ticker:
            continue
        for issue in detect_unit_issues(symbol, data.reports):
            rows.append(issue.model_dump(by_alias=True))
    return pd.DataFrame(rows, columns=ISSUE_COLUMNS)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Audit stored financial data for unit errors.")
    parser.add_argument('--ticker', type=str, default=None, help="Only audit this ticker")
    parser.add_argument('--data-dir', type=Path, default=None, help="Earnings insight store directory")
    args = parser.parse_args(argv)

    print_header("FINANCIAL DATA QUALITY AUDIT")

    records = load_all_earnings_data(args.data_dir)
    ticker = args.ticker.upper() if args.ticker else None
    if ticker and ticker not in records:
        print(f"  {ICON.FAIL} No earnings data for {ticker}")
        return 1
    print(f"  Scanning {1 if ticker else len(records)} company files...\n")

    issues = collect_issues(records, ticker)
    if issues.empty:
        print(f"  {ICON.OK} No issues found! All financial data appears to be in correct units.")
        return 0

    print(f"  Found {len(issues)} potential issues:")
    for symbol, group in issues.groupby('ticker', sort=False):
        print(f"\n{symbol} ({len(group)} issues):")
        print("-" * 80)
        for row in group.itertuples(index=False):
            marker = ICON.FAIL if row.severity == 'critical' else ICON.WARN
            print(f"  {marker} {row.quarter} - {row.field}")
            print(f"     Current value: {row.value:,.0f}")
            if pd.notna(row.suggestedFix):
                print(f"     Suggested fix: {row.suggestedFix:,.3f} million")
            print(f"     Expected range: {row.expectedRange}")

    print_header("SUMMARY")
    severity_counts = issues['severity'].value_counts()
    print(f"  Critical issues: {severity_counts.get('critical', 0)}")
    print(f"  Warnings: {severity_counts.get('warning', 0)}")
    print(f"\n  Affected companies: {issues['ticker'].nunique()}")
    print(f"  Total issues: {len(issues)}")
    print_separator()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n[!] Operation cancelled.")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Data audit failed: {e}", exc_info=True)
        sys.exit(1)
