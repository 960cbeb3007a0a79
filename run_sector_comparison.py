"""
Sector Comparison CLI

Shows how one company stacks up against its sector and sub-category peers
for a quarter (default: the company's own latest quarter).
"""

import sys
import argparse
from pathlib import Path

# IMPORTANT: Set logging mode BEFORE importing modules
from utils import LoggingContext, set_logging_mode
set_logging_mode(LoggingContext.ORCHESTRATED)

from data_acquisition.earnings_data import load_all_earnings_data
from fundamentals.peer_comparison import get_sector_comparison
from utils.console_utils import symbol as ICON, print_header, print_separator
from utils.helpers import format_large_number
from utils.logger import setup_logger
from utils.numeric_utils import safe_format

logger = setup_logger('run_sector_comparison')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Compare a company with its sector peers.")
    parser.add_argument('ticker', help="Ticker symbol, e.g. NVDA")
    parser.add_argument('--quarter', help="Period label, e.g. 'Q4 2024'")
    parser.add_argument('--data-dir', type=Path, default=None, help="Earnings insight store directory")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    ticker = args.ticker.upper()

    records = load_all_earnings_data(args.data_dir)
    result = get_sector_comparison(ticker, records, args.quarter)
    if result is None:
        print(f"  {ICON.FAIL} No comparison available for {ticker}"
              f"{' in ' + args.quarter if args.quarter else ''}")
        return 1

    company = result.company
    metrics = result.company_metrics
    ranking = result.ranking

    print_header(f"{company.name} ({company.ticker}) - {result.quarter}")
    print(f"  Sector: {company.sector} / {company.sub_category}\n")

    print(f"  {'Metric':<16}{'Company':>14}{'Sector Avg':>14}{'Sub-Cat Avg':>14}")
    print(f"  {'Revenue':<16}{format_large_number(metrics.revenue):>14}"
          f"{format_large_number(result.sector_averages.revenue):>14}"
          f"{format_large_number(result.sub_category_averages.revenue):>14}")
    print(f"  {'Capex Growth':<16}{safe_format(metrics.capex_growth, '.1f', suffix='%'):>14}"
          f"{safe_format(result.sector_averages.capex_growth, '.1f', suffix='%'):>14}"
          f"{safe_format(result.sub_category_averages.capex_growth, '.1f', suffix='%'):>14}")

    print(f"\n  Revenue rank in sector:       #{ranking.in_sector} of {ranking.total_in_sector}")
    print(f"  Revenue rank in sub-category: #{ranking.in_sub_category} of {ranking.total_in_sub_category}")
    print_separator()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n[!] Operation cancelled.")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Sector comparison failed: {e}", exc_info=True)
        sys.exit(1)
