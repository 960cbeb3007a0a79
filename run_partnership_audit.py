"""
Partnership Audit CLI

Normalizes every stored partner mention across ALL quarters and lists the
canonical partners by the number of distinct companies mentioning them.
Useful for tuning the alias and exclusion tables.
"""

import sys
import argparse
from pathlib import Path

# IMPORTANT: Set logging mode BEFORE importing modules
from utils import LoggingContext, set_logging_mode
set_logging_mode(LoggingContext.ORCHESTRATED)

from data_acquisition.earnings_data import load_all_earnings_data
from fundamentals.partners import build_partner_audit
from utils.console_utils import symbol as ICON, print_header, print_separator
from utils.logger import setup_logger

logger = setup_logger('run_partnership_audit')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Audit normalized partnerships across all quarters.")
    parser.add_argument('--data-dir', type=Path, default=None, help="Earnings insight store directory")
    parser.add_argument('--min-companies', type=int, default=2,
                        help="Minimum distinct companies for the cross-company list (default: 2)")
    parser.add_argument('--top', type=int, default=25, help="Rows in the full list (default: 25)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    records = load_all_earnings_data(args.data_dir)
    if not records:
        print(f"  {ICON.FAIL} No earnings data found")
        return 1

    audit = build_partner_audit(records)

    print_header(f"Normalized partnerships across ALL quarters ({args.min_companies}+ companies)")
    cross_company = audit[audit['companies'] >= args.min_companies]
    if cross_company.empty:
        print("  None found")
    else:
        print(cross_company.to_string(index=False))

    print_header("All normalized partnerships (sorted by company count)")
    if audit.empty:
        print("  None found")
    else:
        print(audit.head(args.top).to_string(index=False))

    print(f"\n  {ICON.INFO} {len(audit)} canonical partners from {len(records)} companies")
    print_separator()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n[!] Operation cancelled.")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Partnership audit failed: {e}", exc_info=True)
        sys.exit(1)
