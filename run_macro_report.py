"""
Macro Trends Report Orchestrator

Loads every company's stored earnings insights, computes the cross-company
macro analysis for a quarter, writes it to the macro data directory as
latest.json and optionally renders a Markdown dashboard.
"""

import sys
import argparse
from pathlib import Path

# IMPORTANT: Set logging mode BEFORE importing modules
from utils import LoggingContext, set_logging_mode
set_logging_mode(LoggingContext.ORCHESTRATED)

from config.settings import settings
from data_acquisition.earnings_data import load_all_earnings_data, save_macro_analysis
from fundamentals.macro_trends import MacroAnalyzer, MacroMarkdownReport
from fundamentals.reporting import ReportAssembler
from utils.console_utils import symbol as ICON, print_header, print_step, print_separator
from utils.logger import setup_logger
from utils.numeric_utils import safe_format

logger = setup_logger('run_macro_report')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Regenerate the cross-company macro trends analysis.")
    parser.add_argument('--quarter', help="Period label, e.g. 'Q4 2024' (default: most recent)")
    parser.add_argument('--data-dir', type=Path, default=None, help="Earnings insight store directory")
    parser.add_argument('--output-dir', type=Path, default=None, help="Where latest.json is written")
    parser.add_argument('--markdown', action='store_true', help="Also write a Markdown dashboard")
    parser.add_argument(
        '--ordering', choices=['lexicographic', 'chronological'], default=None,
        help="Quarter ordering used to pick the most recent period",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    print_header("EARNINGS MACRO TRENDS")

    print_step(1, 3, "Loading Earnings Data")
    records = load_all_earnings_data(args.data_dir)
    if not records:
        print(f"  {ICON.FAIL} No earnings data found in {args.data_dir or settings.earnings_data_dir}")
        return 1
    print(f"  {ICON.OK} Loaded {len(records)} companies")

    print_step(2, 3, "Computing Macro Analysis")
    analysis = MacroAnalyzer(args.ordering).analyze(records, args.quarter)
    aggregates = analysis.aggregate_insights

    print(f"  {ICON.OK} Period: {analysis.period} ({len(analysis.companies)} companies)")
    print(f"  > Avg capex growth:    {safe_format(aggregates.average_capex_growth, '.1f', suffix='%')}")
    print(f"  > Guidance:            {aggregates.companies_raising_guidance} raised, "
          f"{aggregates.companies_lowering_guidance} lowered")
    print(f"  > AI investment:       {aggregates.ai_investment_count} companies")
    print(f"  > Market sentiment:    {aggregates.overall_market_sentiment}")
    print(f"  > Partnership network: {len(aggregates.partnership_network)} partners")
    print(f"  > Sectors:             {len(analysis.sector_analyses)}")
    if analysis.top_themes:
        print(f"  > Themes:              {', '.join(analysis.top_themes)}")
    if not analysis.companies:
        print(f"  {ICON.WARN} No company has an analyzed report for {analysis.period}")

    print_step(3, 3, "Writing Outputs")
    output_path = save_macro_analysis(analysis, args.output_dir)
    print(f"  {ICON.OK} Macro analysis saved: {output_path}")

    if args.markdown:
        md_text = ReportAssembler.assemble_macro_report(MacroMarkdownReport().generate_report(analysis))

        reports_dir = settings.reports_dir
        reports_dir.mkdir(parents=True, exist_ok=True)
        period_slug = analysis.period.replace(' ', '_')
        report_file = reports_dir / f"macro_trends_{period_slug}.md"
        report_file.write_text(md_text, encoding='utf-8')
        print(f"  {ICON.OK} Dashboard generated: {report_file}")

    print_separator()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n[!] Operation cancelled.")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Macro report failed: {e}", exc_info=True)
        sys.exit(1)
