"""
Macro Trends Markdown Report Generator

Renders a MacroAnalysis as a Markdown "Macro Dashboard":
1. Market Summary (sentiment, guidance, capex, AI)
2. Partnership Network
3. Sector Breakdown
4. Divergences
5. Top Themes
"""

from datetime import datetime
from typing import List

from utils.helpers import parse_date
from utils.numeric_utils import safe_format
from utils.unified_schema import (
    AggregateInsights,
    DivergenceEntry,
    MacroAnalysis,
    PartnershipEdge,
    SectorAnalysis,
)

SENTIMENT_EMOJI = {
    'bullish': "🟢",
    'neutral': "🟡",
    'bearish': "🔴",
}


class MacroMarkdownReport:
    """Generates Markdown reports for cross-company macro analysis."""

    def generate_report(self, analysis: MacroAnalysis) -> str:
        generated = parse_date(analysis.generated_at) or datetime.now()

        md = []
        md.append(f"# 🌍 Earnings Macro Trends - {analysis.period}")
        md.append(
            f"> **Generated at:** {generated.strftime('%Y-%m-%d %H:%M')} | "
            f"**Companies:** {len(analysis.companies)}"
        )
        md.append("\n---")

        if not analysis.companies:
            md.append("\n_No company has analyzed earnings for this period._")
            return "\n".join(md)

        md.append("## 1. 📊 Market Summary")
        md.append(self._render_summary(analysis.aggregate_insights, len(analysis.companies)))

        md.append("\n## 2. 🤝 Partnership Network")
        md.append(self._render_partnerships(analysis.aggregate_insights.partnership_network))

        md.append("\n## 3. 🧩 Sector Breakdown")
        md.append(self._render_sectors(analysis.sector_analyses))

        md.append("\n## 4. ↔️ Divergences")
        md.append(self._render_divergences(analysis.divergences))

        md.append("\n## 5. 🔭 Top Themes")
        if analysis.top_themes:
            md.extend(f"- {theme}" for theme in analysis.top_themes)
        else:
            md.append("_No dominant theme this period._")

        return "\n".join(md)

    def _render_summary(self, aggregates: AggregateInsights, company_count: int) -> str:
        sentiment = aggregates.overall_market_sentiment
        emoji = SENTIMENT_EMOJI.get(sentiment, "")

        guidance = (
            f"{aggregates.companies_raising_guidance} raised / "
            f"{aggregates.companies_maintaining_guidance} maintained / "
            f"{aggregates.companies_lowering_guidance} lowered / "
            f"{aggregates.companies_not_providing_guidance} not provided"
        )
        supply = ", ".join(f"{k}: {v}" for k, v in aggregates.supply_chain_sentiment.items())
        headcount = ", ".join(f"{k}: {v}" for k, v in aggregates.headcount_trends.items())
        pricing = ", ".join(f"{k}: {v}" for k, v in aggregates.pricing_power_distribution.items())

        return f"""
| Dimension | Value |
| :--- | :--- |
| **Overall Sentiment** | {emoji} **{sentiment.capitalize()}** (score {aggregates.average_sentiment_score:+.2f}) |
| **Guidance** | {guidance} |
| **Avg Capex Growth** | {safe_format(aggregates.average_capex_growth, '.1f', suffix='%')} |
| **AI Investment** | {aggregates.ai_investment_count} of {company_count} companies |
| **Supply Chain** | {supply or 'N/A'} |
| **Headcount** | {headcount or 'N/A'} |
| **Pricing Power** | {pricing or 'N/A'} |
"""

    def _render_partnerships(self, edges: List[PartnershipEdge]) -> str:
        if not edges:
            return "_No partnerships reported._"

        md = ["| Partner | Companies | Connected |",
              "| :--- | :---: | :--- |"]
        for edge in edges:
            md.append(f"| **{edge.partner}** | {edge.mentions} | {', '.join(edge.connected_companies)} |")
        return "\n".join(md)

    def _render_sectors(self, sectors: List[SectorAnalysis]) -> str:
        if not sectors:
            return "_No sector data._"

        md = ["| Sector | Sub-Category | Companies | Avg Capex | AI % | Sentiment | Top Partners |",
              "| :--- | :--- | :--- | :---: | :---: | :---: | :--- |"]
        for sector in sectors:
            partners = ", ".join(f"{p.partner} ({p.mentions})" for p in sector.top_partners) or "-"
            md.append(
                f"| {sector.sector or 'Unclassified'} | {sector.sub_category or '-'} | "
                f"{', '.join(sector.companies)} | "
                f"{safe_format(sector.average_capex_growth, '.1f', suffix='%')} | "
                f"{safe_format(sector.ai_investment_percentage, '.0f', suffix='%')} | "
                f"{sector.average_sentiment:+.2f} | {partners} |"
            )
        return "\n".join(md)

    def _render_divergences(self, divergences: List[DivergenceEntry]) -> str:
        if not divergences:
            return "_No divergences detected._"

        md = []
        for entry in divergences:
            md.append(f"### {entry.theme}")
            md.append(f"{entry.details}\n")
            md.append(f"- 🟢 **Up:** {', '.join(entry.winners) or '-'}")
            md.append(f"- 🔴 **Down:** {', '.join(entry.losers) or '-'}")
        return "\n".join(md)
