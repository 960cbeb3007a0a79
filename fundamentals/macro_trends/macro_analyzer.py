"""
Macro Analyzer - cross-company trend analysis for one period.

Takes the per-company earnings insight records, selects each company's
report for the period and rolls them up into:

- market-wide aggregates (capex growth, guidance counts, sentiment...)
- a partnership network of canonical partners and the distinct companies
  mentioning them
- per (sector, sub-category) breakdowns
- divergences and top themes

Every run recomputes from scratch and never mutates its input. Missing or
unrecognized values are treated as absent; no data-shape problem raises.
"""

from collections import Counter
from datetime import datetime
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from config.analysis_config import PARTNER_NETWORK_LIMITS, SENTIMENT_SCORES, SENTIMENT_THRESHOLDS
from config.settings import settings
from fundamentals.partners import normalize
from utils.logger import setup_logger
from utils.numeric_utils import safe_divide, safe_mean
from utils.unified_schema import (
    GUIDANCE_DIRECTIONS,
    HEADCOUNT_TRENDS,
    PRICING_POWER_LEVELS,
    SUPPLY_CHAIN_STATUSES,
    AggregateInsights,
    CompanyEarningsData,
    MacroAnalysis,
    PartnershipEdge,
    SectorAnalysis,
)
from .divergence_detector import detect_divergences
from .quarter_selector import QuarterSelection, resolve_target_quarter, select_quarter_reports
from .theme_rules import identify_top_themes

logger = setup_logger('macro_analyzer')

# Dashboard key for the not_provided bucket in sector guidance counts
SECTOR_GUIDANCE_KEYS = {
    'raised': 'raised',
    'maintained': 'maintained',
    'lowered': 'lowered',
    'not_provided': 'notProvided',
}


def count_choices(values: Sequence[Optional[str]], choices: Tuple[str, ...]) -> Dict[str, int]:
    """Frequency table over ``choices``; anything else is not counted."""
    counts = Counter(value for value in values if value in choices)
    return {choice: counts.get(choice, 0) for choice in choices}


def sentiment_score(sentiment: Optional[str]) -> int:
    """bullish -> +1, bearish -> -1, anything else -> 0."""
    return SENTIMENT_SCORES.get(sentiment, 0)


def classify_sentiment(average_score: float) -> str:
    if average_score > SENTIMENT_THRESHOLDS["BULLISH_ABOVE"]:
        return 'bullish'
    if average_score < SENTIMENT_THRESHOLDS["BEARISH_BELOW"]:
        return 'bearish'
    return 'neutral'


def build_partnership_edges(selections: Sequence[QuarterSelection]) -> List[PartnershipEdge]:
    """
    Map each canonical partner to the distinct companies mentioning it.

    Edges are sorted by distinct-company count, descending. Ties keep
    first-seen order.
    """
    connected: Dict[str, Dict[str, None]] = {}
    for selection in selections:
        for raw_name in selection.insights.partnerships:
            partner = normalize(raw_name)
            if partner is None:
                continue
            connected.setdefault(partner, {})[selection.ticker] = None

    edges = [
        PartnershipEdge(partner=partner, connected_companies=list(tickers))
        for partner, tickers in connected.items()
    ]
    # sorted() is stable
    return sorted(edges, key=lambda edge: edge.mentions, reverse=True)


def select_network_edges(
    edges: List[PartnershipEdge],
    top_n: Optional[int],
    fallback_top_n: int,
) -> List[PartnershipEdge]:
    """
    Keep cross-company edges (enough distinct mentions); when none qualify,
    fall back to the strongest single-company edges so the view is never
    empty while any partnership exists.
    """
    min_mentions = PARTNER_NETWORK_LIMITS["MIN_CROSS_COMPANY_MENTIONS"]
    strong = [edge for edge in edges if edge.mentions >= min_mentions]
    if strong:
        return strong[:top_n] if top_n is not None else strong
    return edges[:fallback_top_n]


class MacroAnalyzer:
    """Computes a MacroAnalysis from a ticker -> CompanyEarningsData mapping."""

    def __init__(self, ordering: Optional[str] = None):
        self.ordering = ordering or settings.quarter_ordering

    def analyze(
        self,
        records: Mapping[str, CompanyEarningsData],
        target_quarter: Optional[str] = None,
    ) -> MacroAnalysis:
        """
        Analyze one period.

        Args:
            records: Per-company earnings data keyed by ticker
            target_quarter: Period label (e.g. "Q4 2024"); defaults to the
                most recent label present in ``records``

        Returns:
            MacroAnalysis for the period (empty but well-formed when no
            company has a report for it)

        Raises:
            TypeError: if ``records`` is not a mapping
        """
        if not isinstance(records, Mapping):
            raise TypeError(f"records must be a mapping of ticker -> CompanyEarningsData, got {type(records).__name__}")

        period = resolve_target_quarter(records, target_quarter, self.ordering)
        selections = select_quarter_reports(records, period)
        logger.debug(f"Analyzing {period}: {len(selections)} of {len(records)} companies have a report")

        aggregates = self._aggregate(selections)

        return MacroAnalysis(
            period=period,
            generated_at=datetime.now().isoformat(),
            companies=[selection.ticker for selection in selections],
            aggregate_insights=aggregates,
            sector_analyses=self._analyze_sectors(selections),
            divergences=detect_divergences(selections),
            top_themes=identify_top_themes(aggregates, len(selections)),
        )

    def _aggregate(self, selections: Sequence[QuarterSelection]) -> AggregateInsights:
        insights = [selection.insights for selection in selections]

        guidance = count_choices([i.guidance_direction for i in insights], GUIDANCE_DIRECTIONS)
        average_score = safe_mean([sentiment_score(i.overall_sentiment) for i in insights], default=0.0)

        edges = build_partnership_edges(selections)
        network = select_network_edges(
            edges,
            top_n=None,
            fallback_top_n=PARTNER_NETWORK_LIMITS["NETWORK_FALLBACK_TOP_N"],
        )

        return AggregateInsights(
            average_capex_growth=safe_mean([i.capex_growth for i in insights], default=0.0),
            companies_raising_guidance=guidance['raised'],
            companies_lowering_guidance=guidance['lowered'],
            companies_maintaining_guidance=guidance['maintained'],
            companies_not_providing_guidance=guidance['not_provided'],
            ai_investment_count=sum(1 for i in insights if i.ai_investment_mentioned),
            overall_market_sentiment=classify_sentiment(average_score),
            average_sentiment_score=average_score,
            partnership_network=network,
            supply_chain_sentiment=count_choices([i.supply_chain_status for i in insights], SUPPLY_CHAIN_STATUSES),
            headcount_trends=count_choices([i.headcount_trend for i in insights], HEADCOUNT_TRENDS),
            pricing_power_distribution=count_choices([i.pricing_power for i in insights], PRICING_POWER_LEVELS),
        )

    def _analyze_sectors(self, selections: Sequence[QuarterSelection]) -> List[SectorAnalysis]:
        # Buckets keep first-seen order
        buckets: Dict[Tuple[Optional[str], Optional[str]], List[QuarterSelection]] = {}
        for selection in selections:
            company = selection.company
            key = (company.sector, company.sub_category) if company else (None, None)
            buckets.setdefault(key, []).append(selection)

        return [
            self._analyze_bucket(sector, sub_category, members)
            for (sector, sub_category), members in buckets.items()
        ]

    def _analyze_bucket(
        self,
        sector: Optional[str],
        sub_category: Optional[str],
        members: List[QuarterSelection],
    ) -> SectorAnalysis:
        insights = [member.insights for member in members]

        guidance = count_choices([i.guidance_direction for i in insights], GUIDANCE_DIRECTIONS)
        ai_count = sum(1 for i in insights if i.ai_investment_mentioned)

        top_partners = select_network_edges(
            build_partnership_edges(members),
            top_n=PARTNER_NETWORK_LIMITS["SECTOR_TOP_N"],
            fallback_top_n=PARTNER_NETWORK_LIMITS["SECTOR_FALLBACK_TOP_N"],
        )

        return SectorAnalysis(
            sector=sector,
            sub_category=sub_category,
            companies=[member.ticker for member in members],
            average_capex_growth=safe_mean([i.capex_growth for i in insights], default=0.0),
            guidance_sentiment={SECTOR_GUIDANCE_KEYS[k]: v for k, v in guidance.items()},
            supply_chain_status=count_choices([i.supply_chain_status for i in insights], SUPPLY_CHAIN_STATUSES),
            ai_investment_percentage=safe_divide(ai_count * 100, len(members), default=0.0),
            average_sentiment=safe_mean([sentiment_score(i.overall_sentiment) for i in insights], default=0.0),
            top_partners=top_partners,
        )


def compute_macro_analysis(
    records: Mapping[str, CompanyEarningsData],
    target_quarter: Optional[str] = None,
    ordering: Optional[str] = None,
) -> MacroAnalysis:
    """Convenience wrapper around ``MacroAnalyzer(ordering).analyze``."""
    return MacroAnalyzer(ordering).analyze(records, target_quarter)
