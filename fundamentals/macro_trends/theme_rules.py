"""
Top-theme rules.

Each rule looks at the period's aggregate insights (and the number of
selected companies) and returns a theme label or None. Evaluation order
is output order.
"""

from typing import Callable, List, Optional, Sequence

from config.analysis_config import THEME_THRESHOLDS
from utils.unified_schema import AggregateInsights


def ai_infrastructure_theme(aggregates: AggregateInsights, company_count: int) -> Optional[str]:
    if aggregates.ai_investment_count > company_count * THEME_THRESHOLDS["AI_INVESTMENT_SHARE"]:
        return "AI Infrastructure Investment"
    return None


def supply_chain_theme(aggregates: AggregateInsights, company_count: int) -> Optional[str]:
    easing = aggregates.supply_chain_sentiment.get('easing', 0)
    tight = aggregates.supply_chain_sentiment.get('tight', 0)
    if easing > tight:
        return "Supply Chain Easing"
    if tight > easing:
        return "Supply Chain Constraints"
    return None


def guidance_outlook_theme(aggregates: AggregateInsights, company_count: int) -> Optional[str]:
    raised = aggregates.companies_raising_guidance
    lowered = aggregates.companies_lowering_guidance
    if raised > lowered * THEME_THRESHOLDS["OPTIMISM_RAISE_RATIO"]:
        return "Optimistic Outlook"
    if lowered > raised:
        return "Cautious Guidance"
    return None


def cost_cutting_theme(aggregates: AggregateInsights, company_count: int) -> Optional[str]:
    reducing = aggregates.headcount_trends.get('reducing', 0)
    expanding = aggregates.headcount_trends.get('expanding', 0)
    if reducing > expanding:
        return "Cost Cutting Measures"
    return None


THEME_RULES: Sequence[Callable[[AggregateInsights, int], Optional[str]]] = (
    ai_infrastructure_theme,
    supply_chain_theme,
    guidance_outlook_theme,
    cost_cutting_theme,
)


def identify_top_themes(aggregates: AggregateInsights, company_count: int) -> List[str]:
    """Evaluate THEME_RULES in order; each contributes at most one theme."""
    themes = []
    for rule in THEME_RULES:
        theme = rule(aggregates, company_count)
        if theme is not None:
            themes.append(theme)
    return themes
