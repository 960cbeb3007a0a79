"""
Composite Sentiment Calculator

Reality-based sentiment score (0-100) for one earnings report:
- 10% management tone (from the filing analysis)
- 40% earnings beat/miss (actual vs estimated EPS)
- 30% post-earnings price action (7-day move)
- 20% guidance accuracy (hitting their own prior targets)

Missing market data scores a neutral 50 for that component.
"""

import math
from typing import List, Optional, Tuple

from config.analysis_config import (
    COMPOSITE_SENTIMENT_BANDS,
    COMPOSITE_SENTIMENT_WEIGHTS,
    EPS_SURPRISE_FLOOR_SCORE,
    EPS_SURPRISE_SCORE_BANDS,
    GUIDANCE_ACCURACY_SCORES,
    MANAGEMENT_TONE_ADJUSTMENTS,
    MANAGEMENT_TONE_BASELINE,
    PRICE_ACTION_FLOOR_SCORE,
    PRICE_ACTION_SCORE_BANDS,
)
from utils.numeric_utils import clean_numeric
from utils.unified_schema import CompositeSentimentScores, EarningsInsights, MarketData

NEUTRAL_SCORE = 50


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _band_score(value, bands: List[Tuple[float, int]], floor_score: int) -> int:
    cleaned = clean_numeric(value)
    if cleaned is None:
        return NEUTRAL_SCORE
    for lower_bound, score in bands:
        if cleaned > lower_bound:
            return score
    return floor_score


def calculate_management_tone_score(insights: EarningsInsights) -> int:
    """Baseline 50 adjusted by management tone, overall sentiment and guidance tone."""
    score = MANAGEMENT_TONE_BASELINE
    for field_name, adjustments in MANAGEMENT_TONE_ADJUSTMENTS.items():
        score += adjustments.get(getattr(insights, field_name), 0)
    return max(0, min(100, score))


def calculate_earnings_beat_score(eps_surprise_percent: Optional[float]) -> int:
    return _band_score(eps_surprise_percent, EPS_SURPRISE_SCORE_BANDS, EPS_SURPRISE_FLOOR_SCORE)


def calculate_price_action_score(price_change_percent: Optional[float]) -> int:
    return _band_score(price_change_percent, PRICE_ACTION_SCORE_BANDS, PRICE_ACTION_FLOOR_SCORE)


def calculate_guidance_accuracy_score(
    prior_guidance_hit: Optional[bool],
    guidance_direction: Optional[str],
) -> int:
    """
    Credibility of current guidance given whether prior guidance was hit.

    Without a track record, the current direction is used as a proxy.
    """
    by_direction = GUIDANCE_ACCURACY_SCORES[prior_guidance_hit]
    return by_direction.get(guidance_direction, by_direction[None])


def classify_composite_score(score: float) -> str:
    if score >= COMPOSITE_SENTIMENT_BANDS["BULLISH_AT_OR_ABOVE"]:
        return 'bullish'
    if score <= COMPOSITE_SENTIMENT_BANDS["BEARISH_AT_OR_BELOW"]:
        return 'bearish'
    return 'neutral'


def calculate_composite_sentiment(
    insights: EarningsInsights,
    market_data: Optional[MarketData] = None,
) -> CompositeSentimentScores:
    """
    Calculate the weighted composite sentiment for one report.

    Args:
        insights: Extracted earnings insights
        market_data: EPS and price reaction; defaults to ``insights.market_data``

    Returns:
        Rounded component scores, the composite score and its category
    """
    if market_data is None:
        market_data = insights.market_data

    eps_surprise = market_data.eps_surprise_percent if market_data else None
    price_change = market_data.price_change_percent if market_data else None

    components = {
        'management_tone': calculate_management_tone_score(insights),
        'earnings_beat': calculate_earnings_beat_score(eps_surprise),
        'price_action': calculate_price_action_score(price_change),
        'guidance_accuracy': calculate_guidance_accuracy_score(
            insights.prior_guidance_hit, insights.guidance_direction
        ),
    }

    composite = sum(components[name] * weight for name, weight in COMPOSITE_SENTIMENT_WEIGHTS.items())

    return CompositeSentimentScores(
        management_tone_score=components['management_tone'],
        earnings_beat_score=components['earnings_beat'],
        price_action_score=components['price_action'],
        guidance_accuracy_score_weighted=components['guidance_accuracy'],
        composite_sentiment_score=_round_half_up(composite),
        composite_sentiment=classify_composite_score(composite),
    )


def get_sentiment_explanation(composite_sentiment: str, composite_sentiment_score: float) -> str:
    """Human-readable label for a composite sentiment result."""
    if composite_sentiment == 'bullish':
        if composite_sentiment_score >= 80:
            return "Very Strong Bullish Signal"
        if composite_sentiment_score >= 70:
            return "Strong Bullish Signal"
        return "Moderately Bullish"

    if composite_sentiment == 'bearish':
        if composite_sentiment_score <= 20:
            return "Very Strong Bearish Signal"
        if composite_sentiment_score <= 30:
            return "Strong Bearish Signal"
        return "Moderately Bearish"

    return "Neutral - Mixed Signals"
