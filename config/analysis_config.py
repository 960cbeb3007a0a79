"""
Analysis Configuration
Centralized configuration for aggregation thresholds, limits, and scoring parameters.
"""

# --- Sentiment Classification ---
# Per-company sentiment is mapped to a score and averaged across the period.
SENTIMENT_SCORES = {
    'bullish': 1,
    'bearish': -1,
}
SENTIMENT_THRESHOLDS = {
    "BULLISH_ABOVE": 0.3,
    "BEARISH_BELOW": -0.3,
}

# --- Partnership Network ---
PARTNER_NETWORK_LIMITS = {
    # Minimum distinct companies for an edge to count as cross-company signal
    "MIN_CROSS_COMPANY_MENTIONS": 2,
    # Market-wide fallback when no edge reaches the minimum
    "NETWORK_FALLBACK_TOP_N": 15,
    # Per-sector caps (strong edges / fallback)
    "SECTOR_TOP_N": 5,
    "SECTOR_FALLBACK_TOP_N": 3,
}

# --- Partner Name Normalization ---
# Raw names shorter than this skip the substring exclusion check; short
# company names collide too easily with longer excluded phrases.
SUBSTRING_EXCLUSION_MIN_LENGTH = 20
# Cleaned names with more tokens than this are descriptions, not entities
MAX_PARTNER_NAME_TOKENS = 4

# --- Divergence Detection ---
CAPEX_DIVERGENCE_THRESHOLDS = {
    "HIGH_GROWTH_ABOVE": 20.0,   # > +20% capex growth
    "CUTBACK_BELOW": -10.0,      # < -10% capex growth
}

# --- Theme Rules ---
THEME_THRESHOLDS = {
    # Share of selected companies mentioning AI investment
    "AI_INVESTMENT_SHARE": 0.5,
    # Raised guidance must exceed lowered by this factor for optimism
    "OPTIMISM_RAISE_RATIO": 2,
}

# --- Composite Sentiment Weights ---
# Weighted composite: 10% management tone + 40% EPS beat + 30% price action + 20% guidance
COMPOSITE_SENTIMENT_WEIGHTS = {
    'management_tone': 0.10,
    'earnings_beat': 0.40,
    'price_action': 0.30,
    'guidance_accuracy': 0.20,
}
COMPOSITE_SENTIMENT_BANDS = {
    "BULLISH_AT_OR_ABOVE": 60,
    "BEARISH_AT_OR_BELOW": 40,
}

# --- Financial Unit Validation ---
# All monetary insight fields are expected in millions of USD.
UNIT_CONVERSION_THRESHOLDS = {
    "DOLLARS_ABOVE": 1_000_000,    # |v| > 1M (millions) -> reported in dollars
    "THOUSANDS_ABOVE": 100_000,    # 100K < |v| < 1M (millions) -> reported in thousands
}

# Reasonable ranges after normalization (millions)
# Format: 'field_name': {'min': float, 'max': float}
FINANCIAL_FIELD_RANGES = {
    'revenue': {'min': 0.001, 'max': 1_000_000},
    'net_income': {'min': -500_000, 'max': 500_000},
    'operating_cash_flow': {'min': -100_000, 'max': 500_000},
    'free_cash_flow': {'min': -100_000, 'max': 500_000},
    'capex_amount': {'min': 0, 'max': 500_000},
    'deferred_revenue': {'min': 0, 'max': 500_000},
}

# Audit thresholds for stored data
UNIT_AUDIT_THRESHOLDS = {
    "DOLLARS_ABOVE": 100_000_000,
    "THOUSANDS_ABOVE": 100_000,
    "QOQ_JUMP_RATIO": 100,
}

# Component score bands: (exclusive lower bound, score), checked top-down.
# Values at or below the last bound score the floor.
EPS_SURPRISE_SCORE_BANDS = [
    (10, 100),   # massive beat
    (5, 85),
    (2, 70),
    (0, 60),
    (-2, 40),
    (-5, 25),
    (-10, 15),
]
EPS_SURPRISE_FLOOR_SCORE = 5

# 7-day post-earnings price change (%)
PRICE_ACTION_SCORE_BANDS = [
    (15, 100),
    (10, 90),
    (7, 80),
    (5, 70),
    (3, 65),
    (0, 55),
    (-3, 45),
    (-5, 35),
    (-7, 25),
    (-10, 15),
]
PRICE_ACTION_FLOOR_SCORE = 5

# Guidance credibility: prior_guidance_hit -> guidance_direction -> score.
# The None key is used when the direction is missing or not listed.
GUIDANCE_ACCURACY_SCORES = {
    None: {'raised': 70, 'maintained': 50, 'lowered': 30, None: 50},
    True: {'raised': 90, 'maintained': 75, 'lowered': 40, None: 80},
    False: {'raised': 30, 'maintained': 25, 'lowered': 35, None: 20},
}

# Management tone score: neutral baseline plus adjustments, clamped to 0-100
MANAGEMENT_TONE_BASELINE = 50
MANAGEMENT_TONE_ADJUSTMENTS = {
    'management_tone': {'confident': 20, 'defensive': -20},
    'overall_sentiment': {'bullish': 20, 'bearish': -20},
    'guidance_tone': {'positive': 10, 'negative': -10, 'cautious': -5},
}
