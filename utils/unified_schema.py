"""
Unified Data Schema
===================

Standardized data models for the earnings trend system, defined with
Pydantic to ensure type safety at the storage boundary.

Field Naming Convention
-----------------------
Attributes are snake_case in Python. Every model serializes with camelCase
aliases (``capexGrowth``, ``guidanceDirection``...) so the JSON written by
the extraction pipeline loads unchanged and the dashboard receives the
shape it expects. Use ``model_dump(by_alias=True)`` for JSON output.

Unit Conventions
----------------
- **Monetary Values** (revenue, net income, capex amount...): millions of USD
- **Growth Rates** (capex growth, bookings growth): percentage points
  (25% = 25.0, not 0.25)

Leniency
--------
Insight records are produced by a language model and may contain values
outside the expected enums, NaN, or wrong types. Input models never reject
a record for that: unknown enum values and invalid numbers become ``None``
(absent), malformed lists become empty. Input models are frozen; the
aggregation core never mutates what it is given.
"""

from typing import Any, Dict, List, Literal, Optional, Tuple
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    computed_field,
    field_validator,
)
from pydantic.alias_generators import to_camel

from utils.numeric_utils import clean_numeric


# --- Closed value sets ---

GuidanceDirection = Literal['raised', 'maintained', 'lowered', 'not_provided']
SupplyChainStatus = Literal['tight', 'easing', 'normal', 'unknown']
HeadcountTrend = Literal['expanding', 'stable', 'freezing', 'reducing']
PricingPower = Literal['strong', 'moderate', 'weak', 'unknown']
Sentiment = Literal['bullish', 'neutral', 'bearish']
GuidanceTone = Literal['positive', 'neutral', 'negative', 'cautious']
ManagementTone = Literal['confident', 'neutral', 'defensive']

GUIDANCE_DIRECTIONS: Tuple[str, ...] = ('raised', 'maintained', 'lowered', 'not_provided')
SUPPLY_CHAIN_STATUSES: Tuple[str, ...] = ('tight', 'easing', 'normal', 'unknown')
HEADCOUNT_TRENDS: Tuple[str, ...] = ('expanding', 'stable', 'freezing', 'reducing')
PRICING_POWER_LEVELS: Tuple[str, ...] = ('strong', 'moderate', 'weak', 'unknown')
SENTIMENTS: Tuple[str, ...] = ('bullish', 'neutral', 'bearish')
GUIDANCE_TONES: Tuple[str, ...] = ('positive', 'neutral', 'negative', 'cautious')
MANAGEMENT_TONES: Tuple[str, ...] = ('confident', 'neutral', 'defensive')


def _known_choice(value: Any, choices: Tuple[str, ...]) -> Optional[str]:
    """Return ``value`` if it is one of ``choices``, else None."""
    if isinstance(value, str) and value in choices:
        return value
    return None


def _string_tuple(value: Any) -> Tuple[str, ...]:
    """Keep the string entries of a list-like value, in order."""
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(item for item in value if isinstance(item, str))


class InputModel(BaseModel):
    """Read-only record loaded from the insight store."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra='ignore',
    )


class OutputModel(BaseModel):
    """Derived analysis result handed to the host."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Input records
# =============================================================================

class Company(InputModel):
    """Tracked company reference data."""
    ticker: str = Field(..., description="Ticker symbol (unique key)")
    name: str = Field(..., description="Legal company name")
    category: Tuple[str, ...] = Field((), description="Dashboard categories (Mag7, Tech, Biotech...)")
    sector: Optional[str] = Field(None, description="Broad sector (Technology, Healthcare...)")
    sub_category: Optional[str] = Field(None, description="Sub-category within the sector")
    cik: Optional[str] = Field(None, description="SEC Central Index Key")
    fiscal_year_end: Optional[str] = Field(None, description="Fiscal year end as MM-DD; None for Dec 31")

    @field_validator('category', mode='before')
    @classmethod
    def _clean_category(cls, value: Any) -> Tuple[str, ...]:
        return _string_tuple(value)


class Filing(InputModel):
    """Regulatory filing the insights were extracted from."""
    accession_number: Optional[str] = None
    filing_date: Optional[str] = None
    report_date: Optional[str] = None
    form: Optional[str] = None
    url: Optional[str] = None


class MarketData(InputModel):
    """Market reaction data attached to an insight record (optional)."""
    actual_eps: Optional[float] = Field(None, alias='actualEPS')
    estimated_eps: Optional[float] = Field(None, alias='estimatedEPS')
    eps_surprise_percent: Optional[float] = None
    price_on_earnings_date: Optional[float] = None
    price_after_7_days: Optional[float] = None
    price_change_percent: Optional[float] = None
    management_tone_score: Optional[float] = None
    earnings_beat_score: Optional[float] = None
    price_action_score: Optional[float] = None
    guidance_accuracy_score_weighted: Optional[float] = None
    composite_sentiment_score: Optional[float] = None
    composite_sentiment: Optional[Sentiment] = None

    @field_validator(
        'actual_eps', 'estimated_eps', 'eps_surprise_percent',
        'price_on_earnings_date', 'price_after_7_days', 'price_change_percent',
        'management_tone_score', 'earnings_beat_score', 'price_action_score',
        'guidance_accuracy_score_weighted', 'composite_sentiment_score',
        mode='before',
    )
    @classmethod
    def _clean_numbers(cls, value: Any) -> Optional[float]:
        return clean_numeric(value)

    @field_validator('composite_sentiment', mode='before')
    @classmethod
    def _known_sentiment(cls, value: Any) -> Optional[str]:
        return _known_choice(value, SENTIMENTS)


_INSIGHT_CHOICES: Dict[str, Tuple[str, ...]] = {
    'guidance_tone': GUIDANCE_TONES,
    'guidance_direction': GUIDANCE_DIRECTIONS,
    'pricing_power': PRICING_POWER_LEVELS,
    'headcount_trend': HEADCOUNT_TRENDS,
    'supply_chain_status': SUPPLY_CHAIN_STATUSES,
    'management_tone': MANAGEMENT_TONES,
    'overall_sentiment': SENTIMENTS,
}


class EarningsInsights(InputModel):
    """
    Structured signals extracted from one company's filing for one quarter.

    Every field is optional at the storage boundary; aggregation treats a
    missing or unrecognized value as absent.
    """
    # Leading indicators
    guidance_tone: Optional[GuidanceTone] = None
    guidance_direction: Optional[GuidanceDirection] = None
    bookings_growth: Optional[float] = Field(None, description="Bookings growth (%)")
    pricing_power: Optional[PricingPower] = None
    headcount_trend: Optional[HeadcountTrend] = None

    # Quality of earnings (millions USD)
    revenue: Optional[float] = None
    net_income: Optional[float] = None
    operating_cash_flow: Optional[float] = None
    free_cash_flow: Optional[float] = None
    deferred_revenue: Optional[float] = None

    # Macro signals
    capex_amount: Optional[float] = None
    capex_growth: Optional[float] = Field(None, description="Capex growth YoY (%)")
    partnerships: Tuple[str, ...] = Field((), description="Raw partner mentions, in filing order")
    supply_chain_status: Optional[SupplyChainStatus] = None
    regulatory_headwinds: Tuple[str, ...] = ()
    ai_investment_mentioned: bool = False

    # Credibility
    prior_guidance_hit: Optional[bool] = None
    management_tone: Optional[ManagementTone] = None

    # Sentiment & summary
    overall_sentiment: Optional[Sentiment] = None
    summary: Optional[str] = None
    key_quotes: Tuple[str, ...] = ()

    market_data: Optional[MarketData] = None

    @field_validator(*_INSIGHT_CHOICES, mode='before')
    @classmethod
    def _drop_unknown_choices(cls, value: Any, info: ValidationInfo) -> Optional[str]:
        return _known_choice(value, _INSIGHT_CHOICES[info.field_name])

    @field_validator(
        'bookings_growth', 'revenue', 'net_income', 'operating_cash_flow',
        'free_cash_flow', 'deferred_revenue', 'capex_amount', 'capex_growth',
        mode='before',
    )
    @classmethod
    def _clean_numbers(cls, value: Any) -> Optional[float]:
        return clean_numeric(value)

    @field_validator('partnerships', 'regulatory_headwinds', 'key_quotes', mode='before')
    @classmethod
    def _clean_string_lists(cls, value: Any) -> Tuple[str, ...]:
        return _string_tuple(value)

    @field_validator('ai_investment_mentioned', mode='before')
    @classmethod
    def _strict_flag(cls, value: Any) -> bool:
        return value is True

    @field_validator('prior_guidance_hit', mode='before')
    @classmethod
    def _optional_flag(cls, value: Any) -> Optional[bool]:
        return value if isinstance(value, bool) else None

    @field_validator('summary', mode='before')
    @classmethod
    def _optional_text(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator('market_data', mode='before')
    @classmethod
    def _optional_market_data(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, MarketData)) else None


class EarningsReport(InputModel):
    """One analyzed filing: the quarter label plus extracted insights."""
    quarter: Optional[str] = Field(None, description="Period label, e.g. 'Q4 2024'")
    fiscal_year: Optional[int] = None
    filing: Optional[Filing] = None
    insights: Optional[EarningsInsights] = None
    analyzed_successfully: bool = True
    analyzed_at: Optional[str] = None

    @field_validator('quarter', mode='before')
    @classmethod
    def _optional_label(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator('fiscal_year', mode='before')
    @classmethod
    def _optional_year(cls, value: Any) -> Optional[int]:
        cleaned = clean_numeric(value)
        return int(cleaned) if cleaned is not None else None

    @field_validator('filing', mode='before')
    @classmethod
    def _optional_filing(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, Filing)) else None

    @field_validator('insights', mode='before')
    @classmethod
    def _optional_insights(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, EarningsInsights)) else None


class CompanyEarningsData(InputModel):
    """Per-company record set as stored in ``<TICKER>.json``."""
    company: Optional[Company] = None
    reports: Tuple[EarningsReport, ...] = Field((), description="Analyzed reports, most recent first")
    total_fetched: int = 0
    successful_analyses: int = 0
    last_updated: Optional[str] = None

    @field_validator('reports', mode='before')
    @classmethod
    def _clean_reports(cls, value: Any) -> Tuple[Any, ...]:
        if not isinstance(value, (list, tuple)):
            return ()
        return tuple(r for r in value if isinstance(r, (dict, EarningsReport)))


# =============================================================================
# Derived results
# =============================================================================

class PartnershipEdge(OutputModel):
    """A canonical partner and the distinct companies that mention it."""
    partner: str
    connected_companies: List[str] = Field(default_factory=list)

    @field_validator('connected_companies')
    @classmethod
    def _distinct_companies(cls, value: List[str]) -> List[str]:
        return list(dict.fromkeys(value))

    @computed_field
    @property
    def mentions(self) -> int:
        """Distinct-company count, never the raw mention count."""
        return len(self.connected_companies)


class DivergenceEntry(OutputModel):
    """A theme where one group of companies moves opposite to another."""
    theme: str
    winners: List[str] = Field(default_factory=list)
    losers: List[str] = Field(default_factory=list)
    details: str = ""


class SectorAnalysis(OutputModel):
    """Rollup of one (sector, sub-category) bucket for the period."""
    sector: Optional[str] = None
    sub_category: Optional[str] = None
    companies: List[str] = Field(default_factory=list)
    average_capex_growth: float = 0.0
    guidance_sentiment: Dict[str, int] = Field(default_factory=dict)
    supply_chain_status: Dict[str, int] = Field(default_factory=dict)
    ai_investment_percentage: float = 0.0
    average_sentiment: float = 0.0
    top_partners: List[PartnershipEdge] = Field(default_factory=list)


class AggregateInsights(OutputModel):
    """Market-wide aggregates over the selected companies."""
    average_capex_growth: float = 0.0
    companies_raising_guidance: int = 0
    companies_lowering_guidance: int = 0
    companies_maintaining_guidance: int = 0
    companies_not_providing_guidance: int = 0
    ai_investment_count: int = 0
    overall_market_sentiment: Sentiment = 'neutral'
    average_sentiment_score: float = 0.0
    partnership_network: List[PartnershipEdge] = Field(default_factory=list)
    supply_chain_sentiment: Dict[str, int] = Field(default_factory=dict)
    headcount_trends: Dict[str, int] = Field(default_factory=dict)
    pricing_power_distribution: Dict[str, int] = Field(default_factory=dict)


class MacroAnalysis(OutputModel):
    """Cross-company analysis for one period."""
    period: str
    generated_at: str
    companies: List[str] = Field(default_factory=list)
    aggregate_insights: AggregateInsights = Field(default_factory=AggregateInsights)
    sector_analyses: List[SectorAnalysis] = Field(default_factory=list)
    divergences: List[DivergenceEntry] = Field(default_factory=list)
    top_themes: List[str] = Field(default_factory=list)


class PeerAverages(OutputModel):
    """Null-safe peer means; None when no peer reports the metric."""
    capex_growth: Optional[float] = None
    revenue: Optional[float] = None


class PeerRanking(OutputModel):
    """1-based revenue rank within each peer set (0 when absent)."""
    in_sector: int = 0
    total_in_sector: int = 0
    in_sub_category: int = 0
    total_in_sub_category: int = 0


class ComparisonResult(OutputModel):
    """A company's metrics against its sector and sub-category peers."""
    company: Company
    quarter: str
    company_metrics: EarningsInsights
    sector_averages: PeerAverages
    sub_category_averages: PeerAverages
    ranking: PeerRanking


class QuarterInfo(OutputModel):
    """Period labels derived from a filing's report date."""
    calendar_quarter: int
    calendar_year: int
    fiscal_quarter: int
    fiscal_year: int
    quarter: str
    report_date: str


class CompositeSentimentScores(OutputModel):
    """Component and weighted composite sentiment scores (0-100)."""
    management_tone_score: int
    earnings_beat_score: int
    price_action_score: int
    guidance_accuracy_score_weighted: int
    composite_sentiment_score: int
    composite_sentiment: Sentiment


class UnitIssue(OutputModel):
    """A stored financial value that looks like it is in the wrong unit."""
    ticker: str
    quarter: Optional[str] = None
    field_name: str = Field(..., alias='field')
    value: float
    expected_range: str
    severity: Literal['critical', 'warning']
    suggested_fix: Optional[float] = None
