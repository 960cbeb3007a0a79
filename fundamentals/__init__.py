"""
Fundamentals module - cross-company analysis of earnings insights.
Consumes stored insight records and the Company Directory to produce
macro trends, peer comparisons and sentiment scores.
"""

from .partners import normalize, normalize_partners
from .macro_trends import MacroAnalyzer, compute_macro_analysis, MacroMarkdownReport
from .peer_comparison import get_sector_comparison
from .sentiment import calculate_composite_sentiment, get_sentiment_explanation

__all__ = [
    'normalize',
    'normalize_partners',
    'MacroAnalyzer',
    'compute_macro_analysis',
    'MacroMarkdownReport',
    'get_sector_comparison',
    'calculate_composite_sentiment',
    'get_sentiment_explanation',
]
