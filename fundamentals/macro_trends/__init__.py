from .quarter_selector import (
    QuarterSelection,
    quarter_sort_key,
    resolve_latest_quarter,
    resolve_target_quarter,
    select_quarter_reports,
    get_quarter_info,
)
from .macro_analyzer import MacroAnalyzer, compute_macro_analysis
from .divergence_detector import DIVERGENCE_DETECTORS, detect_divergences
from .theme_rules import THEME_RULES, identify_top_themes
from .macro_markdown_report import MacroMarkdownReport

__all__ = [
    'QuarterSelection',
    'quarter_sort_key',
    'resolve_latest_quarter',
    'resolve_target_quarter',
    'select_quarter_reports',
    'get_quarter_info',
    'MacroAnalyzer',
    'compute_macro_analysis',
    'DIVERGENCE_DETECTORS',
    'detect_divergences',
    'THEME_RULES',
    'identify_top_themes',
    'MacroMarkdownReport',
]
