"""
Divergence detectors.

Each detector takes the period's selected reports and returns one
DivergenceEntry or None. Detectors are independent of each other; new
themes are added by appending a function to DIVERGENCE_DETECTORS.
"""

from typing import Callable, List, Optional, Sequence

from config.analysis_config import CAPEX_DIVERGENCE_THRESHOLDS
from utils.unified_schema import DivergenceEntry
from .quarter_selector import QuarterSelection


def detect_guidance_divergence(selections: Sequence[QuarterSelection]) -> Optional[DivergenceEntry]:
    """Companies raising guidance vs companies lowering it."""
    raised = [s.ticker for s in selections if s.insights.guidance_direction == 'raised']
    lowered = [s.ticker for s in selections if s.insights.guidance_direction == 'lowered']

    if not raised and not lowered:
        return None

    return DivergenceEntry(
        theme="Guidance Direction",
        winners=raised,
        losers=lowered,
        details=f"{len(raised)} companies raised guidance vs {len(lowered)} lowered",
    )


def detect_capex_divergence(selections: Sequence[QuarterSelection]) -> Optional[DivergenceEntry]:
    """High capex growers vs companies cutting capex."""
    high_growth = CAPEX_DIVERGENCE_THRESHOLDS["HIGH_GROWTH_ABOVE"]
    cutback = CAPEX_DIVERGENCE_THRESHOLDS["CUTBACK_BELOW"]

    growing = []
    cutting = []
    for selection in selections:
        growth = selection.insights.capex_growth
        if growth is None:
            continue
        if growth > high_growth:
            growing.append(selection.ticker)
        elif growth < cutback:
            cutting.append(selection.ticker)

    if not growing and not cutting:
        return None

    return DivergenceEntry(
        theme="Capital Expenditure",
        winners=growing,
        losers=cutting,
        details=(
            f"{len(growing)} companies increasing capex >{high_growth:g}% "
            f"vs {len(cutting)} decreasing >{abs(cutback):g}%"
        ),
    )


DIVERGENCE_DETECTORS: Sequence[Callable[[Sequence[QuarterSelection]], Optional[DivergenceEntry]]] = (
    detect_guidance_divergence,
    detect_capex_divergence,
)


def detect_divergences(selections: Sequence[QuarterSelection]) -> List[DivergenceEntry]:
    """Run every registered detector, keeping the entries that fired."""
    entries = []
    for detector in DIVERGENCE_DETECTORS:
        entry = detector(selections)
        if entry is not None:
            entries.append(entry)
    return entries
