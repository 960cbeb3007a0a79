"""
Shared pytest fixtures for the earnings macro trends test suite.

Record sets are built in memory from the same camelCase JSON shape the
insight store holds, so every test also exercises the model aliases and
lenient validation.

Usage:
    Fixtures are automatically discovered by pytest.
    Use them directly in test functions - no explicit import needed.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

# Ensure the project root is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from data_acquisition.companies import CompanyDirectory
from utils.unified_schema import Company, CompanyEarningsData


def build_report(quarter: Optional[str], **insights: Any) -> Dict[str, Any]:
    """One stored report dict; keyword arguments are camelCase insight fields."""
    return {"quarter": quarter, "insights": insights}


def build_company_data(
    ticker: str,
    reports: List[Dict[str, Any]],
    sector: Optional[str] = "Technology",
    sub_category: Optional[str] = "Semiconductors",
) -> CompanyEarningsData:
    """A validated record set for one company."""
    return CompanyEarningsData.model_validate({
        "company": {
            "ticker": ticker,
            "name": f"{ticker} Holdings",
            "category": ["Tech"],
            "sector": sector,
            "subCategory": sub_category,
        },
        "reports": reports,
        "totalFetched": len(reports),
        "successfulAnalyses": len(reports),
    })


# ===========================
# Factory Fixtures
# ===========================

@pytest.fixture
def make_report():
    """Factory for stored report dicts."""
    return build_report


@pytest.fixture
def make_company_data():
    """Factory for CompanyEarningsData record sets."""
    return build_company_data


@pytest.fixture
def make_directory():
    """Factory for a CompanyDirectory over the given record sets' companies."""
    def _make(records: Dict[str, CompanyEarningsData]) -> CompanyDirectory:
        return CompanyDirectory(data.company for data in records.values())
    return _make


# ===========================
# Sample Data Fixtures
# ===========================

@pytest.fixture
def q4_records() -> Dict[str, CompanyEarningsData]:
    """
    Five companies with Q4 2024 reports plus an older Q3 2024 report each.

    Q4 2024 summary:
        NVDA: raised, capex +45, tight, expanding, bullish, AI
        AMD:  raised, capex +22, easing, stable, bullish, AI
        INTC: lowered, capex -18, easing, reducing, bearish
        MRNA: maintained, no capex, normal, reducing, neutral (Healthcare)
        VRTX: raised, capex +5, easing, freezing, bullish, AI (Healthcare)
    """
    return {
        "NVDA": build_company_data("NVDA", [
            build_report(
                "Q4 2024", guidanceDirection="raised", capexGrowth=45.0, revenue=35082.0,
                supplyChainStatus="tight", headcountTrend="expanding", pricingPower="strong",
                overallSentiment="bullish", aiInvestmentMentioned=True,
                partnerships=["Microsoft Corp", "TSMC", "OpenAI"],
            ),
            build_report("Q3 2024", guidanceDirection="raised", capexGrowth=30.0, revenue=30040.0),
        ]),
        "AMD": build_company_data("AMD", [
            build_report(
                "Q4 2024", guidanceDirection="raised", capexGrowth=22.0, revenue=7658.0,
                supplyChainStatus="easing", headcountTrend="stable", pricingPower="moderate",
                overallSentiment="bullish", aiInvestmentMentioned=True,
                partnerships=["MSFT", "TSMC", "FDA"],
            ),
            build_report("Q3 2024", guidanceDirection="maintained", revenue=6819.0),
        ]),
        "INTC": build_company_data("INTC", [
            build_report(
                "Q4 2024", guidanceDirection="lowered", capexGrowth=-18.0, revenue=14260.0,
                supplyChainStatus="easing", headcountTrend="reducing", pricingPower="weak",
                overallSentiment="bearish", aiInvestmentMentioned=False,
                partnerships=["microsoft corporation", "continued AI model collaborations"],
            ),
            build_report("Q3 2024", guidanceDirection="lowered", revenue=13284.0),
        ]),
        "MRNA": build_company_data("MRNA", [
            build_report(
                "Q4 2024", guidanceDirection="maintained", revenue=966.0,
                supplyChainStatus="normal", headcountTrend="reducing", pricingPower="unknown",
                overallSentiment="neutral", partnerships=["Merck", "Cencora"],
            ),
            build_report("Q3 2024", guidanceDirection="maintained", revenue=1860.0),
        ], sector="Healthcare", sub_category="Biotech"),
        "VRTX": build_company_data("VRTX", [
            build_report(
                "Q4 2024", guidanceDirection="raised", capexGrowth=5.0, revenue=2910.0,
                supplyChainStatus="easing", headcountTrend="freezing", pricingPower="strong",
                overallSentiment="bullish", aiInvestmentMentioned=True,
                partnerships=["CRISPR Therapeutics AG", "Merck & Co."],
            ),
            build_report("Q3 2024", guidanceDirection="raised", revenue=2772.0),
        ], sector="Healthcare", sub_category="Biotech"),
    }


@pytest.fixture
def tracked_company() -> Company:
    return Company(
        ticker="NVDA",
        name="NVIDIA Corporation",
        category=("Mag7", "Tech"),
        sector="Technology",
        sub_category="Semiconductors",
        fiscal_year_end="01-31",
    )
