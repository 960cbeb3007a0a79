"""Unit tests for lenient record validation and output models."""

import math

import pytest
from pydantic import ValidationError

from utils.unified_schema import (
    CompanyEarningsData,
    EarningsInsights,
    EarningsReport,
    PartnershipEdge,
    UnitIssue,
)


class TestEarningsInsights:

    def test_camel_case_aliases(self):
        insights = EarningsInsights.model_validate({"capexGrowth": 12.5, "guidanceDirection": "lowered"})
        assert insights.capex_growth == 12.5
        assert insights.guidance_direction == "lowered"

    def test_off_enum_values_become_none(self):
        insights = EarningsInsights.model_validate({
            "guidanceDirection": "sideways",
            "headcountTrend": "unknown",
            "overallSentiment": 3,
        })
        assert insights.guidance_direction is None
        assert insights.headcount_trend is None
        assert insights.overall_sentiment is None

    @pytest.mark.parametrize("raw", [float('nan'), float('inf'), "lots", True, None])
    def test_invalid_numbers_become_none(self, raw):
        assert EarningsInsights.model_validate({"capexGrowth": raw}).capex_growth is None

    def test_numeric_strings_accepted(self):
        assert EarningsInsights.model_validate({"revenue": "1530.5"}).revenue == 1530.5

    def test_partnerships_keep_strings_only(self):
        insights = EarningsInsights.model_validate({"partnerships": ["TSMC", None, 5, "OpenAI"]})
        assert insights.partnerships == ("TSMC", "OpenAI")

    def test_frozen(self):
        insights = EarningsInsights(capex_growth=1.0)
        with pytest.raises(ValidationError):
            insights.capex_growth = 2.0

    def test_nan_survives_nowhere(self):
        insights = EarningsInsights.model_validate({"revenue": float('nan'), "netIncome": 5})
        assert insights.revenue is None
        assert not math.isnan(insights.net_income)


class TestRecordSets:

    def test_malformed_reports_dropped(self):
        data = CompanyEarningsData.model_validate({"reports": [{"quarter": "Q4 2024"}, "garbage", 7]})
        assert len(data.reports) == 1

    def test_non_dict_insights_become_none(self):
        assert EarningsReport.model_validate({"quarter": "Q4 2024", "insights": "n/a"}).insights is None

    def test_non_list_reports(self):
        assert CompanyEarningsData.model_validate({"reports": {"quarter": "Q4 2024"}}).reports == ()


class TestOutputModels:

    def test_edge_mentions_are_distinct_companies(self):
        edge = PartnershipEdge(partner="TSMC", connected_companies=["NVDA", "AMD", "NVDA"])
        assert edge.connected_companies == ["NVDA", "AMD"]
        assert edge.mentions == 2

    def test_unit_issue_accepts_field_alias(self):
        issue = UnitIssue.model_validate({
            "ticker": "COIN", "quarter": "Q4 2024", "field": "revenue", "value": 2.0e9,
            "expectedRange": "10-100,000 million", "severity": "critical",
        })
        assert issue.field_name == "revenue"
        assert issue.suggested_fix is None
