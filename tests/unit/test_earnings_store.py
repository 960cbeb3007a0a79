"""Unit tests for loading and saving the earnings insight store."""

import json
import logging

import pytest

from data_acquisition.earnings_data import (
    get_cached_earnings,
    has_cached_earnings,
    load_all_earnings_data,
    save_macro_analysis,
)
from fundamentals.macro_trends import compute_macro_analysis

NVDA_FILE = {
    "company": {
        "ticker": "NVDA",
        "name": "NVIDIA Corporation",
        "category": ["Mag7", "Tech"],
        "sector": "Technology",
        "subCategory": "Semiconductors",
    },
    "reports": [
        {
            "quarter": "Q4 2024",
            "fiscalYear": 2025,
            "filing": {"accessionNumber": "0001045810-25-000023", "form": "10-K"},
            "insights": {
                "guidanceDirection": "raised",
                "capexGrowth": 45.2,
                "supplyChainStatus": "sort of tight",
                "partnerships": ["Microsoft Corp", "TSMC"],
                "aiInvestmentMentioned": True,
                "unexpectedField": "ignored",
            },
            "analyzedSuccessfully": True,
        }
    ],
    "totalFetched": 1,
    "successfulAnalyses": 1,
    "lastUpdated": "2025-02-27T10:00:00Z",
}


@pytest.fixture
def store_dir(tmp_path):
    earnings_dir = tmp_path / "earnings"
    earnings_dir.mkdir()
    (earnings_dir / "NVDA.json").write_text(json.dumps(NVDA_FILE), encoding="utf-8")
    return earnings_dir


class TestLoadAllEarningsData:

    def test_loads_company_files(self, store_dir):
        records = load_all_earnings_data(store_dir)
        assert list(records) == ["NVDA"]

        insights = records["NVDA"].reports[0].insights
        assert records["NVDA"].company.sub_category == "Semiconductors"
        assert insights.capex_growth == 45.2
        assert insights.partnerships == ("Microsoft Corp", "TSMC")

    def test_off_enum_value_loads_as_absent(self, store_dir):
        insights = load_all_earnings_data(store_dir)["NVDA"].reports[0].insights
        assert insights.supply_chain_status is None
        assert insights.guidance_direction == "raised"

    def test_bad_files_are_skipped_and_logged(self, store_dir, caplog):
        (store_dir / "BROKEN.json").write_text("{not json", encoding="utf-8")
        (store_dir / "LIST.json").write_text("[1, 2, 3]", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            records = load_all_earnings_data(store_dir)

        assert list(records) == ["NVDA"]
        assert "BROKEN.json" in caplog.text
        assert "LIST.json" in caplog.text

    def test_ticker_key_is_upper_case(self, tmp_path):
        (tmp_path / "amd.json").write_text(json.dumps({"reports": []}), encoding="utf-8")
        assert list(load_all_earnings_data(tmp_path)) == ["AMD"]

    def test_missing_directory(self, tmp_path):
        assert load_all_earnings_data(tmp_path / "does-not-exist") == {}

    def test_sorted_filename_order(self, store_dir):
        (store_dir / "AMD.json").write_text(json.dumps({"reports": []}), encoding="utf-8")
        assert list(load_all_earnings_data(store_dir)) == ["AMD", "NVDA"]


class TestCachedEarnings:

    def test_get_cached_earnings(self, store_dir):
        data = get_cached_earnings("nvda", store_dir)
        assert data is not None
        assert data.total_fetched == 1

    def test_missing_company(self, store_dir):
        assert get_cached_earnings("AMD", store_dir) is None
        assert not has_cached_earnings("AMD", store_dir)
        assert has_cached_earnings("NVDA", store_dir)


class TestSaveMacroAnalysis:

    def test_writes_camel_case_latest_json(self, store_dir, tmp_path):
        analysis = compute_macro_analysis(load_all_earnings_data(store_dir), ordering="lexicographic")
        output_path = save_macro_analysis(analysis, tmp_path / "macro")

        assert output_path.name == "latest.json"
        payload = json.loads(output_path.read_text(encoding="utf-8"))
        assert payload["period"] == "Q4 2024"
        assert payload["companies"] == ["NVDA"]
        assert payload["aggregateInsights"]["averageCapexGrowth"] == 45.2
        assert payload["aggregateInsights"]["partnershipNetwork"][0]["mentions"] == 1
