"""Unit tests for the cross-company macro analysis."""

import pytest

from fundamentals.macro_trends import MacroAnalyzer, compute_macro_analysis


def analyze(records, target_quarter=None):
    return compute_macro_analysis(records, target_quarter, ordering="lexicographic")


def edge_counts(edges):
    return {edge.partner: edge.mentions for edge in edges}


class TestPeriodResolution:

    def test_defaults_to_latest_quarter(self, q4_records):
        result = analyze(q4_records)
        assert result.period == "Q4 2024"
        assert result.companies == ["NVDA", "AMD", "INTC", "MRNA", "VRTX"]

    def test_explicit_quarter(self, q4_records):
        result = analyze(q4_records, "Q3 2024")
        assert result.period == "Q3 2024"
        assert len(result.companies) == 5

    def test_companies_without_the_quarter_are_excluded(self, make_company_data, make_report):
        records = {
            "AAA": make_company_data("AAA", [make_report("Q4 2024", capexGrowth=10.0)]),
            "BBB": make_company_data("BBB", [make_report("Q3 2024", capexGrowth=90.0)]),
        }
        result = analyze(records, "Q4 2024")
        assert result.companies == ["AAA"]
        assert result.aggregate_insights.average_capex_growth == pytest.approx(10.0)

    def test_chronological_ordering(self, make_company_data, make_report):
        records = {
            "AAA": make_company_data("AAA", [make_report("Q1 2024"), make_report("Q4 2023")]),
        }
        assert MacroAnalyzer("lexicographic").analyze(records).period == "Q4 2023"
        assert MacroAnalyzer("chronological").analyze(records).period == "Q1 2024"


class TestScalarAggregates:

    def test_market_aggregates(self, q4_records):
        aggregates = analyze(q4_records).aggregate_insights

        assert aggregates.average_capex_growth == pytest.approx(13.5)
        assert aggregates.companies_raising_guidance == 3
        assert aggregates.companies_lowering_guidance == 1
        assert aggregates.companies_maintaining_guidance == 1
        assert aggregates.companies_not_providing_guidance == 0
        assert aggregates.ai_investment_count == 3
        assert aggregates.supply_chain_sentiment == {"tight": 1, "easing": 3, "normal": 1, "unknown": 0}
        assert aggregates.headcount_trends == {"expanding": 1, "stable": 1, "freezing": 1, "reducing": 2}
        assert aggregates.pricing_power_distribution == {"strong": 2, "moderate": 1, "weak": 1, "unknown": 1}

    def test_sentiment_classification(self, q4_records):
        aggregates = analyze(q4_records).aggregate_insights
        # (+1 +1 -1 +0 +1) / 5
        assert aggregates.average_sentiment_score == pytest.approx(0.4)
        assert aggregates.overall_market_sentiment == "bullish"

    def test_balanced_sentiment_is_neutral(self, make_company_data, make_report):
        records = {
            "AAA": make_company_data("AAA", [make_report("Q4 2024", overallSentiment="bullish")]),
            "BBB": make_company_data("BBB", [make_report("Q4 2024", overallSentiment="bearish")]),
            "CCC": make_company_data("CCC", [make_report("Q4 2024", overallSentiment="neutral")]),
        }
        assert analyze(records).aggregate_insights.overall_market_sentiment == "neutral"

    def test_bearish_period(self, make_company_data, make_report):
        records = {
            "AAA": make_company_data("AAA", [make_report("Q4 2024", overallSentiment="bearish")]),
            "BBB": make_company_data("BBB", [make_report("Q4 2024", overallSentiment="bearish")]),
            "CCC": make_company_data("CCC", [make_report("Q4 2024", overallSentiment="bullish")]),
        }
        assert analyze(records).aggregate_insights.overall_market_sentiment == "bearish"

    def test_no_capex_data_averages_to_zero(self, make_company_data, make_report):
        records = {
            "AAA": make_company_data("AAA", [make_report("Q4 2024", revenue=100.0)]),
            "BBB": make_company_data("BBB", [make_report("Q4 2024", capexGrowth="n/a")]),
        }
        result = analyze(records)
        assert result.aggregate_insights.average_capex_growth == 0.0
        assert result.sector_analyses[0].average_capex_growth == 0.0

    def test_off_enum_values_not_counted(self, make_company_data, make_report):
        records = {
            "AAA": make_company_data("AAA", [make_report(
                "Q4 2024", guidanceDirection="up", supplyChainStatus="very tight",
                headcountTrend="hiring", pricingPower="extreme", overallSentiment="euphoric",
            )]),
            "BBB": make_company_data("BBB", [make_report("Q4 2024", supplyChainStatus="tight")]),
        }
        aggregates = analyze(records).aggregate_insights
        assert aggregates.supply_chain_sentiment == {"tight": 1, "easing": 0, "normal": 0, "unknown": 0}
        assert sum(aggregates.headcount_trends.values()) == 0
        assert sum(aggregates.pricing_power_distribution.values()) == 0
        assert aggregates.companies_raising_guidance == 0
        assert aggregates.average_sentiment_score == 0.0

    def test_ai_flag_requires_literal_true(self, make_company_data, make_report):
        records = {
            "AAA": make_company_data("AAA", [make_report("Q4 2024", aiInvestmentMentioned="yes")]),
            "BBB": make_company_data("BBB", [make_report("Q4 2024", aiInvestmentMentioned=True)]),
        }
        assert analyze(records).aggregate_insights.ai_investment_count == 1


class TestPartnershipNetwork:

    def test_mentions_count_distinct_companies(self, q4_records):
        network = analyze(q4_records).aggregate_insights.partnership_network
        assert edge_counts(network) == {"Microsoft": 3, "TSMC": 2, "Merck": 2}
        assert network[0].connected_companies == ["NVDA", "AMD", "INTC"]
        assert all(edge.mentions == len(edge.connected_companies) for edge in network)

    def test_repeated_mention_counts_once(self, make_company_data, make_report):
        records = {
            "AAA": make_company_data("AAA", [make_report(
                "Q4 2024", partnerships=["OpenAI", "OpenAI", "openai", "Open AI"],
            )]),
        }
        network = analyze(records).aggregate_insights.partnership_network
        assert edge_counts(network) == {"OpenAI": 1}
        assert network[0].connected_companies == ["AAA"]

    def test_fallback_when_no_cross_company_edge(self, make_company_data, make_report):
        records = {
            f"C{i:02d}": make_company_data(f"C{i:02d}", [make_report(
                "Q4 2024", partnerships=[f"Partner{i:02d} Labs"],
            )])
            for i in range(20)
        }
        network = analyze(records).aggregate_insights.partnership_network
        assert len(network) == 15
        assert all(edge.mentions == 1 for edge in network)
        assert network[0].partner == "Partner00 Labs"

    def test_single_company_edges_dropped_when_cross_company_exists(self, q4_records):
        partners = [edge.partner for edge in analyze(q4_records).aggregate_insights.partnership_network]
        assert "OpenAI" not in partners
        assert "CRISPR Therapeutics" not in partners

    def test_noise_never_reaches_network(self, q4_records):
        partners = [edge.partner for edge in analyze(q4_records).aggregate_insights.partnership_network]
        assert "FDA" not in partners
        assert "Cencora" not in partners

    def test_malformed_partnerships_ignored(self, make_company_data, make_report):
        records = {
            "AAA": make_company_data("AAA", [make_report("Q4 2024", partnerships="Microsoft")]),
            "BBB": make_company_data("BBB", [make_report("Q4 2024", partnerships=[None, 7, "MSFT"])]),
        }
        assert edge_counts(analyze(records).aggregate_insights.partnership_network) == {"Microsoft": 1}


class TestSectorBreakdown:

    def test_buckets_by_sector_and_sub_category(self, q4_records):
        sectors = analyze(q4_records).sector_analyses
        assert [(s.sector, s.sub_category) for s in sectors] == [
            ("Technology", "Semiconductors"),
            ("Healthcare", "Biotech"),
        ]

        tech, health = sectors
        assert tech.companies == ["NVDA", "AMD", "INTC"]
        assert tech.average_capex_growth == pytest.approx(49.0 / 3)
        assert tech.ai_investment_percentage == pytest.approx(200.0 / 3)
        assert tech.average_sentiment == pytest.approx(1.0 / 3)
        assert edge_counts(tech.top_partners) == {"Microsoft": 3, "TSMC": 2}

        assert health.average_capex_growth == pytest.approx(5.0)
        assert health.ai_investment_percentage == pytest.approx(50.0)
        assert health.guidance_sentiment == {"raised": 1, "maintained": 1, "lowered": 0, "notProvided": 0}
        assert health.supply_chain_status == {"tight": 0, "easing": 1, "normal": 1, "unknown": 0}
        assert edge_counts(health.top_partners) == {"Merck": 2}

    def test_bucket_partner_cap(self, make_company_data, make_report):
        partners = [f"Vendor{i} Systems" for i in range(7)]
        records = {
            "AAA": make_company_data("AAA", [make_report("Q4 2024", partnerships=partners)]),
            "BBB": make_company_data("BBB", [make_report("Q4 2024", partnerships=partners)]),
        }
        top = analyze(records).sector_analyses[0].top_partners
        assert len(top) == 5
        assert all(edge.mentions == 2 for edge in top)

    def test_bucket_fallback_cap(self, make_company_data, make_report):
        records = {
            "AAA": make_company_data("AAA", [make_report(
                "Q4 2024", partnerships=["Vendor1 Systems", "Vendor2 Systems", "Vendor3 Systems", "Vendor4 Systems"],
            )]),
        }
        top = analyze(records).sector_analyses[0].top_partners
        assert [edge.partner for edge in top] == ["Vendor1 Systems", "Vendor2 Systems", "Vendor3 Systems"]


class TestDivergences:

    def test_capex_divergence(self, make_company_data, make_report):
        records = {
            "A": make_company_data("A", [make_report("Q4 2024", capexGrowth=25.0)]),
            "B": make_company_data("B", [make_report("Q4 2024", capexGrowth=-15.0)]),
            "C": make_company_data("C", [make_report("Q4 2024", capexGrowth=5.0)]),
        }
        divergences = analyze(records).divergences
        assert len(divergences) == 1

        capex = divergences[0]
        assert capex.theme == "Capital Expenditure"
        assert capex.winners == ["A"]
        assert capex.losers == ["B"]
        assert capex.details == "1 companies increasing capex >20% vs 1 decreasing >10%"

    def test_guidance_divergence_one_sided(self, make_company_data, make_report):
        records = {
            "A": make_company_data("A", [make_report("Q4 2024", guidanceDirection="raised")]),
            "B": make_company_data("B", [make_report("Q4 2024", guidanceDirection="maintained")]),
        }
        divergences = analyze(records).divergences
        assert len(divergences) == 1
        assert divergences[0].theme == "Guidance Direction"
        assert divergences[0].winners == ["A"]
        assert divergences[0].losers == []
        assert divergences[0].details == "1 companies raised guidance vs 0 lowered"

    def test_both_divergences(self, q4_records):
        divergences = analyze(q4_records).divergences
        assert [d.theme for d in divergences] == ["Guidance Direction", "Capital Expenditure"]
        guidance, capex = divergences
        assert guidance.winners == ["NVDA", "AMD", "VRTX"]
        assert guidance.losers == ["INTC"]
        assert capex.winners == ["NVDA", "AMD"]
        assert capex.losers == ["INTC"]

    def test_no_divergence(self, make_company_data, make_report):
        records = {"A": make_company_data("A", [make_report("Q4 2024", capexGrowth=10.0)])}
        assert analyze(records).divergences == []


class TestTopThemes:

    def test_themes_in_rule_order(self, q4_records):
        assert analyze(q4_records).top_themes == [
            "AI Infrastructure Investment",
            "Supply Chain Easing",
            "Optimistic Outlook",
            "Cost Cutting Measures",
        ]

    def test_cautious_guidance_and_constraints(self, make_company_data, make_report):
        records = {
            "A": make_company_data("A", [make_report("Q4 2024", guidanceDirection="lowered", supplyChainStatus="tight")]),
            "B": make_company_data("B", [make_report("Q4 2024", guidanceDirection="lowered")]),
            "C": make_company_data("C", [make_report("Q4 2024", guidanceDirection="raised")]),
        }
        assert analyze(records).top_themes == ["Supply Chain Constraints", "Cautious Guidance"]

    def test_optimism_needs_two_to_one(self, make_company_data, make_report):
        records = {
            "A": make_company_data("A", [make_report("Q4 2024", guidanceDirection="raised")]),
            "B": make_company_data("B", [make_report("Q4 2024", guidanceDirection="raised")]),
            "C": make_company_data("C", [make_report("Q4 2024", guidanceDirection="lowered")]),
        }
        assert analyze(records).top_themes == []


class TestRobustness:

    def test_empty_input(self):
        result = analyze({})
        assert result.period == "Unknown"
        assert result.companies == []
        assert result.aggregate_insights.average_capex_growth == 0.0
        assert result.aggregate_insights.overall_market_sentiment == "neutral"
        assert result.aggregate_insights.partnership_network == []
        assert result.sector_analyses == []
        assert result.divergences == []
        assert result.top_themes == []

    def test_no_records_for_target_quarter(self, q4_records):
        result = analyze(q4_records, "Q1 2019")
        assert result.period == "Q1 2019"
        assert result.companies == []
        assert result.aggregate_insights.partnership_network == []

    def test_records_must_be_a_mapping(self, q4_records):
        with pytest.raises(TypeError):
            analyze(list(q4_records.values()))

    def test_deterministic(self, q4_records):
        first = analyze(q4_records).model_dump(exclude={"generated_at"})
        second = analyze(q4_records).model_dump(exclude={"generated_at"})
        assert first == second

    def test_camel_case_serialization(self, q4_records):
        payload = analyze(q4_records).model_dump(mode="json", by_alias=True)
        assert set(payload) == {
            "period", "generatedAt", "companies", "aggregateInsights",
            "sectorAnalyses", "divergences", "topThemes",
        }
        edge = payload["aggregateInsights"]["partnershipNetwork"][0]
        assert edge == {"partner": "Microsoft", "connectedCompanies": ["NVDA", "AMD", "INTC"], "mentions": 3}
        assert "subCategory" in payload["sectorAnalyses"][0]
