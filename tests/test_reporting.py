import pytest

from engine.runner import run_projections
from reporting.chart import build_chart_data, chart_frame, metric_columns, series_key
from reporting.formatting import fmt_compact, fmt_count, fmt_full, fmt_pct
from reporting.kpis import compute_headline_kpis, revenue_split, scenario_summary, tier_economics_frame
from economics.tiers import compute_all_tier_economics


@pytest.fixture
def projections(scenarios, tiers, bulk_catalog, retail_catalog):
    return run_projections(scenarios, tiers, bulk_catalog, retail_catalog)


def test_chart_data_shape(projections):
    points = build_chart_data(projections)
    assert len(points) == 12
    assert points[0]["label"] == "M1"
    for p in projections:
        for suffix in ("rev", "profit", "partners", "margin", "cumRev"):
            assert series_key(p.scenario.name, suffix) in points[0]


def test_chart_data_values(projections):
    points = build_chart_data(projections)
    base = projections[0]
    assert points[11]["Base Case_rev"] == base.months[11].total_revenue
    assert points[11]["Base Case_partners"] == base.months[11].total_active
    assert points[4]["Base Case_cumRev"] == base.months[4].cumulative_revenue


def test_metric_columns(projections):
    assert metric_columns(projections, "cumRev") == [
        "Base Case_cumRev", "Aggressive_cumRev", "Conservative_cumRev",
    ]
    assert set(metric_columns(projections, "profit")) <= set(chart_frame(projections).columns)


def test_headline_kpis(projections):
    base = projections[0]
    k = compute_headline_kpis(base.months)
    assert k.m12_revenue == base.months[11].total_revenue
    assert k.m12_annualized_revenue == base.months[11].total_revenue * 12
    assert k.m6_revenue == base.months[5].total_revenue
    assert k.year1_revenue == sum(m.total_revenue for m in base.months)
    assert k.m12_bulk_revenue + k.m12_retail_revenue == pytest.approx(k.m12_revenue, abs=1)
    assert len(k.to_dataframe()) == 5


def test_headline_kpis_empty():
    k = compute_headline_kpis([])
    assert k.m12_revenue == 0
    assert k.year1_profit == 0
    assert revenue_split(k)["value"].sum() == 0


def test_scenario_summary(projections):
    df = scenario_summary(projections)
    assert df["scenario"].tolist() == ["Base Case", "Aggressive", "Conservative"]
    row = df.iloc[0]
    assert row["monthly_revenue"] == projections[0].months[11].total_revenue
    assert row["year1_profit"] == sum(m.total_profit for m in projections[0].months)


def test_tier_economics_frame(tiers, bulk_catalog, retail_catalog):
    econ = compute_all_tier_economics(tiers, bulk_catalog, retail_catalog)
    df = tier_economics_frame(tiers, econ)
    assert df["tier"].tolist() == ["Small Cafe", "Medium Cafe", "Large Cafe"]
    assert df.iloc[0]["total_revenue"] == "$253"


@pytest.mark.parametrize("value, expected", [
    (1_500_000, "$1.5M"),
    (2_500, "$2.5K"),
    (512.4, "$512"),
    (0, "$0"),
])
def test_fmt_compact(value, expected):
    assert fmt_compact(value) == expected


def test_fmt_full_and_pct():
    assert fmt_full(12345.6) == "$12,346"
    assert fmt_pct(0.8383) == "83.8%"
    assert fmt_pct(0) == "0%"


@pytest.mark.parametrize("value, expected", [
    (2.5, "3"),
    (0.5, "1"),
    (2.49, "2"),
    (0, "0"),
])
def test_fmt_count_rounds_ties_up(value, expected):
    assert fmt_count(value) == expected


def test_partner_tile_rounds_ties_up(make_scenario, tiers, bulk_catalog, retail_catalog):
    scenario = make_scenario(starting_partners=2.5, new_partners_per_month=0, monthly_churn_pct=0)
    (proj,) = run_projections([scenario], tiers, bulk_catalog, retail_catalog)
    k = compute_headline_kpis(proj.months)
    assert k.m12_partners == 2.5
    tiles = k.to_dataframe().set_index("Metric")
    assert tiles.loc["M12 Partners", "Value"] == "3"
    # cohorts 1.25 / 0.875 / 0.375
    assert tiles.loc["M12 Partners", "Detail"] == "1S / 1M / 0L"
