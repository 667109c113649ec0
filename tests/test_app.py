from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parent.parent / "app" / "streamlit_app.py"


@pytest.fixture
def app():
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _open(at, section):
    at.radio(key="section").set_value(section).run()
    assert not at.exception
    return at


def test_removing_first_scenario_keeps_the_others(app):
    _open(app, "Scenarios")
    app.button(key="scn_rm_base").click().run()
    assert not app.exception

    remaining = app.session_state["scenarios"]
    assert [s.name for s in remaining] == ["Aggressive", "Conservative"]
    assert (remaining[0].new_partners_per_month, remaining[0].monthly_churn_pct) == (4, 3)
    assert (remaining[1].new_partners_per_month, remaining[1].monthly_churn_pct) == (1, 1)


def test_removing_middle_scenario_after_add(app):
    _open(app, "Scenarios")
    app.button[0].click().run()  # + Add Scenario
    assert len(app.session_state["scenarios"]) == 4

    app.button(key="scn_rm_aggressive").click().run()
    remaining = app.session_state["scenarios"]
    assert [s.name for s in remaining] == ["Base Case", "Conservative", "Scenario 4"]
    assert remaining[1].retail_attach_pct == 30
    assert remaining[2].pct_small == 50


def test_tier_cards_show_computed_economics(app):
    _open(app, "Cafe Tiers")
    frames = [df.value for df in app.dataframe]
    assert [f["tier"].iloc[0] for f in frames] == ["Small Cafe", "Medium Cafe", "Large Cafe"]
    assert frames[0]["servings_per_month"].iloc[0] == 300
    assert frames[0]["total_revenue"].iloc[0] == "$253"
