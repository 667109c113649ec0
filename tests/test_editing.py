from inputs.defaults import SCENARIO_COLORS
from inputs.editing import add_scenario, remove_at, replace_at


def test_replace_at_returns_new_collection(scenarios):
    edited = replace_at(scenarios, 1, monthly_churn_pct=10)
    assert edited[1].monthly_churn_pct == 10
    assert edited[0] is scenarios[0]
    assert scenarios[1].monthly_churn_pct == 3


def test_replace_at_out_of_range_is_noop(scenarios):
    assert replace_at(scenarios, 9, name="x") == tuple(scenarios)
    assert replace_at(scenarios, -1, name="x") == tuple(scenarios)


def test_replace_at_tier_fields(tiers):
    edited = replace_at(tiers, 0, bulk_product_ids=("ev1", "dk10"))
    assert edited[0].bulk_product_ids == ("ev1", "dk10")
    assert tiers[0].bulk_product_ids == ("ev1",)


def test_remove_at(scenarios):
    remaining = remove_at(scenarios, 0)
    assert [s.name for s in remaining] == ["Aggressive", "Conservative"]
    assert remove_at(scenarios, 7) == tuple(scenarios)


def test_add_scenario_uses_template_and_palette(scenarios):
    added = add_scenario(scenarios)
    assert len(added) == 4
    new = added[-1]
    assert new.name == "Scenario 4"
    assert new.color == SCENARIO_COLORS[3]
    assert (new.pct_small, new.pct_medium, new.pct_large) == (50, 35, 15)
    assert len(scenarios) == 3


def test_add_scenario_caps_at_five(scenarios):
    full = add_scenario(add_scenario(scenarios))
    assert len(full) == 5
    assert add_scenario(full) == full


def test_add_scenario_from_empty():
    added = add_scenario(())
    assert added[0].name == "Scenario 1"
    assert added[0].color == SCENARIO_COLORS[0]


def test_scenarios_carry_distinct_uids(scenarios):
    assert [s.uid for s in scenarios] == ["base", "aggressive", "conservative"]
    grown = add_scenario(add_scenario(scenarios))
    uids = [s.uid for s in grown]
    assert all(uids)
    assert len(set(uids)) == len(uids)


def test_remove_then_add_does_not_reuse_uid(scenarios):
    added = add_scenario(scenarios)
    again = add_scenario(remove_at(added, 3))
    assert again[3].uid != added[3].uid
