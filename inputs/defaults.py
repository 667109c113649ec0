"""
Default catalogs, tiers and scenarios loaded into a fresh dashboard session.
Figures come from the pricing spreadsheet the dashboard was built from.
"""

from __future__ import annotations

from typing import Dict, Tuple

from core.schema import BulkProduct, RetailProduct, Scenario, Tier, TierRole

SCENARIO_COLORS: Tuple[str, ...] = (
    "#f5b5c2",
    "#fdd160",
    "#1d1e1c",
    "#c4a05a",
    "#9a9a93",
)
FALLBACK_COLOR = "#999999"

DEFAULT_BULK_PRODUCTS: Tuple[BulkProduct, ...] = (
    BulkProduct("ev1", "Everyday Cafe Bag 1lb", size_units=1, servings_per_unit=180, wholesale_price=80, cogs=12.93),
    BulkProduct("ev5", "Everyday Cafe Bag 5lb", size_units=5, servings_per_unit=900, wholesale_price=300, cogs=60),
    BulkProduct("dk5", "Dusk Cafe Bag 5lb", size_units=5, servings_per_unit=107, wholesale_price=108, cogs=53),
    BulkProduct("dk10", "Dusk Cafe Bag 10lb", size_units=10, servings_per_unit=214, wholesale_price=195, cogs=100),
)

DEFAULT_RETAIL_PRODUCTS: Tuple[RetailProduct, ...] = (
    RetailProduct("evp", "Everyday Pouch", retail_price=24, wholesale_price=12, cogs=4),
    RetailProduct("dkp", "Dusk Pouch", retail_price=24, wholesale_price=12, cogs=8),
)

DEFAULT_TIERS: Tuple[Tier, ...] = (
    Tier(
        id="small", label="Small Cafe", bulk_product_ids=("ev1",),
        drinks_per_day=10, units_per_serving=1, days_per_month=30,
        retail_product_ids=("evp",), retail_units_per_month=10, role=TierRole.SMALL,
    ),
    Tier(
        id="medium", label="Medium Cafe", bulk_product_ids=("ev5",),
        drinks_per_day=40, units_per_serving=1, days_per_month=30,
        retail_product_ids=("evp",), retail_units_per_month=15, role=TierRole.MEDIUM,
    ),
    Tier(
        id="large", label="Large Cafe", bulk_product_ids=("ev5", "dk5"),
        drinks_per_day=60, units_per_serving=1, days_per_month=30,
        retail_product_ids=("evp", "dkp"), retail_units_per_month=25, role=TierRole.LARGE,
    ),
)

DEFAULT_SCENARIOS: Tuple[Scenario, ...] = (
    Scenario("Base Case", starting_partners=1, new_partners_per_month=2,
             pct_small=50, pct_medium=35, pct_large=15,
             monthly_churn_pct=2, retail_attach_pct=50, color=SCENARIO_COLORS[0], uid="base"),
    Scenario("Aggressive", starting_partners=1, new_partners_per_month=4,
             pct_small=35, pct_medium=40, pct_large=25,
             monthly_churn_pct=3, retail_attach_pct=75, color=SCENARIO_COLORS[1], uid="aggressive"),
    Scenario("Conservative", starting_partners=1, new_partners_per_month=1,
             pct_small=60, pct_medium=30, pct_large=10,
             monthly_churn_pct=1, retail_attach_pct=30, color=SCENARIO_COLORS[2], uid="conservative"),
)

# Field values for a scenario added from the dashboard (name/color filled in on add)
NEW_SCENARIO_TEMPLATE: Dict[str, float] = {
    "starting_partners": 1,
    "new_partners_per_month": 2,
    "pct_small": 50,
    "pct_medium": 35,
    "pct_large": 15,
    "monthly_churn_pct": 2,
    "retail_attach_pct": 50,
}
