import pytest

from core.schema import BulkProduct, RetailProduct, Scenario, Tier
from inputs.defaults import (
    DEFAULT_BULK_PRODUCTS,
    DEFAULT_RETAIL_PRODUCTS,
    DEFAULT_SCENARIOS,
    DEFAULT_TIERS,
)


@pytest.fixture
def bulk_catalog():
    return DEFAULT_BULK_PRODUCTS


@pytest.fixture
def retail_catalog():
    return DEFAULT_RETAIL_PRODUCTS


@pytest.fixture
def tiers():
    return DEFAULT_TIERS


@pytest.fixture
def scenarios():
    return DEFAULT_SCENARIOS


@pytest.fixture
def base_case():
    return DEFAULT_SCENARIOS[0]


@pytest.fixture
def small_cafe():
    return DEFAULT_TIERS[0]


@pytest.fixture
def make_scenario():
    def _make(**overrides):
        fields = dict(
            name="Test", starting_partners=1, new_partners_per_month=2,
            pct_small=50, pct_medium=35, pct_large=15,
            monthly_churn_pct=2, retail_attach_pct=50,
        )
        fields.update(overrides)
        return Scenario(**fields)
    return _make


@pytest.fixture
def make_tier():
    def _make(**overrides):
        fields = dict(
            id="t", label="Test Tier", bulk_product_ids=("ev1",),
            drinks_per_day=10, units_per_serving=1, days_per_month=30,
            retail_product_ids=("evp",), retail_units_per_month=10,
        )
        fields.update(overrides)
        return Tier(**fields)
    return _make


@pytest.fixture
def loss_leader():
    return BulkProduct("ll", "Loss Leader", size_units=1, servings_per_unit=100, wholesale_price=10, cogs=15)


@pytest.fixture
def free_pouch():
    return RetailProduct("fp", "Free Pouch", retail_price=0, wholesale_price=0, cogs=3)
