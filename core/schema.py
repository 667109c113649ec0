"""
Plain data records for the projection engine.

Every record is a frozen dataclass: the dashboard never mutates one in place,
it replaces the whole record (see inputs/editing.py). Percentages are kept on
the 0-100 scale the user edits; they only become fractions inside the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class TierRole(str, Enum):
    """Cohort a tier fills in a scenario's partner mix."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


# Order matters: positional fallback maps the first three tiers onto these.
COHORT_ROLES: Tuple[TierRole, ...] = (TierRole.SMALL, TierRole.MEDIUM, TierRole.LARGE)


@dataclass(frozen=True)
class BulkProduct:
    """Cafe-size ingredient bag sold wholesale for in-house drinks."""

    id: str
    name: str
    size_units: float  # informational only (e.g. lbs)
    servings_per_unit: float
    wholesale_price: float
    cogs: float


@dataclass(frozen=True)
class RetailProduct:
    """Take-home pouch sold wholesale to the partner for resale."""

    id: str
    name: str
    retail_price: float  # consumer-facing, never drives revenue
    wholesale_price: float
    cogs: float


@dataclass(frozen=True)
class Tier:
    """
    Partner archetype with a consumption and stocking profile.

    bulk_product_ids / retail_product_ids reference the catalogs by id;
    ids that do not resolve are ignored by the calculator.
    """

    id: str
    label: str
    bulk_product_ids: Tuple[str, ...]
    drinks_per_day: float
    units_per_serving: float
    days_per_month: float
    retail_product_ids: Tuple[str, ...] = ()
    retail_units_per_month: float = 0.0
    role: Optional[TierRole] = None


@dataclass(frozen=True)
class Scenario:
    """Named growth / churn / mix assumptions for one 12-month run."""

    name: str
    starting_partners: float
    new_partners_per_month: float
    pct_small: float
    pct_medium: float
    pct_large: float
    monthly_churn_pct: float
    retail_attach_pct: float
    color: str = "#999999"
    # widget-key identity; name is user-editable
    uid: str = ""

    @property
    def mix_total_pct(self) -> float:
        return self.pct_small + self.pct_medium + self.pct_large

    def cohort_pct(self, role: TierRole) -> float:
        return {
            TierRole.SMALL: self.pct_small,
            TierRole.MEDIUM: self.pct_medium,
            TierRole.LARGE: self.pct_large,
        }[TierRole(role)]
