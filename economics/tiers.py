"""
Tier economics — monthly consumption and per-partner revenue/profit for one tier.

Assumes the partner stocks everything the tier is configured for (full retail
attach). The scenario projector applies the attach rate one layer up.

Rounding follows the dashboard figures exactly:
  - bulk_rev, bulk_profit, total_rev, total_profit: half-up to cents
  - retail_rev, retail_profit: full precision (carried into the projector)
  - breakdown lines: units and revenue to cents, display only
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from core.schema import BulkProduct, RetailProduct, Tier
from core.utils import round_half_up

from .products import bulk_margin, retail_margin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BulkLine:
    """Per-product slice of a tier's bulk consumption (display figures)."""
    product_id: str
    name: str
    units: float
    revenue: float


@dataclass(frozen=True)
class TierEconomics:
    servings_per_month: float
    bulk_breakdown: Tuple[BulkLine, ...] = field(default_factory=tuple)
    bulk_rev: float = 0.0
    bulk_profit: float = 0.0
    retail_rev: float = 0.0
    retail_profit: float = 0.0
    total_rev: float = 0.0
    total_profit: float = 0.0

    @property
    def margin_pct(self) -> float:
        """Total profit over total revenue as a fraction (0 with no revenue)."""
        if self.total_rev > 0:
            return self.total_profit / self.total_rev
        return 0.0


def _select(catalog, ids) -> list:
    # Catalog order wins; unknown ids drop out silently.
    wanted = set(ids or ())
    return [p for p in catalog if p.id in wanted]


def compute_tier_economics(
    tier: Tier,
    bulk_catalog: Sequence[BulkProduct],
    retail_catalog: Sequence[RetailProduct],
) -> TierEconomics:
    """
    Compute one tier's monthly per-partner economics.

    Servings are split evenly across the selected bulk products and retail
    units evenly across the selected retail products. Empty selections and
    zero servings-per-unit degrade to zero figures, never to an error.
    """
    selected_bulk = _select(bulk_catalog, tier.bulk_product_ids)
    selected_retail = _select(retail_catalog, tier.retail_product_ids)

    servings_per_month = tier.drinks_per_day * tier.units_per_serving * tier.days_per_month
    servings_per_product = (
        servings_per_month / len(selected_bulk) if selected_bulk else 0.0
    )

    bulk_rev = 0.0
    bulk_profit = 0.0
    breakdown: List[BulkLine] = []
    for product in selected_bulk:
        units = (
            servings_per_product / product.servings_per_unit
            if product.servings_per_unit > 0 else 0.0
        )
        rev = units * product.wholesale_price
        profit = units * bulk_margin(product)
        bulk_rev += rev
        bulk_profit += profit
        breakdown.append(BulkLine(
            product_id=product.id,
            name=product.name,
            units=round_half_up(units, 2),
            revenue=round_half_up(rev, 2),
        ))

    units_per_retail = (
        tier.retail_units_per_month / len(selected_retail) if selected_retail else 0.0
    )
    retail_rev = 0.0
    retail_profit = 0.0
    for product in selected_retail:
        retail_rev += units_per_retail * product.wholesale_price
        retail_profit += units_per_retail * retail_margin(product)

    if len(selected_bulk) < len(set(tier.bulk_product_ids or ())):
        logger.debug("Tier %s: some bulk product ids did not resolve", tier.id)

    return TierEconomics(
        servings_per_month=servings_per_month,
        bulk_breakdown=tuple(breakdown),
        bulk_rev=round_half_up(bulk_rev, 2),
        bulk_profit=round_half_up(bulk_profit, 2),
        retail_rev=retail_rev,
        retail_profit=retail_profit,
        total_rev=round_half_up(bulk_rev + retail_rev, 2),
        total_profit=round_half_up(bulk_profit + retail_profit, 2),
    )


def compute_all_tier_economics(
    tiers: Sequence[Tier],
    bulk_catalog: Sequence[BulkProduct],
    retail_catalog: Sequence[RetailProduct],
) -> Dict[str, TierEconomics]:
    """Economics for every tier keyed by tier id, in tier order."""
    return {
        t.id: compute_tier_economics(t, bulk_catalog, retail_catalog)
        for t in tiers
    }
