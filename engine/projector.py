"""
Scenario projector — 12-month partner growth and revenue/profit fold.

State carried month to month: total active partners, cumulative revenue,
cumulative profit. Everything else is recomputed per month.

Monthly recurrence (churn is applied to the prior month before adding):
    month 1:  active = starting_partners
    month m:  active = active * (1 - churn) + new_partners_per_month

Cohort counts are active * pct / 100 with no re-normalisation, so a mix that
does not sum to 100 models more (or fewer) partners than `active`.

Revenue per cohort:
    bulk   = count * tier.bulk_rev
    retail = count * tier.retail_rev * attach_fraction

Cumulative totals accumulate unrounded monthly values; only the reported
fields are rounded (currency to whole units, partner counts to cents).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import BulkProduct, RetailProduct, Scenario, Tier, TierRole
from core.utils import round_half_up
from economics.tiers import TierEconomics, compute_tier_economics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthlyResult:
    """One month of a scenario projection (display-rounded)."""
    month: int
    label: str
    total_active: float
    small: float
    medium: float
    large: float
    bulk_revenue: float
    retail_revenue: float
    total_revenue: float
    bulk_profit: float
    retail_profit: float
    total_profit: float
    margin_pct: float
    cumulative_revenue: float
    cumulative_profit: float

    def cohort(self, role: TierRole) -> float:
        return getattr(self, TierRole(role).value)


def resolve_cohort_tiers(
    tiers: Sequence[Tier],
    *,
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> Dict[TierRole, Optional[Tier]]:
    """
    Map each cohort role to the tier that supplies its economics.

    If any tier carries an explicit role, roles are matched by tag (first tier
    per role wins). Otherwise tiers fill the roles by position: first tier is
    small, second medium, third large. Unfilled roles map to None.
    """
    roles = config.cohort_roles
    if any(t.role is not None for t in tiers):
        mapping: Dict[TierRole, Optional[Tier]] = {role: None for role in roles}
        for t in tiers:
            if t.role is None:
                continue
            role = TierRole(t.role)
            if role in mapping and mapping[role] is None:
                mapping[role] = t
        return mapping

    return {
        role: (tiers[i] if i < len(tiers) else None)
        for i, role in enumerate(roles)
    }


def project_scenario(
    scenario: Scenario,
    tiers: Sequence[Tier],
    bulk_catalog: Sequence[BulkProduct],
    retail_catalog: Sequence[RetailProduct],
    *,
    config: Optional[ProjectionConfig] = None,
) -> List[MonthlyResult]:
    """
    Project one scenario over the configured horizon (12 months by default).

    Pure: identical inputs give identical outputs, inputs are never mutated.
    Degenerate inputs (no tiers, zero revenue, odd percentages) produce
    zeros rather than errors.
    """
    cfg = config or DEFAULT_CONFIG

    cohort_tiers = resolve_cohort_tiers(tiers, config=cfg)
    econ: Dict[TierRole, TierEconomics] = {
        role: compute_tier_economics(tier, bulk_catalog, retail_catalog)
        for role, tier in cohort_tiers.items()
        if tier is not None
    }

    mix = {role: scenario.cohort_pct(role) / 100.0 for role in cfg.cohort_roles}
    churn = scenario.monthly_churn_pct / 100.0
    attach = scenario.retail_attach_pct / 100.0

    total_active = float(scenario.starting_partners)
    cumulative_rev = 0.0
    cumulative_profit = 0.0
    months: List[MonthlyResult] = []

    for m in range(1, cfg.horizon_months + 1):
        if m > 1:
            total_active = total_active * (1.0 - churn) + scenario.new_partners_per_month
        counts = {role: total_active * frac for role, frac in mix.items()}

        bulk_rev = bulk_profit = retail_rev = retail_profit = 0.0
        for role, tier_econ in econ.items():
            n = counts[role]
            bulk_rev += n * tier_econ.bulk_rev
            bulk_profit += n * tier_econ.bulk_profit
            retail_rev += n * tier_econ.retail_rev * attach
            retail_profit += n * tier_econ.retail_profit * attach

        total_rev = bulk_rev + retail_rev
        total_profit = bulk_profit + retail_profit
        cumulative_rev += total_rev
        cumulative_profit += total_profit

        margin_pct = (
            round_half_up(total_profit / total_rev * 1000) / 10 if total_rev > 0 else 0.0
        )

        months.append(MonthlyResult(
            month=m,
            label=f"M{m}",
            total_active=round_half_up(total_active, 2),
            small=round_half_up(counts.get(TierRole.SMALL, 0.0), 2),
            medium=round_half_up(counts.get(TierRole.MEDIUM, 0.0), 2),
            large=round_half_up(counts.get(TierRole.LARGE, 0.0), 2),
            bulk_revenue=round_half_up(bulk_rev),
            retail_revenue=round_half_up(retail_rev),
            total_revenue=round_half_up(total_rev),
            bulk_profit=round_half_up(bulk_profit),
            retail_profit=round_half_up(retail_profit),
            total_profit=round_half_up(total_profit),
            margin_pct=margin_pct,
            cumulative_revenue=round_half_up(cumulative_rev),
            cumulative_profit=round_half_up(cumulative_profit),
        ))

    logger.debug(
        "Projected %r: M%d active=%.2f revenue=%.0f",
        scenario.name, cfg.horizon_months, total_active, cumulative_rev,
    )
    return months
