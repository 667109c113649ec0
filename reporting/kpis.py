"""
Headline KPIs for the primary scenario and the month-12 comparison table.

Year-1 totals are sums of the reported (rounded) monthly totals, matching what
the tables show; they can differ from month-12 cumulative figures by a few
units of rounding.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd

from core.schema import Tier
from economics.tiers import TierEconomics
from engine.projector import MonthlyResult
from engine.runner import ScenarioProjection

from .formatting import fmt_compact, fmt_count, fmt_full, fmt_pct


def _at(months: Sequence[MonthlyResult], m: int) -> Optional[MonthlyResult]:
    return months[m - 1] if 1 <= m <= len(months) else None


@dataclass(frozen=True)
class HeadlineKpis:
    """KPI tiles shown above the projection chart."""
    m12_revenue: float
    m12_annualized_revenue: float
    m12_profit: float
    m12_margin_pct: float
    m12_partners: float
    m12_small: float
    m12_medium: float
    m12_large: float
    year1_revenue: float
    year1_profit: float
    m6_revenue: float
    m12_bulk_revenue: float
    m12_retail_revenue: float

    def to_dataframe(self) -> pd.DataFrame:
        rows = [
            {"Metric": "M12 Monthly Revenue", "Value": fmt_compact(self.m12_revenue),
             "Detail": f"{fmt_compact(self.m12_annualized_revenue)} annualized"},
            {"Metric": "M12 Gross Profit", "Value": fmt_compact(self.m12_profit),
             "Detail": f"{self.m12_margin_pct:g}% margin"},
            {"Metric": "M12 Partners", "Value": fmt_count(self.m12_partners),
             "Detail": f"{fmt_count(self.m12_small)}S / {fmt_count(self.m12_medium)}M / {fmt_count(self.m12_large)}L"},
            {"Metric": "Year 1 Total Revenue", "Value": fmt_compact(self.year1_revenue),
             "Detail": f"{fmt_compact(self.year1_profit)} profit"},
            {"Metric": "M6 Revenue", "Value": fmt_compact(self.m6_revenue),
             "Detail": "Halfway checkpoint"},
        ]
        return pd.DataFrame(rows)


def compute_headline_kpis(months: Sequence[MonthlyResult]) -> HeadlineKpis:
    """KPIs from one projection; an empty projection gives all zeros."""
    m12 = _at(months, 12) or (months[-1] if months else None)
    m6 = _at(months, 6)
    return HeadlineKpis(
        m12_revenue=m12.total_revenue if m12 else 0.0,
        m12_annualized_revenue=(m12.total_revenue * 12) if m12 else 0.0,
        m12_profit=m12.total_profit if m12 else 0.0,
        m12_margin_pct=m12.margin_pct if m12 else 0.0,
        m12_partners=m12.total_active if m12 else 0.0,
        m12_small=m12.small if m12 else 0.0,
        m12_medium=m12.medium if m12 else 0.0,
        m12_large=m12.large if m12 else 0.0,
        year1_revenue=sum(r.total_revenue for r in months),
        year1_profit=sum(r.total_profit for r in months),
        m6_revenue=m6.total_revenue if m6 else 0.0,
        m12_bulk_revenue=m12.bulk_revenue if m12 else 0.0,
        m12_retail_revenue=m12.retail_revenue if m12 else 0.0,
    )


def revenue_split(kpis: HeadlineKpis) -> pd.DataFrame:
    """Month-12 revenue by stream (for the pie chart)."""
    return pd.DataFrame([
        {"stream": "Ingredient Supply", "value": kpis.m12_bulk_revenue},
        {"stream": "Retail Sellthrough", "value": kpis.m12_retail_revenue},
    ])


def scenario_summary(projections: Sequence[ScenarioProjection]) -> pd.DataFrame:
    """
    Side-by-side month-12 comparison, one row per scenario.

    Columns: scenario, partners, monthly_revenue, monthly_profit, margin_pct,
    year1_revenue, year1_profit.
    """
    rows = []
    for proj in projections:
        k = compute_headline_kpis(proj.months)
        rows.append({
            "scenario": proj.scenario.name,
            "partners": k.m12_partners,
            "monthly_revenue": k.m12_revenue,
            "monthly_profit": k.m12_profit,
            "margin_pct": k.m12_margin_pct,
            "year1_revenue": k.year1_revenue,
            "year1_profit": k.year1_profit,
        })
    columns = [
        "scenario", "partners", "monthly_revenue", "monthly_profit",
        "margin_pct", "year1_revenue", "year1_profit",
    ]
    return pd.DataFrame(rows, columns=columns)


def tier_economics_frame(
    tiers: Sequence[Tier],
    economics: dict,
) -> pd.DataFrame:
    """
    Per-tier partner economics table.
    `economics` maps tier id -> TierEconomics (see compute_all_tier_economics).
    """
    rows = []
    for t in tiers:
        e: Optional[TierEconomics] = economics.get(t.id)
        if e is None:
            continue
        rows.append({
            "tier": t.label,
            "servings_per_month": e.servings_per_month,
            "bulk_units": " + ".join(f"{line.units:g} {line.name}" for line in e.bulk_breakdown),
            "bulk_revenue": fmt_full(e.bulk_rev),
            "retail_revenue": fmt_full(e.retail_rev),
            "total_revenue": fmt_full(e.total_rev),
            "total_profit": fmt_full(e.total_profit),
            "margin": fmt_pct(e.margin_pct),
        })
    return pd.DataFrame(rows)
