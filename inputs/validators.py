"""
Advisory checks on dashboard inputs.

Nothing here blocks a projection: the engine runs on whatever it is given and
degrades to zeros. These checks only surface what the user probably did not
mean, e.g. a tier mix that adds up to 90%.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import BulkProduct, RetailProduct, Scenario, Tier
from economics.products import bulk_margin, retail_margin


@dataclass
class ValidationResult:
    """Collects all warnings for one set of inputs."""
    warnings: List[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return len(self.warnings) == 0

    def summary(self) -> str:
        if not self.warnings:
            return "✓ All checks passed."
        lines = [f"WARNINGS ({len(self.warnings)}):"]
        for w in self.warnings:
            lines.append(f"  ⚠ {w}")
        return "\n".join(lines)


def check_scenario_mix(
    scenario: Scenario,
    *,
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> Optional[str]:
    """Warning text when the tier mix is off 100% by more than the tolerance."""
    total = scenario.mix_total_pct
    if abs(total - 100) > config.mix_tolerance_pct:
        return f"{scenario.name}: tier mix = {total:g}% (should be 100%)"
    return None


def check_inputs(
    bulk_products: Sequence[BulkProduct],
    retail_products: Sequence[RetailProduct],
    tiers: Sequence[Tier],
    scenarios: Sequence[Scenario],
    *,
    config: Optional[ProjectionConfig] = None,
) -> ValidationResult:
    """
    Run all advisory checks. Never raises; returns a ValidationResult.
    """
    cfg = config or DEFAULT_CONFIG
    result = ValidationResult()

    # --- Products ---
    for p in bulk_products:
        if p.servings_per_unit <= 0:
            result.warnings.append(f"{p.name}: servings per unit is {p.servings_per_unit:g}; it will supply 0 units.")
        if bulk_margin(p) < 0:
            result.warnings.append(f"{p.name}: COGS exceeds wholesale price (negative margin).")
    for p in retail_products:
        if retail_margin(p) < 0:
            result.warnings.append(f"{p.name}: COGS exceeds wholesale price (negative margin).")

    # --- Tiers ---
    bulk_ids = {p.id for p in bulk_products}
    retail_ids = {p.id for p in retail_products}
    for t in tiers:
        dangling = [i for i in t.bulk_product_ids if i not in bulk_ids]
        dangling += [i for i in t.retail_product_ids if i not in retail_ids]
        if dangling:
            result.warnings.append(f"{t.label}: unknown product ids {dangling} are ignored.")
        if not any(i in bulk_ids for i in t.bulk_product_ids):
            result.warnings.append(f"{t.label}: no bulk product selected; bulk revenue is 0.")

    if len(tiers) < len(cfg.cohort_roles) and not any(t.role is not None for t in tiers):
        result.warnings.append(
            f"Only {len(tiers)} tier(s) defined; missing cohorts contribute no revenue."
        )

    # --- Scenarios ---
    for s in scenarios:
        msg = check_scenario_mix(s, config=cfg)
        if msg:
            result.warnings.append(msg)

    dup_names = [name for name, n in Counter(s.name for s in scenarios).items() if n > 1]
    if dup_names:
        result.warnings.append(f"Duplicate scenario names {dup_names}; chart series will collide.")

    if len(scenarios) > cfg.max_scenarios:
        result.warnings.append(
            f"{len(scenarios)} scenarios defined; the dashboard shows at most {cfg.max_scenarios}."
        )

    return result
