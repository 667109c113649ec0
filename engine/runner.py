"""
Batch runner — projects every scenario against the same products and tiers.

The dashboard calls this on every edit; the work is a few hundred cohort
evaluations, so nothing is cached here.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import List, Optional, Sequence

import pandas as pd

from core.config import ProjectionConfig
from core.schema import BulkProduct, RetailProduct, Scenario, Tier

from .projector import MonthlyResult, project_scenario


@dataclass(frozen=True)
class ScenarioProjection:
    scenario: Scenario
    months: List[MonthlyResult]

    @property
    def final(self) -> Optional[MonthlyResult]:
        return self.months[-1] if self.months else None

    def month(self, m: int) -> Optional[MonthlyResult]:
        """1-based month lookup; None beyond the horizon."""
        if 1 <= m <= len(self.months):
            return self.months[m - 1]
        return None

    def to_dataframe(self) -> pd.DataFrame:
        df = pd.DataFrame([asdict(r) for r in self.months])
        df.insert(0, "scenario", self.scenario.name)
        return df


def run_projections(
    scenarios: Sequence[Scenario],
    tiers: Sequence[Tier],
    bulk_catalog: Sequence[BulkProduct],
    retail_catalog: Sequence[RetailProduct],
    *,
    config: Optional[ProjectionConfig] = None,
) -> List[ScenarioProjection]:
    """Project each scenario in order. Returns one ScenarioProjection per scenario."""
    return [
        ScenarioProjection(
            scenario=s,
            months=project_scenario(s, tiers, bulk_catalog, retail_catalog, config=config),
        )
        for s in scenarios
    ]


def projection_frame(projections: Sequence[ScenarioProjection]) -> pd.DataFrame:
    """
    Long table of all projections: one row per (scenario, month).
    Columns: scenario + every MonthlyResult field.
    """
    frames = [p.to_dataframe() for p in projections]
    if not frames:
        return pd.DataFrame(columns=["scenario", "month", "label"])
    return pd.concat(frames, ignore_index=True)
