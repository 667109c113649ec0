"""
Chart pivot — one record per month, one field per (scenario, metric).

Keys are "{scenario name}_{suffix}", e.g. "Base Case_rev". Scenario names are
the join key, so two scenarios with the same name overwrite each other here.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

import pandas as pd

from engine.runner import ScenarioProjection

# suffix -> MonthlyResult field
SERIES_FIELDS: Dict[str, str] = {
    "rev": "total_revenue",
    "profit": "total_profit",
    "partners": "total_active",
    "margin": "margin_pct",
    "cumRev": "cumulative_revenue",
}

# chart metric tab -> suffix
METRIC_SUFFIX: Dict[str, str] = {
    "revenue": "_rev",
    "profit": "_profit",
    "partners": "_partners",
    "cumRev": "_cumRev",
}


def series_key(scenario_name: str, suffix: str) -> str:
    return f"{scenario_name}_{suffix.lstrip('_')}"


def build_chart_data(
    projections: Sequence[ScenarioProjection],
    *,
    horizon_months: int = 12,
) -> List[dict]:
    """Pivot projections into chart points: month, label, plus one key per series."""
    points = []
    for i in range(horizon_months):
        point = {"month": i + 1, "label": f"M{i + 1}"}
        for proj in projections:
            if i >= len(proj.months):
                continue
            row = proj.months[i]
            for suffix, attr in SERIES_FIELDS.items():
                point[series_key(proj.scenario.name, suffix)] = getattr(row, attr)
        points.append(point)
    return points


def chart_frame(
    projections: Sequence[ScenarioProjection],
    *,
    horizon_months: int = 12,
) -> pd.DataFrame:
    return pd.DataFrame(build_chart_data(projections, horizon_months=horizon_months))


def metric_columns(projections: Sequence[ScenarioProjection], metric: str) -> List[str]:
    """Series keys for one chart metric tab, in scenario order."""
    suffix = METRIC_SUFFIX[metric]
    return [series_key(p.scenario.name, suffix) for p in projections]
