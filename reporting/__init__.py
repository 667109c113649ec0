"""
Reporting — chart pivot, headline KPIs, scenario comparison, display formatting.
"""

from .chart import METRIC_SUFFIX, build_chart_data, chart_frame, metric_columns, series_key
from .kpis import (
    HeadlineKpis,
    compute_headline_kpis,
    revenue_split,
    scenario_summary,
    tier_economics_frame,
)
from .formatting import fmt_compact, fmt_count, fmt_full, fmt_pct

__all__ = [
    "METRIC_SUFFIX",
    "build_chart_data",
    "chart_frame",
    "metric_columns",
    "series_key",
    "HeadlineKpis",
    "compute_headline_kpis",
    "revenue_split",
    "scenario_summary",
    "tier_economics_frame",
    "fmt_compact",
    "fmt_count",
    "fmt_full",
    "fmt_pct",
]
