"""
Projection engine — 12-month scenario fold + batch runner.
"""

from .projector import MonthlyResult, project_scenario, resolve_cohort_tiers
from .runner import ScenarioProjection, run_projections, projection_frame

__all__ = [
    "MonthlyResult",
    "project_scenario",
    "resolve_cohort_tiers",
    "ScenarioProjection",
    "run_projections",
    "projection_frame",
]
