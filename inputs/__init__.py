"""
Inputs — default catalogs, immutable edit helpers, and advisory checks.
"""

from .defaults import (
    DEFAULT_BULK_PRODUCTS,
    DEFAULT_RETAIL_PRODUCTS,
    DEFAULT_TIERS,
    DEFAULT_SCENARIOS,
    SCENARIO_COLORS,
)
from .editing import replace_at, remove_at, add_scenario
from .validators import ValidationResult, check_inputs, check_scenario_mix

__all__ = [
    "DEFAULT_BULK_PRODUCTS",
    "DEFAULT_RETAIL_PRODUCTS",
    "DEFAULT_TIERS",
    "DEFAULT_SCENARIOS",
    "SCENARIO_COLORS",
    "replace_at",
    "remove_at",
    "add_scenario",
    "ValidationResult",
    "check_inputs",
    "check_scenario_mix",
]
