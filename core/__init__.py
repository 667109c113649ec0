"""
Core package — data records, configuration, and shared numeric utilities.
No business logic lives here.
"""

from .schema import BulkProduct, RetailProduct, Tier, TierRole, Scenario, COHORT_ROLES
from .config import ProjectionConfig, DEFAULT_CONFIG, get_log_level
from .utils import round_half_up, safe_div
from .logging_setup import configure_logging

__all__ = [
    "BulkProduct",
    "RetailProduct",
    "Tier",
    "TierRole",
    "Scenario",
    "COHORT_ROLES",
    "ProjectionConfig",
    "DEFAULT_CONFIG",
    "get_log_level",
    "round_half_up",
    "safe_div",
    "configure_logging",
]
