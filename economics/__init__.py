"""
Unit economics — per-product margins and per-tier monthly partner economics.
"""

from .products import (
    bulk_margin,
    bulk_margin_pct,
    retail_margin,
    retail_margin_pct,
    retail_markup,
    product_economics_frame,
)
from .tiers import BulkLine, TierEconomics, compute_tier_economics, compute_all_tier_economics

__all__ = [
    "bulk_margin",
    "bulk_margin_pct",
    "retail_margin",
    "retail_margin_pct",
    "retail_markup",
    "product_economics_frame",
    "BulkLine",
    "TierEconomics",
    "compute_tier_economics",
    "compute_all_tier_economics",
]
