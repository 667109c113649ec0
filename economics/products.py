"""
Per-unit product economics.

Pure arithmetic, no validation: a cogs above the wholesale price simply
produces a negative margin.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from core.schema import BulkProduct, RetailProduct
from core.utils import safe_div


def bulk_margin(product: BulkProduct) -> float:
    return product.wholesale_price - product.cogs


def bulk_margin_pct(product: BulkProduct) -> float:
    """Margin as a fraction of wholesale price; 0 when the price is 0."""
    if product.wholesale_price > 0:
        return bulk_margin(product) / product.wholesale_price
    return 0.0


def retail_margin(product: RetailProduct) -> float:
    return product.wholesale_price - product.cogs


def retail_margin_pct(product: RetailProduct) -> float:
    if product.wholesale_price > 0:
        return retail_margin(product) / product.wholesale_price
    return 0.0


def retail_markup(product: RetailProduct) -> float:
    """What the partner keeps per pouch when reselling at retail price."""
    return product.retail_price - product.wholesale_price


def cost_per_serving(product: BulkProduct) -> float:
    return safe_div(product.wholesale_price, product.servings_per_unit)


def product_economics_frame(
    bulk_products: Sequence[BulkProduct],
    retail_products: Sequence[RetailProduct],
) -> pd.DataFrame:
    """
    One row per catalog product with its margin columns.

    Columns: kind, id, name, wholesale_price, cogs, margin, margin_pct,
    cost_per_serving (bulk only), retail_markup (retail only).
    """
    rows = []
    for p in bulk_products:
        rows.append({
            "kind": "bulk",
            "id": p.id,
            "name": p.name,
            "wholesale_price": p.wholesale_price,
            "cogs": p.cogs,
            "margin": bulk_margin(p),
            "margin_pct": bulk_margin_pct(p),
            "cost_per_serving": cost_per_serving(p),
            "retail_markup": None,
        })
    for p in retail_products:
        rows.append({
            "kind": "retail",
            "id": p.id,
            "name": p.name,
            "wholesale_price": p.wholesale_price,
            "cogs": p.cogs,
            "margin": retail_margin(p),
            "margin_pct": retail_margin_pct(p),
            "cost_per_serving": None,
            "retail_markup": retail_markup(p),
        })
    columns = [
        "kind", "id", "name", "wholesale_price", "cogs",
        "margin", "margin_pct", "cost_per_serving", "retail_markup",
    ]
    return pd.DataFrame(rows, columns=columns)
