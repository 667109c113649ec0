"""Display formatters shared by the dashboard tables and KPI tiles."""

from __future__ import annotations

from core.utils import round_half_up


def fmt_compact(n: float) -> str:
    """$1.2M / $3.4K / $512."""
    if n >= 1_000_000:
        return f"${n / 1_000_000:.1f}M"
    if n >= 1_000:
        return f"${n / 1_000:.1f}K"
    return f"${round_half_up(n):,.0f}"


def fmt_full(n: float) -> str:
    """Whole-dollar amount with thousands separators."""
    return f"${round_half_up(n):,.0f}"


def fmt_pct(fraction: float) -> str:
    """Fraction to one-decimal percentage: 0.8383 -> '83.8%'."""
    return f"{round_half_up(fraction * 1000) / 10:g}%"


def fmt_count(n: float) -> str:
    """Partner count to a whole number, ties rounded up: 2.5 -> '3'."""
    return f"{int(round_half_up(n))}"
