from __future__ import annotations

from typing import Union

import numpy as np

Number = Union[int, float]


def round_half_up(x, decimals: int = 0):
    """
    Half-up rounding: floor(x * 10^d + 0.5) / 10^d.

    Ties go toward +inf (2.5 -> 3, -2.5 -> -2), unlike Python's round()
    which rounds ties to even. Scalars in, float out; arrays in, array out.
    """
    m = 10 ** decimals
    arr = np.floor(np.asarray(x, dtype=float) * m + 0.5) / m
    if arr.ndim == 0:
        return float(arr)
    return arr


def safe_div(numerator: Number, denominator: Number) -> float:
    """numerator / denominator, or 0.0 when the denominator is zero."""
    if denominator == 0:
        return 0.0
    return numerator / denominator
