"""Rounding used for scores and displayed percentages."""

import math
from typing import Union


def round_half_up(value: float) -> Union[int, float]:
    """
    Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2).

    The built-in round() rounds halves to even, which would move scores
    that sit exactly on a half point. Infinities and NaN come back
    unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def percent_text(value: float, decimals: int = 0) -> str:
    """
    Text for a percentage inside a sentence: '67', '60.0', '∞' or 'NaN'.

    Whole percentages round half up; other precisions use plain
    fixed-point formatting.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    if decimals == 0:
        return str(round_half_up(value))
    return f"{value:.{decimals}f}"
