"""
Display helpers for scores in [0, 1].
"""

import math
from typing import Optional

RATING_GOOD_MIN = 0.8
RATING_FAIR_MIN = 0.5


def format_percent(value: Optional[float]) -> str:
    """Render a score as a rounded percentage ("--" when not measured)."""
    if value is None:
        return "--"
    # Half-up rounding, 62.5 -> 63
    return f"{math.floor(value * 100 + 0.5)}%"


def classify_score(value: Optional[float]) -> str:
    """
    Band a score for dashboards.

    Returns:
        'good' (>= 0.8), 'fair' (>= 0.5), 'poor', or 'unknown' for None
    """
    if value is None:
        return "unknown"
    if value >= RATING_GOOD_MIN:
        return "good"
    if value >= RATING_FAIR_MIN:
        return "fair"
    return "poor"
