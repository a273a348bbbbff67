"""
Shared utilities module for the QoE evaluators.

This module provides the numeric primitives used across every evaluator
so that all domains derive their statistics the same way.
"""

from .stats import fraction_above, fraction_below, percentile, ratio, safe_average, score_linear, to_seconds

__all__ = [
    "ratio",
    "safe_average",
    "percentile",
    "score_linear",
    "fraction_above",
    "fraction_below",
    "to_seconds",
]
