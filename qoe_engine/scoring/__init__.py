"""
Score aggregation for the QoE engine.

The calculator itself lives in qoe_engine.scoring.engine; it is not
imported here because the evaluators depend on this package.
"""

from .aggregator import normalize_score, weighted_score
from .rating import classify_score, format_percent

__all__ = [
    "weighted_score",
    "normalize_score",
    "classify_score",
    "format_percent",
]
