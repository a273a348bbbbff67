"""
Statistical utilities for deriving QoE statistics from raw samples.

This module provides the numeric primitives shared by every evaluator:
ratios, averages, percentiles and the linear threshold scorer.

Missing data is never an error here. A zero denominator, an empty sample
sequence or a sequence with no finite value resolves to None, and callers
drop the corresponding sub-metric instead of scoring it as zero.
"""

import math
from typing import Iterable, List, Optional

import numpy as np


def _finite(samples: Optional[Iterable[Optional[float]]]) -> list[float]:
    """Keep the finite numeric samples, treating None/NaN/inf as absent."""
    if samples is None:
        return []
    return [float(v) for v in samples if v is not None and math.isfinite(v)]


def ratio(numerator: Optional[float], denominator: Optional[float]) -> Optional[float]:
    """
    Divide two counters.

    The result is not clamped: inconsistent producer counters (more
    completions than requests) surface as values above 1.0.

    Examples:
        >>> ratio(5, 10)
        0.5
        >>> ratio(12, 10)
        1.2
        >>> ratio(0, 0) is None
        True
    """
    if denominator is None or numerator is None:
        return None
    if not math.isfinite(denominator) or not math.isfinite(numerator):
        return None
    if denominator <= 0:
        return None
    return numerator / denominator


def safe_average(samples: Optional[Iterable[Optional[float]]]) -> Optional[float]:
    """
    Arithmetic mean of the finite samples.

    Returns None if no finite sample is available.

    Examples:
        >>> safe_average([10, 20, 30])
        20.0
        >>> safe_average([]) is None
        True
    """
    values = _finite(samples)
    if not values:
        return None
    return float(np.mean(np.array(values)))


def percentile(samples: Optional[Iterable[Optional[float]]], p: float) -> Optional[float]:
    """
    Percentile with linear interpolation between closest ranks.

    The samples are sorted ascending, the fractional index p*(n-1) is
    computed and the value is interpolated between the floor and ceil
    elements (numpy's default "linear" method).

    Args:
        samples: Raw samples (non-finite entries are ignored)
        p: Fraction in [0, 1] (0.1 for the 10th percentile)

    Returns:
        Interpolated value, or None if there is no finite sample

    Raises:
        ValueError: If p is outside [0, 1]

    Examples:
        >>> percentile([10, 20, 30, 40, 50], 0.5)
        30.0
        >>> percentile([10, 20], 0.25)
        12.5
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Percentile fraction must be within [0, 1], got {p}")

    values = _finite(samples)
    if not values:
        return None
    return float(np.percentile(np.array(values), p * 100.0))


def score_linear(value: float, good: float, bad: float, higher_is_better: bool) -> float:
    """
    Map a raw value onto [0, 1] between its bad and good thresholds.

    good maps to 1.0 and bad maps to 0.0; anything beyond either bound is
    clamped. With higher_is_better=False the interval is walked in reverse,
    so lower raw values score higher.

    This function is total. None propagation happens one level up, where
    a missing statistic simply produces no weighted entry.

    Examples:
        >>> score_linear(0.9, good=1.0, bad=0.85, higher_is_better=True)
        0.333...
        >>> score_linear(0.0, good=0.0, bad=0.1, higher_is_better=False)
        1.0
    """
    if good == bad:
        # Degenerate threshold: either the value reaches "good" or it doesn't
        if higher_is_better:
            return 1.0 if value >= good else 0.0
        return 1.0 if value <= good else 0.0

    if higher_is_better:
        score = (value - bad) / (good - bad)
    else:
        score = (bad - value) / (bad - good)

    return max(0.0, min(1.0, score))


def fraction_above(samples: Optional[Iterable[Optional[float]]], cutoff: float) -> Optional[float]:
    """Fraction of finite samples strictly greater than cutoff (None if no sample)."""
    values = _finite(samples)
    return ratio(sum(1 for v in values if v > cutoff), len(values))


def fraction_below(samples: Optional[Iterable[Optional[float]]], cutoff: float) -> Optional[float]:
    """Fraction of finite samples strictly lower than cutoff (None if no sample)."""
    values = _finite(samples)
    return ratio(sum(1 for v in values if v < cutoff), len(values))


def to_seconds(samples_ms: Optional[Iterable[Optional[float]]]) -> List[float]:
    """Convert millisecond samples to seconds, dropping non-finite entries."""
    return [v / 1000.0 for v in _finite(samples_ms)]
