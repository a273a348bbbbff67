"""
Coverage-aware aggregation of weighted sub-scores.

weighted_score() averages whatever was measured and records how much of the
declared weight that represents. normalize_score() then penalizes a domain
in proportion to its missing coverage before it is combined with sibling
domains, so running only the easy tests cannot look as good as running all
of them.
"""

import math
from typing import Iterable, Optional

from ..models import ScoreResult, WeightedEntry


def weighted_score(entries: Iterable[WeightedEntry]) -> ScoreResult:
    """
    Weighted mean over the entries that have a score.

    Entries with score None are excluded (not counted as zero); their
    absence shows up as a lower applied_weight.

    Examples:
        >>> weighted_score([WeightedEntry(0.5, 1.0), WeightedEntry(0.5, 0.0)])
        ScoreResult(score=0.5, applied_weight=1.0)
        >>> weighted_score([WeightedEntry(0.5, None), WeightedEntry(0.5, 0.8)])
        ScoreResult(score=0.8, applied_weight=0.5)
    """
    present = [e for e in entries if e.score is not None]
    applied_weight = sum(e.weight for e in present)

    if applied_weight == 0:
        return ScoreResult(score=None, applied_weight=0.0)

    total = sum(e.weight * e.score for e in present)
    return ScoreResult(score=total / applied_weight, applied_weight=applied_weight)


def normalize_score(result: ScoreResult, expected_weight: float) -> Optional[float]:
    """
    Rescale a domain score by the fraction of its weight that had data.

    Args:
        result: Domain score and applied weight
        expected_weight: Declared share of the domain inside its parent

    Returns:
        score * applied_weight / expected_weight, the score unchanged at
        full coverage, or None when the domain has no coverage at all
    """
    if result.score is None or result.applied_weight == 0:
        return None
    # Weight tables are float sums (0.03 + 0.042 + ...), compare loosely
    if math.isclose(result.applied_weight, expected_weight, rel_tol=1e-9, abs_tol=1e-12):
        return result.score
    return result.score * (result.applied_weight / expected_weight)
