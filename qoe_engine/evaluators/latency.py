"""
Latency and interactivity evaluator.

Each latency probe records an interactivity score (0-100). A probe is
usable when its score is above 25; the success ratio is the fraction of
usable probes.
"""

import logging

from ..models import LatencySamples, LatencyScore
from ..utils.stats import fraction_above, ratio, safe_average
from .base_evaluator import BaseEvaluator

logger = logging.getLogger(__name__)

USABLE_SCORE_CUTOFF = 25


class LatencyEvaluator(BaseEvaluator):
    domain = "latency"

    def evaluate(self, samples: LatencySamples) -> LatencyScore:
        logger.debug(
            f"Latency input: requests={samples.requests} completed={samples.completed} "
            f"scores={len(samples.scores)}"
        )

        success_ratio = fraction_above(samples.scores, USABLE_SCORE_CUTOFF)
        if success_ratio is None:
            # No score recorded yet: fall back to the probe counters
            success_ratio = ratio(samples.completed, samples.requests)
        avg_score = safe_average(samples.scores)

        result = self._aggregate({"success_ratio": success_ratio, "avg_score": avg_score})

        return LatencyScore(
            score=result.score,
            applied_weight=result.applied_weight,
            success_ratio=success_ratio,
            avg_score=avg_score,
        )
