"""
Social media evaluator: success ratio, average interaction duration and
share of interactions slower than 5 seconds.
"""

import logging

from ..models import SocialSamples, SocialScore
from ..utils.stats import fraction_above, ratio, safe_average, to_seconds
from .base_evaluator import BaseEvaluator

logger = logging.getLogger(__name__)

SLOW_ACTIVITY_MS = 5_000


class SocialEvaluator(BaseEvaluator):
    domain = "social"

    def evaluate(self, samples: SocialSamples) -> SocialScore:
        logger.debug(
            f"Social input: requests={samples.requests} completed={samples.completed} "
            f"durations={len(samples.durations)}"
        )

        success_ratio = ratio(samples.completed, samples.requests)
        duration_avg = safe_average(to_seconds(samples.durations))
        duration_over_5 = fraction_above(samples.durations, SLOW_ACTIVITY_MS)

        result = self._aggregate(
            {
                "success_ratio": success_ratio,
                "duration_avg": duration_avg,
                "duration_over_5": duration_over_5,
            }
        )

        return SocialScore(
            score=result.score,
            applied_weight=result.applied_weight,
            success_ratio=success_ratio,
            duration_avg=duration_avg,
            duration_over_5=duration_over_5,
        )
