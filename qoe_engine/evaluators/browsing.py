"""
Web browsing evaluator: activity success ratio (50%) and average page load
duration in seconds (50%).
"""

import logging

from ..models import BrowsingSamples, BrowsingScore
from ..utils.stats import ratio, safe_average, to_seconds
from .base_evaluator import BaseEvaluator

logger = logging.getLogger(__name__)


class BrowsingEvaluator(BaseEvaluator):
    domain = "browsing"

    def evaluate(self, samples: BrowsingSamples) -> BrowsingScore:
        logger.debug(
            f"Browsing input: requests={samples.requests} completed={samples.completed} "
            f"durations={len(samples.durations)}"
        )

        success_ratio = ratio(samples.completed, samples.requests)
        duration_avg = safe_average(to_seconds(samples.durations))

        result = self._aggregate({"success_ratio": success_ratio, "duration_avg": duration_avg})

        return BrowsingScore(
            score=result.score,
            applied_weight=result.applied_weight,
            success_ratio=success_ratio,
            duration_avg=duration_avg,
        )
