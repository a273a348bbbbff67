"""
Video streaming evaluator.

Sub-metrics (share of the streaming domain):
    Success ratio                 50%
    Video quality MOS             15%
    Video MOS < 3.8 ratio         10%
    Video access time [s]         15%
    Video access time > 5s ratio  10%
"""

import logging

from ..models import StreamingSamples, StreamingScore
from ..utils.stats import fraction_above, fraction_below, ratio, safe_average, to_seconds
from .base_evaluator import BaseEvaluator

logger = logging.getLogger(__name__)

# Video MOS below this value counts as a degraded session
LOW_VIDEO_MOS_CUTOFF = 3.8

# Video access times above this value (ms) count as slow starts
SLOW_ACCESS_MS = 5_000


class StreamingEvaluator(BaseEvaluator):
    domain = "streaming"

    def evaluate(self, samples: StreamingSamples) -> StreamingScore:
        logger.debug(
            f"Streaming input: requests={samples.requests} completed={samples.completed} "
            f"mos_samples={len(samples.mos_samples)} setup_times={len(samples.setup_times)}"
        )

        success_ratio = ratio(samples.completed, samples.requests)
        mos_avg = safe_average(samples.mos_samples)
        mos_under_38 = fraction_below(samples.mos_samples, LOW_VIDEO_MOS_CUTOFF)
        setup_avg = safe_average(to_seconds(samples.setup_times))
        setup_over_5 = fraction_above(samples.setup_times, SLOW_ACCESS_MS)

        logger.debug(
            f"Streaming statistics: success_ratio={success_ratio} mos_avg={mos_avg} "
            f"setup_avg={setup_avg} setup_over_5={setup_over_5}"
        )

        result = self._aggregate(
            {
                "success_ratio": success_ratio,
                "mos_avg": mos_avg,
                "mos_under_38": mos_under_38,
                "setup_avg": setup_avg,
                "setup_over_5": setup_over_5,
            }
        )

        return StreamingScore(
            score=result.score,
            applied_weight=result.applied_weight,
            success_ratio=success_ratio,
            mos_avg=mos_avg,
            mos_under_38=mos_under_38,
            setup_avg=setup_avg,
            setup_over_5=setup_over_5,
        )
