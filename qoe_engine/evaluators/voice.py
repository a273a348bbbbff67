"""
Voice evaluator.

Scores call setup success, call drops, voice quality (MOS) and call setup
time from the voice counters.

Sub-metrics and weights (QoE calculator table):
    CSSR                      25%
    CDR                       25%
    MOS average               15%
    MOS < 1.6 ratio           10%
    Call setup time           15%
    Call setup time > 10s     10%
"""

import logging

from ..models import VoiceSamples, VoiceScore
from ..utils.stats import fraction_above, fraction_below, ratio, safe_average
from .base_evaluator import BaseEvaluator

logger = logging.getLogger(__name__)

# MOS below this value is considered unusable speech quality
LOW_MOS_CUTOFF = 1.6

# Setup times above this value (ms) count as slow setups
SLOW_SETUP_MS = 10_000


class VoiceEvaluator(BaseEvaluator):
    """
    Voice call quality evaluator.

    CDR is computed over answered calls (completed + dropped), so a session
    where every answered call dropped still yields CDR = 1.0 instead of a
    division by zero.

    Example:
        evaluator = VoiceEvaluator(config)
        result = evaluator.evaluate(snapshot.voice)
        print(result.cssr, result.score)
    """

    domain = "voice"

    def evaluate(self, samples: VoiceSamples) -> VoiceScore:
        logger.debug(
            f"Voice input: attempts={samples.attempts} setup_ok={samples.setup_ok} "
            f"completed={samples.completed} dropped={samples.dropped} "
            f"setup_times={len(samples.setup_times)} mos_samples={len(samples.mos_samples)}"
        )

        cssr = ratio(samples.setup_ok, samples.attempts)
        cdr = ratio(samples.dropped, samples.completed + samples.dropped)
        cst_avg = safe_average(samples.setup_times)
        cst_over_10 = fraction_above(samples.setup_times, SLOW_SETUP_MS)
        mos_avg = safe_average(samples.mos_samples)
        mos_under_16 = fraction_below(samples.mos_samples, LOW_MOS_CUTOFF)

        logger.debug(f"Voice statistics: cssr={cssr} cdr={cdr} cst_avg={cst_avg} mos_avg={mos_avg}")

        result = self._aggregate(
            {
                "cssr": cssr,
                "cdr": cdr,
                "mos_avg": mos_avg,
                "mos_under_16": mos_under_16,
                # Raw ms average against the configured bounds; no unit conversion
                "cst_avg": cst_avg,
                "cst_over_10": cst_over_10,
            }
        )

        return VoiceScore(
            score=result.score,
            applied_weight=result.applied_weight,
            cssr=cssr,
            cdr=cdr,
            cst_avg=cst_avg,
            cst_over_10=cst_over_10,
            mos_avg=mos_avg,
            mos_under_16=mos_under_16,
        )
