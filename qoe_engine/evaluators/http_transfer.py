"""
HTTP/FTP transfer evaluator.

Scores the transfer success ratio and the download/upload throughput
distribution (average, 10th and 90th percentile, in Mbps).
"""

import logging

from ..models import HttpSamples, HttpScore
from ..utils.stats import percentile, ratio, safe_average
from .base_evaluator import BaseEvaluator

logger = logging.getLogger(__name__)


class HttpTransferEvaluator(BaseEvaluator):
    """
    Data transfer evaluator.

    A single success ratio is scored for both directions: the download
    ratio when downloads were attempted, otherwise the upload ratio.
    """

    domain = "http"

    def evaluate(self, samples: HttpSamples) -> HttpScore:
        dl, ul = samples.dl, samples.ul
        logger.debug(
            f"HTTP input: dl={dl.completed}/{dl.requests} ({len(dl.throughputs)} samples) "
            f"ul={ul.completed}/{ul.requests} ({len(ul.throughputs)} samples)"
        )

        dl_success = ratio(dl.completed, dl.requests)
        ul_success = ratio(ul.completed, ul.requests)
        statistics = {
            "success_ratio": dl_success if dl_success is not None else ul_success,
            "dl_avg": safe_average(dl.throughputs),
            "dl_p10": percentile(dl.throughputs, 0.1),
            "dl_p90": percentile(dl.throughputs, 0.9),
            "ul_avg": safe_average(ul.throughputs),
            "ul_p10": percentile(ul.throughputs, 0.1),
            "ul_p90": percentile(ul.throughputs, 0.9),
        }

        result = self._aggregate(statistics)

        return HttpScore(
            score=result.score,
            applied_weight=result.applied_weight,
            dl_success=dl_success,
            dl_avg=statistics["dl_avg"],
            dl_p10=statistics["dl_p10"],
            dl_p90=statistics["dl_p90"],
            ul_success=ul_success,
            ul_avg=statistics["ul_avg"],
            ul_p10=statistics["ul_p10"],
            ul_p90=statistics["ul_p90"],
        )
