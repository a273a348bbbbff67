"""
Base evaluator class providing interface consistency for all evaluators.

All evaluators inherit from BaseEvaluator: it binds a domain to its weight
and threshold tables and turns derived statistics into a ScoreResult.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from ..config import Config, get_config
from ..models import ScoreResult, WeightedEntry
from ..scoring.aggregator import weighted_score
from ..utils.stats import score_linear

logger = logging.getLogger(__name__)


class BaseEvaluator(ABC):
    """
    Abstract base class for the per-domain metric evaluators.

    The evaluation flow:
    1. evaluate(): derive domain statistics from a sample set
    2. _score_metrics(): score each statistic against its threshold
    3. _aggregate(): weight the scored statistics into a ScoreResult

    A statistic that is None (no attempt, no sample) yields no weighted
    entry, so it neither lowers nor raises the domain score; it only lowers
    the applied weight.
    """

    #: Key of the domain in the weight and threshold tables
    domain: str = ""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else get_config()
        self.weights: Mapping[str, float] = self.config.domain_weights(self.domain)
        self.thresholds = self.config.thresholds(self.domain)

    @abstractmethod
    def evaluate(self, samples: Any) -> ScoreResult:
        """
        Score one domain sample set.

        Args:
            samples: Frozen sample set of the domain

        Returns:
            Domain score result with its diagnostic statistics
        """
        pass

    def _score_metrics(self, statistics: Mapping[str, Optional[float]]) -> Dict[str, Optional[float]]:
        """
        Score each statistic against its configured threshold.

        Args:
            statistics: Metric name -> derived value (None when not measured)

        Returns:
            Metric name -> sub-score in [0, 1] (None when not measured)
        """
        scores: Dict[str, Optional[float]] = {}
        for metric, value in statistics.items():
            if value is None:
                scores[metric] = None
                continue
            threshold = self.thresholds[metric]
            scores[metric] = score_linear(value, threshold.good, threshold.bad, threshold.higher_is_better)
        return scores

    def _aggregate(self, statistics: Mapping[str, Optional[float]]) -> ScoreResult:
        """Score statistics and combine them with the domain weights."""
        scores = self._score_metrics(statistics)
        entries = [WeightedEntry(weight=self.weights[metric], score=score) for metric, score in scores.items()]
        result = weighted_score(entries)

        logger.debug(
            f"{self.__class__.__name__}: sub-scores={scores} "
            f"score={result.score} applied_weight={result.applied_weight}"
        )
        return result
