"""
QoE Score Calculator

Turns a full metrics snapshot into the hierarchical QoE score tree
(ETSI TR 103 559 style):

    voice ─────────────────────────────────────────┐
                                                   ├─ overall (40% / 60%)
    http      (30%) ─┐                             │
    browsing  (25%) ─┤                             │
    streaming (15%) ─┼─ coverage-adjusted ── data ─┘
    latency   (15%) ─┤
    social    (15%) ─┘

Each data domain is rescaled by the fraction of its weight that had data
before the data score is computed. Voice enters the overall score as is.

The calculation is a pure function of its input: nothing is cached or
stored between calls, and the snapshot is never modified.
"""

import logging
from typing import Any, Mapping, Optional, Union

from ..config import DATA_DOMAINS, Config, get_config
from ..evaluators import (
    BrowsingEvaluator,
    HttpTransferEvaluator,
    LatencyEvaluator,
    SocialEvaluator,
    StreamingEvaluator,
    VoiceEvaluator,
)
from ..models import MetricsSnapshot, ScoreTree, WeightedEntry
from ..snapshot import snapshot_from_dict
from .aggregator import normalize_score, weighted_score

logger = logging.getLogger(__name__)


class QoEScoreCalculator:
    """
    Hierarchical QoE score calculator.

    Example:
        calculator = QoEScoreCalculator()
        tree = calculator.compute(accumulator.snapshot())
        print(f"Overall: {tree.overall.score}")
        print(f"Data coverage: {tree.data.applied_weight}")
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Args:
            config: Scoring configuration. Defaults to the packaged one.
        """
        self.config = config if config is not None else get_config()
        self.voice_evaluator = VoiceEvaluator(self.config)
        self.http_evaluator = HttpTransferEvaluator(self.config)
        self.browsing_evaluator = BrowsingEvaluator(self.config)
        self.streaming_evaluator = StreamingEvaluator(self.config)
        self.social_evaluator = SocialEvaluator(self.config)
        self.latency_evaluator = LatencyEvaluator(self.config)

    def compute(self, snapshot: Union[MetricsSnapshot, Mapping[str, Any], None]) -> ScoreTree:
        """
        Compute the full score tree for one snapshot.

        Args:
            snapshot: MetricsSnapshot, or a mapping following the camelCase
                      input contract (converted with snapshot_from_dict)

        Returns:
            ScoreTree with every domain, the data score and the overall score.
            A score is None when nothing contributed to it.
        """
        if not isinstance(snapshot, MetricsSnapshot):
            snapshot = snapshot_from_dict(snapshot)

        voice = self.voice_evaluator.evaluate(snapshot.voice)
        domains = {
            "http": self.http_evaluator.evaluate(snapshot.data.http),
            "browsing": self.browsing_evaluator.evaluate(snapshot.data.browsing),
            "streaming": self.streaming_evaluator.evaluate(snapshot.data.streaming),
            "latency": self.latency_evaluator.evaluate(snapshot.data.latency),
            "social": self.social_evaluator.evaluate(snapshot.data.social),
        }

        shares = self.config.domain_shares
        data = weighted_score(
            WeightedEntry(weight=shares[name], score=normalize_score(domains[name], shares[name]))
            for name in DATA_DOMAINS
        )

        overall_weights = self.config.overall_weights
        overall = weighted_score(
            [
                WeightedEntry(weight=overall_weights["voice"], score=voice.score),
                WeightedEntry(weight=overall_weights["data"], score=data.score),
            ]
        )

        logger.debug(
            f"Overall: voice={voice.score} data={data.score} "
            f"(applied {data.applied_weight}) -> overall={overall.score} "
            f"(applied {overall.applied_weight})"
        )

        return ScoreTree(
            voice=voice,
            http=domains["http"],
            browsing=domains["browsing"],
            streaming=domains["streaming"],
            social=domains["social"],
            latency=domains["latency"],
            data=data,
            overall=overall,
        )


def compute_scores(
    snapshot: Union[MetricsSnapshot, Mapping[str, Any], None], config: Optional[Config] = None
) -> ScoreTree:
    """Convenience wrapper: QoEScoreCalculator(config).compute(snapshot)."""
    return QoEScoreCalculator(config).compute(snapshot)
