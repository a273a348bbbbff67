"""
QoE scoring engine: turns voice and data measurement samples into a
coverage-aware Quality-of-Experience score tree.
"""

from .__version__ import __version__
from .accumulator import SampleAccumulator
from .config import Config, get_config
from .models import MetricsSnapshot, ScoreResult, ScoreTree, Threshold, WeightedEntry
from .scoring.engine import QoEScoreCalculator, compute_scores
from .snapshot import score_tree_to_dict, snapshot_from_dict

__all__ = [
    "__version__",
    "Config",
    "get_config",
    "MetricsSnapshot",
    "ScoreResult",
    "ScoreTree",
    "Threshold",
    "WeightedEntry",
    "QoEScoreCalculator",
    "compute_scores",
    "SampleAccumulator",
    "snapshot_from_dict",
    "score_tree_to_dict",
]
