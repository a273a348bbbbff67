"""
Per-domain metric evaluators
"""

from .base_evaluator import BaseEvaluator
from .browsing import BrowsingEvaluator
from .http_transfer import HttpTransferEvaluator
from .latency import LatencyEvaluator
from .social import SocialEvaluator
from .streaming import StreamingEvaluator
from .voice import VoiceEvaluator

__all__ = [
    "BaseEvaluator",
    "VoiceEvaluator",
    "HttpTransferEvaluator",
    "BrowsingEvaluator",
    "StreamingEvaluator",
    "SocialEvaluator",
    "LatencyEvaluator",
]
