"""
Data model for the QoE scoring engine.

Sample sets are frozen dataclasses holding counters and tuples of samples.
Every field has a default, so a domain that was never measured is an empty
sample set rather than a missing key. Score results are recomputed on each
call and are never the source of truth.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


# =============================================================================
# Sample sets (engine input)
# =============================================================================


@dataclass(frozen=True)
class CallEndReason:
    """Cause reported by the telephony stack when a call ended or failed."""

    code: Optional[int] = None
    label: Optional[str] = None
    source: str = "native"


@dataclass(frozen=True)
class VoiceSamples:
    """
    Voice call counters.

    Attributes:
        attempts: Call attempts
        setup_ok: Successful call setups
        completed: Calls that ended normally
        dropped: Calls that were dropped after being answered
        setup_times: Call setup times in milliseconds
        mos_samples: Voice MOS samples (1.0 - 5.0)
        reasons: Call end/failure reasons (display only)
    """

    attempts: float = 0
    setup_ok: float = 0
    completed: float = 0
    dropped: float = 0
    setup_times: Tuple[float, ...] = ()
    mos_samples: Tuple[float, ...] = ()
    reasons: Tuple[CallEndReason, ...] = ()


@dataclass(frozen=True)
class TransferSamples:
    """One transfer direction (throughputs in Mbps)."""

    requests: float = 0
    completed: float = 0
    throughputs: Tuple[float, ...] = ()


@dataclass(frozen=True)
class HttpSamples:
    dl: TransferSamples = field(default_factory=TransferSamples)
    ul: TransferSamples = field(default_factory=TransferSamples)


@dataclass(frozen=True)
class BrowsingSamples:
    """Page loads (durations and DNS times in ms, throughputs in Kbps)."""

    requests: float = 0
    completed: float = 0
    durations: Tuple[float, ...] = ()
    dns_resolution_times: Tuple[float, ...] = ()
    throughputs: Tuple[float, ...] = ()


@dataclass(frozen=True)
class StreamingSamples:
    """Video sessions (setup times in ms, MOS 1.0 - 5.0, throughputs in Kbps)."""

    requests: float = 0
    completed: float = 0
    mos_samples: Tuple[float, ...] = ()
    setup_times: Tuple[float, ...] = ()
    throughputs: Tuple[float, ...] = ()
    buffering_counts: Tuple[float, ...] = ()
    resolutions: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SocialSamples:
    """Social API interactions (durations in ms, throughputs in Kbps)."""

    requests: float = 0
    completed: float = 0
    durations: Tuple[float, ...] = ()
    throughputs: Tuple[float, ...] = ()


@dataclass(frozen=True)
class LatencySamples:
    """Latency probes (interactivity scores 0 - 100)."""

    requests: float = 0
    completed: float = 0
    scores: Tuple[float, ...] = ()


@dataclass(frozen=True)
class DataSamples:
    browsing: BrowsingSamples = field(default_factory=BrowsingSamples)
    streaming: StreamingSamples = field(default_factory=StreamingSamples)
    http: HttpSamples = field(default_factory=HttpSamples)
    social: SocialSamples = field(default_factory=SocialSamples)
    latency: LatencySamples = field(default_factory=LatencySamples)


@dataclass(frozen=True)
class MetricsSnapshot:
    """Immutable view of every sample set at the time scoring was requested."""

    voice: VoiceSamples = field(default_factory=VoiceSamples)
    data: DataSamples = field(default_factory=DataSamples)


# =============================================================================
# Configuration and aggregation units
# =============================================================================


@dataclass(frozen=True)
class Threshold:
    """
    Linear scoring bounds for one sub-metric.

    Attributes:
        good: Raw value mapped to 1.0
        bad: Raw value mapped to 0.0
        higher_is_better: Direction of improvement
    """

    good: float
    bad: float
    higher_is_better: bool


@dataclass(frozen=True)
class WeightedEntry:
    weight: float
    score: Optional[float]


@dataclass(frozen=True)
class ScoreResult:
    """
    Aggregated score plus the weight that actually had data.

    Attributes:
        score: Weighted mean in [0, 1], or None when nothing was measured
        applied_weight: Sum of the weights of the entries that had a score
    """

    score: Optional[float]
    applied_weight: float


# =============================================================================
# Domain results (engine output)
# =============================================================================


@dataclass(frozen=True)
class VoiceScore(ScoreResult):
    """Voice score with its diagnostics (cst_avg in ms)."""

    cssr: Optional[float] = None
    cdr: Optional[float] = None
    cst_avg: Optional[float] = None
    cst_over_10: Optional[float] = None
    mos_avg: Optional[float] = None
    mos_under_16: Optional[float] = None


@dataclass(frozen=True)
class HttpScore(ScoreResult):
    dl_success: Optional[float] = None
    dl_avg: Optional[float] = None
    dl_p10: Optional[float] = None
    dl_p90: Optional[float] = None
    ul_success: Optional[float] = None
    ul_avg: Optional[float] = None
    ul_p10: Optional[float] = None
    ul_p90: Optional[float] = None


@dataclass(frozen=True)
class BrowsingScore(ScoreResult):
    success_ratio: Optional[float] = None
    duration_avg: Optional[float] = None


@dataclass(frozen=True)
class StreamingScore(ScoreResult):
    success_ratio: Optional[float] = None
    mos_avg: Optional[float] = None
    mos_under_38: Optional[float] = None
    setup_avg: Optional[float] = None
    setup_over_5: Optional[float] = None


@dataclass(frozen=True)
class SocialScore(ScoreResult):
    success_ratio: Optional[float] = None
    duration_avg: Optional[float] = None
    duration_over_5: Optional[float] = None


@dataclass(frozen=True)
class LatencyScore(ScoreResult):
    success_ratio: Optional[float] = None
    avg_score: Optional[float] = None


@dataclass(frozen=True)
class ScoreTree:
    """
    Complete scoring result for one snapshot.

    Attributes:
        voice: Voice score (not rescaled by coverage)
        http: HTTP/FTP transfer score
        browsing: Web browsing score
        streaming: Video streaming score
        social: Social media score
        latency: Latency and interactivity score
        data: Coverage-adjusted combination of the five data domains
        overall: Combination of voice and data
    """

    voice: VoiceScore
    http: HttpScore
    browsing: BrowsingScore
    streaming: StreamingScore
    social: SocialScore
    latency: LatencyScore
    data: ScoreResult
    overall: ScoreResult
