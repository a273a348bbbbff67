"""
Producer-side sample accumulator.

Measurement components (call state tracking, page loads, transfers,
latency probes) record their outcomes here as they happen. Scoring never
reads the accumulator directly: callers take a snapshot(), which copies the
current counters into an immutable MetricsSnapshot.

Usage:
    accumulator = SampleAccumulator()
    accumulator.add_browsing_sample(request=True)
    accumulator.add_browsing_sample(completed=True, duration_ms=850)
    tree = QoEScoreCalculator().compute(accumulator.snapshot())
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .models import (
    BrowsingSamples,
    CallEndReason,
    DataSamples,
    HttpSamples,
    LatencySamples,
    MetricsSnapshot,
    SocialSamples,
    StreamingSamples,
    TransferSamples,
    VoiceSamples,
)

logger = logging.getLogger(__name__)

HTTP_DIRECTIONS = ("dl", "ul")


@dataclass
class _Counters:
    requests: int = 0
    completed: int = 0
    durations: List[float] = field(default_factory=list)
    throughputs: List[float] = field(default_factory=list)


@dataclass
class _VoiceCounters:
    attempts: int = 0
    setup_ok: int = 0
    completed: int = 0
    dropped: int = 0
    setup_times: List[float] = field(default_factory=list)
    mos_samples: List[float] = field(default_factory=list)
    reasons: List[CallEndReason] = field(default_factory=list)


@dataclass
class _StreamingCounters(_Counters):
    mos_samples: List[float] = field(default_factory=list)
    setup_times: List[float] = field(default_factory=list)
    buffering_counts: List[float] = field(default_factory=list)
    resolutions: List[str] = field(default_factory=list)


@dataclass
class _BrowsingCounters(_Counters):
    dns_resolution_times: List[float] = field(default_factory=list)


@dataclass
class _LatencyCounters(_Counters):
    scores: List[float] = field(default_factory=list)


class SampleAccumulator:
    """
    Mutable counters for one measurement session.

    Every add_* method takes keyword flags mirroring a probe event:
    request=True when a test starts, completed=True when it succeeds,
    plus the measured values. A single call may carry both flags.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Discard every recorded sample."""
        self._voice = _VoiceCounters()
        self._browsing = _BrowsingCounters()
        self._streaming = _StreamingCounters()
        self._http = {direction: _Counters() for direction in HTTP_DIRECTIONS}
        self._social = _Counters()
        self._latency = _LatencyCounters()
        logger.debug("Sample accumulator reset")

    def add_voice_sample(
        self,
        attempt: bool = False,
        setup_successful: bool = False,
        setup_time_ms: Optional[float] = None,
        call_completed: bool = False,
        dropped: bool = False,
        mos: Optional[float] = None,
        reason_code: Optional[int] = None,
        reason_label: Optional[str] = None,
        reason_source: Optional[str] = None,
    ) -> None:
        """
        Record a call state transition.

        Args:
            attempt: A call attempt started (ringing / dialing)
            setup_successful: The call was answered
            setup_time_ms: Time from attempt to answer
            call_completed: The call ended normally
            dropped: The call was dropped after being answered
            mos: Estimated voice MOS for the call
            reason_code: Cause code reported by the telephony stack
            reason_label: Human-readable cause
            reason_source: Origin of the cause ("native" by default)
        """
        voice = self._voice
        if attempt:
            voice.attempts += 1
        if setup_successful:
            voice.setup_ok += 1
        if setup_time_ms is not None:
            voice.setup_times.append(setup_time_ms)
        if call_completed:
            voice.completed += 1
        if dropped:
            voice.dropped += 1
        if mos is not None:
            voice.mos_samples.append(mos)
        if reason_code is not None or reason_label:
            voice.reasons.append(CallEndReason(code=reason_code, label=reason_label, source=reason_source or "native"))

    def add_browsing_sample(
        self,
        request: bool = False,
        completed: bool = False,
        duration_ms: Optional[float] = None,
        dns_resolution_time_ms: Optional[float] = None,
        throughput_kbps: Optional[float] = None,
    ) -> None:
        browsing = self._browsing
        self._count(browsing, request, completed)
        if duration_ms is not None:
            browsing.durations.append(duration_ms)
        if dns_resolution_time_ms is not None:
            browsing.dns_resolution_times.append(dns_resolution_time_ms)
        if throughput_kbps is not None:
            browsing.throughputs.append(throughput_kbps)

    def add_streaming_sample(
        self,
        request: bool = False,
        completed: bool = False,
        setup_time_ms: Optional[float] = None,
        mos: Optional[float] = None,
        throughput_kbps: Optional[float] = None,
        buffering_count: Optional[int] = None,
        resolution: Optional[str] = None,
    ) -> None:
        streaming = self._streaming
        self._count(streaming, request, completed)
        if setup_time_ms is not None:
            streaming.setup_times.append(setup_time_ms)
        if mos is not None:
            streaming.mos_samples.append(mos)
        if throughput_kbps is not None:
            streaming.throughputs.append(throughput_kbps)
        if buffering_count is not None:
            streaming.buffering_counts.append(buffering_count)
        if resolution:
            streaming.resolutions.append(resolution)

    def add_http_sample(
        self,
        direction: str,
        request: bool = False,
        completed: bool = False,
        throughput_mbps: Optional[float] = None,
    ) -> None:
        """
        Record an HTTP transfer event.

        Raises:
            ValueError: If direction is not "dl" or "ul"
        """
        if direction not in HTTP_DIRECTIONS:
            raise ValueError(f"Unknown transfer direction: {direction!r} (expected 'dl' or 'ul')")
        transfer = self._http[direction]
        self._count(transfer, request, completed)
        if throughput_mbps is not None:
            transfer.throughputs.append(throughput_mbps)

    def add_social_sample(
        self,
        request: bool = False,
        completed: bool = False,
        duration_ms: Optional[float] = None,
        throughput_kbps: Optional[float] = None,
    ) -> None:
        social = self._social
        self._count(social, request, completed)
        if duration_ms is not None:
            social.durations.append(duration_ms)
        if throughput_kbps is not None:
            social.throughputs.append(throughput_kbps)

    def add_latency_sample(
        self,
        request: bool = False,
        completed: bool = False,
        score: Optional[float] = None,
    ) -> None:
        latency = self._latency
        self._count(latency, request, completed)
        if score is not None:
            latency.scores.append(score)

    @staticmethod
    def _count(counters: _Counters, request: bool, completed: bool) -> None:
        if request:
            counters.requests += 1
        if completed:
            counters.completed += 1

    def snapshot(self) -> MetricsSnapshot:
        """
        Copy the current counters into an immutable snapshot.

        Samples recorded after this call never show up in the returned
        snapshot.
        """
        voice = self._voice
        browsing = self._browsing
        streaming = self._streaming
        social = self._social
        latency = self._latency

        return MetricsSnapshot(
            voice=VoiceSamples(
                attempts=voice.attempts,
                setup_ok=voice.setup_ok,
                completed=voice.completed,
                dropped=voice.dropped,
                setup_times=tuple(voice.setup_times),
                mos_samples=tuple(voice.mos_samples),
                reasons=tuple(voice.reasons),
            ),
            data=DataSamples(
                browsing=BrowsingSamples(
                    requests=browsing.requests,
                    completed=browsing.completed,
                    durations=tuple(browsing.durations),
                    dns_resolution_times=tuple(browsing.dns_resolution_times),
                    throughputs=tuple(browsing.throughputs),
                ),
                streaming=StreamingSamples(
                    requests=streaming.requests,
                    completed=streaming.completed,
                    mos_samples=tuple(streaming.mos_samples),
                    setup_times=tuple(streaming.setup_times),
                    throughputs=tuple(streaming.throughputs),
                    buffering_counts=tuple(streaming.buffering_counts),
                    resolutions=tuple(streaming.resolutions),
                ),
                http=HttpSamples(
                    dl=TransferSamples(
                        requests=self._http["dl"].requests,
                        completed=self._http["dl"].completed,
                        throughputs=tuple(self._http["dl"].throughputs),
                    ),
                    ul=TransferSamples(
                        requests=self._http["ul"].requests,
                        completed=self._http["ul"].completed,
                        throughputs=tuple(self._http["ul"].throughputs),
                    ),
                ),
                social=SocialSamples(
                    requests=social.requests,
                    completed=social.completed,
                    durations=tuple(social.durations),
                    throughputs=tuple(social.throughputs),
                ),
                latency=LatencySamples(
                    requests=latency.requests,
                    completed=latency.completed,
                    scores=tuple(latency.scores),
                ),
            ),
        )
