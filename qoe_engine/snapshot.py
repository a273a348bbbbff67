"""
Conversion between the camelCase wire contract and the typed data model.

Producers and dashboards exchange plain mappings such as
``{"voice": {"attempts": 3, "setupOk": 2, ...}, "data": {...}}``. This
module turns such a mapping into a MetricsSnapshot and a ScoreTree back
into the same style of mapping. Any key may be absent: counters default
to 0 and sample lists to empty.
"""

import dataclasses
import math
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from .models import (
    BrowsingSamples,
    CallEndReason,
    DataSamples,
    HttpSamples,
    LatencySamples,
    MetricsSnapshot,
    ScoreResult,
    ScoreTree,
    SocialSamples,
    StreamingSamples,
    TransferSamples,
    VoiceSamples,
)


def _section(payload: Optional[Mapping[str, Any]], key: str) -> Mapping[str, Any]:
    if not payload:
        return {}
    value = payload.get(key)
    return value if isinstance(value, Mapping) else {}


def _counter(section: Mapping[str, Any], key: str) -> float:
    value = section.get(key)
    if value is None or isinstance(value, bool):
        return 0
    return value


def _samples(section: Mapping[str, Any], key: str) -> Tuple[Any, ...]:
    values: Optional[Iterable[Any]] = section.get(key)
    if not values:
        return ()
    return tuple(v for v in values if v is not None)


def _reason(raw: Any) -> CallEndReason:
    if isinstance(raw, Mapping):
        return CallEndReason(
            code=raw.get("code", raw.get("reasonCode")),
            label=raw.get("label", raw.get("reasonLabel")),
            source=raw.get("source", raw.get("reasonSource")) or "native",
        )
    return CallEndReason(label=str(raw))


def _transfer(section: Mapping[str, Any]) -> TransferSamples:
    return TransferSamples(
        requests=_counter(section, "requests"),
        completed=_counter(section, "completed"),
        throughputs=_samples(section, "throughputs"),
    )


def snapshot_from_dict(payload: Optional[Mapping[str, Any]]) -> MetricsSnapshot:
    """
    Build a MetricsSnapshot from the camelCase input contract.

    Args:
        payload: Mapping shaped like {"voice": {...}, "data": {...}}, or None

    Returns:
        Immutable snapshot (the payload is copied, never referenced)
    """
    voice = _section(payload, "voice")
    data = _section(payload, "data")
    browsing = _section(data, "browsing")
    streaming = _section(data, "streaming")
    http = _section(data, "http")
    social = _section(data, "social")
    latency = _section(data, "latency")

    return MetricsSnapshot(
        voice=VoiceSamples(
            attempts=_counter(voice, "attempts"),
            setup_ok=_counter(voice, "setupOk"),
            completed=_counter(voice, "completed"),
            dropped=_counter(voice, "dropped"),
            setup_times=_samples(voice, "setupTimes"),
            mos_samples=_samples(voice, "mosSamples"),
            reasons=tuple(_reason(r) for r in _samples(voice, "reasons")),
        ),
        data=DataSamples(
            browsing=BrowsingSamples(
                requests=_counter(browsing, "requests"),
                completed=_counter(browsing, "completed"),
                durations=_samples(browsing, "durations"),
                dns_resolution_times=_samples(browsing, "dnsResolutionTimes"),
                throughputs=_samples(browsing, "throughputs"),
            ),
            streaming=StreamingSamples(
                requests=_counter(streaming, "requests"),
                completed=_counter(streaming, "completed"),
                mos_samples=_samples(streaming, "mosSamples"),
                setup_times=_samples(streaming, "setupTimes"),
                throughputs=_samples(streaming, "throughputs"),
                buffering_counts=_samples(streaming, "bufferingCounts"),
                resolutions=tuple(str(r) for r in _samples(streaming, "resolutions")),
            ),
            http=HttpSamples(dl=_transfer(_section(http, "dl")), ul=_transfer(_section(http, "ul"))),
            social=SocialSamples(
                requests=_counter(social, "requests"),
                completed=_counter(social, "completed"),
                durations=_samples(social, "durations"),
                throughputs=_samples(social, "throughputs"),
            ),
            latency=LatencySamples(
                requests=_counter(latency, "requests"),
                completed=_counter(latency, "completed"),
                scores=_samples(latency, "scores"),
            ),
        ),
    )


def _camel(name: str) -> str:
    """cst_over_10 -> cstOver10, applied_weight -> appliedWeight"""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _json_number(value: Optional[float]) -> Optional[float]:
    # NaN/inf are not valid JSON; they can only come from inconsistent counters
    if value is None or not math.isfinite(value):
        return None
    return value


def score_result_to_dict(result: ScoreResult) -> Dict[str, Optional[float]]:
    """Flatten one score node to {"score", "appliedWeight", ...diagnostics}."""
    return {_camel(f.name): _json_number(getattr(result, f.name)) for f in dataclasses.fields(result)}


def score_tree_to_dict(tree: ScoreTree) -> Dict[str, Dict[str, Optional[float]]]:
    """
    Render a ScoreTree as the camelCase output contract.

    Returns:
        {"voice": {...}, "http": {...}, "browsing": {...}, "streaming": {...},
         "social": {...}, "latency": {...}, "data": {...}, "overall": {...}}
    """
    return {f.name: score_result_to_dict(getattr(tree, f.name)) for f in dataclasses.fields(tree)}
