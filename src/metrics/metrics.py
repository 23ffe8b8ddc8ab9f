import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

from services.brand_detection.models import AnalysisResult


@dataclass(frozen=True)
class ResponseMetrics:
    prompt_id: str
    provider: str
    brand_present: bool
    prominence: Optional[int]
    visibility_score: float
    competitors: Tuple[str, ...] = ()
    sentiment: str = "neutral"

    @classmethod
    def from_result(cls, prompt_id: str, provider: str, result: AnalysisResult) -> "ResponseMetrics":
        sentiment = result.metadata.get("brand_sentiment", {}).get("polarity", "neutral")
        return cls(
            prompt_id=prompt_id,
            provider=provider,
            brand_present=result.brand_present,
            prominence=result.prominence,
            visibility_score=result.visibility_score,
            competitors=tuple(result.competitors),
            sentiment=sentiment,
        )


def prominence_weight(rank: Optional[int]) -> float:
    if rank is None or rank < 1:
        return 0.0
    return 1 / math.log2(rank + 1)


def brand_presence_rate(results: Sequence[ResponseMetrics]) -> float:
    if not results:
        return 0.0
    return sum(1 for r in results if r.brand_present) / len(results)


def average_visibility(results: Sequence[ResponseMetrics]) -> float:
    if not results:
        return 0.0
    return round(sum(r.visibility_score for r in results) / len(results), 1)


def top_spot_share(results: Sequence[ResponseMetrics]) -> float:
    if not results:
        return 0.0
    return sum(1 for r in results if r.prominence == 1) / len(results)


def weighted_prominence(results: Sequence[ResponseMetrics]) -> float:
    """Mean prominence weight over all responses; absent brands weigh zero."""
    if not results:
        return 0.0
    return sum(prominence_weight(r.prominence) for r in results) / len(results)


def competitor_share_of_voice(results: Iterable[ResponseMetrics], brand: str) -> Dict[str, float]:
    """Share of all name appearances held by the brand and by each competitor."""
    counts: Dict[str, int] = {brand: 0}
    for r in results:
        if r.brand_present:
            counts[brand] += 1
        for competitor in r.competitors:
            counts[competitor] = counts.get(competitor, 0) + 1
    total = sum(counts.values())
    if total == 0:
        return {brand: 0.0}
    return {name: count / total for name, count in counts.items()}


def sentiment_index(results: Iterable[ResponseMetrics]) -> float:
    present = [r for r in results if r.brand_present]
    if not present:
        return 0.0
    return sum(1 for r in present if r.sentiment == "positive") / len(present)


def zero_metrics() -> Dict[str, float]:
    return {
        "brand_presence_rate": 0.0,
        "average_visibility": 0.0,
        "top_spot_share": 0.0,
        "weighted_prominence": 0.0,
        "share_of_voice": 0.0,
        "sentiment_index": 0.0,
    }


def summarize(results: Sequence[ResponseMetrics], brand: str) -> Dict[str, float]:
    if not results:
        return zero_metrics()
    return {
        "brand_presence_rate": brand_presence_rate(results),
        "average_visibility": average_visibility(results),
        "top_spot_share": top_spot_share(results),
        "weighted_prominence": weighted_prominence(results),
        "share_of_voice": competitor_share_of_voice(results, brand)[brand],
        "sentiment_index": sentiment_index(results),
    }
