from typing import Iterable, Optional

# (upper bound on first-position ratio, prominence bucket); 1 is best
PROMINENCE_BUCKETS = (
    (0.10, 1),
    (0.25, 2),
    (0.50, 4),
    (0.75, 7),
)
LAST_PROMINENCE_BUCKET = 9

SHORT_RESPONSE_CHARS = 500
LONG_RESPONSE_CHARS = 2000


def prominence_bucket(ratio: float) -> int:
    for upper, bucket in PROMINENCE_BUCKETS:
        if ratio <= upper:
            return bucket
    return LAST_PROMINENCE_BUCKET


def prominence(position_ratios: Iterable[float]) -> Optional[int]:
    """Best bucket across all brand mentions, or None when the brand is absent."""
    buckets = [prominence_bucket(r) for r in position_ratios]
    return min(buckets) if buckets else None


def visibility_score(
    present: bool,
    prominence_rank: Optional[int],
    competitor_count: int,
    response_length: int,
) -> float:
    if present and prominence_rank is not None:
        score = 5.5 + (11 - prominence_rank) * 0.3
        score -= min(2.5, competitor_count * 0.15)
        if response_length < SHORT_RESPONSE_CHARS:
            score += 0.5
        elif response_length > LONG_RESPONSE_CHARS:
            score -= 0.3
    else:
        score = max(0.5, 2.0 - competitor_count * 0.2)
    return round(max(0.0, min(10.0, score)), 1)
