from metrics.metrics import (
    ResponseMetrics,
    average_visibility,
    brand_presence_rate,
    competitor_share_of_voice,
    summarize,
    top_spot_share,
)
from metrics.scoring import prominence, prominence_bucket, visibility_score

__all__ = [
    "ResponseMetrics",
    "average_visibility",
    "brand_presence_rate",
    "competitor_share_of_voice",
    "summarize",
    "top_spot_share",
    "prominence",
    "prominence_bucket",
    "visibility_score",
]
