"""
Cross-provider consensus.

A competitor reaches consensus for a prompt when enough distinct providers
reported it within the lookback window. The resulting names feed the
classifier's consensus boost through ``CrossProviderContext``.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Set

from services.brand_detection.models import CrossProviderContext

logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK_HOURS = 24
MIN_CONSENSUS_PROVIDERS = 2
CONSENSUS_SHARE = 0.5


@dataclass
class ProviderObservation:
    """Competitors one provider's response produced for a prompt."""
    prompt_id: str
    provider: str
    competitors: List[str] = field(default_factory=list)
    observed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    status: str = "success"


def _recent(
    observations: Iterable[ProviderObservation],
    prompt_id: str,
    hours: float,
    now: Optional[datetime],
) -> List[ProviderObservation]:
    now = now or datetime.now(timezone.utc)
    cutoff = now - timedelta(hours=hours)
    return [
        o for o in observations
        if o.prompt_id == prompt_id and o.status == "success" and o.observed_at >= cutoff
    ]


def cross_provider_consensus(
    prompt_id: str,
    observations: Iterable[ProviderObservation],
    hours: float = DEFAULT_LOOKBACK_HOURS,
    now: Optional[datetime] = None,
) -> List[str]:
    """Competitors reported by at least max(2, ceil(50% of responses)) providers."""
    recent = _recent(observations, prompt_id, hours, now)
    if not recent:
        return []

    providers: Dict[str, Set[str]] = {}
    spelling: Dict[str, str] = {}
    for observation in recent:
        for competitor in observation.competitors:
            key = competitor.strip().lower()
            if not key:
                continue
            spelling.setdefault(key, competitor.strip())
            providers.setdefault(key, set()).add(observation.provider)

    threshold = max(MIN_CONSENSUS_PROVIDERS, math.ceil(len(recent) * CONSENSUS_SHARE))
    consensus = [spelling[k] for k, seen in providers.items() if len(seen) >= threshold]
    logger.debug(f"Consensus for prompt {prompt_id}: {len(consensus)} competitors (threshold {threshold})")
    return consensus


def build_cross_provider_context(
    prompt_id: str,
    observations: Iterable[ProviderObservation],
    current_provider: Optional[str] = None,
    hours: float = DEFAULT_LOOKBACK_HOURS,
    now: Optional[datetime] = None,
) -> CrossProviderContext:
    """Recent competitors for the prompt as reported by providers other than ``current_provider``."""
    others = [o for o in _recent(observations, prompt_id, hours, now) if o.provider != current_provider]
    seen: Dict[str, str] = {}
    for observation in others:
        for competitor in observation.competitors:
            key = competitor.strip().lower()
            if key:
                seen.setdefault(key, competitor.strip())
    return CrossProviderContext(prompt_id=prompt_id, recent_competitors=tuple(seen.values()))
