"""
Main orchestration for the brand detection pipeline.

Takes one LLM response and an organization profile and produces the
``AnalysisResult`` the caller persists: whether the organization's brand is
present, its prominence, the competitors mentioned, a visibility score and an
observability metadata block.
"""

import hashlib
import logging
import time
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from config import settings
from metrics.scoring import prominence, visibility_score
from models.domain import DetectionStrategy
from services.brand_detection import config as detection_config
from services.brand_detection.async_utils import inside_event_loop, run_blocking
from services.brand_detection.config import ANALYSIS_HASH_TEXT_CHARS
from services.brand_detection.discovery import (
    DiscoveryClient,
    discover_organizations,
    get_discovery_client,
)
from services.brand_detection.gazetteer import (
    GLOBAL_GAZETTEER,
    Gazetteer,
    GazetteerRegistry,
    build_org_gazetteer,
)
from services.brand_detection.models import (
    AnalysisResult,
    ConservativeResult,
    CrossProviderContext,
    DiscoveryResult,
    LiberalResult,
    OrgBrandProfile,
)
from services.brand_detection.sentiment import analyze_brand_sentiment
from services.brand_detection.similarity import SimilarityScorer
from services.brand_detection.strategies import (
    StrategyOutcome,
    diff_results,
    run_conservative,
    run_liberal,
    select_result,
)
from services.brand_detection.text_utils import preprocess_response

logger = logging.getLogger(__name__)


def analyze_response(
    text: str,
    profile: OrgBrandProfile,
    strategy: Union[DetectionStrategy, str, None] = None,
    gazetteer: Optional[Gazetteer] = None,
    registry: Optional[GazetteerRegistry] = None,
    org_id: Optional[str] = None,
    cross_provider: Optional[CrossProviderContext] = None,
    discovery_client: Optional[DiscoveryClient] = None,
    alias_table: Optional[Mapping[str, str]] = None,
    scorer: Optional[SimilarityScorer] = None,
) -> AnalysisResult:
    """
    Main entry point for analyzing one response.

    Runs the selected detection strategy (both, with the fallback rule, by
    default), optionally asks a model about unresolved candidates, and scores
    the outcome. Never raises for bad text; an empty or non-string response
    yields an empty zero-confidence result.
    """
    strategy = _coerce_strategy(strategy)
    wants_discovery = (
        strategy != DetectionStrategy.CONSERVATIVE and _discovery_client(discovery_client) is not None
    )
    if wants_discovery and inside_event_loop():
        logger.warning(
            "analyze_response called inside a running event loop; skipping model discovery. "
            "Await analyze_response_async to include it."
        )
    elif wants_discovery:
        return run_blocking(
            analyze_response_async(
                text, profile, strategy, gazetteer, registry, org_id,
                cross_provider, discovery_client, alias_table, scorer,
            )
        )

    started = time.perf_counter()
    if _is_malformed(text):
        return _empty_result(started)

    working, cited_domains = _prepare_text(text)
    conservative, liberal = _run_strategies(
        working, profile, strategy, gazetteer, registry, org_id, cross_provider, alias_table, scorer
    )
    return _build_result(text, working, cited_domains, strategy, conservative, liberal, None, started)


async def analyze_response_async(
    text: str,
    profile: OrgBrandProfile,
    strategy: Union[DetectionStrategy, str, None] = None,
    gazetteer: Optional[Gazetteer] = None,
    registry: Optional[GazetteerRegistry] = None,
    org_id: Optional[str] = None,
    cross_provider: Optional[CrossProviderContext] = None,
    discovery_client: Optional[DiscoveryClient] = None,
    alias_table: Optional[Mapping[str, str]] = None,
    scorer: Optional[SimilarityScorer] = None,
) -> AnalysisResult:
    """Async variant of ``analyze_response`` that awaits model-assisted discovery."""
    started = time.perf_counter()
    if _is_malformed(text):
        return _empty_result(started)

    strategy = _coerce_strategy(strategy)
    working, cited_domains = _prepare_text(text)
    conservative, liberal = _run_strategies(
        working, profile, strategy, gazetteer, registry, org_id, cross_provider, alias_table, scorer
    )

    discovery = None
    client = _discovery_client(discovery_client)
    if liberal is not None and client is not None and liberal.classified.unresolved_terms:
        discovery = await discover_organizations(liberal.classified.unresolved_terms, working, client)
        if discovery.organizations:
            liberal = run_liberal(
                working,
                profile,
                GLOBAL_GAZETTEER if gazetteer is None else gazetteer,
                cross_provider,
                discovered=discovery.organizations,
                alias_table=alias_table,
                scorer=scorer,
            )

    return _build_result(text, working, cited_domains, strategy, conservative, liberal, discovery, started)


def _coerce_strategy(strategy: Union[DetectionStrategy, str, None]) -> DetectionStrategy:
    return DetectionStrategy(strategy or settings.default_strategy)


def _is_malformed(text: Any) -> bool:
    return not isinstance(text, str) or not text.strip()


def _prepare_text(text: str) -> Tuple[str, List[str]]:
    if not detection_config.ENABLE_TEXT_PREPROCESSING:
        return text, []
    preprocessed = preprocess_response(text)
    return preprocessed.text, preprocessed.cited_domains


def _discovery_client(explicit: Optional[DiscoveryClient]) -> Optional[DiscoveryClient]:
    if explicit is not None:
        return explicit
    if not detection_config.ENABLE_MODEL_DISCOVERY:
        return None
    try:
        return get_discovery_client()
    except ValueError as e:
        logger.warning(f"Model discovery disabled: {e}")
        return None


def _run_strategies(
    text: str,
    profile: OrgBrandProfile,
    strategy: DetectionStrategy,
    gazetteer: Optional[Gazetteer],
    registry: Optional[GazetteerRegistry],
    org_id: Optional[str],
    cross_provider: Optional[CrossProviderContext],
    alias_table: Optional[Mapping[str, str]],
    scorer: Optional[SimilarityScorer],
) -> Tuple[Optional[ConservativeResult], Optional[LiberalResult]]:
    conservative = None
    liberal = None
    if strategy != DetectionStrategy.LIBERAL:
        if registry is not None and org_id:
            org_gazetteer = registry.get(org_id, profile)
        else:
            org_gazetteer = build_org_gazetteer(profile)
        conservative = run_conservative(text, profile, org_gazetteer, cross_provider)
    if strategy != DetectionStrategy.CONSERVATIVE:
        liberal = run_liberal(
            text,
            profile,
            GLOBAL_GAZETTEER if gazetteer is None else gazetteer,
            cross_provider,
            alias_table=alias_table,
            scorer=scorer,
        )
    return conservative, liberal


def _build_result(
    original: str,
    text: str,
    cited_domains: List[str],
    strategy: DetectionStrategy,
    conservative: Optional[ConservativeResult],
    liberal: Optional[LiberalResult],
    discovery: Optional[DiscoveryResult],
    started: float,
) -> AnalysisResult:
    if conservative is not None and liberal is not None:
        chosen: StrategyOutcome = select_result(conservative, liberal)
    else:
        chosen = conservative if conservative is not None else liberal

    classified = chosen.classified
    brands = classified.brand_names
    competitors = classified.competitor_names
    brand_present = bool(brands)
    rank = prominence(m.first_position_ratio for m in classified.org_brands_found) if brand_present else None
    score = visibility_score(brand_present, rank, len(competitors), len(text))

    metadata: Dict[str, Any] = {
        "strategy_requested": strategy.value,
        "strategy_used": chosen.strategy,
        "confidence": classified.confidence,
        "per_source_counts": dict(classified.per_source_counts),
        "stage_counts": {
            r.strategy: dict(r.stage_counts) for r in (conservative, liberal) if r is not None
        },
        "rejected_terms": list(classified.rejected_terms),
        "consensus_boost_applied": classified.consensus_boost_applied,
        "cited_domains": list(cited_domains),
        "analysis_hash": analysis_hash(original, brands, competitors),
    }
    if liberal is not None:
        metadata["rejected_by_stage"] = {k: list(v) for k, v in liberal.rejected_by_stage.items()}
    if conservative is not None and liberal is not None:
        metadata["strategy_diff"] = diff_results(conservative, liberal)
    if discovery is not None:
        metadata["discovery"] = {
            "method": discovery.method,
            "organizations": dict(discovery.organizations),
            "error": discovery.error,
        }
    if brand_present and detection_config.ENABLE_MENTION_SENTIMENT:
        metadata["brand_sentiment"] = analyze_brand_sentiment(brands[0], text).to_dict()
    metadata["processing_time_ms"] = _elapsed_ms(started)

    logger.info(
        f"Analysis ({chosen.strategy}): brand_present={brand_present}, "
        f"{len(competitors)} competitors, score={score}"
    )
    return AnalysisResult(
        brand_present=brand_present,
        prominence=rank,
        competitors=competitors,
        brands=brands,
        visibility_score=score,
        metadata=metadata,
    )


def _empty_result(started: float) -> AnalysisResult:
    logger.warning("Empty or non-string response text; returning empty analysis")
    return AnalysisResult(
        brand_present=False,
        prominence=None,
        competitors=[],
        brands=[],
        visibility_score=visibility_score(False, None, 0, 0),
        metadata={
            "strategy_used": None,
            "confidence": 0.0,
            "per_source_counts": {"catalog": 0, "global": 0, "discovered": 0},
            "stage_counts": {},
            "consensus_boost_applied": False,
            "cited_domains": [],
            "error": "empty_or_invalid_text",
            "processing_time_ms": _elapsed_ms(started),
        },
    )


def analysis_hash(text: str, brands: List[str], competitors: List[str]) -> str:
    """Stable digest of a result, used by callers to skip duplicate analyses."""
    content = f"{text[:ANALYSIS_HASH_TEXT_CHARS]}|{','.join(brands)}|{','.join(competitors)}"
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
