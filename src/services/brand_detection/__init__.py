"""
Brand and competitor detection for LLM responses.

This package decides whether an organization's brand appears in a free-form
model answer, which competitors appear alongside it, and how visible the
brand is, using layered pattern heuristics with an optional model-assisted
discovery step.
"""

from services.brand_detection.models import (
    AnalysisResult,
    BrandCatalogEntry,
    BrandSentiment,
    ClassifiedMatch,
    ClassifiedResult,
    ConservativeResult,
    CrossProviderContext,
    DiscoveryResult,
    GazetteerEntry,
    LiberalResult,
    NormalizedCandidate,
    OrgBrandProfile,
    OrgOverlay,
    RawCandidate,
)
from services.brand_detection.orchestrator import (
    analysis_hash,
    analyze_response,
    analyze_response_async,
)
from services.brand_detection.candidate_generator import extract_candidates
from services.brand_detection.normalizer import normalize, normalize_candidates
from services.brand_detection.entity_validator import filter_candidates
from services.brand_detection.classification import classify_candidates, clean_competitors
from services.brand_detection.gazetteer import (
    GLOBAL_GAZETTEER,
    Gazetteer,
    GazetteerRegistry,
    build_global_gazetteer,
    build_org_gazetteer,
)
from services.brand_detection.strategies import (
    diff_results,
    run_conservative,
    run_liberal,
    select_result,
)
from services.brand_detection.discovery import (
    DiscoveryClient,
    OllamaDiscoveryClient,
    OpenAIDiscoveryClient,
    discover_organizations,
    get_discovery_client,
)
from services.brand_detection.similarity import (
    LevenshteinScorer,
    SequenceMatcherScorer,
    SimilarityScorer,
    TokenSetScorer,
)
from services.brand_detection.sentiment import analyze_brand_sentiment
from services.brand_detection.text_utils import preprocess_response
from services.brand_detection.config import (
    ENABLE_MODEL_DISCOVERY,
    ENABLE_HEURISTIC_DISCOVERY_FALLBACK,
    ENABLE_TEXT_PREPROCESSING,
    ENABLE_MENTION_SENTIMENT,
    CANDIDATE_CONFIDENCE_THRESHOLD,
    DISCOVERY_CONFIDENCE_THRESHOLD,
)

__all__ = [
    # Data models
    "AnalysisResult",
    "BrandCatalogEntry",
    "BrandSentiment",
    "ClassifiedMatch",
    "ClassifiedResult",
    "ConservativeResult",
    "CrossProviderContext",
    "DiscoveryResult",
    "GazetteerEntry",
    "LiberalResult",
    "NormalizedCandidate",
    "OrgBrandProfile",
    "OrgOverlay",
    "RawCandidate",

    # Main API functions
    "analyze_response",
    "analyze_response_async",
    "analysis_hash",

    # Pipeline stages
    "extract_candidates",
    "normalize",
    "normalize_candidates",
    "filter_candidates",
    "classify_candidates",
    "clean_competitors",

    # Gazetteers
    "GLOBAL_GAZETTEER",
    "Gazetteer",
    "GazetteerRegistry",
    "build_global_gazetteer",
    "build_org_gazetteer",

    # Strategies
    "run_conservative",
    "run_liberal",
    "select_result",
    "diff_results",

    # Discovery
    "DiscoveryClient",
    "OllamaDiscoveryClient",
    "OpenAIDiscoveryClient",
    "discover_organizations",
    "get_discovery_client",

    # Similarity
    "SimilarityScorer",
    "LevenshteinScorer",
    "SequenceMatcherScorer",
    "TokenSetScorer",

    # Text and sentiment
    "preprocess_response",
    "analyze_brand_sentiment",

    # Configuration
    "ENABLE_MODEL_DISCOVERY",
    "ENABLE_HEURISTIC_DISCOVERY_FALLBACK",
    "ENABLE_TEXT_PREPROCESSING",
    "ENABLE_MENTION_SENTIMENT",
    "CANDIDATE_CONFIDENCE_THRESHOLD",
    "DISCOVERY_CONFIDENCE_THRESHOLD",
]
