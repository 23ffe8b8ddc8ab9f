"""
Detection strategies and the fallback rule that joins them.

The conservative strategy only recognizes names from the organization's
verified catalog (plus overlay overrides). The liberal strategy runs the full
extract, normalize, validate and classify chain against the global gazetteer.
``select_result`` decides which one is published for a run.
"""

import logging
from typing import Collection, Dict, List, Mapping, Optional, Union

from services.brand_detection.candidate_generator import extract_candidates
from services.brand_detection.classification import classify_candidates
from services.brand_detection.entity_validator import filter_candidates_with_reasons
from services.brand_detection.gazetteer import (
    GLOBAL_GAZETTEER,
    Gazetteer,
    build_org_gazetteer,
)
from services.brand_detection.models import (
    ConservativeResult,
    CrossProviderContext,
    LiberalResult,
    NormalizedCandidate,
    OrgBrandProfile,
)
from services.brand_detection.normalizer import normalize_candidates
from services.brand_detection.similarity import SimilarityScorer
from services.brand_detection.text_utils import count_mentions, find_term

logger = logging.getLogger(__name__)

StrategyOutcome = Union[ConservativeResult, LiberalResult]

_EMPTY_GAZETTEER = Gazetteer(())


def run_conservative(
    text: str,
    profile: OrgBrandProfile,
    org_gazetteer: Optional[Gazetteer] = None,
    cross_provider: Optional[CrossProviderContext] = None,
) -> ConservativeResult:
    """Scan the text for catalog names and overlay overrides only."""
    if org_gazetteer is None:
        org_gazetteer = build_org_gazetteer(profile)
    length = max(1, len(text or ""))

    hits: List[NormalizedCandidate] = []
    terms = _catalog_terms(org_gazetteer, profile)
    for term, canonical in terms.items():
        match = find_term(text, term)
        if match is None:
            continue
        hits.append(
            NormalizedCandidate(
                original=match.group(0),
                normalized_form=term,
                canonical_form=canonical,
                confidence=1.0,
                mention_count=count_mentions(text, term),
                first_position_ratio=round(match.start() / length, 4),
            )
        )

    classified = classify_candidates(hits, profile, _EMPTY_GAZETTEER, cross_provider)
    stage_counts = {
        "catalog_terms": len(terms),
        "candidates_extracted": len(hits),
        "brands_found": len(classified.org_brands_found),
        "competitors_found": len(classified.competitors_found),
    }
    logger.info(f"Conservative strategy: {stage_counts}")
    return ConservativeResult(classified=classified, stage_counts=stage_counts)


def _catalog_terms(org_gazetteer: Gazetteer, profile: OrgBrandProfile) -> Dict[str, str]:
    terms: Dict[str, str] = {}
    seen = set()
    pairs = [
        (term, entry.canonical_name)
        for entry in org_gazetteer.entries
        for term in (entry.canonical_name, *entry.aliases)
    ]
    pairs.extend((o, o) for o in profile.overlay.competitor_overrides)
    for term, canonical in pairs:
        term = (term or "").strip()
        if term and term.lower() not in seen:
            seen.add(term.lower())
            terms[term] = canonical.strip()
    return terms


def run_liberal(
    text: str,
    profile: OrgBrandProfile,
    gazetteer: Optional[Gazetteer] = None,
    cross_provider: Optional[CrossProviderContext] = None,
    discovered: Optional[Mapping[str, float]] = None,
    alias_table: Optional[Mapping[str, str]] = None,
    scorer: Optional[SimilarityScorer] = None,
) -> LiberalResult:
    """Run extractor, normalizer, validator and classifier over the text."""
    gazetteer = GLOBAL_GAZETTEER if gazetteer is None else gazetteer

    raw = extract_candidates(text)
    normalized = normalize_candidates(raw, alias_table, scorer)
    kept, rejected = filter_candidates_with_reasons(normalized, text, evidence_allowlist(gazetteer, profile))
    kept_names = set(kept)
    survivors = [c for c in normalized if c.normalized_form in kept_names]
    classified = classify_candidates(survivors, profile, gazetteer, cross_provider, discovered)

    stage_counts = {
        "candidates_extracted": len(raw),
        "candidates_normalized": len(normalized),
        "candidates_filtered": len(survivors),
        "brands_found": len(classified.org_brands_found),
        "competitors_found": len(classified.competitors_found),
    }
    logger.info(f"Liberal strategy: {stage_counts}")
    return LiberalResult(
        classified=classified,
        stage_counts=stage_counts,
        rejected_by_stage={"validation": sorted(rejected), "classification": list(classified.rejected_terms)},
    )


def evidence_allowlist(gazetteer: Gazetteer, profile: OrgBrandProfile) -> Collection[str]:
    """Curated names that skip the minimum-evidence rule."""
    allowed = set(gazetteer.terms())
    for entry in profile.catalog_competitors:
        allowed.add(entry.name.lower())
        allowed.update(v.lower() for v in entry.variants)
    allowed.update(o.lower() for o in profile.overlay.competitor_overrides)
    allowed.update(v.lower() for v in profile.brand_variants())
    return allowed


def select_result(conservative: ConservativeResult, liberal: LiberalResult) -> StrategyOutcome:
    """Pick the single result to publish.

    Conservative wins whenever it found competitors. Otherwise liberal wins if
    it found competitors, or if conservative found nothing at all while liberal
    found org brands. When neither found competitors and conservative is not
    empty, the empty competitor list is taken as genuine.
    """
    if conservative.classified.competitors_found:
        return conservative
    if liberal.classified.competitors_found:
        return liberal
    if conservative.classified.is_empty() and not liberal.classified.is_empty():
        return liberal
    return conservative


def diff_results(first: StrategyOutcome, second: StrategyOutcome) -> Dict[str, List[str]]:
    """Names each strategy found that the other did not."""
    first_comp = set(first.classified.competitor_names)
    second_comp = set(second.classified.competitor_names)
    first_brand = set(first.classified.brand_names)
    second_brand = set(second.classified.brand_names)
    return {
        f"competitors_only_{first.strategy}": sorted(first_comp - second_comp),
        f"competitors_only_{second.strategy}": sorted(second_comp - first_comp),
        f"brands_only_{first.strategy}": sorted(first_brand - second_brand),
        f"brands_only_{second.strategy}": sorted(second_brand - first_brand),
    }
