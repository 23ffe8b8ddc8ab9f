"""
Candidate classification.

Assigns each validated candidate to the organization's own brand, to a
competitor (with the source that resolved it), or to the rejected list, and
computes per-candidate and overall confidence.
"""

import logging
import re
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from constants.known_brands import ALIAS_TABLE
from models.domain import CompetitorSource
from services.brand_detection.blacklist import is_blacklisted
from services.brand_detection.config import (
    BASE_CANDIDATE_CONFIDENCE,
    CANDIDATE_CONFIDENCE_THRESHOLD,
    CONSENSUS_BOOST,
    MAX_COMPETITORS,
    MAX_COMPETITOR_NAME_LENGTH,
    SHORT_NAME_LENGTH,
    SHORT_NAME_PENALTY,
)
from services.brand_detection.gazetteer import GLOBAL_GAZETTEER, Gazetteer
from services.brand_detection.models import (
    ClassifiedMatch,
    ClassifiedResult,
    CrossProviderContext,
    NormalizedCandidate,
    OrgBrandProfile,
    RawCandidate,
)

logger = logging.getLogger(__name__)

SOURCE_ORG_BRAND = "org_brand"
SOURCE_CATALOG = CompetitorSource.CATALOG.value
SOURCE_GLOBAL = CompetitorSource.GLOBAL.value
SOURCE_DISCOVERED = CompetitorSource.DISCOVERED.value

_NUMERIC = re.compile(r"^[\d\s.,%$-]+$")


def _key(name: str) -> str:
    return " ".join((name or "").lower().split())


def classify_candidates(
    candidates: Sequence,
    profile: OrgBrandProfile,
    gazetteer: Optional[Gazetteer] = None,
    cross_provider: Optional[CrossProviderContext] = None,
    discovered: Optional[Mapping[str, float]] = None,
) -> ClassifiedResult:
    """Classify candidates against the org profile, overlay, catalog and gazetteer."""
    gazetteer = GLOBAL_GAZETTEER if gazetteer is None else gazetteer
    discovered_keys = {_key(k): v for k, v in (discovered or {}).items()}
    recent = {_key(c) for c in (cross_provider.recent_competitors if cross_provider else ())}
    variants = profile.brand_variants()
    exclusions = _resolve_exclusions(profile.overlay.competitor_exclusions, gazetteer)
    overrides = {_key(o) for o in profile.overlay.competitor_overrides}
    catalog = _catalog_index(profile)

    result = ClassifiedResult()
    brands: List[ClassifiedMatch] = []
    competitors: List[ClassifiedMatch] = []

    for candidate in candidates:
        name, canonical, mentions, ratio = _unpack(candidate)
        keys = {_key(name), _key(canonical)}
        is_brand = is_org_brand(name, variants) or _key(canonical) in {_key(v) for v in variants}
        entry = gazetteer.lookup_any([name, canonical])
        catalog_hit = next((catalog[k] for k in keys if k in catalog), None)

        confidence = BASE_CANDIDATE_CONFIDENCE
        if is_brand or catalog_hit or keys & overrides:
            confidence = max(confidence, 1.0)
        if entry is not None:
            confidence = max(confidence, entry.confidence)
        discovered_confidence = next((discovered_keys[k] for k in keys if k in discovered_keys), None)
        if discovered_confidence is not None:
            confidence = max(confidence, discovered_confidence)
        if (keys | _entry_keys(entry)) & recent:
            confidence += CONSENSUS_BOOST
            result.consensus_boost_applied = True
        if len(name) <= SHORT_NAME_LENGTH:
            confidence -= SHORT_NAME_PENALTY
        confidence = round(min(1.0, confidence), 4)

        if confidence < CANDIDATE_CONFIDENCE_THRESHOLD:
            result.rejected_terms.append(name)
            logger.debug(f"Rejected {name!r}: confidence {confidence}")
            continue

        group_key = _key(entry.canonical_name) if entry is not None else _key(canonical)

        if is_brand:
            brands.append(ClassifiedMatch(name, group_key, SOURCE_ORG_BRAND, confidence, mentions, ratio))
            continue

        entry_key = _key(entry.canonical_name) if entry is not None else None
        if keys & exclusions or (entry_key and entry_key in exclusions):
            result.rejected_terms.append(name)
            continue

        if keys & overrides or (entry_key and entry_key in overrides):
            source = SOURCE_CATALOG
        elif catalog_hit is not None:
            source = SOURCE_CATALOG
            group_key = _key(catalog_hit)
        elif entry is not None:
            source = SOURCE_GLOBAL
        elif discovered_confidence is not None:
            source = SOURCE_DISCOVERED
        else:
            result.rejected_terms.append(name)
            result.unresolved_terms.append(name)
            continue

        competitors.append(ClassifiedMatch(name, group_key, source, confidence, mentions, ratio))

    result.org_brands_found = _collapse_contained(_merge_by_canonical(brands))
    result.competitors_found = _finalize_competitors(competitors, result.org_brands_found, variants, exclusions)
    for match in result.competitors_found:
        result.per_source_counts[match.source] = result.per_source_counts.get(match.source, 0) + 1
    result.confidence = overall_confidence(result)

    logger.info(
        f"Classification: {len(result.org_brands_found)} brands, "
        f"{len(result.competitors_found)} competitors, {len(result.rejected_terms)} rejected"
    )
    return result


def _resolve_exclusions(names: Iterable[str], gazetteer: Gazetteer) -> set:
    """Exclusion keys plus the canonical names their aliases resolve to."""
    keys = set()
    for name in names:
        key = _key(name)
        if not key:
            continue
        keys.add(key)
        if key in ALIAS_TABLE:
            keys.add(_key(ALIAS_TABLE[key]))
        entry = gazetteer.lookup(name)
        if entry is not None:
            keys.add(_key(entry.canonical_name))
    return keys


def _entry_keys(entry) -> set:
    if entry is None:
        return set()
    return {_key(entry.canonical_name)}


def is_org_brand(name: str, variants: Iterable[str]) -> bool:
    """Exact or substring match in either direction, case-insensitive."""
    candidate = _key(name)
    if not candidate:
        return False
    for variant in variants:
        v = _key(variant)
        if not v:
            continue
        if candidate == v:
            return True
        if len(v) >= 3 and len(candidate) >= 3 and (v in candidate or candidate in v):
            return True
    return False


def overall_confidence(result: ClassifiedResult) -> float:
    confidence = 0.8
    if result.org_brands_found:
        confidence += 0.1
    total = len(result.competitors_found)
    if total:
        known = sum(1 for m in result.competitors_found if m.source != SOURCE_DISCOVERED)
        confidence += 0.1 * (known / total)
    return round(min(1.0, confidence), 4)


def clean_competitors(
    competitors: Sequence[ClassifiedMatch],
    brand_variants: Iterable[str],
) -> List[ClassifiedMatch]:
    """Drop org brands, generic terms, numerics and overlong names; dedupe keeping the longer form."""
    variants = list(brand_variants)
    cleaned: Dict[str, ClassifiedMatch] = {}
    for match in competitors:
        name = match.name.strip()
        if not name or len(name) > MAX_COMPETITOR_NAME_LENGTH:
            continue
        if is_blacklisted(name) or _NUMERIC.match(name):
            continue
        if is_org_brand(name, variants):
            continue
        existing = cleaned.get(_key(name))
        if existing is None or len(name) > len(existing.name):
            cleaned[_key(name)] = match
    return list(cleaned.values())


def _finalize_competitors(
    competitors: List[ClassifiedMatch],
    brands: List[ClassifiedMatch],
    variants: List[str],
    exclusions: set,
) -> List[ClassifiedMatch]:
    merged = _merge_by_canonical(clean_competitors(competitors, variants))
    brand_keys = {m.canonical for m in brands} | {_key(m.name) for m in brands}
    final = [
        m for m in merged
        if m.canonical not in brand_keys
        and _key(m.name) not in brand_keys
        and _key(m.name) not in exclusions
        and m.canonical not in exclusions
    ]
    final.sort(key=lambda m: (-m.mention_count, m.first_position_ratio, m.name))
    return final[:MAX_COMPETITORS]


def _merge_by_canonical(matches: Sequence[ClassifiedMatch]) -> List[ClassifiedMatch]:
    """One match per canonical form, keeping the longest surface name."""
    merged: Dict[str, ClassifiedMatch] = {}
    for match in matches:
        existing = merged.get(match.canonical)
        if existing is None:
            merged[match.canonical] = ClassifiedMatch(**vars(match))
            continue
        if len(match.name) > len(existing.name):
            existing.name = match.name
        existing.mention_count = max(existing.mention_count, match.mention_count)
        existing.first_position_ratio = min(existing.first_position_ratio, match.first_position_ratio)
        existing.confidence = max(existing.confidence, match.confidence)
    return sorted(merged.values(), key=lambda m: (m.first_position_ratio, m.name))


def _collapse_contained(brands: List[ClassifiedMatch]) -> List[ClassifiedMatch]:
    """Drop a brand mention that is a word-bounded part of a longer one."""
    kept: List[ClassifiedMatch] = []
    for match in sorted(brands, key=lambda m: -len(m.name)):
        container = next((k for k in kept if _contains_words(k.name, match.name)), None)
        if container is None:
            kept.append(match)
        else:
            container.first_position_ratio = min(container.first_position_ratio, match.first_position_ratio)
            container.mention_count = max(container.mention_count, match.mention_count)
    return sorted(kept, key=lambda m: (m.first_position_ratio, m.name))


def _contains_words(longer: str, shorter: str) -> bool:
    return re.search(rf"(?<!\w){re.escape(_key(shorter))}(?!\w)", _key(longer)) is not None


def _catalog_index(profile: OrgBrandProfile) -> Dict[str, str]:
    index: Dict[str, str] = {}
    for entry in profile.catalog_competitors:
        for term in (entry.name, *entry.variants):
            if _key(term):
                index.setdefault(_key(term), entry.name)
    return index


def _unpack(candidate) -> Tuple[str, str, int, float]:
    if isinstance(candidate, NormalizedCandidate):
        return (
            candidate.normalized_form,
            candidate.canonical_form or candidate.normalized_form,
            candidate.mention_count,
            candidate.first_position_ratio,
        )
    if isinstance(candidate, RawCandidate):
        return candidate.text, candidate.text, candidate.mention_count, candidate.first_position_ratio
    return str(candidate), str(candidate), 1, 0.0
