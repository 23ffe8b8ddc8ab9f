"""
Brand name normalization.

Canonicalizes a raw candidate string (Unicode folding, whitespace, quote
variants, brand-aware title casing), resolves it through an alias table using
exact and fuzzy lookup, and scores how much the name had to change.
"""

import logging
import re
import unicodedata
from typing import Dict, List, Mapping, Optional, Sequence

from constants.known_brands import ALIAS_TABLE, SMALL_WORDS, TITLE_CASE_EXCEPTIONS
from services.brand_detection.blacklist import is_connective_word
from services.brand_detection.config import (
    MIN_CANDIDATE_KEEP_CONFIDENCE,
    MIN_NORMALIZATION_CONFIDENCE,
)
from services.brand_detection.models import NormalizedCandidate, RawCandidate
from services.brand_detection.similarity import DEFAULT_SCORER, SimilarityScorer

logger = logging.getLogger(__name__)

_QUOTE_VARIANTS = {
    "“": '"', "”": '"', "„": '"', "‟": '"', "«": '"', "»": '"',
    "‘": "'", "’": "'", "‛": "'", "`": "'",
    "‚": ",",
}
_CAMEL_SHAPE = re.compile(r"^[A-Z][a-z]+([A-Z][a-z]+)*$")
_DOMAIN_SUFFIX = re.compile(r"\.(com|io|org|net|co)$", re.IGNORECASE)
_NUMERIC = re.compile(r"^[\d\s.,%$-]+$")


def normalize(
    text: str,
    alias_table: Optional[Mapping[str, str]] = None,
    scorer: Optional[SimilarityScorer] = None,
) -> NormalizedCandidate:
    """Normalize a candidate name and resolve it to its canonical form."""
    if not text or not isinstance(text, str):
        return NormalizedCandidate(original="", normalized_form="", canonical_form="", confidence=0.0)

    cleaned = _clean(text)
    titled = to_title_case(cleaned)
    canonical = map_to_canonical(titled, alias_table, scorer)
    confidence = _normalization_confidence(text, cleaned, titled, canonical)

    return NormalizedCandidate(
        original=text,
        normalized_form=titled,
        canonical_form=canonical,
        confidence=confidence,
    )


def _clean(text: str) -> str:
    cleaned = unicodedata.normalize("NFKC", text)
    cleaned = " ".join(cleaned.split())
    for variant, replacement in _QUOTE_VARIANTS.items():
        cleaned = cleaned.replace(variant, replacement)
    return cleaned


def to_title_case(text: str) -> str:
    """Title-case a name, keeping known brand spellings, acronyms and mixed case."""
    whole = TITLE_CASE_EXCEPTIONS.get(text.lower())
    if whole:
        return whole

    words = text.split(" ")
    return " ".join(_title_word(word, i) for i, word in enumerate(words))


def _title_word(word: str, index: int) -> str:
    if not word:
        return word
    lower = word.lower()
    if lower in TITLE_CASE_EXCEPTIONS:
        return TITLE_CASE_EXCEPTIONS[lower]
    if any(c.isupper() for c in word[1:]):
        return word
    if index > 0 and lower in SMALL_WORDS:
        return lower
    return word[0].upper() + word[1:]


def map_to_canonical(
    name: str,
    alias_table: Optional[Mapping[str, str]] = None,
    scorer: Optional[SimilarityScorer] = None,
) -> str:
    """Exact case-insensitive alias lookup, then fuzzy lookup; the name itself on a miss."""
    table = ALIAS_TABLE if alias_table is None else alias_table
    scorer = scorer or DEFAULT_SCORER
    lowered = name.lower()

    for alias, canonical in table.items():
        if alias.lower() == lowered:
            return canonical

    for alias, canonical in table.items():
        if scorer.is_close(name, alias):
            logger.debug(f"Fuzzy alias match: {name!r} ~ {alias!r} -> {canonical!r}")
            return canonical

    return name


def _normalization_confidence(original: str, cleaned: str, normalized: str, canonical: str) -> float:
    confidence = 1.0

    if normalized != cleaned:
        confidence -= 0.1
    if normalized != canonical:
        confidence -= 0.15
    if len(original.strip()) <= 2:
        confidence -= 0.3
    if _CAMEL_SHAPE.match(normalized):
        confidence += 0.1
    if _DOMAIN_SUFFIX.search(original.strip()):
        confidence += 0.05

    return round(max(0.0, min(1.0, confidence)), 4)


def is_valid_normalization(candidate: NormalizedCandidate) -> bool:
    name = candidate.normalized_form
    if candidate.confidence < MIN_NORMALIZATION_CONFIDENCE:
        return False
    if not 2 <= len(name) <= 50:
        return False
    if _NUMERIC.match(name):
        return False
    return not is_connective_word(name)


def normalize_candidates(
    candidates: Sequence[RawCandidate],
    alias_table: Optional[Mapping[str, str]] = None,
    scorer: Optional[SimilarityScorer] = None,
) -> List[NormalizedCandidate]:
    """Normalize raw candidates, keep the confident ones, merge identical forms."""
    merged: Dict[str, NormalizedCandidate] = {}

    for raw in candidates:
        result = normalize(raw.text, alias_table, scorer)
        if not is_valid_normalization(result) or result.confidence < MIN_CANDIDATE_KEEP_CONFIDENCE:
            logger.debug(f"Dropped at normalization: {raw.text!r} ({result.confidence})")
            continue

        existing = merged.get(result.normalized_form)
        if existing is None:
            result.mention_count = raw.mention_count
            result.first_position_ratio = raw.first_position_ratio
            merged[result.normalized_form] = result
        else:
            existing.mention_count += raw.mention_count
            existing.first_position_ratio = min(existing.first_position_ratio, raw.first_position_ratio)
            existing.confidence = max(existing.confidence, result.confidence)

    return list(merged.values())
