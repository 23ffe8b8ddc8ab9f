"""
Candidate validation.

Drops candidates that are stopwords, do not look like names, lack evidence in
the text, or sit next to capability verbs ("X allows you to ...") that mark a
feature description rather than an organization.
"""

import logging
import re
from typing import Collection, Dict, List, Optional, Sequence, Union

from constants.brand_cues import BRAND_CUES, NEGATIVE_CONTEXT_VERBS
from services.brand_detection.blacklist import is_stopword
from services.brand_detection.config import MIN_EVIDENCE_MENTIONS, NEGATIVE_CONTEXT_WINDOW
from services.brand_detection.gazetteer import GLOBAL_GAZETTEER
from services.brand_detection.models import NormalizedCandidate, RawCandidate
from services.brand_detection.text_utils import (
    contains_any_term,
    count_mentions,
    find_term,
    split_sentences,
)

logger = logging.getLogger(__name__)

CandidateLike = Union[str, RawCandidate, NormalizedCandidate]


def filter_candidates(
    candidates: Sequence[CandidateLike],
    full_text: str,
    allowlist: Optional[Collection[str]] = None,
) -> List[str]:
    """Return the candidate names that pass every validation rule."""
    kept, rejected = filter_candidates_with_reasons(candidates, full_text, allowlist)
    return kept


def filter_candidates_with_reasons(
    candidates: Sequence[CandidateLike],
    full_text: str,
    allowlist: Optional[Collection[str]] = None,
) -> tuple[List[str], Dict[str, str]]:
    allowed = _allowlist_keys(allowlist)
    kept: List[str] = []
    rejected: Dict[str, str] = {}

    for candidate in candidates:
        name = candidate_name(candidate)
        reason = rejection_reason(name, full_text or "", allowed)
        if reason:
            rejected[name] = reason
            logger.debug(f"Rejected candidate {name!r}: {reason}")
        elif name not in kept:
            kept.append(name)

    logger.info(f"Candidate validation: {len(candidates)} -> {len(kept)} candidates")
    return kept, rejected


def rejection_reason(name: str, text: str, allowlist: Collection[str]) -> Optional[str]:
    if is_stopword(name):
        return "stopword"
    if not passes_shape_heuristics(name):
        return "shape"
    if not has_minimum_evidence(name, text, allowlist):
        return "evidence"
    if has_negative_context(name, text):
        return "negative_context"
    return None


def passes_shape_heuristics(name: str) -> bool:
    if not name:
        return False
    return (
        name[0].isupper()
        or "." in name
        or "&" in name
        or any(c.isupper() for c in name[1:])
    )


def has_minimum_evidence(name: str, text: str, allowlist: Collection[str]) -> bool:
    if name.lower() in allowlist:
        return True
    if count_mentions(text, name) >= MIN_EVIDENCE_MENTIONS:
        return True
    return has_brand_cue_in_sentence(name, text)


def has_brand_cue_in_sentence(name: str, text: str) -> bool:
    for sentence in split_sentences(text):
        if find_term(sentence, name) is not None and contains_any_term(sentence, BRAND_CUES):
            return True
    return False


def has_negative_context(name: str, text: str, window: int = NEGATIVE_CONTEXT_WINDOW) -> bool:
    match = find_term(text, name)
    if match is None:
        return False
    start = max(0, match.start() - window)
    end = min(len(text), match.end() + window)
    context = text[start:end]
    return any(re.search(rf"\b{verb}\b", context, re.IGNORECASE) for verb in NEGATIVE_CONTEXT_VERBS)


def candidate_name(candidate: CandidateLike) -> str:
    if isinstance(candidate, NormalizedCandidate):
        return candidate.normalized_form
    if isinstance(candidate, RawCandidate):
        return candidate.text
    return str(candidate)


def _allowlist_keys(allowlist: Optional[Collection[str]]) -> set:
    terms = GLOBAL_GAZETTEER.terms() if allowlist is None else allowlist
    return {" ".join(t.lower().split()) for t in terms}
