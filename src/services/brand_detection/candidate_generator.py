"""
Candidate generation for brand detection.

Runs a fixed battery of independent pattern rules over the response text and
merges the matches into ``RawCandidate`` records keyed by their exact surface
form, with a mention count and the earliest position as a ratio of text length.
"""

import logging
import re
from typing import Dict, Iterator, List, Optional, Set, Tuple

from constants.text_patterns import (
    BUSINESS_CUE_PATTERN,
    CAMEL_CASE_PATTERN,
    COMPETITIVE_PATTERNS,
    DOMAIN_PATTERN,
    PROPER_NOUN_PATTERN,
    QUOTED_PATTERN,
)
from services.brand_detection.blacklist import is_english_stopword, is_generic_quote
from services.brand_detection.config import MAX_CANDIDATE_LENGTH, MIN_CANDIDATE_LENGTH
from services.brand_detection.models import RawCandidate

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"\S+")
_LIST_SPLIT = re.compile(r",|\s+(?:and|or)\s+")
_TRAILING_PUNCT = ",;:!?()[]\"'"


def extract_candidates(text: str) -> List[RawCandidate]:
    """Extract candidate organization names from text."""
    if not text or not isinstance(text, str):
        return []

    hits: Dict[str, Set[int]] = {}
    for name, offset in _iter_rule_matches(text):
        if MIN_CANDIDATE_LENGTH <= len(name) <= MAX_CANDIDATE_LENGTH:
            hits.setdefault(name, set()).add(offset)

    length = len(text)
    candidates = [
        RawCandidate(
            text=name,
            mention_count=len(offsets),
            first_position_ratio=round(min(offsets) / length, 4),
        )
        for name, offsets in hits.items()
    ]
    candidates.sort(key=lambda c: (c.first_position_ratio, c.text))

    logger.info(f"Candidate extraction: {len(candidates)} candidates")
    return candidates


def _iter_rule_matches(text: str) -> Iterator[Tuple[str, int]]:
    yield from _competitive_context_matches(text)
    yield from _quoted_matches(text)
    yield from _business_cue_matches(text)
    yield from _domain_matches(text)
    yield from _camel_case_matches(text)
    yield from _proper_noun_matches(text)


def _competitive_context_matches(text: str) -> Iterator[Tuple[str, int]]:
    for pattern in COMPETITIVE_PATTERNS:
        for match in pattern.finditer(text):
            phrase, start = match.group(1), match.start(1)
            for part_start, part in _split_listed(phrase):
                cleaned = _clean_phrase(part)
                if cleaned:
                    yield cleaned[0], start + part_start + cleaned[1]


def _quoted_matches(text: str) -> Iterator[Tuple[str, int]]:
    for match in QUOTED_PATTERN.finditer(text):
        phrase = match.group(1).strip()
        if phrase and not is_generic_quote(phrase):
            yield phrase, match.start(1)


def _business_cue_matches(text: str) -> Iterator[Tuple[str, int]]:
    for match in BUSINESS_CUE_PATTERN.finditer(text):
        cleaned = _clean_phrase(match.group(1))
        if cleaned:
            yield cleaned[0], match.start(1) + cleaned[1]


def _domain_matches(text: str) -> Iterator[Tuple[str, int]]:
    for match in DOMAIN_PATTERN.finditer(text):
        yield match.group(1), match.start(1)


def _camel_case_matches(text: str) -> Iterator[Tuple[str, int]]:
    for match in CAMEL_CASE_PATTERN.finditer(text):
        if len(match.group(1)) >= 4:
            yield match.group(1), match.start(1)


def _proper_noun_matches(text: str) -> Iterator[Tuple[str, int]]:
    for match in PROPER_NOUN_PATTERN.finditer(text):
        cleaned = _clean_phrase(match.group(1))
        if cleaned:
            yield cleaned[0], match.start(1) + cleaned[1]


def _split_listed(phrase: str) -> Iterator[Tuple[int, str]]:
    """Split 'A, B and C' into its parts with their offsets."""
    start = 0
    for sep in _LIST_SPLIT.finditer(phrase):
        yield start, phrase[start:sep.start()]
        start = sep.end()
    yield start, phrase[start:]


def _clean_phrase(phrase: str) -> Optional[Tuple[str, int]]:
    """Trim a matched phrase to its run of capitalized tokens.

    Stops at the first lower-case token, drops stopwords at either end (a
    sentence-initial "While" or "Our") and strips trailing punctuation.
    Returns the cleaned name and its offset inside ``phrase``.
    """
    tokens = []
    for match in _TOKEN.finditer(phrase):
        token = match.group(0)
        if not (token[0].isupper() or token[0].isdigit() or token == "&"):
            break
        tokens.append([match.start(), token])
        if token[-1] in ",;:!?.":
            break

    if not tokens:
        return None

    tokens[-1][1] = _strip_trailing(tokens[-1][1])

    while tokens and (is_english_stopword(tokens[0][1]) or tokens[0][1] == "&"):
        tokens.pop(0)
    while tokens and (is_english_stopword(tokens[-1][1]) or tokens[-1][1] in ("&", "")):
        tokens.pop()
    if not tokens:
        return None

    start = tokens[0][0]
    end = tokens[-1][0] + len(tokens[-1][1])
    name = phrase[start:end]
    name = " ".join(name.split())
    return (name, start) if name else None


def _strip_trailing(token: str) -> str:
    token = token.rstrip(_TRAILING_PUNCT)
    if token.endswith("."):
        token = token[:-1]
    return token.rstrip(_TRAILING_PUNCT)
