"""
Lexical sentiment and context for the organization's brand mention.

Reported alongside the detection result; the visibility score ignores it.
"""

import logging
import re
from typing import Iterable, Tuple

from constants.brand_cues import (
    COMPARISON_MARKERS,
    EXAMPLE_MARKERS,
    RECOMMENDATION_MARKERS,
    SENTIMENT_NEGATIVE_WORDS,
    SENTIMENT_POSITIVE_WORDS,
)
from models.domain import MentionContext, Sentiment
from services.brand_detection.models import BrandSentiment
from services.brand_detection.text_utils import find_term, split_sentences

logger = logging.getLogger(__name__)

_NEGATION = re.compile(r"\b(?:not|never|no|\w+n't)\s+(?:\w+\s+)?(?:recommend|suggest|good|great|excellent|best)\b", re.IGNORECASE)

_POSITIVE_PATTERNS = (
    "{brand} is excellent",
    "{brand} offers",
    "{brand} provides",
    "choose {brand}",
    "use {brand}",
    "try {brand}",
    "{brand} stands out",
    "{brand} excels",
)

_NEGATIVE_PATTERNS = (
    "avoid {brand}",
    "{brand} is bad",
    "{brand} has issues",
    "problems with {brand}",
    "{brand} lacks",
    "not {brand}",
    "instead of {brand}",
)


def analyze_brand_sentiment(brand: str, text: str) -> BrandSentiment:
    """Score the first sentence that mentions ``brand``."""
    sentence = next((s for s in split_sentences(text) if find_term(s, brand) is not None), None)
    if sentence is None:
        return BrandSentiment(brand=brand, reasoning="Brand not mentioned")

    polarity, confidence, reasoning = _polarity(sentence, brand)
    return BrandSentiment(
        brand=brand,
        polarity=polarity,
        confidence=confidence,
        context=mention_context(sentence),
        reasoning=reasoning,
    )


def _polarity(sentence: str, brand: str) -> Tuple[str, float, str]:
    if _NEGATION.search(sentence):
        return Sentiment.NEGATIVE.value, 0.6, "Negation of a positive term"

    positive = _count(sentence, SENTIMENT_POSITIVE_WORDS) + 2 * _count_patterns(sentence, brand, _POSITIVE_PATTERNS)
    negative = _count(sentence, SENTIMENT_NEGATIVE_WORDS) + 2 * _count_patterns(sentence, brand, _NEGATIVE_PATTERNS)

    if positive > negative:
        return Sentiment.POSITIVE.value, round(min(0.9, positive * 0.2), 4), f"Positive indicators: {positive}, negative: {negative}"
    if negative > positive:
        return Sentiment.NEGATIVE.value, round(min(0.9, negative * 0.2), 4), f"Negative indicators: {negative}, positive: {positive}"
    return Sentiment.NEUTRAL.value, 0.5, f"No clear sentiment (P:{positive}, N:{negative})"


def mention_context(sentence: str) -> str:
    if _count(sentence, RECOMMENDATION_MARKERS):
        return MentionContext.RECOMMENDATION.value
    if _count(sentence, COMPARISON_MARKERS):
        return MentionContext.COMPARISON.value
    if _count(sentence, EXAMPLE_MARKERS):
        return MentionContext.EXAMPLE.value
    return MentionContext.MENTION.value


def _count(sentence: str, terms: Iterable[str]) -> int:
    return sum(1 for term in terms if find_term(sentence, term) is not None)


def _count_patterns(sentence: str, brand: str, patterns: Iterable[str]) -> int:
    return _count(sentence, (p.format(brand=brand) for p in patterns))
