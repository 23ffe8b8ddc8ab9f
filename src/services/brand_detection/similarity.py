"""
Pluggable string similarity used for fuzzy alias resolution.

Every scorer shares the same matching rule: equal once spaces are removed, or
one form contains the other when both are long enough, or the scorer's
similarity clears its threshold when both are long enough. Only the similarity
measure differs between implementations.
"""

from abc import ABC, abstractmethod
from difflib import SequenceMatcher

from rapidfuzz import fuzz
from rapidfuzz.distance import Levenshtein

from services.brand_detection.config import (
    CONTAINMENT_MIN_LENGTH,
    EDIT_SIMILARITY_MIN_LENGTH,
    EDIT_SIMILARITY_THRESHOLD,
)


class SimilarityScorer(ABC):
    threshold: float = EDIT_SIMILARITY_THRESHOLD
    min_length: int = EDIT_SIMILARITY_MIN_LENGTH
    containment_min_length: int = CONTAINMENT_MIN_LENGTH

    @abstractmethod
    def similarity(self, a: str, b: str) -> float:
        """Return a similarity in [0, 1] for two lower-cased strings."""

    def is_close(self, a: str, b: str) -> bool:
        left, right = (a or "").lower(), (b or "").lower()
        s1, s2 = _compact(left), _compact(right)
        if not s1 or not s2:
            return False
        if s1 == s2:
            return True
        if len(s1) >= self.containment_min_length and len(s2) >= self.containment_min_length:
            if s1 in s2 or s2 in s1:
                return True
        if len(s1) >= self.min_length and len(s2) >= self.min_length:
            return self.similarity(left, right) >= self.threshold
        return False


class LevenshteinScorer(SimilarityScorer):
    """1 - edit_distance / max_length over space-stripped strings."""

    def similarity(self, a: str, b: str) -> float:
        return Levenshtein.normalized_similarity(_compact(a), _compact(b))


class SequenceMatcherScorer(SimilarityScorer):
    def similarity(self, a: str, b: str) -> float:
        return SequenceMatcher(None, _compact(a), _compact(b)).ratio()


class TokenSetScorer(SimilarityScorer):
    """Order-insensitive comparison of word sets."""

    def similarity(self, a: str, b: str) -> float:
        return fuzz.token_set_ratio(a, b) / 100.0


def _compact(text: str) -> str:
    return "".join(text.split())


DEFAULT_SCORER = LevenshteinScorer()
