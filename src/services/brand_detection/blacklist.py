"""Stopword and generic-phrase checks for candidate names."""

from constants.brand_cues import GENERIC_QUOTE_PHRASES
from constants.stopwords import (
    BUSINESS_GENERIC_TERMS,
    CONNECTIVE_WORDS,
    ENGLISH_STOPWORDS,
    GENERIC_CATEGORY_PHRASES,
    STRICT_STOPWORDS,
)


def _key(term: str) -> str:
    return " ".join((term or "").lower().split())


def is_english_stopword(term: str) -> bool:
    return _key(term) in ENGLISH_STOPWORDS


def is_business_generic_term(term: str) -> bool:
    return _key(term) in BUSINESS_GENERIC_TERMS


def is_generic_category_phrase(term: str) -> bool:
    return _key(term) in GENERIC_CATEGORY_PHRASES


def is_blacklisted(term: str) -> bool:
    """True for any stopword, generic business term or generic category phrase."""
    return (
        is_english_stopword(term)
        or is_business_generic_term(term)
        or is_generic_category_phrase(term)
    )


def is_stopword(term: str) -> bool:
    """Validator rule: blacklisted or at most two characters long."""
    return len((term or "").strip()) <= 2 or is_blacklisted(term)


def is_strict_stopword(term: str) -> bool:
    return is_blacklisted(term) or _key(term) in STRICT_STOPWORDS


def is_connective_word(term: str) -> bool:
    return _key(term) in CONNECTIVE_WORDS


def is_generic_quote(text: str) -> bool:
    lowered = _key(text)
    return any(phrase in lowered for phrase in GENERIC_QUOTE_PHRASES)
