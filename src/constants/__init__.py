from constants.brand_cues import (
    BRAND_CUES,
    COMPANY_DOMAIN_SUFFIXES,
    COMPANY_SUFFIXES,
    GENERIC_QUOTE_PHRASES,
    NEGATIVE_CONTEXT_VERBS,
)
from constants.global_competitors import DEFAULT_GAZETTEER_CONFIDENCE, GLOBAL_COMPETITORS
from constants.known_brands import ALIAS_TABLE, SMALL_WORDS, TITLE_CASE_EXCEPTIONS
from constants.stopwords import (
    BUSINESS_GENERIC_TERMS,
    CONNECTIVE_WORDS,
    ENGLISH_STOPWORDS,
    GENERIC_CATEGORY_PHRASES,
    STRICT_STOPWORDS,
)
from constants.text_patterns import (
    BUSINESS_CUE_PATTERN,
    CAMEL_CASE_PATTERN,
    COMPETITIVE_PATTERNS,
    DOMAIN_PATTERN,
    PROPER_NOUN_PATTERN,
    QUOTED_PATTERN,
)

__all__ = [
    "BRAND_CUES",
    "COMPANY_DOMAIN_SUFFIXES",
    "COMPANY_SUFFIXES",
    "GENERIC_QUOTE_PHRASES",
    "NEGATIVE_CONTEXT_VERBS",
    "DEFAULT_GAZETTEER_CONFIDENCE",
    "GLOBAL_COMPETITORS",
    "ALIAS_TABLE",
    "SMALL_WORDS",
    "TITLE_CASE_EXCEPTIONS",
    "BUSINESS_GENERIC_TERMS",
    "CONNECTIVE_WORDS",
    "ENGLISH_STOPWORDS",
    "GENERIC_CATEGORY_PHRASES",
    "STRICT_STOPWORDS",
    "BUSINESS_CUE_PATTERN",
    "CAMEL_CASE_PATTERN",
    "COMPETITIVE_PATTERNS",
    "DOMAIN_PATTERN",
    "PROPER_NOUN_PATTERN",
    "QUOTED_PATTERN",
]
