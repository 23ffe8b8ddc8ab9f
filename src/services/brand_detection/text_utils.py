"""
Text preprocessing and matching utilities.

This module contains functions for cleaning LLM responses before extraction
(markdown, citation markers, links), sentence splitting, word-boundary term
matching, and tolerant parsing of the JSON lists returned by model calls.
"""

import json
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, List, Optional
from urllib.parse import urlparse

from constants.text_patterns import (
    BARE_URL_PATTERN,
    CITATION_PATTERNS,
    MARKDOWN_LINK_PATTERN,
    MARKDOWN_NOISE_PATTERNS,
    SENTENCE_SPLIT_PATTERN,
)


@dataclass
class PreprocessedText:
    """Cleaned response text plus the domains it cited."""
    text: str
    cited_domains: List[str] = field(default_factory=list)


def preprocess_response(text: str) -> PreprocessedText:
    """Strip markdown and citation noise while keeping link anchors."""
    if not text:
        return PreprocessedText(text="")

    domains: List[str] = []

    def _replace_link(match: re.Match) -> str:
        _add_domain(domains, match.group(2))
        return match.group(1)

    def _replace_url(match: re.Match) -> str:
        domain = _add_domain(domains, match.group(0))
        return domain or ""

    cleaned = MARKDOWN_LINK_PATTERN.sub(_replace_link, text)
    cleaned = BARE_URL_PATTERN.sub(_replace_url, cleaned)

    for pattern in CITATION_PATTERNS:
        cleaned = pattern.sub("", cleaned)

    heading, bold, italic, code, quote = MARKDOWN_NOISE_PATTERNS
    cleaned = heading.sub("", cleaned)
    cleaned = bold.sub(r"\2", cleaned)
    cleaned = italic.sub(r"\1", cleaned)
    cleaned = code.sub(r"\1", cleaned)
    cleaned = quote.sub("", cleaned)

    return PreprocessedText(text=normalize_whitespace(cleaned), cited_domains=domains)


def normalize_whitespace(text: str) -> str:
    lines = [re.sub(r"[ \t\u00a0]+", " ", line).strip() for line in text.splitlines()]
    joined = "\n".join(lines)
    return re.sub(r"\n{3,}", "\n\n", joined).strip()


def _add_domain(domains: List[str], url: str) -> Optional[str]:
    try:
        host = urlparse(url).netloc.lower()
    except ValueError:
        return None
    host = host.split(":")[0]
    if host.startswith("www."):
        host = host[4:]
    if host and host not in domains:
        domains.append(host)
    return host or None


def split_sentences(text: str) -> List[str]:
    """Split on sentence punctuation that is followed by whitespace or end of text."""
    return [s.strip() for s in SENTENCE_SPLIT_PATTERN.split(text or "") if s.strip()]


@lru_cache(maxsize=1024)
def _term_pattern(term: str) -> re.Pattern:
    return re.compile(r"(?<![\w])" + re.escape(term) + r"(?![\w])", re.IGNORECASE)


def find_term(text: str, term: str) -> Optional[re.Match]:
    """First case-insensitive, word-bounded occurrence of ``term``."""
    term = (term or "").strip()
    if not term or not text:
        return None
    return _term_pattern(term).search(text)


def count_mentions(text: str, term: str) -> int:
    term = (term or "").strip()
    if not term or not text:
        return 0
    return len(_term_pattern(term).findall(text))


def contains_any_term(text: str, terms: Iterable[str]) -> bool:
    return any(find_term(text, t) is not None for t in terms)


def _strip_code_fence(response: str) -> str:
    response = response.strip()
    if response.startswith("```json"):
        response = response[7:]
    if response.startswith("```"):
        response = response[3:]
    if response.endswith("```"):
        response = response[:-3]
    return response.strip()


def _parse_json_list_response(response: str) -> list | None:
    """Parse a JSON array returned by a model call, tolerating wrappers."""
    response = _strip_code_fence(response or "")

    try:
        parsed = json.loads(response)
        if isinstance(parsed, list):
            return parsed
        if isinstance(parsed, dict):
            for value in parsed.values():
                if isinstance(value, list):
                    return value
    except json.JSONDecodeError:
        pass

    array_match = re.search(r'\[[\s\S]*\]', response)
    if array_match:
        try:
            parsed = json.loads(array_match.group(0))
            if isinstance(parsed, list):
                return parsed
        except json.JSONDecodeError:
            pass

    return None
