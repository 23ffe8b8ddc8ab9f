import re

_NAME = r"[A-Z][a-zA-Z0-9\s&.-]{2,30}"

COMPETITIVE_PATTERNS = [
    re.compile(
        r"\b(?i:vs\.?|versus|compared to|alternative to|similar to|like|including|such as|alternatives|competitors|options)"
        r"\s+(" + _NAME + r")"
    ),
    re.compile(r"\b(" + _NAME + r")\s+(?i:vs\.?|versus|compared to|alternative)\b"),
    re.compile(r"\b(?i:instead of|rather than|better than|unlike)\s+(" + _NAME + r")"),
]

QUOTED_PATTERN = re.compile(r'"([A-Z][a-zA-Z0-9\s&.-]{2,30})"')

BUSINESS_CUE_PATTERN = re.compile(
    r"\b([A-Z][a-zA-Z0-9]{1,20}(?:\s+[A-Z][a-zA-Z0-9]{1,20}){0,3})\s+"
    r"(?i:offers|provides|specializes|focuses|develops|platform|software|tool|service|solution|company|"
    r"marketplace|app|website|system)\b"
)

DOMAIN_PATTERN = re.compile(r"\b([A-Z][a-zA-Z0-9]{2,20}\.(?:com|io|org|net|co|app))\b")

CAMEL_CASE_PATTERN = re.compile(r"\b([A-Z][a-z]+[A-Z][a-zA-Z0-9]*)\b")

PROPER_NOUN_PATTERN = re.compile(r"\b([A-Z][a-zA-Z0-9]*(?:[ \t]+[A-Z][a-zA-Z0-9]*){0,3})\b")

SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+(?:\s+|$)")

MARKDOWN_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\((https?://[^)\s]+)\)")
BARE_URL_PATTERN = re.compile(r"https?://[^\s)\]>]+")
CITATION_PATTERNS = [
    re.compile(r"\[\^?\d+\]"),
    re.compile(r"\((?:[A-Z][a-zA-Z]+(?: et al\.)?(?:,? and [A-Z][a-zA-Z]+)?),? \d{4}\)"),
]
MARKDOWN_NOISE_PATTERNS = [
    re.compile(r"^#{1,6}\s*", re.MULTILINE),
    re.compile(r"(\*\*|__)(.+?)\1"),
    re.compile(r"(?<![\w*])\*(?!\s)(.+?)(?<!\s)\*(?!\w)"),
    re.compile(r"`{1,3}([^`]*)`{1,3}"),
    re.compile(r"^\s*>\s?", re.MULTILINE),
]
