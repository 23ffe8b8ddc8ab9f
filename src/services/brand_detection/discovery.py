"""
Model-assisted organization discovery.

Candidates that survive validation but resolve to neither the org profile,
the catalog nor the gazetteer are sent in one batch to a language model that
labels which of them are organizations. Any failure (timeout, transport
error, unparseable answer) falls back to a suffix and context heuristic so a
run never blocks on the model.
"""

import asyncio
import json
import logging
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

import httpx

from config import settings
from constants.brand_cues import COMPANY_DOMAIN_SUFFIXES, COMPANY_SUFFIXES
from services.brand_detection import config as detection_config
from services.brand_detection.blacklist import is_generic_quote, is_strict_stopword
from services.brand_detection.config import (
    DISCOVERY_BATCH_SIZE,
    DISCOVERY_CONFIDENCE_THRESHOLD,
    DISCOVERY_CONTEXT_CHARS,
    DISCOVERY_FALLBACK_CONFIDENCE,
    HEURISTIC_DISCOVERY_CONFIDENCE,
)
from services.brand_detection.models import DiscoveryResult
from services.brand_detection.prompts import render_prompt
from services.brand_detection.text_utils import _parse_json_list_response, find_term

logger = logging.getLogger(__name__)

_INVALID_CHARS = re.compile(r"[<>{}\[\]|\\^~=*#@]")
_NUMERIC = re.compile(r"^[\d\s.,%$-]+$")
_NAME_FIELD = re.compile(r'"name"\s*:\s*"([^"]+)"')
_BRACKET_LIST = re.compile(r"\[([^\[\]]*)\]")
_COMPETITIVE_CONTEXT = (
    r"(?:vs\.?|versus|alternatives?\s+to|compared\s+to|instead\s+of|rather\s+than|"
    r"competitors?\s+(?:like|such\s+as)|such\s+as)"
)


class DiscoveryClient(ABC):
    """A chat model that answers one prompt with plain text."""

    @abstractmethod
    async def complete(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        ...


class OllamaDiscoveryClient(DiscoveryClient):
    def __init__(
        self,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url or settings.ollama_base_url
        self.model = model or settings.ollama_model_discovery
        self.timeout = timeout or settings.discovery_timeout_seconds

    async def complete(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        url = f"{self.base_url}/api/generate"
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {"temperature": 0.0},
        }
        if system_prompt:
            payload["system"] = system_prompt

        timeout = httpx.Timeout(connect=10.0, read=self.timeout, write=10.0, pool=10.0)
        async with httpx.AsyncClient(timeout=timeout) as client:
            try:
                response = await client.post(url, json=payload)
                response.raise_for_status()
                result = response.json()
                return result.get("response", "")
            except httpx.HTTPError as e:
                logger.error(f"Ollama discovery error: {e}")
                raise


class OpenAIDiscoveryClient(DiscoveryClient):
    """Discovery through any OpenAI-compatible chat completions endpoint."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
    ):
        self.api_key = api_key or settings.openai_api_key
        self.base_url = base_url or settings.openai_api_base
        self.model = model or settings.openai_model_discovery

    async def complete(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        from openai import AsyncOpenAI

        if not self.api_key:
            raise ValueError("No API key configured for OpenAI discovery")

        client = AsyncOpenAI(api_key=self.api_key, base_url=self.base_url)
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=0.0,
            )
            return response.choices[0].message.content or ""
        except Exception as e:
            logger.error(f"OpenAI discovery error: {e}")
            raise


def get_discovery_client(provider: Optional[str] = None) -> DiscoveryClient:
    provider = (provider or settings.discovery_provider).lower()
    if provider == "ollama":
        return OllamaDiscoveryClient()
    if provider == "openai":
        return OpenAIDiscoveryClient()
    raise ValueError(f"Unknown discovery provider: {provider}")


async def discover_organizations(
    terms: Sequence[str],
    text: str,
    client: DiscoveryClient,
    timeout: Optional[float] = None,
    threshold: float = DISCOVERY_CONFIDENCE_THRESHOLD,
) -> DiscoveryResult:
    """Ask the model which unresolved terms name organizations.

    Only names the model rates at or above ``threshold`` that also appear in
    ``text`` are returned, keyed by the spelling that was sent.
    """
    batch = _dedupe(terms)[:DISCOVERY_BATCH_SIZE]
    if not batch:
        return DiscoveryResult()

    timeout = timeout or settings.discovery_timeout_seconds
    system_prompt = render_prompt("organization_discovery_system_prompt")
    prompt = render_prompt(
        "organization_discovery_user_prompt",
        text=(text or "")[:DISCOVERY_CONTEXT_CHARS],
        candidates_json=json.dumps(batch, ensure_ascii=False),
        threshold=threshold,
    )

    try:
        response = await asyncio.wait_for(client.complete(prompt, system_prompt=system_prompt), timeout=timeout)
    except Exception as e:
        logger.warning(f"Organization discovery failed: {e!r}")
        return _fallback(batch, text, repr(e))

    parsed = parse_discovery_response(response)
    if parsed is None:
        logger.warning("Organization discovery returned an unparseable response")
        return _fallback(batch, text, "unparseable response")

    requested = {t.lower(): t for t in batch}
    organizations = {}
    for name, confidence in parsed:
        if confidence < threshold:
            continue
        if not validate_organization_entity(name) or find_term(text, name) is None:
            continue
        key = requested.get(name.lower(), name)
        organizations[key] = max(confidence, organizations.get(key, 0.0))

    logger.info(f"Organization discovery: {len(organizations)}/{len(batch)} terms accepted")
    return DiscoveryResult(organizations=organizations, method="model")


def _fallback(batch: List[str], text: str, error: str) -> DiscoveryResult:
    if not detection_config.ENABLE_HEURISTIC_DISCOVERY_FALLBACK:
        return DiscoveryResult(method="failed", error=error)
    return DiscoveryResult(organizations=heuristic_discovery(batch, text), method="heuristic", error=error)


def _dedupe(terms: Sequence[str]) -> List[str]:
    seen = set()
    unique = []
    for term in terms:
        term = (term or "").strip()
        if term and term.lower() not in seen:
            seen.add(term.lower())
            unique.append(term)
    return unique


def parse_discovery_response(response: str) -> Optional[List[Tuple[str, float]]]:
    """Parse the model answer into (name, confidence) pairs.

    Accepts a JSON array of objects or strings, then falls back to scraping
    ``"name": "..."`` fields, then to a bare bracketed list. Names recovered
    by the fallbacks get a reduced confidence. Returns None when nothing
    usable is found.
    """
    if not response or not response.strip():
        return None

    items = _parse_json_list_response(response)
    if items is not None:
        pairs = []
        for item in items:
            if isinstance(item, str):
                pairs.append((item.strip(), DISCOVERY_FALLBACK_CONFIDENCE))
            elif isinstance(item, dict) and isinstance(item.get("name"), str):
                pairs.append((item["name"].strip(), _coerce_confidence(item.get("confidence"))))
        return [(n, c) for n, c in pairs if n]

    names = _NAME_FIELD.findall(response)
    if names:
        return [(n.strip(), DISCOVERY_FALLBACK_CONFIDENCE) for n in names if n.strip()]

    bracket = _BRACKET_LIST.search(response)
    if bracket:
        parts = [p.strip().strip("'\"").strip() for p in bracket.group(1).split(",")]
        return [(p, DISCOVERY_FALLBACK_CONFIDENCE) for p in parts if p]
    return None


def _coerce_confidence(value) -> float:
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        return DISCOVERY_FALLBACK_CONFIDENCE
    return max(0.0, min(1.0, confidence))


def validate_organization_entity(name: str) -> bool:
    name = (name or "").strip()
    if len(name) < 3 or len(name) > 30:
        return False
    if not (name[0].isupper() or name[0].isdigit()):
        return False
    if _NUMERIC.match(name) or _INVALID_CHARS.search(name):
        return False
    return not (is_strict_stopword(name) or is_generic_quote(name))


def heuristic_discovery(terms: Sequence[str], text: str) -> dict:
    """Accept terms that carry a company suffix, a domain suffix or competitive context."""
    found = {}
    for term in _dedupe(terms):
        if not validate_organization_entity(term):
            continue
        if _has_company_suffix(term) or term.lower().endswith(COMPANY_DOMAIN_SUFFIXES):
            found[term] = HEURISTIC_DISCOVERY_CONFIDENCE
        elif _in_competitive_context(term, text or ""):
            found[term] = HEURISTIC_DISCOVERY_CONFIDENCE
    return found


def _has_company_suffix(term: str) -> bool:
    words = term.lower().split()
    return len(words) > 1 and words[-1] in COMPANY_SUFFIXES


def _in_competitive_context(term: str, text: str) -> bool:
    escaped = re.escape(term)
    before = rf"\b{_COMPETITIVE_CONTEXT}\s+(?:[\w.&-]+,\s+)*{escaped}(?!\w)"
    after = rf"(?<!\w){escaped}\s+(?:vs\.?|versus)\b"
    return bool(re.search(before, text, re.IGNORECASE) or re.search(after, text, re.IGNORECASE))
