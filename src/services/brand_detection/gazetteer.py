"""
Gazetteers: read-only name/alias lookup tables.

The global gazetteer is built once from the curated competitor list and never
mutated. Account-scoped gazetteers are built from an organization's verified
brand catalog and held in an explicitly constructed ``GazetteerRegistry`` that
callers pass into the pipeline.
"""

import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from constants.global_competitors import DEFAULT_GAZETTEER_CONFIDENCE, GLOBAL_COMPETITORS
from services.brand_detection.models import GazetteerEntry, OrgBrandProfile

logger = logging.getLogger(__name__)

ORG_BRAND_CATEGORY = "org_brand"
CATALOG_COMPETITOR_CATEGORY = "catalog_competitor"


def _key(name: str) -> str:
    return " ".join((name or "").lower().split())


class Gazetteer:
    """Immutable lookup keyed by lower-cased alias."""

    def __init__(self, entries: Iterable[GazetteerEntry]):
        self._entries = tuple(entries)
        index: Dict[str, GazetteerEntry] = {}
        for entry in self._entries:
            for term in (entry.canonical_name, *entry.aliases):
                key = _key(term)
                if key and key not in index:
                    index[key] = entry
        self._index: Mapping[str, GazetteerEntry] = MappingProxyType(index)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        return _key(name) in self._index

    @property
    def entries(self) -> tuple:
        return self._entries

    def lookup(self, name: str) -> Optional[GazetteerEntry]:
        return self._index.get(_key(name))

    def lookup_any(self, names: Iterable[str]) -> Optional[GazetteerEntry]:
        for name in names:
            entry = self.lookup(name)
            if entry is not None:
                return entry
        return None

    def terms(self) -> List[str]:
        """Every indexed name and alias."""
        return list(self._index.keys())

    def entries_in_category(self, category: str) -> List[GazetteerEntry]:
        return [e for e in self._entries if e.category == category]


def build_global_gazetteer(records: Optional[Sequence[dict]] = None) -> Gazetteer:
    records = GLOBAL_COMPETITORS if records is None else records
    entries = [
        GazetteerEntry(
            canonical_name=r["name"],
            category=r.get("category", "general"),
            aliases=tuple(r.get("aliases", ())),
            confidence=r.get("confidence", DEFAULT_GAZETTEER_CONFIDENCE),
        )
        for r in records
    ]
    return Gazetteer(entries)


def build_org_gazetteer(profile: OrgBrandProfile) -> Gazetteer:
    """Account-scoped gazetteer from the verified catalog only."""
    entries = [
        GazetteerEntry(
            canonical_name=profile.catalog_brand_names[0] if profile.catalog_brand_names else profile.org_name,
            category=ORG_BRAND_CATEGORY,
            aliases=tuple(profile.brand_variants()),
            confidence=1.0,
        )
    ]
    for competitor in profile.catalog_competitors:
        entries.append(
            GazetteerEntry(
                canonical_name=competitor.name,
                category=CATALOG_COMPETITOR_CATEGORY,
                aliases=tuple(competitor.variants),
                confidence=1.0,
            )
        )
    return Gazetteer(entries)


class GazetteerRegistry:
    """Per-organization gazetteers, built once per organization and then only read."""

    def __init__(self):
        self._gazetteers: Dict[str, Gazetteer] = {}
        self._lock = threading.Lock()

    def get(self, org_id: str, profile: OrgBrandProfile) -> Gazetteer:
        gazetteer = self._gazetteers.get(org_id)
        if gazetteer is not None:
            return gazetteer
        with self._lock:
            gazetteer = self._gazetteers.get(org_id)
            if gazetteer is None:
                gazetteer = build_org_gazetteer(profile)
                self._gazetteers[org_id] = gazetteer
                logger.info(f"Built org gazetteer for {org_id}: {len(gazetteer)} entries")
        return gazetteer

    def invalidate(self, org_id: Optional[str] = None) -> None:
        with self._lock:
            if org_id is None:
                self._gazetteers.clear()
            else:
                self._gazetteers.pop(org_id, None)

    def __contains__(self, org_id: str) -> bool:
        return org_id in self._gazetteers


GLOBAL_GAZETTEER = build_global_gazetteer()
