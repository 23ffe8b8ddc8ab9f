"""
Data models for brand detection.

This module contains the data structures that flow through the detection
pipeline: raw and normalized candidates, the organization profile and overlay
supplied by the caller, gazetteer entries, classification output and the final
analysis result.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple


@dataclass
class RawCandidate:
    """A candidate name found in the response text."""
    text: str
    mention_count: int = 1
    first_position_ratio: float = 0.0


@dataclass
class NormalizedCandidate:
    """A candidate after normalization and alias resolution."""
    original: str
    normalized_form: str
    canonical_form: str
    confidence: float
    mention_count: int = 1
    first_position_ratio: float = 0.0

    @property
    def is_valid(self) -> bool:
        from services.brand_detection.normalizer import is_valid_normalization

        return is_valid_normalization(self)


@dataclass
class BrandCatalogEntry:
    """One row of the organization's brand catalog snapshot."""
    name: str
    is_org_brand: bool = False
    variants: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class OrgOverlay:
    """Per-organization manual corrections layered over automatic detection."""
    competitor_overrides: Tuple[str, ...] = ()
    competitor_exclusions: Tuple[str, ...] = ()
    brand_variants: Tuple[str, ...] = ()


@dataclass
class OrgBrandProfile:
    """Everything known about the organization for one analysis run."""
    org_name: str
    domain: Optional[str] = None
    catalog_brand_names: List[str] = field(default_factory=list)
    catalog_variants: List[str] = field(default_factory=list)
    catalog_competitors: List[BrandCatalogEntry] = field(default_factory=list)
    overlay: OrgOverlay = field(default_factory=OrgOverlay)
    keywords: List[str] = field(default_factory=list)
    competitors: List[str] = field(default_factory=list)
    products_services: List[str] = field(default_factory=list)

    @classmethod
    def from_catalog(
        cls,
        org_name: str,
        catalog: Sequence[BrandCatalogEntry],
        domain: Optional[str] = None,
        overlay: Optional[OrgOverlay] = None,
        keywords: Optional[List[str]] = None,
        competitors: Optional[List[str]] = None,
        products_services: Optional[List[str]] = None,
    ) -> "OrgBrandProfile":
        """Split a catalog snapshot into org brands and private competitors."""
        brand_names = [e.name for e in catalog if e.is_org_brand]
        brand_variants = [v for e in catalog if e.is_org_brand for v in e.variants]
        catalog_competitors = [e for e in catalog if not e.is_org_brand]
        for name in competitors or []:
            if not any(c.name.lower() == name.lower() for c in catalog_competitors):
                catalog_competitors.append(BrandCatalogEntry(name=name))
        return cls(
            org_name=org_name,
            domain=domain,
            catalog_brand_names=brand_names,
            catalog_variants=brand_variants,
            catalog_competitors=catalog_competitors,
            overlay=overlay or OrgOverlay(),
            keywords=list(keywords or []),
            competitors=list(competitors or []),
            products_services=list(products_services or []),
        )

    def brand_variants(self) -> List[str]:
        """All self-aliases: org name, bare domain, catalog names and variants, overlay variants."""
        variants: List[str] = [self.org_name]
        if self.domain:
            variants.append(_domain_stem(self.domain))
        variants.extend(self.catalog_brand_names)
        variants.extend(self.catalog_variants)
        variants.extend(self.overlay.brand_variants)
        seen = set()
        unique = []
        for v in variants:
            key = (v or "").strip().lower()
            if key and key not in seen:
                seen.add(key)
                unique.append(v.strip())
        return unique


def _domain_stem(domain: str) -> str:
    stem = domain.lower().strip()
    for prefix in ("https://", "http://", "www."):
        if stem.startswith(prefix):
            stem = stem[len(prefix):]
    return stem.split("/")[0].rsplit(".", 1)[0]


@dataclass(frozen=True)
class GazetteerEntry:
    """A curated organization name with its aliases."""
    canonical_name: str
    category: str
    aliases: Tuple[str, ...] = ()
    confidence: float = 0.9


@dataclass(frozen=True)
class CrossProviderContext:
    """Competitors recently detected for the same prompt by other providers."""
    prompt_id: str
    recent_competitors: Tuple[str, ...] = ()


@dataclass
class ClassifiedMatch:
    """A candidate assigned to the org brand or competitor bucket."""
    name: str
    canonical: str
    source: str
    confidence: float
    mention_count: int = 1
    first_position_ratio: float = 0.0


@dataclass
class ClassifiedResult:
    """Output of candidate classification."""
    org_brands_found: List[ClassifiedMatch] = field(default_factory=list)
    competitors_found: List[ClassifiedMatch] = field(default_factory=list)
    rejected_terms: List[str] = field(default_factory=list)
    per_source_counts: Dict[str, int] = field(
        default_factory=lambda: {"catalog": 0, "global": 0, "discovered": 0}
    )
    confidence: float = 0.0
    consensus_boost_applied: bool = False
    unresolved_terms: List[str] = field(default_factory=list)

    @property
    def brand_names(self) -> List[str]:
        return [m.name for m in self.org_brands_found]

    @property
    def competitor_names(self) -> List[str]:
        return [m.name for m in self.competitors_found]

    def is_empty(self) -> bool:
        return not self.org_brands_found and not self.competitors_found


@dataclass
class AnalysisResult:
    """Final result persisted by the caller."""
    brand_present: bool
    prominence: Optional[int]
    competitors: List[str]
    brands: List[str]
    visibility_score: float
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class StrategyResult:
    """Classification produced by one detection strategy, with stage counts."""
    classified: ClassifiedResult
    stage_counts: Dict[str, int] = field(default_factory=dict)
    rejected_by_stage: Dict[str, List[str]] = field(default_factory=dict)

    strategy = "unknown"


@dataclass
class ConservativeResult(StrategyResult):
    """Catalog-only detection: precise, may under-match."""
    strategy = "conservative"


@dataclass
class LiberalResult(StrategyResult):
    """Full extract/normalize/validate/classify chain: broader recall."""
    strategy = "liberal"


@dataclass
class DiscoveryResult:
    """Organizations identified among unresolved candidates."""
    organizations: Dict[str, float] = field(default_factory=dict)
    method: str = "none"
    error: Optional[str] = None


@dataclass
class BrandSentiment:
    """Polarity and context of the organization's brand mention."""
    brand: str
    polarity: str = "neutral"
    confidence: float = 0.5
    context: str = "mention"
    reasoning: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
