from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from models.domain import DetectionStrategy
from services.brand_detection.models import (
    AnalysisResult,
    BrandCatalogEntry,
    CrossProviderContext,
    OrgBrandProfile,
    OrgOverlay,
)


class BrandCatalogItem(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    is_org_brand: bool = False
    variants: List[str] = Field(default_factory=list)

    def to_domain(self) -> BrandCatalogEntry:
        return BrandCatalogEntry(name=self.name, is_org_brand=self.is_org_brand, variants=list(self.variants))


class OrgOverlayIn(BaseModel):
    competitor_overrides: List[str] = Field(default_factory=list)
    competitor_exclusions: List[str] = Field(default_factory=list)
    brand_variants: List[str] = Field(default_factory=list)

    def to_domain(self) -> OrgOverlay:
        return OrgOverlay(
            competitor_overrides=tuple(self.competitor_overrides),
            competitor_exclusions=tuple(self.competitor_exclusions),
            brand_variants=tuple(self.brand_variants),
        )


class OrgProfileIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    domain: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    competitors: List[str] = Field(default_factory=list)
    products_services: List[str] = Field(default_factory=list)


class CrossProviderContextIn(BaseModel):
    prompt_id: str
    recent_competitors: List[str] = Field(default_factory=list)

    def to_domain(self) -> CrossProviderContext:
        return CrossProviderContext(prompt_id=self.prompt_id, recent_competitors=tuple(self.recent_competitors))


class AnalysisRequest(BaseModel):
    text: str = ""
    org: OrgProfileIn
    catalog: List[BrandCatalogItem] = Field(default_factory=list)
    overlay: Optional[OrgOverlayIn] = None
    cross_provider: Optional[CrossProviderContextIn] = None
    strategy: DetectionStrategy = DetectionStrategy.BOTH

    def to_profile(self) -> OrgBrandProfile:
        return OrgBrandProfile.from_catalog(
            org_name=self.org.name,
            catalog=[item.to_domain() for item in self.catalog],
            domain=self.org.domain,
            overlay=self.overlay.to_domain() if self.overlay else None,
            keywords=self.org.keywords,
            competitors=self.org.competitors,
            products_services=self.org.products_services,
        )

    def to_cross_provider(self) -> Optional[CrossProviderContext]:
        return self.cross_provider.to_domain() if self.cross_provider else None


class AnalysisResponse(BaseModel):
    brand_present: bool
    prominence: Optional[int] = Field(default=None, ge=1, le=10)
    competitors: List[str] = Field(default_factory=list)
    brands: List[str] = Field(default_factory=list)
    visibility_score: float = Field(..., ge=0.0, le=10.0)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisResponse":
        return cls(**result.to_dict())
