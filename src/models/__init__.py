from models.domain import CompetitorSource, DetectionStrategy, MentionContext, Sentiment
from models.schemas import (
    AnalysisRequest,
    AnalysisResponse,
    BrandCatalogItem,
    CrossProviderContextIn,
    OrgOverlayIn,
    OrgProfileIn,
)

__all__ = [
    "CompetitorSource",
    "DetectionStrategy",
    "MentionContext",
    "Sentiment",
    "AnalysisRequest",
    "AnalysisResponse",
    "BrandCatalogItem",
    "CrossProviderContextIn",
    "OrgOverlayIn",
    "OrgProfileIn",
]
