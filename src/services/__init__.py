from .consensus import ProviderObservation, build_cross_provider_context, cross_provider_consensus
from .org_overlay import (
    add_brand_variant,
    add_competitor_exclusion,
    add_competitor_override,
    merge_overlays,
    remove_brand_variant,
    remove_competitor_exclusion,
    remove_competitor_override,
)

__all__ = [
    "ProviderObservation",
    "build_cross_provider_context",
    "cross_provider_consensus",
    "add_brand_variant",
    "add_competitor_exclusion",
    "add_competitor_override",
    "merge_overlays",
    "remove_brand_variant",
    "remove_competitor_exclusion",
    "remove_competitor_override",
]
