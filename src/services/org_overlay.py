"""
Per-organization overlay edits.

Overlays are immutable; every operation returns a new ``OrgOverlay`` and
leaves the input untouched. Comparisons are case-insensitive and the first
spelling added is kept.
"""

from dataclasses import replace
from typing import Iterable, Tuple

from services.brand_detection.models import OrgOverlay


def _add(values: Tuple[str, ...], value: str) -> Tuple[str, ...]:
    value = (value or "").strip()
    if not value or value.lower() in {v.lower() for v in values}:
        return values
    return values + (value,)


def _remove(values: Tuple[str, ...], value: str) -> Tuple[str, ...]:
    key = (value or "").strip().lower()
    return tuple(v for v in values if v.lower() != key)


def add_competitor_override(overlay: OrgOverlay, competitor: str) -> OrgOverlay:
    return replace(overlay, competitor_overrides=_add(overlay.competitor_overrides, competitor))


def remove_competitor_override(overlay: OrgOverlay, competitor: str) -> OrgOverlay:
    return replace(overlay, competitor_overrides=_remove(overlay.competitor_overrides, competitor))


def add_competitor_exclusion(overlay: OrgOverlay, competitor: str) -> OrgOverlay:
    return replace(overlay, competitor_exclusions=_add(overlay.competitor_exclusions, competitor))


def remove_competitor_exclusion(overlay: OrgOverlay, competitor: str) -> OrgOverlay:
    return replace(overlay, competitor_exclusions=_remove(overlay.competitor_exclusions, competitor))


def add_brand_variant(overlay: OrgOverlay, variant: str) -> OrgOverlay:
    return replace(overlay, brand_variants=_add(overlay.brand_variants, variant))


def remove_brand_variant(overlay: OrgOverlay, variant: str) -> OrgOverlay:
    return replace(overlay, brand_variants=_remove(overlay.brand_variants, variant))


def merge_overlays(*overlays: OrgOverlay) -> OrgOverlay:
    """Union of several overlays, in order."""
    merged = OrgOverlay()
    for overlay in overlays:
        for name in overlay.competitor_overrides:
            merged = add_competitor_override(merged, name)
        for name in overlay.competitor_exclusions:
            merged = add_competitor_exclusion(merged, name)
        for name in overlay.brand_variants:
            merged = add_brand_variant(merged, name)
    return merged


def overlay_from_lists(
    overrides: Iterable[str] = (),
    exclusions: Iterable[str] = (),
    brand_variants: Iterable[str] = (),
) -> OrgOverlay:
    return merge_overlays(
        OrgOverlay(
            competitor_overrides=tuple(overrides),
            competitor_exclusions=tuple(exclusions),
            brand_variants=tuple(brand_variants),
        )
    )
