from services.brand_detection.models import OrgOverlay
from services.org_overlay import (
    add_brand_variant,
    add_competitor_exclusion,
    add_competitor_override,
    merge_overlays,
    overlay_from_lists,
    remove_brand_variant,
    remove_competitor_exclusion,
    remove_competitor_override,
)


def test_add_override_is_case_insensitive():
    overlay = add_competitor_override(OrgOverlay(), "Plannery")
    overlay = add_competitor_override(overlay, "plannery")

    assert overlay.competitor_overrides == ("Plannery",)


def test_operations_return_new_overlay():
    original = OrgOverlay()

    updated = add_competitor_exclusion(original, "Asana")

    assert original.competitor_exclusions == ()
    assert updated.competitor_exclusions == ("Asana",)


def test_blank_values_are_ignored():
    assert add_brand_variant(OrgOverlay(), "   ") == OrgOverlay()


def test_remove_operations():
    overlay = OrgOverlay(
        competitor_overrides=("Plannery",),
        competitor_exclusions=("Asana",),
        brand_variants=("Acme AI",),
    )

    overlay = remove_competitor_override(overlay, "PLANNERY")
    overlay = remove_competitor_exclusion(overlay, "asana")
    overlay = remove_brand_variant(overlay, "acme ai")

    assert overlay == OrgOverlay()


def test_merge_overlays_keeps_first_spelling():
    first = OrgOverlay(competitor_overrides=("Plannery",), brand_variants=("Acme AI",))
    second = OrgOverlay(competitor_overrides=("PLANNERY", "Widgetly"), competitor_exclusions=("Asana",))

    merged = merge_overlays(first, second)

    assert merged.competitor_overrides == ("Plannery", "Widgetly")
    assert merged.competitor_exclusions == ("Asana",)
    assert merged.brand_variants == ("Acme AI",)


def test_overlay_from_lists_dedupes():
    overlay = overlay_from_lists(overrides=["Plannery", "plannery"], exclusions=["Asana"])

    assert overlay.competitor_overrides == ("Plannery",)
    assert overlay.competitor_exclusions == ("Asana",)
