from services.brand_detection.gazetteer import GLOBAL_GAZETTEER, build_org_gazetteer
from services.brand_detection.models import (
    ClassifiedMatch,
    ClassifiedResult,
    ConservativeResult,
    LiberalResult,
    OrgOverlay,
)
from services.brand_detection.strategies import (
    diff_results,
    evidence_allowlist,
    run_conservative,
    run_liberal,
    select_result,
)

CRM_TEXT = "While Salesforce CRM is popular, our HubSpot Marketing Hub offers better value."


def _conservative(brands=(), competitors=()):
    return ConservativeResult(classified=_classified(brands, competitors))


def _liberal(brands=(), competitors=()):
    return LiberalResult(classified=_classified(brands, competitors))


def _classified(brands, competitors):
    return ClassifiedResult(
        org_brands_found=[ClassifiedMatch(b, b.lower(), "org_brand", 1.0) for b in brands],
        competitors_found=[ClassifiedMatch(c, c.lower(), "global", 0.9) for c in competitors],
    )


def test_conservative_finds_only_catalog_names(hubspot_profile):
    result = run_conservative(CRM_TEXT, hubspot_profile)

    assert result.strategy == "conservative"
    assert result.classified.brand_names == ["HubSpot Marketing Hub"]
    assert result.classified.competitor_names == []
    assert result.stage_counts["catalog_terms"] == 2


def test_conservative_catalog_competitor(taskly_profile):
    text = "For small teams, Plannery is a lightweight option. Taskly offers deeper reporting."

    result = run_conservative(text, taskly_profile, build_org_gazetteer(taskly_profile))

    assert result.classified.brand_names == ["Taskly"]
    assert result.classified.competitor_names == ["Plannery"]
    assert result.classified.competitors_found[0].source == "catalog"


def test_conservative_includes_overrides(make_profile):
    profile = make_profile("Acme", overlay=OrgOverlay(competitor_overrides=("Plannery",)))

    result = run_conservative("Plannery offers simple boards.", profile)

    assert result.classified.competitor_names == ["Plannery"]


def test_liberal_finds_global_competitors(hubspot_profile):
    result = run_liberal(CRM_TEXT, hubspot_profile)

    assert result.strategy == "liberal"
    assert result.classified.brand_names == ["HubSpot Marketing Hub"]
    assert result.classified.competitor_names == ["Salesforce CRM"]
    assert result.classified.per_source_counts["global"] == 1
    assert set(result.rejected_by_stage) == {"validation", "classification"}
    assert result.stage_counts["candidates_extracted"] >= 2


def test_liberal_leaves_unknown_names_unresolved(make_profile):
    text = "Plannery offers simple boards. Many teams pick Plannery for planning."

    result = run_liberal(text, make_profile("Acme"))

    assert result.classified.competitor_names == []
    assert "Plannery" in result.classified.unresolved_terms


def test_liberal_accepts_discovered_names(make_profile):
    text = "Plannery offers simple boards. Many teams pick Plannery for planning."

    result = run_liberal(text, make_profile("Acme"), discovered={"Plannery": 0.9})

    assert result.classified.competitor_names == ["Plannery"]
    assert result.classified.per_source_counts["discovered"] == 1


def test_select_prefers_conservative_with_competitors():
    conservative = _conservative(competitors=["Plannery"])
    liberal = _liberal(competitors=["Plannery", "Asana"])

    assert select_result(conservative, liberal) is conservative


def test_select_falls_back_to_liberal_competitors():
    conservative = _conservative(brands=["HubSpot"])
    liberal = _liberal(brands=["HubSpot"], competitors=["Salesforce"])

    assert select_result(conservative, liberal) is liberal


def test_select_liberal_competitors_drops_brand_only_conservative_saw():
    conservative = _conservative(brands=["Acme"])
    liberal = _liberal(competitors=["Asana"])

    selected = select_result(conservative, liberal)

    assert selected is liberal
    assert selected.classified.brand_names == []
    assert diff_results(conservative, liberal)["brands_only_conservative"] == ["Acme"]


def test_select_falls_back_when_conservative_empty():
    conservative = _conservative()
    liberal = _liberal(brands=["HubSpot"])

    assert select_result(conservative, liberal) is liberal


def test_select_keeps_conservative_when_nothing_else_found():
    conservative = _conservative(brands=["HubSpot"])
    liberal = _liberal(brands=["HubSpot"])

    assert select_result(conservative, liberal) is conservative


def test_select_both_empty_returns_conservative():
    conservative = _conservative()
    liberal = _liberal()

    assert select_result(conservative, liberal) is conservative


def test_diff_results(hubspot_profile):
    conservative = run_conservative(CRM_TEXT, hubspot_profile)
    liberal = run_liberal(CRM_TEXT, hubspot_profile)

    diff = diff_results(conservative, liberal)

    assert diff["competitors_only_liberal"] == ["Salesforce CRM"]
    assert diff["competitors_only_conservative"] == []
    assert diff["brands_only_conservative"] == []
    assert diff["brands_only_liberal"] == []


def test_evidence_allowlist(taskly_profile):
    profile = taskly_profile
    profile.overlay = OrgOverlay(competitor_overrides=("Widgetly",))

    allowed = evidence_allowlist(GLOBAL_GAZETTEER, profile)

    assert {"asana", "plannery", "plannery app", "widgetly", "taskly"} <= set(allowed)
