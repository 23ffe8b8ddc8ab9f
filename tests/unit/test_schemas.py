import pytest
from pydantic import ValidationError

from models import AnalysisRequest, AnalysisResponse, BrandCatalogItem, CompetitorSource, DetectionStrategy
from services.brand_detection.orchestrator import analyze_response


def _request(**overrides):
    payload = {
        "text": "While Salesforce CRM is popular, our HubSpot Marketing Hub offers better value.",
        "org": {"name": "HubSpot", "domain": "hubspot.com", "competitors": ["Pipedrive"]},
        "catalog": [{"name": "HubSpot", "is_org_brand": True, "variants": ["HubSpot Marketing Hub"]}],
    }
    payload.update(overrides)
    return AnalysisRequest.model_validate(payload)


def test_request_builds_profile():
    request = _request(overlay={"competitor_exclusions": ["Zoho CRM"]})

    profile = request.to_profile()

    assert request.strategy == DetectionStrategy.BOTH
    assert profile.brand_variants() == ["HubSpot", "HubSpot Marketing Hub"]
    assert [c.name for c in profile.catalog_competitors] == ["Pipedrive"]
    assert profile.overlay.competitor_exclusions == ("Zoho CRM",)
    assert request.to_cross_provider() is None


def test_request_cross_provider_and_strategy():
    request = _request(strategy="liberal", cross_provider={"prompt_id": "p1", "recent_competitors": ["Asana"]})

    context = request.to_cross_provider()

    assert request.strategy == DetectionStrategy.LIBERAL
    assert context.prompt_id == "p1"
    assert context.recent_competitors == ("Asana",)


def test_request_rejects_unknown_strategy():
    with pytest.raises(ValidationError):
        _request(strategy="aggressive")


def test_catalog_item_requires_name():
    with pytest.raises(ValidationError):
        BrandCatalogItem(name="")


def test_response_from_result():
    request = _request()

    result = analyze_response(request.text, request.to_profile(), strategy=request.strategy)
    response = AnalysisResponse.from_result(result)

    assert response.brand_present is True
    assert response.competitors == ["Salesforce CRM"]
    assert set(response.metadata["per_source_counts"]) == {s.value for s in CompetitorSource}


@pytest.mark.parametrize("field,value", [("prominence", 11), ("visibility_score", 10.5)])
def test_response_bounds(field, value):
    payload = {"brand_present": True, "prominence": 1, "visibility_score": 5.0}
    payload[field] = value

    with pytest.raises(ValidationError):
        AnalysisResponse(**payload)
