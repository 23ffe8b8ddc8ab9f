import pytest

from services.brand_detection import config as detection_config
from services.brand_detection.discovery import DiscoveryClient
from services.brand_detection.gazetteer import GazetteerRegistry
from services.brand_detection.models import CrossProviderContext, OrgOverlay
from services.brand_detection.orchestrator import (
    analysis_hash,
    analyze_response,
    analyze_response_async,
)

CRM_TEXT = "While Salesforce CRM is popular, our HubSpot Marketing Hub offers better value."
UNKNOWN_VENDOR_TEXT = "Plannery offers simple boards. Many teams pick Plannery for planning."
MARKDOWN_TEXT = (
    "## Best tools\n\n"
    "1. **Asana** is a leading project platform [1]\n"
    "2. [Trello](https://www.trello.com/pricing) offers simple boards [2]"
)


class StubClient(DiscoveryClient):
    def __init__(self, response="[]", error=None):
        self.response = response
        self.error = error
        self.calls = 0

    async def complete(self, prompt, system_prompt=None):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.response


def test_brand_and_competitor_detected(hubspot_profile):
    result = analyze_response(CRM_TEXT, hubspot_profile)

    assert result.brands == ["HubSpot Marketing Hub"]
    assert result.competitors == ["Salesforce CRM"]
    assert result.brand_present is True
    assert result.prominence == 4
    assert 7.9 <= result.visibility_score <= 8.0
    assert result.metadata["strategy_requested"] == "both"
    assert result.metadata["strategy_used"] == "liberal"
    assert result.metadata["confidence"] == pytest.approx(1.0)
    assert result.metadata["per_source_counts"]["global"] == 1
    assert result.metadata["strategy_diff"]["competitors_only_liberal"] == ["Salesforce CRM"]
    assert set(result.metadata["stage_counts"]) == {"conservative", "liberal"}


def test_brand_sentiment_reported(hubspot_profile):
    result = analyze_response(CRM_TEXT, hubspot_profile)

    sentiment = result.metadata["brand_sentiment"]
    assert sentiment["brand"] == "HubSpot Marketing Hub"
    assert sentiment["polarity"] == "positive"


def test_brand_sentiment_can_be_disabled(hubspot_profile, monkeypatch):
    monkeypatch.setattr(detection_config, "ENABLE_MENTION_SENTIMENT", False)

    result = analyze_response(CRM_TEXT, hubspot_profile)

    assert "brand_sentiment" not in result.metadata


def test_competitors_only(make_profile):
    result = analyze_response("Zoho CRM and Freshworks are gaining traction.", make_profile("Acme"))

    assert result.brand_present is False
    assert result.prominence is None
    assert result.competitors == ["Zoho CRM", "Freshworks"]
    assert result.visibility_score == 1.6
    assert result.metadata["confidence"] == pytest.approx(0.9)


@pytest.mark.parametrize("text", ["", "   ", None, 42])
def test_empty_or_invalid_text(hubspot_profile, text):
    result = analyze_response(text, hubspot_profile)

    assert result.brand_present is False
    assert result.brands == []
    assert result.competitors == []
    assert result.prominence is None
    assert result.visibility_score == 2.0
    assert result.metadata["confidence"] == 0.0
    assert result.metadata["error"] == "empty_or_invalid_text"


def test_text_without_brand_like_tokens(make_profile):
    result = analyze_response("there are many options for small teams today.", make_profile("Acme"))

    assert result.brands == []
    assert result.competitors == []
    assert result.visibility_score == 2.0


def test_idempotent(hubspot_profile):
    first = analyze_response(CRM_TEXT, hubspot_profile).to_dict()
    second = analyze_response(CRM_TEXT, hubspot_profile).to_dict()

    first["metadata"].pop("processing_time_ms")
    second["metadata"].pop("processing_time_ms")
    assert first == second


def test_overlay_exclusion(hubspot_profile):
    hubspot_profile.overlay = OrgOverlay(competitor_exclusions=("Salesforce",))

    result = analyze_response(CRM_TEXT, hubspot_profile)

    assert result.competitors == []
    assert result.brands == ["HubSpot Marketing Hub"]
    assert result.metadata["strategy_used"] == "conservative"


def test_overlay_exclusion_by_alias(make_profile):
    profile = make_profile("Acme", overlay=OrgOverlay(competitor_exclusions=("SFDC",)))

    result = analyze_response("Many teams use Salesforce CRM for pipelines.", profile)

    assert result.competitors == []


def test_weekday_plural_is_not_a_competitor(make_profile):
    text = "Mondays are hard for teams, so Asana offers a weekly platform view."

    result = analyze_response(text, make_profile("Acme"))

    assert result.competitors == ["Asana"]


def test_conservative_strategy_only(hubspot_profile):
    result = analyze_response(CRM_TEXT, hubspot_profile, strategy="conservative")

    assert result.metadata["strategy_used"] == "conservative"
    assert result.competitors == []
    assert "strategy_diff" not in result.metadata
    assert "rejected_by_stage" not in result.metadata


def test_liberal_strategy_only(hubspot_profile):
    result = analyze_response(CRM_TEXT, hubspot_profile, strategy="liberal")

    assert result.metadata["strategy_used"] == "liberal"
    assert result.competitors == ["Salesforce CRM"]
    assert "strategy_diff" not in result.metadata


def test_catalog_competitor_keeps_conservative(taskly_profile):
    text = "For small teams, Plannery is a lightweight option. Taskly offers deeper reporting."

    result = analyze_response(text, taskly_profile)

    assert result.metadata["strategy_used"] == "conservative"
    assert result.brands == ["Taskly"]
    assert result.competitors == ["Plannery"]
    assert result.prominence == 7
    assert result.metadata["per_source_counts"]["catalog"] == 1


def test_markdown_is_cleaned_and_domains_cited(make_profile):
    result = analyze_response(MARKDOWN_TEXT, make_profile("Acme"))

    assert set(result.competitors) == {"Asana", "Trello"}
    assert result.metadata["cited_domains"] == ["trello.com"]


def test_preprocessing_can_be_disabled(make_profile, monkeypatch):
    monkeypatch.setattr(detection_config, "ENABLE_TEXT_PREPROCESSING", False)

    result = analyze_response(MARKDOWN_TEXT, make_profile("Acme"))

    assert result.metadata["cited_domains"] == []


def test_registry_caches_org_gazetteer(taskly_profile):
    registry = GazetteerRegistry()

    analyze_response("Taskly offers reporting.", taskly_profile, registry=registry, org_id="org-1")

    assert "org-1" in registry


def test_consensus_boost_reported(hubspot_profile):
    context = CrossProviderContext(prompt_id="p1", recent_competitors=("Salesforce",))

    result = analyze_response(CRM_TEXT, hubspot_profile, cross_provider=context)

    assert result.metadata["consensus_boost_applied"] is True


def test_analysis_hash_is_stable():
    digest = analysis_hash(CRM_TEXT, ["HubSpot"], ["Salesforce CRM"])

    assert digest == analysis_hash(CRM_TEXT, ["HubSpot"], ["Salesforce CRM"])
    assert digest != analysis_hash(CRM_TEXT, ["HubSpot"], [])
    assert len(digest) == 64


@pytest.mark.asyncio
async def test_async_discovery_adds_competitor(make_profile):
    client = StubClient('[{"name": "Plannery", "confidence": 0.9}]')

    result = await analyze_response_async(UNKNOWN_VENDOR_TEXT, make_profile("Acme"), discovery_client=client)

    assert result.competitors == ["Plannery"]
    assert result.metadata["discovery"]["method"] == "model"
    assert result.metadata["discovery"]["organizations"] == {"Plannery": 0.9}
    assert result.metadata["per_source_counts"]["discovered"] == 1


@pytest.mark.asyncio
async def test_async_discovery_failure_keeps_result(make_profile):
    client = StubClient(error=RuntimeError("model offline"))

    result = await analyze_response_async(UNKNOWN_VENDOR_TEXT, make_profile("Acme"), discovery_client=client)

    assert result.competitors == []
    assert result.metadata["discovery"]["method"] == "heuristic"
    assert "model offline" in result.metadata["discovery"]["error"]


def test_sync_entry_point_runs_discovery(make_profile):
    client = StubClient('[{"name": "Plannery", "confidence": 0.9}]')

    result = analyze_response(UNKNOWN_VENDOR_TEXT, make_profile("Acme"), discovery_client=client)

    assert result.competitors == ["Plannery"]
    assert client.calls == 1


@pytest.mark.asyncio
async def test_sync_entry_point_inside_running_loop_skips_discovery(make_profile, caplog):
    client = StubClient('[{"name": "Plannery", "confidence": 0.9}]')

    result = analyze_response(UNKNOWN_VENDOR_TEXT, make_profile("Acme"), discovery_client=client)

    assert result.competitors == []
    assert client.calls == 0
    assert "discovery" not in result.metadata
    assert "running event loop" in caplog.text


def test_conservative_strategy_skips_discovery(make_profile):
    client = StubClient('[{"name": "Plannery", "confidence": 0.9}]')

    result = analyze_response(
        UNKNOWN_VENDOR_TEXT, make_profile("Acme"), strategy="conservative", discovery_client=client
    )

    assert result.competitors == []
    assert client.calls == 0
    assert "discovery" not in result.metadata


def test_without_discovery_unknown_names_are_dropped(make_profile):
    result = analyze_response(UNKNOWN_VENDOR_TEXT, make_profile("Acme"))

    assert result.competitors == []
    assert "Plannery" in result.metadata["rejected_by_stage"]["classification"]
