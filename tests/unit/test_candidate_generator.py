from services.brand_detection.candidate_generator import (
    _clean_phrase,
    _quoted_matches,
    extract_candidates,
)


def _names(text):
    return {c.text for c in extract_candidates(text)}


def test_extracts_proper_nouns_and_business_cue_phrases():
    names = _names("While Salesforce CRM is popular, our HubSpot Marketing Hub offers better value.")

    assert "Salesforce CRM" in names
    assert "HubSpot Marketing Hub" in names
    assert "HubSpot" in names
    assert "While" not in names
    assert "While Salesforce CRM" not in names


def test_extracts_listed_names():
    names = _names("Popular alternatives to Pipedrive include Zoho CRM, Freshworks and HubSpot.")

    assert {"Pipedrive", "Zoho CRM", "Freshworks", "HubSpot"} <= names
    assert "Popular" not in names


def test_extracts_quoted_phrase():
    assert "Plannery Pro" in _names('Teams love "Plannery Pro" for planning.')


def test_generic_quotes_are_ignored():
    assert list(_quoted_matches('Click "Learn More" today')) == []


def test_extracts_domain_and_camel_case():
    assert "Later.com" in _names("Try Later.com for scheduling.")
    assert "ClickUp" in _names("We moved to ClickUp last year.")


def test_counts_mentions_and_first_position():
    candidates = {c.text: c for c in extract_candidates("Asana is great. Asana is fast.")}

    assert candidates["Asana"].mention_count == 2
    assert candidates["Asana"].first_position_ratio == 0.0


def test_candidates_sorted_by_position():
    candidates = extract_candidates("Trello and Notion are both fine.")

    assert [c.text for c in candidates][:2] == ["Trello", "Notion"]
    assert candidates[0].first_position_ratio < candidates[1].first_position_ratio


def test_empty_and_non_string_input():
    assert extract_candidates("") == []
    assert extract_candidates(None) == []


def test_clean_phrase():
    assert _clean_phrase("While Salesforce CRM") == ("Salesforce CRM", 6)
    assert _clean_phrase("Asana, Trello") == ("Asana", 0)
    assert _clean_phrase("the tools") is None


def test_calendar_words_are_not_candidates():
    names = _names("Mondays are hard for teams, so Asana offers a weekly platform view.")

    assert "Mondays" not in names
    assert "Asana" in names
    assert _clean_phrase("In October Trello") == ("Trello", 11)
