import pytest

from services.brand_detection.entity_validator import (
    filter_candidates,
    filter_candidates_with_reasons,
    has_negative_context,
    passes_shape_heuristics,
)
from services.brand_detection.models import NormalizedCandidate, RawCandidate


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Asana", True),
        ("asana", False),
        ("later.com", True),
        ("eBay", True),
        ("b&q", True),
        ("", False),
    ],
)
def test_shape_heuristics(name, expected):
    assert passes_shape_heuristics(name) is expected


def test_stopwords_and_short_names_rejected():
    kept, rejected = filter_candidates_with_reasons(["Platform", "Go"], "Platform Go", allowlist=[])

    assert kept == []
    assert rejected == {"Platform": "stopword", "Go": "stopword"}


def test_calendar_words_rejected_as_stopwords():
    kept, rejected = filter_candidates_with_reasons(["Mondays", "October"], "Mondays in October", allowlist=[])

    assert kept == []
    assert rejected == {"Mondays": "stopword", "October": "stopword"}


def test_single_mention_without_cue_needs_allowlist():
    text = "Plannery is neat."

    assert filter_candidates(["Plannery"], text, allowlist=[]) == []
    assert filter_candidates(["Plannery"], text, allowlist=["plannery"]) == ["Plannery"]


def test_brand_cue_in_sentence_is_evidence():
    assert filter_candidates(["Plannery"], "Plannery offers planning.", allowlist=[]) == ["Plannery"]


def test_repeated_mentions_are_evidence():
    text = "Plannery is neat. We still use Plannery daily."
    assert filter_candidates(["Plannery"], text, allowlist=[]) == ["Plannery"]


def test_capability_description_rejected():
    text = "Zapflow lets you automate tasks. Zapflow is popular."

    kept, rejected = filter_candidates_with_reasons(["Zapflow"], text, allowlist=[])

    assert kept == []
    assert rejected == {"Zapflow": "negative_context"}


def test_negative_verbs_match_whole_words_only():
    assert has_negative_context("Canva", "Canva offers templates.") is False
    assert filter_candidates(["Canva"], "Canva offers templates.") == ["Canva"]


def test_accepts_candidate_objects():
    candidates = [
        RawCandidate("Asana"),
        NormalizedCandidate("trello", "Trello", "Trello", 1.0),
    ]

    assert filter_candidates(candidates, "Asana and Trello are popular.") == ["Asana", "Trello"]
