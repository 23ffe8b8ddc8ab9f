from services.brand_detection.text_utils import (
    _parse_json_list_response,
    contains_any_term,
    count_mentions,
    find_term,
    normalize_whitespace,
    preprocess_response,
    split_sentences,
)


def test_preprocess_strips_markdown_and_citations():
    text = (
        "## Best tools\n\n"
        "1. **Asana** is a leading project platform [1]\n"
        "2. [Trello](https://www.trello.com/pricing) offers simple boards [2]"
    )

    result = preprocess_response(text)

    assert "Asana is a leading project platform" in result.text
    assert "Trello offers simple boards" in result.text
    assert "**" not in result.text
    assert "[1]" not in result.text
    assert "https" not in result.text
    assert result.cited_domains == ["trello.com"]


def test_preprocess_replaces_bare_urls_with_domain():
    result = preprocess_response("See https://www.asana.com/guide for details.")

    assert result.text == "See asana.com for details."
    assert result.cited_domains == ["asana.com"]


def test_preprocess_removes_author_year_citations():
    result = preprocess_response("Asana leads the market (Smith et al., 2020).")

    assert "Smith" not in result.text
    assert result.text.startswith("Asana leads the market")


def test_preprocess_empty():
    assert preprocess_response("").text == ""


def test_normalize_whitespace():
    assert normalize_whitespace("a   b\n\n\n\nc") == "a b\n\nc"


def test_split_sentences():
    text = "Asana is great! Is Trello better? Yes. v2.0 is out"

    assert split_sentences(text) == ["Asana is great", "Is Trello better", "Yes", "v2.0 is out"]


def test_find_term_is_word_bounded():
    assert find_term("Canva offers templates", "can") is None
    assert find_term("I use ASANA daily", "Asana").group(0) == "ASANA"
    assert find_term("", "Asana") is None


def test_count_mentions():
    assert count_mentions("Asana, asana and Asanas", "asana") == 2
    assert count_mentions("Asana", "") == 0


def test_contains_any_term():
    assert contains_any_term("Try Trello today", ["asana", "trello"])
    assert not contains_any_term("Try Trello today", ["asana"])


def test_parse_json_list_response_tolerates_wrappers():
    assert _parse_json_list_response('```json\n[{"name": "Asana"}]\n```') == [{"name": "Asana"}]
    assert _parse_json_list_response('{"organizations": ["Asana"]}') == ["Asana"]
    assert _parse_json_list_response('Here you go: ["Trello"] thanks') == ["Trello"]
    assert _parse_json_list_response("nothing") is None
