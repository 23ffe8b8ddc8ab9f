import pytest

from services.brand_detection.sentiment import analyze_brand_sentiment, mention_context


def test_negated_recommendation_is_negative():
    sentiment = analyze_brand_sentiment("Asana", "I would not recommend Asana for large teams.")

    assert sentiment.polarity == "negative"
    assert sentiment.confidence == 0.6


def test_positive_mention():
    sentiment = analyze_brand_sentiment("Asana", "Asana is excellent and we recommend it.")

    assert sentiment.polarity == "positive"
    assert sentiment.confidence == pytest.approx(0.8)
    assert sentiment.context == "recommendation"


def test_negative_mention():
    sentiment = analyze_brand_sentiment("Asana", "Avoid Asana because of poor support.")

    assert sentiment.polarity == "negative"
    assert sentiment.confidence == pytest.approx(0.8)


def test_only_first_mentioning_sentence_counts():
    sentiment = analyze_brand_sentiment("Asana", "Trello is bad. Asana is great. Asana has issues.")

    assert sentiment.polarity == "positive"


def test_brand_not_mentioned():
    sentiment = analyze_brand_sentiment("Asana", "Trello is great.")

    assert sentiment.polarity == "neutral"
    assert sentiment.reasoning == "Brand not mentioned"
    assert sentiment.to_dict()["brand"] == "Asana"


@pytest.mark.parametrize(
    "sentence,expected",
    [
        ("Asana vs Trello for startups", "comparison"),
        ("Tools such as Asana exist", "example"),
        ("You should use Asana", "recommendation"),
        ("Asana was founded in 2008", "mention"),
    ],
)
def test_mention_context(sentence, expected):
    assert mention_context(sentence) == expected


def test_neutral_comparison():
    sentiment = analyze_brand_sentiment("Asana", "Asana vs Trello for startups.")

    assert sentiment.polarity == "neutral"
    assert sentiment.confidence == 0.5
    assert sentiment.context == "comparison"
