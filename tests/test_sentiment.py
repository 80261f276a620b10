import pytest

from todoapp.ml import analyze_sentiment, generate_motivational_response
from todoapp.ml.sentiment import DEFAULT_MOTIVATION, SENTIMENT_RESPONSES, TONE_RESPONSES


def test_strongly_positive_text_is_excited():
    result = analyze_sentiment("I am excited and happy about this")
    assert result["sentiment"] == "positive"
    assert result["scores"]["positive"] == 100
    assert result["emotional_tone"] == "excited"
    assert result["emotional_intensity"] == 2
    assert result["matched_words"]["positive"] == ["excited", "happy"]


def test_mixed_positive_text_is_pleased():
    result = analyze_sentiment("good plan, bad timing")
    assert result["sentiment"] == "positive"
    assert result["scores"]["positive"] == 50
    assert result["emotional_tone"] == "pleased"
    assert result["emotional_intensity"] == 1


def test_multi_word_phrase_is_detected():
    result = analyze_sentiment("Looking forward to the trip")
    assert result["matched_words"]["positive"] == ["looking forward"]
    assert result["sentiment"] == "positive"


@pytest.mark.parametrize(
    "text, tone, intensity",
    [
        ("I feel anxious about this hard exam", "stressed", 2),
        ("This is boring and tedious", "bored", 1),
        ("Such a frustrating bug", "frustrated", 1),
    ],
)
def test_negative_tones(text, tone, intensity):
    result = analyze_sentiment(text)
    assert result["sentiment"] == "negative"
    assert result["emotional_tone"] == tone
    assert result["emotional_intensity"] == intensity


def test_neutral_holds_ties():
    result = analyze_sentiment("It is fine but hard")
    assert result["sentiment"] == "neutral"
    assert result["emotional_tone"] == "neutral"
    assert result["scores"] == {"positive": 0, "neutral": 50, "negative": 50}


def test_no_matches_is_fully_neutral():
    result = analyze_sentiment("Call the plumber")
    assert result["sentiment"] == "neutral"
    assert result["scores"] == {"positive": 0.0, "neutral": 100.0, "negative": 0.0}
    assert result["emotional_intensity"] == 0


def test_empty_text_has_zero_scores():
    result = analyze_sentiment("")
    assert result["sentiment"] == "neutral"
    assert result["scores"] == {"positive": 0.0, "neutral": 0.0, "negative": 0.0}


def test_motivation_prefers_tone():
    analysis = analyze_sentiment("I am excited")
    assert generate_motivational_response(analysis) == TONE_RESPONSES["excited"]


def test_motivation_falls_back_to_sentiment():
    analysis = analyze_sentiment("Call the plumber")
    assert generate_motivational_response(analysis) == SENTIMENT_RESPONSES["neutral"]


def test_motivation_without_analysis():
    assert generate_motivational_response(None) == DEFAULT_MOTIVATION
