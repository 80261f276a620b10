"""
Lexicon-based sentiment for task text.

The analyzer counts words from three fixed word lists and derives an
emotional tone used to pick an encouraging message.
"""
import re

from todoapp.ml.lexicons import BOREDOM_MARKERS, SENTIMENT_WORDS, STRESS_MARKERS

SENTIMENTS = ("positive", "neutral", "negative")

DEFAULT_MOTIVATION = {
    "message": "You've got this!",
    "suggestion": "Break your task into smaller parts to make it more manageable.",
}

SENTIMENT_RESPONSES = {
    "positive": {
        "message": "Great attitude! You're on the right track.",
        "suggestion": "Use this positive energy to tackle your most important tasks.",
    },
    "neutral": {
        "message": "You've got this!",
        "suggestion": "Setting a timer can help you stay focused on this task.",
    },
    "negative": {
        "message": "This task seems challenging, but you can handle it.",
        "suggestion": "Break it down into smaller steps to make it more manageable.",
    },
}

TONE_RESPONSES = {
    "excited": {
        "message": "Your enthusiasm is contagious! Channel that energy!",
        "suggestion": "This is a great time to tackle something challenging.",
    },
    "pleased": {
        "message": "You seem positive about this task - that's half the battle!",
        "suggestion": "Build on this momentum by planning your next steps.",
    },
    "stressed": {
        "message": "It's normal to feel overwhelmed sometimes. Take a deep breath.",
        "suggestion": "Focus on just the first step. Progress, not perfection.",
    },
    "bored": {
        "message": "Even routine tasks can be opportunities for small improvements.",
        "suggestion": "Try setting a personal challenge to make this more interesting.",
    },
    "frustrated": {
        "message": "This task may be challenging, but you've overcome difficult things before.",
        "suggestion": "Consider asking for help or taking a short break to reset.",
    },
}


def _empty_result() -> dict:
    return {
        "sentiment": "neutral",
        "scores": {"positive": 0.0, "neutral": 0.0, "negative": 0.0},
        "matched_words": {sentiment: [] for sentiment in SENTIMENTS},
        "emotional_tone": "neutral",
        "emotional_intensity": 0,
    }


def analyze_sentiment(text: str | None) -> dict:
    if not text:
        return _empty_result()

    lowered = text.lower()
    words = re.split(r"\W+", lowered)

    counts = dict.fromkeys(SENTIMENTS, 0)
    matched = {sentiment: [] for sentiment in SENTIMENTS}

    for word in words:
        for sentiment, vocabulary in SENTIMENT_WORDS.items():
            if word in vocabulary:
                counts[sentiment] += 1
                matched[sentiment].append(word)

    # Multi-word phrases can never survive tokenization, so look for them in the raw text
    for sentiment, vocabulary in SENTIMENT_WORDS.items():
        for phrase in vocabulary:
            if " " in phrase and phrase in lowered:
                counts[sentiment] += 1
                matched[sentiment].append(phrase)

    # Neutral holds ties; positive is weighed before negative
    dominant = "neutral"
    highest = counts["neutral"]
    if counts["positive"] > highest:
        dominant, highest = "positive", counts["positive"]
    if counts["negative"] > highest:
        dominant, highest = "negative", counts["negative"]

    total = sum(counts.values())
    if total:
        scores = {sentiment: counts[sentiment] / total * 100 for sentiment in SENTIMENTS}
    else:
        scores = {"positive": 0.0, "neutral": 100.0, "negative": 0.0}

    tone, intensity = "neutral", 0
    if dominant == "positive":
        if scores["positive"] > 75:
            tone, intensity = "excited", 2
        else:
            tone, intensity = "pleased", 1
    elif dominant == "negative":
        if any(marker in lowered for marker in STRESS_MARKERS):
            tone, intensity = "stressed", 2
        elif any(marker in lowered for marker in BOREDOM_MARKERS):
            tone, intensity = "bored", 1
        else:
            tone, intensity = "frustrated", 1

    return {
        "sentiment": dominant,
        "scores": scores,
        "matched_words": matched,
        "emotional_tone": tone,
        "emotional_intensity": intensity,
    }


def generate_motivational_response(analysis: dict | None) -> dict:
    """Pick an encouraging message for a sentiment result, tone first."""
    if not analysis:
        return dict(DEFAULT_MOTIVATION)

    tone = analysis.get("emotional_tone")
    if tone in TONE_RESPONSES:
        return dict(TONE_RESPONSES[tone])
    return dict(SENTIMENT_RESPONSES.get(analysis.get("sentiment"), DEFAULT_MOTIVATION))
