"""Keyword classifiers for a task's category, urgency and expected effort."""
import re

from todoapp.ml.lexicons import (
    CATEGORY_KEYWORDS,
    COMPLEXITY_WORDS,
    HIGH_PRIORITY_WORDS,
    MEDIUM_PRIORITY_WORDS,
    UNCATEGORIZED,
)

BASE_ESTIMATE_MINUTES = 30
QUICK_ESTIMATE_MINUTES = 15
COMPLEX_ESTIMATE_MINUTES = 60

_TIME_MENTION = re.compile(r"(\d+)\s*(min|hour|hr)", re.IGNORECASE)

_LEVEL_TO_PRIORITY = {1: "high", 2: "medium", 3: "low"}
_PRIORITY_TO_LEVEL = {label: level for level, label in _LEVEL_TO_PRIORITY.items()}


def _task_text(title: str | None, description: str | None) -> str:
    return f"{title or ''} {description or ''}".lower()


def categorize_task(title: str, description: str = "") -> str:
    """
    Pick the category whose keywords appear most often as whole words.
    Returns "uncategorized" when nothing matches.
    """
    text = _task_text(title, description)

    best_category = UNCATEGORIZED
    highest_score = 0
    for category, keywords in CATEGORY_KEYWORDS.items():
        score = sum(len(re.findall(rf"\b{re.escape(keyword)}\b", text)) for keyword in keywords)
        if score > highest_score:
            highest_score = score
            best_category = category

    return best_category


def suggest_priority(title: str, description: str = "") -> int:
    """1 is the most urgent, 3 the least."""
    text = _task_text(title, description)

    if any(word in text for word in HIGH_PRIORITY_WORDS):
        return 1
    if any(word in text for word in MEDIUM_PRIORITY_WORDS):
        return 2
    return 3


def estimate_completion_time(title: str, description: str = "") -> int:
    """
    Minutes a task is likely to take.

    An explicit mention such as "45 min" or "2 hours" wins over keywords.
    """
    text = _task_text(title, description)

    estimate = BASE_ESTIMATE_MINUTES
    if any(word in text for word in COMPLEXITY_WORDS["quick"]):
        estimate = QUICK_ESTIMATE_MINUTES
    elif any(word in text for word in COMPLEXITY_WORDS["complex"]):
        estimate = COMPLEX_ESTIMATE_MINUTES
    # "medium" words are not consulted; such tasks keep the base estimate

    match = _TIME_MENTION.search(text)
    if match:
        value = int(match.group(1))
        unit = match.group(2).lower()
        if unit in ("hour", "hr"):
            return value * 60
        return value

    return estimate


def priority_label(level: int | None) -> str:
    """Map a suggested level (1-3) onto the task priority field."""
    return _LEVEL_TO_PRIORITY.get(level, "low")


def priority_level(label: str | None) -> int:
    return _PRIORITY_TO_LEVEL.get((label or "").lower(), 3)
