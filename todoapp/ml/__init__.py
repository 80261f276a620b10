"""Rule-based task heuristics: categorization, urgency, effort, sentiment and recommendations."""
from todoapp.ml.classifier import (
    categorize_task,
    estimate_completion_time,
    priority_label,
    priority_level,
    suggest_priority,
)
from todoapp.ml.insights import generate_productivity_insights
from todoapp.ml.recommender import get_current_time_period, recommend_tasks
from todoapp.ml.sentiment import analyze_sentiment, generate_motivational_response

__all__ = [
    "categorize_task",
    "suggest_priority",
    "estimate_completion_time",
    "priority_label",
    "priority_level",
    "recommend_tasks",
    "get_current_time_period",
    "generate_productivity_insights",
    "analyze_sentiment",
    "generate_motivational_response",
]
