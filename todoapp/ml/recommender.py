"""
Scores pending tasks for "what should I do now".

Each task starts from a priority base and collects bonuses for fitting the
current time bucket, for an approaching deadline and for a duration that
suits the time of day.
"""
import math
from datetime import datetime, timedelta
from typing import Any, Iterable, Mapping

from todoapp.ml.lexicons import DAY_TYPE_PROFILE, TIME_OF_DAY_PROFILE
from todoapp.utils.timezone import as_utc, local_now, to_utc

PRIORITY_BASE = {1: 100, 2: 50, 3: 20}
DEFAULT_BASE = 20

DEADLINE_BONUS = (
    (0, 100),   # due today
    (1, 70),    # due tomorrow
    (3, 40),
    (7, 20),
)


def get_current_time_period(now: datetime | None = None) -> dict:
    now = now or local_now()
    hour = now.hour
    # Sunday = 0 ... Saturday = 6
    day_of_week = (now.weekday() + 1) % 7

    if 5 <= hour < 12:
        time_of_day = "morning"
    elif 12 <= hour < 17:
        time_of_day = "afternoon"
    elif 17 <= hour < 22:
        time_of_day = "evening"
    else:
        time_of_day = "night"

    day_type = "weekend" if day_of_week in (0, 6) else "weekday"

    return {
        "time_of_day": time_of_day,
        "day_type": day_type,
        "hour": hour,
        "day_of_week": day_of_week,
    }


def _parse_due(value: Any) -> datetime | None:
    if not value:
        return None
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    if not isinstance(value, datetime):
        return None
    return to_utc(value)


def days_until_due(due: datetime, now: datetime) -> int:
    remaining = (as_utc(due) - as_utc(now)) / timedelta(days=1)
    return max(0, math.ceil(remaining))


def _deadline_bonus(days: int) -> int:
    for limit, bonus in DEADLINE_BONUS:
        if days <= limit:
            return bonus
    return 0


def _duration_bonus(time_of_day: str, minutes: Any) -> int:
    if not minutes:
        return 0
    try:
        minutes = float(minutes)
    except (TypeError, ValueError):
        return 0

    if time_of_day == "night" and minutes <= 30:
        return 20
    if time_of_day == "evening" and minutes <= 60:
        return 15
    if time_of_day == "morning" and minutes > 60:
        return 15
    return 0


def score_task(task: Mapping[str, Any], period: dict, now: datetime) -> float:
    score = PRIORITY_BASE.get(task.get("priority"), DEFAULT_BASE)

    category = task.get("category")
    time_profile = TIME_OF_DAY_PROFILE[period["time_of_day"]]
    day_profile = DAY_TYPE_PROFILE[period["day_type"]]
    if category in time_profile["categories"]:
        score += time_profile["productive"] / 2
    if category in day_profile["categories"]:
        score += day_profile["productive"] / 2

    due = _parse_due(task.get("due_date"))
    if due is not None:
        score += _deadline_bonus(days_until_due(due, now))

    score += _duration_bonus(period["time_of_day"], task.get("estimated_minutes"))
    return score


def recommend_tasks(
    tasks: Iterable[Mapping[str, Any]],
    user_data: Mapping[str, Any] | None = None,
    now: datetime | None = None,
) -> list[dict]:
    """
    Return copies of the tasks with a ``recommendation_score``, best first.

    ``user_data`` is accepted for personalization but does not affect the
    score yet. Ties keep their input order.
    """
    now = now or local_now()
    period = get_current_time_period(now)

    scored = [
        {**task, "recommendation_score": score_task(task, period, now)}
        for task in tasks
    ]
    scored.sort(key=lambda item: item["recommendation_score"], reverse=True)
    return scored
