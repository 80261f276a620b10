from collections import defaultdict
from datetime import datetime
from typing import Any, Iterable, Mapping

from todoapp.utils.timezone import to_local, to_utc

TIME_LABELS = (
    "Early morning (12am-4am)",
    "Morning (4am-8am)",
    "Late morning (8am-12pm)",
    "Afternoon (12pm-4pm)",
    "Evening (4pm-8pm)",
    "Night (8pm-12am)",
)
DAY_LABELS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

NO_DATA = {
    "most_productive_time": None,
    "most_productive_day": None,
    "average_tasks_per_day": 0,
    "suggestions": ["Start completing tasks to see productivity insights"],
}


def _field(task: Any, name: str):
    if isinstance(task, Mapping):
        return task.get(name)
    return getattr(task, name, None)


def _completion_time(task: Any) -> datetime | None:
    value = _field(task, "completed_at")
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    if not isinstance(value, datetime):
        return None
    return to_local(to_utc(value))


def _busiest(buckets: dict) -> int | None:
    winner, highest = None, 0
    for key in sorted(buckets):
        if buckets[key]["count"] > highest:
            winner, highest = key, buckets[key]["count"]
    return winner


def generate_productivity_insights(completed_tasks: Iterable[Any] | None) -> dict:
    """
    Summarize when a user gets things done.

    Accepts ORM tasks or plain mappings exposing ``completed_at`` and an
    optional ``actual_minutes``. Completions are grouped in 4-hour blocks of
    the application timezone and by weekday.
    """
    tasks = [task for task in (completed_tasks or []) if _completion_time(task) is not None]
    if not tasks:
        return {**NO_DATA, "suggestions": list(NO_DATA["suggestions"])}

    by_block = defaultdict(lambda: {"count": 0, "minutes": 0})
    by_day = defaultdict(lambda: {"count": 0, "minutes": 0})
    total_minutes = 0
    days_covered = set()

    for task in tasks:
        completed = _completion_time(task)
        minutes = _field(task, "actual_minutes") or 0
        block = completed.hour // 4
        day = (completed.weekday() + 1) % 7

        by_block[block]["count"] += 1
        by_block[block]["minutes"] += minutes
        by_day[day]["count"] += 1
        by_day[day]["minutes"] += minutes

        total_minutes += minutes
        days_covered.add(completed.date())

    best_block = _busiest(by_block)
    best_day = _busiest(by_day)
    readable_time = TIME_LABELS[best_block]
    readable_day = DAY_LABELS[best_day]

    suggestions = [
        f"You are most productive during {readable_time}. Consider scheduling important tasks during this time.",
        f"{readable_day} is your most productive day. Plan challenging tasks for this day if possible.",
    ]
    if total_minutes > 0:
        suggestions.append(f"On average, you spend {round(total_minutes / len(tasks))} minutes per task.")

    return {
        "most_productive_time": readable_time,
        "most_productive_day": readable_day,
        "average_tasks_per_day": round(len(tasks) / len(days_covered), 1),
        "suggestions": suggestions,
    }
