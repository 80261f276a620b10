import logging
from sqlalchemy.ext.asyncio import AsyncSession
from todoapp import ml
from todoapp.models.task import Task
from todoapp.services import task_service, user_preference_service
from todoapp.utils.timezone import as_utc

logger = logging.getLogger(__name__)

def task_features(task: Task) -> dict:
    """Shape a stored task the way the recommender reads it."""
    return {
        "id": task.id,
        "title": task.title,
        "category": task.category,
        "priority": ml.priority_level(task.priority),
        "due_date": as_utc(task.due_date),
        "estimated_minutes": ml.estimate_completion_time(task.title, task.description or ""),
    }

async def get_personalization(db: AsyncSession, user_id: int) -> dict:
    preferences = await user_preference_service.get_user_preferences(db, user_id)
    return {
        "preferred_categories": list(preferences.preferred_categories or []),
        "working_hours": preferences.working_hours,
        "productivity": preferences.productivity,
    }

async def recommend_for_user(db: AsyncSession, user_id: int, tasks: list[dict] | None = None) -> list[dict]:
    """
    Rank the supplied tasks, or the user's pending tasks when none are supplied.
    """
    user_data = await get_personalization(db, user_id)
    if tasks is None:
        stored = await task_service.get_pending_tasks(db, user_id)
        tasks = [task_features(t) for t in stored]

    recommendations = ml.recommend_tasks(tasks, user_data)
    logger.info(f"🎯 Ranked {len(recommendations)} tasks for user {user_id}")
    return recommendations

async def insights_for_user(db: AsyncSession, user_id: int, supplied: list | None = None) -> dict:
    """Prefer the user's own completion history; fall back to the supplied tasks."""
    history = await task_service.get_completed_history(db, user_id)
    if history:
        # Stored times are UTC even when the driver hands them back naive
        completed = [{"completed_at": as_utc(t.completed_at)} for t in history]
    else:
        completed = supplied or []
    return ml.generate_productivity_insights(completed)
