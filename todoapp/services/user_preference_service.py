import logging
import math
from datetime import timedelta
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from todoapp.core.config import settings
from todoapp.models.task import Task
from todoapp.models.user_preference import UserPreference
from todoapp.schemas.user_preference import UserPreferenceUpdate, MLModels
from todoapp.utils.timezone import utcnow, as_utc

logger = logging.getLogger(__name__)

async def get_user_preferences(db: AsyncSession, user_id: int) -> UserPreference:
    query = select(UserPreference).filter(UserPreference.user_id == user_id)
    result = await db.execute(query)
    preferences = result.scalars().first()

    if not preferences:
        # Create default if not exists
        preferences = UserPreference(user_id=user_id, preferred_categories=[])
        db.add(preferences)
        await db.commit()
        await db.refresh(preferences)
        logger.info(f"🆕 Created default preferences for user {user_id}")

    return preferences

def _clip_categories(categories: list) -> list:
    limit = settings.PREFERRED_CATEGORIES_LIMIT
    return list(categories)[-limit:] if limit > 0 else []

async def update_user_preferences(db: AsyncSession, preferences_update: UserPreferenceUpdate, user_id: int) -> UserPreference:
    preferences = await get_user_preferences(db, user_id)

    update_data = preferences_update.model_dump(exclude_unset=True)
    if "preferred_categories" in update_data:
        preferences.preferred_categories = _clip_categories(update_data["preferred_categories"] or [])
    if update_data.get("working_hours"):
        preferences.working_hours_start = update_data["working_hours"]["start"]
        preferences.working_hours_end = update_data["working_hours"]["end"]
    if update_data.get("ml_models"):
        _apply_models(preferences, update_data["ml_models"])

    db.add(preferences)
    await db.commit()
    await db.refresh(preferences)
    logger.info(f"⚙️ Preferences updated for user {user_id}: {sorted(update_data)}")
    return preferences

def _apply_models(preferences: UserPreference, models: dict) -> None:
    for key in ("priority_model", "category_model", "duration_model"):
        if models.get(key):
            setattr(preferences, key, models[key])

async def store_ml_models(db: AsyncSession, models: MLModels, user_id: int) -> UserPreference:
    preferences = await get_user_preferences(db, user_id)
    _apply_models(preferences, models.model_dump())
    db.add(preferences)
    await db.commit()
    await db.refresh(preferences)
    return preferences

async def record_category_usage(db: AsyncSession, user_id: int, category: str) -> UserPreference:
    """Remember a category the user picked; the oldest entry drops off past the limit."""
    preferences = await get_user_preferences(db, user_id)
    categories = list(preferences.preferred_categories or [])

    if category not in categories:
        categories.append(category)
        # Reassign so the JSON column is flagged dirty
        preferences.preferred_categories = _clip_categories(categories)
        db.add(preferences)
        await db.commit()
        await db.refresh(preferences)

    return preferences

async def recalculate_productivity(db: AsyncSession, user_id: int) -> UserPreference | None:
    """
    Recompute productivity metrics from the user's whole task history.
    Returns None when the user has no tasks.
    """
    result = await db.execute(select(Task).filter(Task.user_id == user_id))
    tasks = result.scalars().all()
    if not tasks:
        return None

    now = utcnow()
    completed = [t for t in tasks if t.completed]
    high_priority = [t for t in tasks if t.priority == "high"]
    high_priority_done = [t for t in high_priority if t.completed]

    oldest = min(as_utc(t.created_at) for t in tasks)
    days_since_first = max(1, math.ceil((now - oldest) / timedelta(days=1)))

    with_completion = [t for t in completed if t.completed_at]
    average_completion_time = 0.0
    if with_completion:
        total_days = sum(
            (as_utc(t.completed_at) - as_utc(t.created_at)) / timedelta(days=1)
            for t in with_completion
        )
        average_completion_time = total_days / len(with_completion)

    preferences = await get_user_preferences(db, user_id)
    preferences.average_tasks_per_day = len(completed) / days_since_first
    preferences.high_priority_completion_rate = (
        len(high_priority_done) / len(high_priority) if high_priority else 0.0
    )
    preferences.average_completion_time = average_completion_time
    preferences.last_calculated = now

    db.add(preferences)
    await db.commit()
    await db.refresh(preferences)
    logger.info(f"📊 Productivity metrics recalculated for user {user_id}")
    return preferences
