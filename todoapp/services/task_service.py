import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc
from todoapp.core.config import settings
from todoapp.models.task import Task
from todoapp.schemas.task import TaskCreate, TaskUpdate
from todoapp.services import notification_service, user_preference_service
from todoapp.utils.timezone import to_utc

logger = logging.getLogger(__name__)

async def create_new_task(db: AsyncSession, task: TaskCreate, user_id: int) -> Task:
    logger.info(f"📝 Creating task for user {user_id}: '{task.title}'")

    try:
        db_task = Task(
            title=task.title,
            description=task.description,
            due_date=to_utc(task.due_date),
            reminder=to_utc(task.reminder),
            priority=task.priority or "medium",
            category=task.category or "other",
            completed=False,
            reminder_sent=False,
            user_id=user_id,
        )
        db.add(db_task)
        await db.flush()

        notification_service.schedule_task_reminder(db, db_task)

        await db.commit()
        await db.refresh(db_task)
    except Exception as e:
        logger.error(f"❌ Failed to create task: {e}")
        await db.rollback()
        raise

    if db_task.category != "other":
        try:
            await user_preference_service.record_category_usage(db, user_id, db_task.category)
        except Exception as e:
            # Category tracking never undoes a committed task
            logger.warning(f"⚠️ Could not record category '{db_task.category}' for user {user_id}: {e}")
            await db.rollback()
            await db.refresh(db_task)

    logger.info(f"✅ Task created successfully! ID: {db_task.id}")
    return db_task

async def get_tasks(db: AsyncSession, user_id: int):
    result = await db.execute(
        select(Task).filter(Task.user_id == user_id).order_by(desc(Task.created_at), desc(Task.id))
    )
    return result.scalars().all()

async def get_task(db: AsyncSession, task_id: int) -> Task | None:
    """Look a task up by id only; ownership is checked by the caller."""
    result = await db.execute(select(Task).filter(Task.id == task_id))
    return result.scalars().first()

async def update_task(db: AsyncSession, db_task: Task, task_update: TaskUpdate) -> Task:
    update_data = task_update.model_dump(exclude_unset=True)

    if update_data.get("title"):
        db_task.title = update_data["title"]
    if "description" in update_data:
        db_task.description = update_data["description"]
    if update_data.get("completed") is not None:
        db_task.completed = update_data["completed"]
    if "due_date" in update_data:
        db_task.due_date = to_utc(update_data["due_date"])
    if update_data.get("priority"):
        db_task.priority = update_data["priority"]
    if update_data.get("category"):
        db_task.category = update_data["category"]

    if "reminder" in update_data:
        # A task keeps at most one live reminder
        db_task.reminder = to_utc(update_data["reminder"])
        db_task.reminder_sent = False
        await notification_service.clear_task_notifications(db, db_task.id)
        notification_service.schedule_task_reminder(db, db_task)

    db.add(db_task)
    await db.commit()
    await db.refresh(db_task)
    logger.info(f"✏️ Task {db_task.id} updated: {sorted(update_data)}")
    return db_task

async def delete_task(db: AsyncSession, db_task: Task) -> None:
    await notification_service.clear_task_notifications(db, db_task.id)
    await db.delete(db_task)
    await db.commit()
    logger.info(f"🗑️ Task {db_task.id} and its notifications deleted")

async def get_pending_tasks(db: AsyncSession, user_id: int):
    result = await db.execute(
        select(Task).filter(Task.user_id == user_id, Task.completed == False).order_by(Task.id)
    )
    return result.scalars().all()

async def get_completed_history(db: AsyncSession, user_id: int, limit: int | None = None):
    """Most recent completions first."""
    query = select(Task).filter(
        Task.user_id == user_id,
        Task.completed == True,
        Task.completed_at.is_not(None),
    ).order_by(desc(Task.completed_at)).limit(limit or settings.INSIGHTS_HISTORY_LIMIT)
    result = await db.execute(query)
    return result.scalars().all()
