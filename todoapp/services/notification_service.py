import logging
from datetime import datetime
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, and_
from todoapp.models.notification import Notification
from todoapp.models.task import Task
from todoapp.models.user import User
from todoapp.schemas.notification import NotificationCreate
from todoapp.utils.timezone import utcnow, to_utc, as_utc

logger = logging.getLogger(__name__)

DEFAULT_REMINDER_BODY = "Your task is due soon"

def schedule_task_reminder(db: AsyncSession, task: Task, now: datetime | None = None) -> Notification | None:
    """
    Stage a reminder notification for the task's reminder time.
    Past or missing reminders are not scheduled. The caller commits.
    """
    if not task.reminder:
        return None

    now = now or utcnow()
    scheduled_for = as_utc(task.reminder)
    if scheduled_for <= now:
        logger.info(f"⏭️ Reminder for task {task.id} is in the past, not scheduling")
        return None

    notification = Notification(
        user_id=task.user_id,
        task_id=task.id,
        title=f"Reminder: {task.title}",
        body=task.description or DEFAULT_REMINDER_BODY,
        scheduled_for=scheduled_for,
        sent=False,
    )
    db.add(notification)
    logger.info(f"⏰ Reminder scheduled for task {task.id} at {scheduled_for.isoformat()}")
    return notification

async def clear_task_notifications(db: AsyncSession, task_id: int) -> None:
    """Delete every notification referencing the task. The caller commits."""
    await db.execute(delete(Notification).where(Notification.task_id == task_id))

async def get_pending_notifications(db: AsyncSession, user_id: int):
    query = select(Notification).filter(
        Notification.user_id == user_id,
        Notification.sent == False,
    ).order_by(Notification.scheduled_for)
    result = await db.execute(query)
    return result.scalars().all()

async def create_notification(db: AsyncSession, notification_in: NotificationCreate, user_id: int) -> Notification:
    notification = Notification(
        user_id=user_id,
        task_id=notification_in.task_id,
        title=notification_in.title,
        body=notification_in.body,
        scheduled_for=to_utc(notification_in.scheduled_for),
        sent=False,
    )
    db.add(notification)
    await db.commit()
    await db.refresh(notification)
    logger.info(f"🔔 Notification {notification.id} scheduled for task {notification.task_id}")
    return notification

async def get_notification(db: AsyncSession, notification_id: int) -> Notification | None:
    result = await db.execute(select(Notification).filter(Notification.id == notification_id))
    return result.scalars().first()

async def mark_as_sent(db: AsyncSession, notification: Notification) -> Notification:
    notification.sent = True
    db.add(notification)

    task = await db.get(Task, notification.task_id)
    if task is not None:
        task.reminder_sent = True
        db.add(task)

    await db.commit()
    await db.refresh(notification)
    logger.info(f"📨 Notification {notification.id} marked as sent")
    return notification

async def get_due_notifications(db: AsyncSession, now: datetime | None = None):
    """
    Unsent notifications whose time has come, across all users,
    paired with the owner's push token for the delivery poller.
    """
    now = now or utcnow()
    query = select(Notification, User.push_token).join(
        User, Notification.user_id == User.id
    ).filter(
        and_(
            Notification.scheduled_for <= now,
            Notification.sent == False,
        )
    ).order_by(Notification.scheduled_for)

    result = await db.execute(query)
    return result.all()
