from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from todoapp.core.database import get_db
from todoapp.schemas.notification import (
    NotificationCreate, NotificationResponse, NotificationWithTask, DueNotification,
)
from todoapp.services import notification_service, task_service
from todoapp.api.deps import get_current_user, ensure_owner
from todoapp.models.user import User

router = APIRouter()

@router.get("/", response_model=List[NotificationWithTask])
async def get_notifications(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Unsent notifications of the current user, soonest first"""
    return await notification_service.get_pending_notifications(db, current_user.id)

@router.post("/schedule", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def schedule_notification(
    notification_in: NotificationCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = await task_service.get_task(db, notification_in.task_id)
    ensure_owner(task, current_user, "Task")
    return await notification_service.create_notification(db, notification_in, current_user.id)

@router.get("/due", response_model=List[DueNotification])
async def get_due_notifications(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Everything the push poller should deliver now, across all users"""
    rows = await notification_service.get_due_notifications(db)
    return [
        DueNotification(
            **NotificationWithTask.model_validate(notification).model_dump(),
            push_token=push_token,
        )
        for notification, push_token in rows
    ]

@router.put("/{notification_id}/sent", response_model=NotificationResponse)
async def mark_notification_sent(
    notification_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    notification = await notification_service.get_notification(db, notification_id)
    ensure_owner(notification, current_user, "Notification")
    return await notification_service.mark_as_sent(db, notification)
