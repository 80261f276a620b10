from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime
from todoapp.schemas.common import UTCDateTime
from todoapp.schemas.task import TaskSummary

class NotificationCreate(BaseModel):
    task_id: int
    title: str
    body: str
    scheduled_for: datetime

    @field_validator('title', 'body')
    def must_not_be_empty(cls, v):
        if not v or not v.strip():
            raise ValueError('Field is required')
        return v.strip()

class NotificationResponse(BaseModel):
    id: int
    user_id: int
    task_id: int
    title: str
    body: str
    scheduled_for: UTCDateTime
    sent: bool
    created_at: UTCDateTime

    class Config:
        from_attributes = True

class NotificationWithTask(NotificationResponse):
    task: Optional[TaskSummary] = None

class DueNotification(NotificationWithTask):
    push_token: Optional[str] = None
