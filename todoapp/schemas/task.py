from pydantic import BaseModel, field_validator
from typing import Optional, Literal
from datetime import datetime
from todoapp.schemas.common import UTCDateTime

Priority = Literal["low", "medium", "high"]

class TaskBase(BaseModel):
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    reminder: Optional[datetime] = None
    priority: Priority = "medium"
    category: str = "other"

    @field_validator('title')
    def title_must_not_be_empty(cls, v):
        if not v or not v.strip():
            raise ValueError('Title is required')
        return v.strip()

    @field_validator('description')
    def sanitize_description(cls, v):
        if v:
            return v.strip()
        return v

    @field_validator('category')
    def normalize_category(cls, v):
        v = (v or "").strip().lower()
        return v or "other"

class TaskCreate(TaskBase):
    pass

class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None
    due_date: Optional[datetime] = None
    reminder: Optional[datetime] = None
    priority: Optional[Priority] = None
    category: Optional[str] = None

    @field_validator('title')
    def title_not_blank_if_provided(cls, v):
        if v is not None and not v.strip():
            raise ValueError('Title is required if provided')
        return v.strip() if v is not None else v

    @field_validator('category')
    def normalize_category(cls, v):
        if v is None:
            return v
        return v.strip().lower() or "other"

class TaskResponse(BaseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    completed: bool
    priority: str
    category: str
    due_date: Optional[UTCDateTime] = None
    reminder: Optional[UTCDateTime] = None
    reminder_sent: bool
    completed_at: Optional[UTCDateTime] = None
    created_at: UTCDateTime
    updated_at: UTCDateTime

    class Config:
        from_attributes = True

class TaskSummary(BaseModel):
    id: int
    title: str
    description: Optional[str] = None

    class Config:
        from_attributes = True
