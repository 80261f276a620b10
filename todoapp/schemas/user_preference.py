from pydantic import BaseModel, Field
from typing import Optional, List
from todoapp.schemas.common import UTCDateTime

class WorkingHours(BaseModel):
    start: int = Field(default=9, ge=0, le=23)
    end: int = Field(default=17, ge=0, le=23)

class MLModels(BaseModel):
    priority_model: Optional[str] = None
    category_model: Optional[str] = None
    duration_model: Optional[str] = None

class ProductivityMetrics(BaseModel):
    average_tasks_per_day: float = 0
    high_priority_completion_rate: float = 0
    average_completion_time: float = 0
    last_calculated: Optional[UTCDateTime] = None

class UserPreferenceResponse(BaseModel):
    id: int
    user_id: int
    preferred_categories: List[str] = []
    working_hours: WorkingHours
    ml_models: MLModels
    productivity: ProductivityMetrics
    updated_at: Optional[UTCDateTime] = None

    class Config:
        from_attributes = True

class UserPreferenceUpdate(BaseModel):
    preferred_categories: Optional[List[str]] = None
    working_hours: Optional[WorkingHours] = None
    ml_models: Optional[MLModels] = None
