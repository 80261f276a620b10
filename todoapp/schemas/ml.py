from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict, Any
from datetime import datetime

class TaskText(BaseModel):
    title: str
    description: Optional[str] = ""

    @field_validator('title')
    def title_must_not_be_empty(cls, v):
        if not v or not v.strip():
            raise ValueError('Task title is required')
        return v

class CategoryResponse(BaseModel):
    category: str

class PriorityResponse(BaseModel):
    priority: int
    priority_label: str

class EstimateResponse(BaseModel):
    estimated_minutes: int

class TextInput(BaseModel):
    text: str = Field(min_length=1)

class SentimentAnalysis(BaseModel):
    sentiment: str
    scores: Dict[str, float]
    matched_words: Dict[str, List[str]]
    emotional_tone: str
    emotional_intensity: int

class SentimentResponse(BaseModel):
    analysis: SentimentAnalysis

class Motivation(BaseModel):
    message: str
    suggestion: str

class MotivationResponse(BaseModel):
    motivation: Motivation

class RecommendTaskIn(BaseModel):
    """A task as the recommender sees it; unknown fields are passed through."""
    model_config = ConfigDict(extra="allow")

    priority: Optional[int] = None
    category: Optional[str] = None
    due_date: Optional[datetime] = None
    estimated_minutes: Optional[float] = None

class RecommendRequest(BaseModel):
    tasks: List[RecommendTaskIn]

class RecommendResponse(BaseModel):
    recommendations: List[Dict[str, Any]]

class CompletedTaskIn(BaseModel):
    model_config = ConfigDict(extra="allow")

    completed_at: Optional[datetime] = None
    actual_minutes: Optional[float] = None

class InsightsRequest(BaseModel):
    tasks: List[CompletedTaskIn]

class ProductivityInsights(BaseModel):
    most_productive_time: Optional[str] = None
    most_productive_day: Optional[str] = None
    average_tasks_per_day: float = 0
    suggestions: List[str]

class InsightsResponse(BaseModel):
    insights: ProductivityInsights
