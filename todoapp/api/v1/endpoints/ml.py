import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from todoapp import ml
from todoapp.core.database import get_db
from todoapp.schemas.ml import (
    TaskText, CategoryResponse, PriorityResponse, EstimateResponse,
    TextInput, SentimentResponse, MotivationResponse,
    RecommendRequest, RecommendResponse, InsightsRequest, InsightsResponse,
)
from todoapp.services import ml_service
from todoapp.api.deps import get_current_user
from todoapp.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/categorize", response_model=CategoryResponse)
async def categorize(payload: TaskText):
    return {"category": ml.categorize_task(payload.title, payload.description or "")}

@router.post("/priority", response_model=PriorityResponse)
async def priority(payload: TaskText):
    level = ml.suggest_priority(payload.title, payload.description or "")
    return {"priority": level, "priority_label": ml.priority_label(level)}

@router.post("/estimate-time", response_model=EstimateResponse)
async def estimate_time(payload: TaskText):
    return {"estimated_minutes": ml.estimate_completion_time(payload.title, payload.description or "")}

@router.post("/sentiment", response_model=SentimentResponse)
async def sentiment(payload: TextInput):
    return {"analysis": ml.analyze_sentiment(payload.text)}

@router.post("/motivate", response_model=MotivationResponse)
async def motivate(payload: TextInput):
    analysis = ml.analyze_sentiment(payload.text)
    logger.info(f"💬 Motivation requested, tone: {analysis['emotional_tone']}")
    return {"motivation": ml.generate_motivational_response(analysis)}

@router.post("/recommend", response_model=RecommendResponse)
async def recommend_supplied(
    payload: RecommendRequest,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    tasks = [task.model_dump() for task in payload.tasks]
    return {"recommendations": await ml_service.recommend_for_user(db, current_user.id, tasks)}

@router.get("/recommend", response_model=RecommendResponse)
async def recommend_pending(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return {"recommendations": await ml_service.recommend_for_user(db, current_user.id)}

@router.post("/insights", response_model=InsightsResponse)
async def insights(
    payload: InsightsRequest,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    supplied = [task.model_dump() for task in payload.tasks]
    return {"insights": await ml_service.insights_for_user(db, current_user.id, supplied)}
