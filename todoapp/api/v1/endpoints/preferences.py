from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from todoapp.core.database import get_db
from todoapp.schemas.common import Message
from todoapp.schemas.user_preference import UserPreferenceResponse, UserPreferenceUpdate, MLModels
from todoapp.services import user_preference_service
from todoapp.api.deps import get_current_user
from todoapp.models.user import User

router = APIRouter()

@router.get("/", response_model=UserPreferenceResponse)
async def get_preferences(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await user_preference_service.get_user_preferences(db, current_user.id)

@router.patch("/", response_model=UserPreferenceResponse)
async def update_preferences(
    preferences_in: UserPreferenceUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    if not preferences_in.model_dump(exclude_unset=True, exclude_none=True):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No valid updates provided")
    return await user_preference_service.update_user_preferences(db, preferences_in, current_user.id)

@router.post("/productivity", response_model=UserPreferenceResponse | Message)
async def recalculate_productivity(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    preferences = await user_preference_service.recalculate_productivity(db, current_user.id)
    if preferences is None:
        return Message(message="No tasks found to calculate metrics")
    return UserPreferenceResponse.model_validate(preferences)

@router.post("/ml-models", response_model=MLModels)
async def save_ml_models(
    models: MLModels,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    if not any(models.model_dump().values()):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No model data provided")
    preferences = await user_preference_service.store_ml_models(db, models, current_user.id)
    return preferences.ml_models

@router.get("/ml-models", response_model=MLModels)
async def get_ml_models(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    preferences = await user_preference_service.get_user_preferences(db, current_user.id)
    return preferences.ml_models
