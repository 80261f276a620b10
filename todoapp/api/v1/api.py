from fastapi import APIRouter
from todoapp.api.v1.endpoints import auth, tasks, notifications, preferences, ml

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
api_router.include_router(preferences.router, prefix="/preferences", tags=["preferences"])
api_router.include_router(ml.router, prefix="/ml", tags=["ml"])
