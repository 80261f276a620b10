from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from todoapp.core.database import get_db
from todoapp.schemas.task import TaskCreate, TaskUpdate, TaskResponse
from todoapp.schemas.common import Message
from todoapp.services import task_service
from todoapp.api.deps import get_current_user, ensure_owner
from todoapp.models.user import User

router = APIRouter()

@router.get("/", response_model=List[TaskResponse])
async def read_tasks(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await task_service.get_tasks(db, current_user.id)

@router.post("/", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task: TaskCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return await task_service.create_new_task(db, task, current_user.id)

@router.get("/{task_id}", response_model=TaskResponse)
async def read_task(
    task_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = await task_service.get_task(db, task_id)
    return ensure_owner(task, current_user, "Task")

@router.api_route("/{task_id}", methods=["PUT", "PATCH"], response_model=TaskResponse)
async def update_task(
    task_id: int,
    task_in: TaskUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = ensure_owner(await task_service.get_task(db, task_id), current_user, "Task")
    return await task_service.update_task(db, task, task_in)

@router.delete("/{task_id}", response_model=Message)
async def delete_task(
    task_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = ensure_owner(await task_service.get_task(db, task_id), current_user, "Task")
    await task_service.delete_task(db, task)
    return {"message": "Task removed"}
