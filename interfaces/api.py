# interfaces/api.py
from functools import lru_cache
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from application.repository import TaskRepository
from config import get_settings
from domain.entities import FilterMode
from infrastructure.database import Database
from infrastructure.task_storage import TaskStorage
from schemas.task import TaskCreate, TaskResponse, TaskUpdate
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache(maxsize=1)
def get_repository() -> TaskRepository:
    settings = get_settings()
    db = Database(settings.db_path)
    return TaskRepository(TaskStorage(db, settings.storage_key))


# Handlers stay async so repository calls run one at a time on the event loop.
@router.get("/tasks/", response_model=List[TaskResponse])
async def list_tasks(
    filter: Optional[str] = Query(default=FilterMode.ALL.value),
    repository: TaskRepository = Depends(get_repository),
):
    return [TaskResponse.from_task(task) for task in repository.filter(filter)]


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(task_id: str, repository: TaskRepository = Depends(get_repository)):
    task = repository.get_by_id(task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return TaskResponse.from_task(task)


@router.post("/tasks/", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(task: TaskCreate, repository: TaskRepository = Depends(get_repository)):
    created_task = repository.create(task.title, task.description, task.due_date)
    logger.info("Created task %s due %s", created_task.id, created_task.due_date)
    return TaskResponse.from_task(created_task)


@router.put("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(task_id: str, task: TaskUpdate, repository: TaskRepository = Depends(get_repository)):
    updated_task = repository.update(task_id, task.to_patch())
    if not updated_task:
        raise HTTPException(status_code=404, detail="Task not found")
    return TaskResponse.from_task(updated_task)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: str, repository: TaskRepository = Depends(get_repository)):
    if not repository.delete(task_id):
        raise HTTPException(status_code=404, detail="Task not found")
    logger.info("Deleted task %s", task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/tasks/{task_id}/toggle-complete", response_model=TaskResponse)
async def toggle_task_completion(task_id: str, repository: TaskRepository = Depends(get_repository)):
    updated_task = repository.toggle_complete(task_id)
    if not updated_task:
        raise HTTPException(status_code=404, detail="Task not found")
    logger.info("Task %s toggled to completed = %s", task_id, updated_task.completed)
    return TaskResponse.from_task(updated_task)
