# taskhub/api/v1/routers/tasks.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from taskhub.api.v1.deps import get_current_user_id, get_task_service
from taskhub.schemas.task import TaskIn, TaskOut, TaskStatusIn
from taskhub.services.task_service import TaskService

router = APIRouter(prefix="/collections/{collection_id}/tasks", tags=["tasks"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_task(
    collection_id: str,
    body: TaskIn,
    user_id: str = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    """
    Create a task (status "new"). Needs the create right or creatorship.

    Error codes:
        - 400: collectionId not a number, invalid body or priority
        - 403: No create right
        - 404: Collection not found
    """
    task = await service.create_task(user_id, collection_id, body.name, body.priority, body.description)
    return {"message": "Task created successfully", "task": TaskOut.from_record(task)}


@router.get("")
async def list_tasks(
    collection_id: str,
    user_id: str = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    sort: str = Query("createdAt"),
    statuses: Optional[List[str]] = Query(None),
    bracket_statuses: Optional[List[str]] = Query(None, alias="statuses[]"),
):
    """
    Page through a collection's tasks. Visible to the creator and members.

    Query:
        statuses: repeatable, e.g. ?statuses=new&statuses=in_process (default: all);
            the bracketed form ?statuses[]=new is accepted as well
        sort: createdAt | updatedAt | priority, applied after the status ranking

    Returns:
        dict: {page, totalPages, tasks: [...]}
    """
    wanted = (statuses or []) + (bracket_statuses or [])
    result = await service.list_tasks(user_id, collection_id, limit, page, wanted, sort)
    return {
        "page": result.page,
        "totalPages": result.total_pages,
        "tasks": [TaskOut.from_record(t) for t in result.items],
    }


@router.put("/{task_id}")
async def edit_task(
    collection_id: str,
    task_id: str,
    body: TaskIn,
    user_id: str = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    """
    Edit name, priority and (if sent) description. Status is left untouched.
    """
    task = await service.edit_task(user_id, collection_id, task_id, body.name, body.priority, body.description)
    return {"message": "Task edited successfully", "task": TaskOut.from_record(task)}


@router.patch("/{task_id}/status")
async def change_task_status(
    collection_id: str,
    task_id: str,
    body: TaskStatusIn,
    user_id: str = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    """
    Move a task to another status. Needs the change-status right or creatorship.
    """
    task = await service.change_task_status(user_id, collection_id, task_id, body.status)
    return {"message": "Task status changed successfully", "task": TaskOut.from_record(task)}


@router.delete("/{task_id}")
async def delete_task(
    collection_id: str,
    task_id: str,
    user_id: str = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    """
    Delete a task. Needs the delete right or creatorship.
    """
    await service.delete_task(user_id, collection_id, task_id)
    return {"message": "Task deleted successfully"}
