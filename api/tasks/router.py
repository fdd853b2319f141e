"""
Task API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from core import db
from core import dependencies as core_dependencies

from . import repository, schemas

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found.")


@router.get("/tasks")
async def list_tasks(
    database: db.Database = Depends(core_dependencies.get_ojakh_db),
) -> list[dict]:
    return await repository.list_tasks(database)


@router.get("/tasks/{task_id}")
async def get_task(
    task_id: int,
    database: db.Database = Depends(core_dependencies.get_ojakh_db),
) -> dict:
    row = await repository.get_task(database, task_id)
    if row is None:
        raise _not_found()
    return row


@router.post("/tasks", status_code=status.HTTP_201_CREATED)
async def create_task(
    request: schemas.TaskCreateRequest,
    database: db.Database = Depends(core_dependencies.get_ojakh_db),
) -> dict:
    return await repository.create_task(database, title=request.title)


@router.put("/tasks/{task_id}")
async def update_task(
    task_id: int,
    request: schemas.TaskUpdateRequest,
    database: db.Database = Depends(core_dependencies.get_ojakh_db),
) -> dict:
    row = await repository.update_task(
        database,
        task_id,
        title=request.title,
        completed=request.completed,
    )
    if row is None:
        raise _not_found()
    return row


@router.delete("/tasks/{task_id}")
async def delete_task(
    task_id: int,
    database: db.Database = Depends(core_dependencies.get_ojakh_db),
) -> dict:
    if not await repository.delete_task(database, task_id):
        raise _not_found()
    return {"ok": True, "task_id": task_id}
