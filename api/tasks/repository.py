"""
Task persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_tasks(database: db.Database) -> list[dict[str, Any]]:
    return await database.fetch_all(
        """
        SELECT id, title, completed, created_at
        FROM tasks
        ORDER BY created_at DESC, id DESC
        """
    )


async def get_task(database: db.Database, task_id: int) -> dict[str, Any] | None:
    return await database.fetch_one(
        "SELECT id, title, completed, created_at FROM tasks WHERE id = $1",
        task_id,
    )


async def create_task(database: db.Database, *, title: str) -> dict[str, Any]:
    row = await database.fetch_one(
        """
        INSERT INTO tasks (title)
        VALUES ($1)
        RETURNING id, title, completed, created_at
        """,
        title,
    )
    if row is None:
        raise RuntimeError("Failed to insert task.")
    return row


async def update_task(
    database: db.Database,
    task_id: int,
    *,
    title: str,
    completed: bool,
) -> dict[str, Any] | None:
    return await database.fetch_one(
        """
        UPDATE tasks
        SET title = $2,
            completed = $3
        WHERE id = $1
        RETURNING id, title, completed, created_at
        """,
        task_id,
        title,
        completed,
    )


async def delete_task(database: db.Database, task_id: int) -> bool:
    status = await database.execute("DELETE FROM tasks WHERE id = $1", task_id)
    return db.rows_affected(status) > 0
