"""
Recipe persistence (raw SQL).

Tables:
- recipes(id, title, category, cover_image_url, steps jsonb, created_at)
- ingredients(id, name UNIQUE)
- recipe_ingredients(recipe_id -> recipes ON DELETE CASCADE, ingredient_id, amount)
"""

from __future__ import annotations

import json
from typing import Any

from core import db

from . import ingredients


def _json_arg(value: Any) -> str:
    """
    asyncpg does not encode Python lists for jsonb parameters.
    We pass JSON as a string and cast to jsonb in SQL.
    """
    return json.dumps(value if value is not None else [], ensure_ascii=True)


def _decode_steps(row: dict[str, Any]) -> dict[str, Any]:
    steps = row.get("steps")
    if isinstance(steps, (str, bytes)):
        row["steps"] = json.loads(steps)
    elif steps is None:
        row["steps"] = []
    return row


async def create_recipe(
    database: db.Database,
    *,
    title: str,
    category: str | None,
    cover_image_url: str | None,
    steps: list[Any],
    ingredient_entries: list[dict[str, Any]],
) -> int:
    """
    Insert a recipe header and link all of its ingredients in one transaction.

    Returns the new recipe id. Any failure rolls back the header as well.
    """
    async with database.transaction() as conn:
        row = await conn.fetchrow(
            """
            INSERT INTO recipes (title, category, cover_image_url, steps)
            VALUES ($1, $2, $3, $4::jsonb)
            RETURNING id
            """,
            title,
            category,
            cover_image_url,
            _json_arg(steps),
        )
        if row is None or "id" not in row:
            raise RuntimeError("Failed to insert recipe.")

        recipe_id = int(row["id"])
        await ingredients.link_ingredients(conn, recipe_id, ingredient_entries)
        return recipe_id


async def update_recipe(
    database: db.Database,
    recipe_id: int,
    *,
    title: str,
    category: str | None,
    cover_image_url: str | None,
    steps: list[Any],
    ingredient_entries: list[dict[str, Any]],
) -> dict[str, Any] | None:
    """
    Replace a recipe's header fields and its full ingredient list atomically.

    Returns {id, title}, or None when no recipe has this id (nothing is written).
    """
    async with database.transaction() as conn:
        row = await conn.fetchrow(
            """
            UPDATE recipes
            SET title = $1,
                category = $2,
                cover_image_url = $3,
                steps = $4::jsonb
            WHERE id = $5
            RETURNING id, title
            """,
            title,
            category,
            cover_image_url,
            _json_arg(steps),
            recipe_id,
        )
        if row is None:
            return None

        await ingredients.unlink_all(conn, recipe_id)
        await ingredients.link_ingredients(conn, recipe_id, ingredient_entries)
        return {"id": int(row["id"]), "title": row["title"]}


async def list_recipes(database: db.Database) -> list[dict[str, Any]]:
    return await database.fetch_all(
        """
        SELECT id, title, category, cover_image_url
        FROM recipes
        ORDER BY created_at DESC, id DESC
        """
    )


async def get_recipe(database: db.Database, recipe_id: int) -> dict[str, Any] | None:
    row = await database.fetch_one(
        """
        SELECT id, title, category, cover_image_url, steps, created_at
        FROM recipes
        WHERE id = $1
        """,
        recipe_id,
    )
    return _decode_steps(row) if row is not None else None


async def list_recipe_ingredients(database: db.Database, recipe_id: int) -> list[dict[str, Any]]:
    return await database.fetch_all(
        """
        SELECT i.name, ri.amount
        FROM ingredients i
        JOIN recipe_ingredients ri ON i.id = ri.ingredient_id
        WHERE ri.recipe_id = $1
        """,
        recipe_id,
    )


async def delete_recipe(database: db.Database, recipe_id: int) -> str | None:
    """
    Delete a recipe (links go with it via ON DELETE CASCADE).
    Returns the deleted title, or None when not found.
    """
    row = await database.fetch_one(
        "DELETE FROM recipes WHERE id = $1 RETURNING title",
        recipe_id,
    )
    if row is None:
        return None
    return row["title"]


async def list_categories(database: db.Database) -> list[str]:
    rows = await database.fetch_all(
        """
        SELECT DISTINCT category
        FROM recipes
        WHERE category IS NOT NULL
          AND category <> ''
        ORDER BY category ASC
        """
    )
    return [row["category"] for row in rows]


async def list_ingredient_names(database: db.Database) -> list[str]:
    rows = await database.fetch_all("SELECT name FROM ingredients ORDER BY name ASC")
    return [row["name"] for row in rows]


async def find_recipes_by_ingredients(
    database: db.Database,
    candidate_names: list[str],
) -> list[dict[str, Any]]:
    """
    Recipes whose every linked ingredient is in `candidate_names`.

    A recipe with no links matches vacuously. Names are compared as given, so
    callers pass them already normalized.
    """
    if not candidate_names:
        return []

    rows = await database.fetch_all(
        """
        SELECT r.id, r.title, r.category, r.cover_image_url, r.steps, r.created_at
        FROM recipes r
        WHERE NOT EXISTS (
          SELECT 1
          FROM recipe_ingredients ri
          JOIN ingredients i ON ri.ingredient_id = i.id
          WHERE ri.recipe_id = r.id
            AND i.name <> ALL($1::text[])
        )
        ORDER BY r.created_at DESC, r.id DESC
        """,
        candidate_names,
    )
    return [_decode_steps(row) for row in rows]
