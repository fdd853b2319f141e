"""
Ingredient normalization and recipe <-> ingredient links.

Every function here takes a connection that is already inside the caller's
transaction; nothing in this module commits on its own.
"""

from __future__ import annotations

from typing import Any, Iterable

import asyncpg


def normalize_name(name: str | None) -> str:
    return (name or "").strip().lower()


async def upsert_ingredient(conn: asyncpg.Connection, name: str) -> int:
    """
    Return the id for `name`, creating the ingredient if it is new.

    The no-op DO UPDATE makes RETURNING yield the existing row on conflict, so
    concurrent callers with the same name all get the same id.
    """
    row = await conn.fetchrow(
        """
        INSERT INTO ingredients (name)
        VALUES ($1)
        ON CONFLICT (name) DO UPDATE
        SET name = EXCLUDED.name
        RETURNING id
        """,
        normalize_name(name),
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to upsert ingredient.")
    return int(row["id"])


async def link_ingredient(
    conn: asyncpg.Connection,
    recipe_id: int,
    ingredient_id: int,
    amount: str | None,
) -> None:
    await conn.execute(
        """
        INSERT INTO recipe_ingredients (recipe_id, ingredient_id, amount)
        VALUES ($1, $2, $3)
        """,
        recipe_id,
        ingredient_id,
        amount,
    )


async def unlink_all(conn: asyncpg.Connection, recipe_id: int) -> None:
    await conn.execute("DELETE FROM recipe_ingredients WHERE recipe_id = $1", recipe_id)


async def link_ingredients(
    conn: asyncpg.Connection,
    recipe_id: int,
    entries: Iterable[dict[str, Any]],
) -> int:
    """
    Upsert + link each entry ({"name", "amount"}) in order.

    Entries without a usable name are skipped. Returns how many links were written.
    """
    linked = 0
    for entry in entries:
        name = normalize_name(entry.get("name"))
        if not name:
            continue
        ingredient_id = await upsert_ingredient(conn, name)
        await link_ingredient(conn, recipe_id, ingredient_id, entry.get("amount"))
        linked += 1
    return linked
