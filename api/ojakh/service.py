"""
Recipe business logic.

Maps repository outcomes onto HTTP semantics:
- missing rows -> 404
- any failure inside a transactional write -> logged, rolled back, opaque 500
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from core import db

from . import ingredients, repository, schemas

logger = logging.getLogger(__name__)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found.")


def normalize_candidates(names: list[str] | None) -> list[str]:
    """
    Lowercase/strip search candidates the same way ingredient names are stored.
    Blank entries and duplicates are dropped; first-seen order is kept.
    """
    seen: dict[str, None] = {}
    for name in names or []:
        normalized = ingredients.normalize_name(name)
        if normalized:
            seen.setdefault(normalized, None)
    return list(seen)


async def create_recipe(database: db.Database, payload: schemas.RecipeWriteRequest) -> dict[str, Any]:
    try:
        recipe_id = await repository.create_recipe(
            database,
            title=payload.title,
            category=payload.category,
            cover_image_url=payload.cover_image_url,
            steps=payload.steps,
            ingredient_entries=payload.ingredient_entries(),
        )
    except Exception as exc:
        logger.exception("recipe_create_failed title=%r", payload.title)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error during recipe creation.",
        ) from exc

    logger.info("recipe_created id=%s ingredients=%s", recipe_id, len(payload.ingredients))
    return {"id": recipe_id, "title": payload.title}


async def update_recipe(
    database: db.Database,
    recipe_id: int,
    payload: schemas.RecipeWriteRequest,
) -> dict[str, Any]:
    try:
        updated = await repository.update_recipe(
            database,
            recipe_id,
            title=payload.title,
            category=payload.category,
            cover_image_url=payload.cover_image_url,
            steps=payload.steps,
            ingredient_entries=payload.ingredient_entries(),
        )
    except Exception as exc:
        logger.exception("recipe_update_failed id=%s", recipe_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error during recipe update.",
        ) from exc

    if updated is None:
        raise _not_found()

    logger.info("recipe_updated id=%s ingredients=%s", recipe_id, len(payload.ingredients))
    return updated


async def get_recipe(database: db.Database, recipe_id: int) -> dict[str, Any]:
    recipe = await repository.get_recipe(database, recipe_id)
    if recipe is None:
        raise _not_found()

    recipe["ingredients"] = await repository.list_recipe_ingredients(database, recipe_id)
    return recipe


async def delete_recipe(database: db.Database, recipe_id: int) -> dict[str, str]:
    title = await repository.delete_recipe(database, recipe_id)
    if title is None:
        raise _not_found()

    logger.info("recipe_deleted id=%s", recipe_id)
    return {"message": f"Recipe '{title}' deleted successfully"}


async def find_recipes_by_ingredients(
    database: db.Database,
    candidate_names: list[str] | None,
) -> list[dict[str, Any]]:
    candidates = normalize_candidates(candidate_names)
    if not candidates:
        return []
    return await repository.find_recipes_by_ingredients(database, candidates)
