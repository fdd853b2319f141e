"""
Ojakh (recipe catalog) API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core import db
from core import dependencies as core_dependencies

from . import repository, schemas, service

router = APIRouter()


@router.post("/recipes", status_code=status.HTTP_201_CREATED)
async def create_recipe(
    request: schemas.RecipeWriteRequest,
    database: db.Database = Depends(core_dependencies.get_ojakh_db),
) -> dict:
    return await service.create_recipe(database, request)


@router.get("/recipes")
async def list_recipes(
    database: db.Database = Depends(core_dependencies.get_ojakh_db),
) -> list[dict]:
    """
    Summary view, newest first. No steps or ingredients.
    """
    return await repository.list_recipes(database)


@router.post("/recipes/find-by-ingredients")
async def find_recipes_by_ingredients(
    request: schemas.FindByIngredientsRequest,
    database: db.Database = Depends(core_dependencies.get_ojakh_db),
) -> list[dict]:
    """
    Recipes that can be made entirely from `myIngredients`.
    """
    return await service.find_recipes_by_ingredients(database, request.myIngredients)


@router.get("/recipes/{recipe_id}")
async def get_recipe(
    recipe_id: int,
    database: db.Database = Depends(core_dependencies.get_ojakh_db),
) -> dict:
    return await service.get_recipe(database, recipe_id)


@router.put("/recipes/{recipe_id}")
async def update_recipe(
    recipe_id: int,
    request: schemas.RecipeWriteRequest,
    database: db.Database = Depends(core_dependencies.get_ojakh_db),
) -> dict:
    return await service.update_recipe(database, recipe_id, request)


@router.delete("/recipes/{recipe_id}")
async def delete_recipe(
    recipe_id: int,
    database: db.Database = Depends(core_dependencies.get_ojakh_db),
) -> dict:
    return await service.delete_recipe(database, recipe_id)


@router.get("/ingredients")
async def list_ingredients(
    database: db.Database = Depends(core_dependencies.get_ojakh_db),
) -> list[str]:
    return await repository.list_ingredient_names(database)


@router.get("/categories")
async def list_categories(
    database: db.Database = Depends(core_dependencies.get_ojakh_db),
) -> list[str]:
    return await repository.list_categories(database)
