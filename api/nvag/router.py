"""
Nvag (chord reference) API endpoints.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import APIRouter, Depends, HTTPException, status

from core import db
from core import dependencies as core_dependencies

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Chord not found.")


def _name_taken(name: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Chord '{name}' already exists.")


@router.get("/chords")
async def list_chords(
    database: db.Database = Depends(core_dependencies.get_nvag_db),
) -> list[dict]:
    """
    All chords, alphabetical by name.
    """
    return await repository.list_chords(database)


@router.get("/chords/{chord_id}")
async def get_chord(
    chord_id: int,
    database: db.Database = Depends(core_dependencies.get_nvag_db),
) -> dict:
    row = await repository.get_chord(database, chord_id)
    if row is None:
        raise _not_found()
    return row


@router.post("/chords", status_code=status.HTTP_201_CREATED)
async def create_chord(
    request: schemas.ChordWriteRequest,
    database: db.Database = Depends(core_dependencies.get_nvag_db),
) -> dict:
    try:
        row = await repository.create_chord(
            database,
            name=request.name,
            fingering=request.fingering,
            notes=request.notes,
        )
    except asyncpg.UniqueViolationError as exc:
        raise _name_taken(request.name) from exc
    logger.info("chord_created id=%s name=%r", row["id"], row["name"])
    return row


@router.put("/chords/{chord_id}")
async def update_chord(
    chord_id: int,
    request: schemas.ChordWriteRequest,
    database: db.Database = Depends(core_dependencies.get_nvag_db),
) -> dict:
    try:
        row = await repository.update_chord(
            database,
            chord_id,
            name=request.name,
            fingering=request.fingering,
            notes=request.notes,
        )
    except asyncpg.UniqueViolationError as exc:
        raise _name_taken(request.name) from exc
    if row is None:
        raise _not_found()
    return row


@router.delete("/chords/{chord_id}")
async def delete_chord(
    chord_id: int,
    database: db.Database = Depends(core_dependencies.get_nvag_db),
) -> dict:
    row = await repository.delete_chord(database, chord_id)
    if row is None:
        raise _not_found()
    return {"message": f"Chord '{row['name']}' deleted successfully"}
