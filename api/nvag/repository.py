"""
Chord persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

_COLUMNS = "id, name, fingering, notes, created_at"


async def list_chords(database: db.Database) -> list[dict[str, Any]]:
    return await database.fetch_all(f"SELECT {_COLUMNS} FROM chords ORDER BY name ASC")


async def get_chord(database: db.Database, chord_id: int) -> dict[str, Any] | None:
    return await database.fetch_one(f"SELECT {_COLUMNS} FROM chords WHERE id = $1", chord_id)


async def create_chord(
    database: db.Database,
    *,
    name: str,
    fingering: str | None,
    notes: str | None,
) -> dict[str, Any]:
    row = await database.fetch_one(
        f"""
        INSERT INTO chords (name, fingering, notes)
        VALUES ($1, $2, $3)
        RETURNING {_COLUMNS}
        """,
        name,
        fingering,
        notes,
    )
    if row is None:
        raise RuntimeError("Failed to insert chord.")
    return row


async def update_chord(
    database: db.Database,
    chord_id: int,
    *,
    name: str,
    fingering: str | None,
    notes: str | None,
) -> dict[str, Any] | None:
    return await database.fetch_one(
        f"""
        UPDATE chords
        SET name = $2,
            fingering = $3,
            notes = $4
        WHERE id = $1
        RETURNING {_COLUMNS}
        """,
        chord_id,
        name,
        fingering,
        notes,
    )


async def delete_chord(database: db.Database, chord_id: int) -> dict[str, Any] | None:
    return await database.fetch_one(
        "DELETE FROM chords WHERE id = $1 RETURNING id, name",
        chord_id,
    )
