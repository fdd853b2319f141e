"""
Nvag API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ChordWriteRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    fingering: str | None = None
    notes: str | None = None
