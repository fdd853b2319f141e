"""
Task API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TaskCreateRequest(BaseModel):
    title: str = Field(..., min_length=1)


class TaskUpdateRequest(BaseModel):
    title: str = Field(..., min_length=1)
    completed: bool = False
