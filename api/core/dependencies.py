"""
FastAPI dependencies that hand the per-database handles to routes.
"""

from __future__ import annotations

from fastapi import Request

from . import db


def get_ojakh_db(request: Request) -> db.Database:
    return request.app.state.ojakh_db


def get_nvag_db(request: Request) -> db.Database:
    return request.app.state.nvag_db
