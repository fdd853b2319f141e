"""
Fixtures for tests that run against a real Postgres.

Set TEST_DATABASE_URL to a throwaway database; every test starts from empty
tables created from `sql/ojakh.sql`.
"""

from pathlib import Path

import pytest_asyncio

from core import db

SQL_DIR = Path(__file__).resolve().parents[2] / "sql"


@pytest_asyncio.fixture
async def ojakh_database():
    database = db.Database("ojakh-test", "TEST_DATABASE_URL")
    await database.connect()
    try:
        await database.execute((SQL_DIR / "ojakh.sql").read_text())
        await database.execute(
            "TRUNCATE recipe_ingredients, recipes, ingredients, tasks RESTART IDENTITY CASCADE"
        )
        yield database
    finally:
        await database.close()
