"""
Tests for ingredient normalization and linking (connection-level helpers).
"""

from unittest.mock import AsyncMock

import pytest

from ojakh import ingredients


@pytest.mark.parametrize(
    "raw, expected",
    [("Tomato", "tomato"), ("  Olive Oil ", "olive oil"), ("", ""), ("   ", ""), (None, "")],
)
def test_normalize_name(raw, expected):
    assert ingredients.normalize_name(raw) == expected


class TestUpsertIngredient:
    @pytest.mark.asyncio
    async def test_sends_lowercased_name_in_single_statement(self, fake_conn):
        fake_conn.fetchrow = AsyncMock(return_value={"id": 42})

        ingredient_id = await ingredients.upsert_ingredient(fake_conn, "Tomato")

        assert ingredient_id == 42
        fake_conn.fetchrow.assert_awaited_once()
        sql, name = fake_conn.fetchrow.await_args.args
        assert "ON CONFLICT (name)" in sql
        assert "RETURNING id" in sql
        assert name == "tomato"

    @pytest.mark.asyncio
    async def test_missing_row_raises(self, fake_conn):
        fake_conn.fetchrow = AsyncMock(return_value=None)
        with pytest.raises(RuntimeError, match="upsert ingredient"):
            await ingredients.upsert_ingredient(fake_conn, "salt")


class TestLinking:
    @pytest.mark.asyncio
    async def test_link_ingredient_inserts_join_row(self, fake_conn):
        await ingredients.link_ingredient(fake_conn, 7, 3, "2 cups")

        sql, recipe_id, ingredient_id, amount = fake_conn.execute.await_args.args
        assert "INSERT INTO recipe_ingredients" in sql
        assert (recipe_id, ingredient_id, amount) == (7, 3, "2 cups")

    @pytest.mark.asyncio
    async def test_unlink_all_deletes_by_recipe(self, fake_conn):
        await ingredients.unlink_all(fake_conn, 7)

        sql, recipe_id = fake_conn.execute.await_args.args
        assert sql.startswith("DELETE FROM recipe_ingredients")
        assert recipe_id == 7

    @pytest.mark.asyncio
    async def test_link_ingredients_skips_blank_names(self, fake_conn):
        fake_conn.fetchrow = AsyncMock(side_effect=[{"id": 1}, {"id": 2}])
        entries = [
            {"name": "Flour", "amount": "2 cups"},
            {"name": "", "amount": "ignored"},
            {"name": None, "amount": "ignored"},
            {"amount": "no name at all"},
            {"name": "Egg", "amount": "3"},
        ]

        linked = await ingredients.link_ingredients(fake_conn, 9, entries)

        assert linked == 2
        upserted = [call.args[1] for call in fake_conn.fetchrow.await_args_list]
        assert upserted == ["flour", "egg"]
        links = [call.args[1:] for call in fake_conn.execute.await_args_list]
        assert links == [(9, 1, "2 cups"), (9, 2, "3")]

    @pytest.mark.asyncio
    async def test_link_ingredients_does_not_dedupe_pairs(self, fake_conn):
        fake_conn.fetchrow = AsyncMock(return_value={"id": 5})
        entries = [{"name": "salt", "amount": "1 tsp"}, {"name": "SALT", "amount": "pinch"}]

        linked = await ingredients.link_ingredients(fake_conn, 1, entries)

        assert linked == 2
        assert fake_conn.execute.await_count == 2

    @pytest.mark.asyncio
    async def test_failure_stops_linking(self, fake_conn):
        fake_conn.fetchrow = AsyncMock(side_effect=[{"id": 1}, {"id": 2}, {"id": 3}])
        fake_conn.execute = AsyncMock(side_effect=[None, None, RuntimeError("constraint violation"), None])
        entries = [{"name": n, "amount": "1"} for n in ("a", "b", "c", "d")]

        with pytest.raises(RuntimeError, match="constraint violation"):
            await ingredients.link_ingredients(fake_conn, 1, entries)

        assert fake_conn.fetchrow.await_count == 3
        assert fake_conn.execute.await_count == 3
