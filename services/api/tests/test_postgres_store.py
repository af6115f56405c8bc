"""Tests for the storage gateway (SQLite via aiosqlite stands in for Postgres)."""

import asyncio

import pytest
from sqlalchemy import select

from catalog_api.models import Category
from catalog_api.stores.postgres import StorageError, StorageGateway, get_gateway


@pytest.mark.asyncio
async def test_query_returns_rows_as_dicts(gateway) -> None:
    rows = await gateway.query(select(Category.id, Category.name).order_by(Category.id))
    assert rows == [
        {"id": 1, "name": "Mobiles"},
        {"id": 2, "name": "Laptops"},
        {"id": 3, "name": "Accessories"},
    ]


@pytest.mark.asyncio
async def test_query_raw_text_with_bound_params(gateway) -> None:
    rows = await gateway.query("SELECT name FROM category WHERE id = :id", {"id": 2})
    assert rows == [{"name": "Laptops"}]


@pytest.mark.asyncio
async def test_query_no_rows_is_empty_list(gateway) -> None:
    assert await gateway.query(select(Category.id).where(Category.id == 999)) == []


@pytest.mark.asyncio
async def test_query_malformed_statement_raises_storage_error(gateway) -> None:
    with pytest.raises(StorageError):
        await gateway.query("SELECT * FROM no_such_table")


class _SlowSession:
    def __init__(self) -> None:
        self.closed = False

    async def __aenter__(self) -> "_SlowSession":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.closed = True

    async def execute(self, statement, params=None):
        await asyncio.sleep(10)


@pytest.mark.asyncio
async def test_query_timeout_raises_storage_error_and_releases_session() -> None:
    session = _SlowSession()
    gateway = StorageGateway(lambda: session, timeout=0.01)
    with pytest.raises(StorageError, match="timed out"):
        await gateway.query("SELECT 1")
    assert session.closed


def test_get_gateway_before_init_raises() -> None:
    with pytest.raises(RuntimeError):
        get_gateway()
