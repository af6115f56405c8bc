"""Shared fixtures: a seeded SQLite catalog behind the real StorageGateway."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from catalog_api.main import app
from catalog_api.models import ENTITY_TYPE_RAIL, PAGE_HOME, Category, Product, Rail, RailProduct
from catalog_api.routes.products import get_catalog_service
from catalog_api.services.catalog import CatalogService
from catalog_api.settings import Settings
from catalog_api.stores.postgres import Base, StorageGateway

from tests.fakes import add_rows


@pytest.fixture
async def engine(tmp_path):
    """File-backed SQLite so concurrent reads get their own connections."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def catalog(session_factory) -> None:
    """Sample catalog.

    HOME rails by rank: Flash deals (0), Top Mobiles (1), Laptops (2, empty),
    Accessories corner (3). Rail 1 maps products 2 then 1, so mapping order
    differs from id order. A PROMO rail and a HOME banner must never show up.
    """
    await add_rows(
        session_factory,
        [
            Category(id=1, name="Mobiles"),
            Category(id=2, name="Laptops"),
            Category(id=3, name="Accessories"),
            Product(id=1, name="Galaxy S24", price=74999, image="https://img.test/galaxy.png", parent_category_id=1),
            Product(id=2, name="iPhone 15", price=69900, image=None, parent_category_id=1),
            Product(id=3, name="MacBook Air", price=114900, image="", parent_category_id=2),
            Product(id=4, name="USB-C Charger", price=1999, image="https://img.test/charger.png", parent_category_id=3),
            Product(id=5, name="Pixel 8", price=59999, image="https://img.test/pixel.png", parent_category_id=1),
            Product(id=6, name="Gift Card", price=500, image=None, parent_category_id=None),
            Rail(id=1, header="Top Mobiles", page=PAGE_HOME, entity_type=ENTITY_TYPE_RAIL, rank=1),
            Rail(id=2, header="Laptops", page=PAGE_HOME, entity_type=ENTITY_TYPE_RAIL, rank=2),
            Rail(id=3, header="Accessories corner", page=PAGE_HOME, entity_type=ENTITY_TYPE_RAIL, rank=3),
            Rail(id=4, header="Promo only", page="PROMO", entity_type=ENTITY_TYPE_RAIL, rank=0),
            Rail(id=5, header="Banner", page=PAGE_HOME, entity_type="BANNER", rank=0),
            Rail(id=6, header="Flash deals", page=PAGE_HOME, entity_type=ENTITY_TYPE_RAIL, rank=0),
            RailProduct(id=1, entity_id=1, product_id=2),
            RailProduct(id=2, entity_id=1, product_id=1),
            RailProduct(id=3, entity_id=3, product_id=4),
            RailProduct(id=4, entity_id=3, product_id=3),
            RailProduct(id=5, entity_id=4, product_id=1),
            RailProduct(id=6, entity_id=5, product_id=1),
            RailProduct(id=7, entity_id=6, product_id=5),
            RailProduct(id=8, entity_id=6, product_id=6),
        ],
    )


@pytest.fixture
def gateway(session_factory, catalog) -> StorageGateway:
    return StorageGateway(session_factory, timeout=5.0)


@pytest.fixture
async def client(gateway):
    """Test client with the catalog service bound to the seeded gateway."""
    app.dependency_overrides[get_catalog_service] = lambda: CatalogService(gateway, Settings())
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
