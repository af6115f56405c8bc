"""Catalog endpoints.

GET /api/products/top                              - First products of the catalog
GET /api/products/category/{categoryName}          - Products of one category
GET /api/products/home-rails                       - HOME rails with their products
GET /api/products/rails-by-category/{categoryName} - HOME rails narrowed to a category

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends, Path, Query

from catalog_api.schemas import CategoryProducts, ProductCard, RailResult
from catalog_api.services.catalog import CatalogService
from catalog_api.settings import get_settings
from catalog_api.stores.postgres import get_gateway

router = APIRouter()


def get_catalog_service() -> CatalogService:
    """Build the catalog service on the shared storage gateway."""
    return CatalogService(get_gateway(), get_settings())


@router.get("/top", response_model=list[ProductCard])
async def get_top_products(
    limit: str | None = Query(
        default=None,
        description="Max products (1-100); invalid values fall back to 3",
    ),
    service: CatalogService = Depends(get_catalog_service),
) -> list[ProductCard]:
    """Get the first products of the catalog, by id."""
    return await service.top_products(limit)


@router.get("/category/{category_name}", response_model=CategoryProducts)
async def get_products_by_category(
    category_name: str = Path(
        description="Category name, any case",
        examples=["Mobiles", "mobiles"],
    ),
    limit: str | None = Query(
        default=None,
        description="Max products (1-100); invalid values fall back to 10",
    ),
    service: CatalogService = Depends(get_catalog_service),
) -> CategoryProducts:
    """Get products for a category.

    Unknown categories are not an error: the response is
    {"category": "Unknown", "products": []}.
    """
    return await service.products_by_category(category_name, limit)


@router.get("/home-rails", response_model=list[RailResult])
async def get_home_rails(
    service: CatalogService = Depends(get_catalog_service),
) -> list[RailResult]:
    """Get all HOME rails (rank order) with their products, empty rails included."""
    return await service.home_rails()


@router.get("/rails-by-category/{category_name}", response_model=list[RailResult])
async def get_rails_by_category(
    category_name: str = Path(description="Category name, any case"),
    service: CatalogService = Depends(get_catalog_service),
) -> list[RailResult]:
    """Get HOME rails holding only products of the category.

    Rails with no such products are left out; an unknown category returns [].
    """
    return await service.rails_by_category(category_name)
