"""Rail and listing assembly.

Listing rules:
1. Top products: first N products by id
2. Category listing: resolve the category, then its products by id
3. Home rails: HOME rails by rank ASC, each with up to N mapped products

Category-filtered rails:
- Unknown category -> no rails at all
- Only products of the category are kept inside each rail
- Rails left with no products are dropped (unfiltered rails are kept even when empty)

Products inside a rail follow mapping insertion order (entity_product_mapping.id).
Per-rail reads run concurrently and are put back in rank order before returning.
"""

import asyncio
import logging
from collections.abc import Awaitable, Sequence
from typing import Any, TypeVar

from sqlalchemy import select

from catalog_api.models import ENTITY_TYPE_RAIL, PAGE_HOME, Product, Rail, RailProduct
from catalog_api.schemas import CategoryProducts, ProductCard, RailResult
from catalog_api.services.categories import resolve_category
from catalog_api.services.formatting import format_product
from catalog_api.services.limits import clamp_limit
from catalog_api.stores.postgres import StorageGateway

logger = logging.getLogger("uvicorn.error")

T = TypeVar("T")

DEFAULT_TOP_LIMIT = 3
DEFAULT_CATEGORY_LIMIT = 10
DEFAULT_RAIL_LIMIT = 12
DEFAULT_RAIL_CONCURRENCY = 4

UNKNOWN_CATEGORY = "Unknown"


async def list_top_products(gateway: StorageGateway, limit: Any = DEFAULT_TOP_LIMIT) -> list[ProductCard]:
    """Get the first products of the catalog.

    Args:
        gateway: Storage gateway.
        limit: Max products; invalid values fall back to 3.

    Returns:
        Formatted products, ascending by id.
    """
    limit = clamp_limit(limit, DEFAULT_TOP_LIMIT)
    rows = await gateway.query(
        select(Product.name, Product.price, Product.image)
        .order_by(Product.id.asc())
        .limit(limit)
    )
    return [format_product(row) for row in rows]


async def list_products_by_category(
    gateway: StorageGateway,
    category_name: Any,
    limit: Any = DEFAULT_CATEGORY_LIMIT,
) -> CategoryProducts:
    """Get products of a category, looked up by name (case-insensitive).

    Args:
        gateway: Storage gateway.
        category_name: Category name as typed by the client.
        limit: Max products; invalid values fall back to 10.

    Returns:
        CategoryProducts with the canonical name, or "Unknown" and no products
        if the category does not resolve.
    """
    category = await resolve_category(gateway, category_name)
    if category is None:
        return CategoryProducts(category=UNKNOWN_CATEGORY, products=[])

    limit = clamp_limit(limit, DEFAULT_CATEGORY_LIMIT)
    rows = await gateway.query(
        select(Product.name, Product.price, Product.image)
        .where(Product.parent_category_id == category.id)
        .order_by(Product.id.asc())
        .limit(limit)
    )
    return CategoryProducts(
        category=category.display_name,
        products=[format_product(row) for row in rows],
    )


async def list_home_rails(
    gateway: StorageGateway,
    category_name: Any = None,
    limit_per_rail: Any = DEFAULT_RAIL_LIMIT,
    *,
    max_concurrency: int = DEFAULT_RAIL_CONCURRENCY,
) -> list[RailResult]:
    """Get HOME rails with their products.

    Args:
        gateway: Storage gateway.
        category_name: None for all rails. Anything else filters rail products
            to that category; an unresolvable value yields no rails.
        limit_per_rail: Max products per rail; invalid values fall back to 12.
        max_concurrency: Max per-rail product reads in flight.

    Returns:
        Rails ordered by rank ASC.
    """
    category_id: int | None = None
    if category_name is not None:
        category = await resolve_category(gateway, category_name)
        if category is None:
            return []
        category_id = category.id

    limit_per_rail = clamp_limit(limit_per_rail, DEFAULT_RAIL_LIMIT)
    rails = await _fetch_home_rails(gateway)

    product_lists = await _gather_in_order(
        [_fetch_rail_products(gateway, rail["id"], limit_per_rail, category_id) for rail in rails],
        max_concurrency=max_concurrency,
    )

    results: list[RailResult] = []
    for rail, products in zip(rails, product_lists):
        if category_id is not None and not products:
            continue
        results.append(RailResult(id=rail["id"], header=rail["header"], products=products))

    logger.info(
        "[rails] rails returned: %d %s (category=%s)",
        len(results),
        [r.header for r in results],
        category_name,
    )
    return results


async def _fetch_home_rails(gateway: StorageGateway) -> list[dict[str, Any]]:
    return await gateway.query(
        select(Rail.id, Rail.header)
        .where(Rail.page == PAGE_HOME)
        .where(Rail.entity_type == ENTITY_TYPE_RAIL)
        .order_by(Rail.rank.asc(), Rail.id.asc())
    )


async def _fetch_rail_products(
    gateway: StorageGateway,
    rail_id: int,
    limit: int,
    category_id: int | None = None,
) -> list[ProductCard]:
    """Mapped products of one rail, optionally restricted to a category."""
    query = (
        select(Product.name, Product.price, Product.image)
        .select_from(RailProduct)
        .join(Product, RailProduct.product_id == Product.id)
        .where(RailProduct.entity_id == rail_id)
    )
    if category_id is not None:
        query = query.where(Product.parent_category_id == category_id)
    query = query.order_by(RailProduct.id.asc()).limit(limit)

    rows = await gateway.query(query)
    return [format_product(row) for row in rows]


async def _gather_in_order(
    aws: Sequence[Awaitable[T]],
    *,
    max_concurrency: int,
) -> list[T]:
    """Await all, at most ``max_concurrency`` at a time; results keep input order.

    The first failure cancels whatever is still pending and is re-raised.
    """
    sem = asyncio.Semaphore(max(1, max_concurrency))

    async def _run(aw: Awaitable[T]) -> T:
        async with sem:
            return await aw

    tasks = [asyncio.ensure_future(_run(aw)) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except Exception:
        for task in tasks:
            task.cancel()
        # Drain so sibling failures are not reported as unretrieved.
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
