"""Catalog query service.

Facade over the resolver, rail assembler and formatter. Exposes the four read
operations served by the HTTP layer and is the only place where storage
failures are turned into user-facing errors.
"""

import logging
from typing import Any

from catalog_api.schemas import CategoryProducts, ProductCard, RailResult
from catalog_api.services.rails import (
    DEFAULT_CATEGORY_LIMIT,
    DEFAULT_TOP_LIMIT,
    list_home_rails,
    list_products_by_category,
    list_top_products,
)
from catalog_api.settings import Settings, get_settings
from catalog_api.stores.postgres import StorageError, StorageGateway

logger = logging.getLogger("uvicorn.error")


class CatalogQueryError(RuntimeError):
    """A catalog read failed; ``message`` is safe to show to clients."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class CatalogService:
    """Read operations over the product catalog."""

    def __init__(self, gateway: StorageGateway, settings: Settings | None = None) -> None:
        self._gateway = gateway
        self._settings = settings or get_settings()

    async def top_products(self, limit: Any = None) -> list[ProductCard]:
        try:
            return await list_top_products(
                self._gateway,
                DEFAULT_TOP_LIMIT if limit is None else limit,
            )
        except StorageError as e:
            raise self._failed("Failed to fetch top products", e) from e

    async def products_by_category(self, category_name: Any, limit: Any = None) -> CategoryProducts:
        try:
            return await list_products_by_category(
                self._gateway,
                category_name,
                DEFAULT_CATEGORY_LIMIT if limit is None else limit,
            )
        except StorageError as e:
            raise self._failed("Failed to fetch products for category", e) from e

    async def home_rails(self) -> list[RailResult]:
        try:
            return await list_home_rails(
                self._gateway,
                limit_per_rail=self._settings.home_rails_limit_per_rail,
                max_concurrency=self._settings.rail_fetch_concurrency,
            )
        except StorageError as e:
            raise self._failed("Failed to fetch home rails", e) from e

    async def rails_by_category(self, category_name: Any) -> list[RailResult]:
        """Home rails narrowed to one category; empty rails are left out."""
        try:
            return await list_home_rails(
                self._gateway,
                category_name=category_name if category_name is not None else "",
                limit_per_rail=self._settings.home_rails_limit_per_rail,
                max_concurrency=self._settings.rail_fetch_concurrency,
            )
        except StorageError as e:
            raise self._failed("Failed to fetch category-filtered rails", e) from e

    def _failed(self, message: str, error: StorageError) -> CatalogQueryError:
        logger.exception(f"[catalog] {message}: {error}")
        return CatalogQueryError(message, detail=str(error) if self._settings.debug else None)
