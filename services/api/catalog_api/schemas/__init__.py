"""Pydantic schemas for API response validation."""

from catalog_api.schemas.common import ErrorResponse
from catalog_api.schemas.catalog import CategoryProducts, ProductCard, RailResult

__all__ = [
    "ErrorResponse",
    "CategoryProducts",
    "ProductCard",
    "RailResult",
]
