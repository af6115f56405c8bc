"""Schemas for the catalog endpoints (/api/products/*)."""

from pydantic import BaseModel, Field


class ProductCard(BaseModel):
    """A product as shown in a listing or rail."""

    name: str
    price: str = Field(min_length=1, description="Display label, e.g. 'Starting at ₹49999'")
    image_url: str = Field(min_length=1)


class CategoryProducts(BaseModel):
    """Products of one category, with the category's canonical display name."""

    category: str
    products: list[ProductCard] = Field(default_factory=list)


class RailResult(BaseModel):
    """A homepage rail and its products, in display order."""

    id: int
    header: str
    products: list[ProductCard] = Field(default_factory=list)
