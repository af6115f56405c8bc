"""Product card formatting.

Maps a raw product row (``name``, ``price``, ``image``) to the external
ProductCard shape. Pure: no I/O, no rounding, no currency conversion.
"""

from collections.abc import Mapping
from typing import Any

from catalog_api.schemas import ProductCard

PRICE_PREFIX = "Starting at ₹"
PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/160x160?text=No+Image"


def format_price(price: Any) -> str:
    """Render the stored price as a display label, unchanged."""
    return f"{PRICE_PREFIX}{price}"


def format_product(row: Mapping[str, Any]) -> ProductCard:
    """Project a product row onto the listing shape.

    Only name, price and image are read; anything else in the row is ignored.
    A missing, None or empty image falls back to the placeholder.
    """
    return ProductCard(
        name=row["name"],
        price=format_price(row["price"]),
        image_url=row.get("image") or PLACEHOLDER_IMAGE_URL,
    )
