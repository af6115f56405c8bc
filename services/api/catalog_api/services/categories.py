"""Category resolution.

Maps a free-text category name (from a URL) to the canonical category,
case-insensitively. Not finding one is a normal outcome, returned as None.
"""

from dataclasses import dataclass
from typing import Any

from sqlalchemy import func, select

from catalog_api.models import Category
from catalog_api.stores.postgres import StorageGateway


@dataclass(frozen=True)
class ResolvedCategory:
    id: int
    display_name: str


async def resolve_category(gateway: StorageGateway, category_name: Any) -> ResolvedCategory | None:
    """Resolve a category by name, ignoring case.

    If several categories share a name modulo case, the lowest id wins.

    Args:
        gateway: Storage gateway to read through.
        category_name: Name as supplied by the client (e.g. "mobiles", "MOBILES").

    Returns:
        ResolvedCategory, or None when the input is not a non-empty string or
        nothing matches. Invalid input never reaches storage.

    Raises:
        StorageError: If the lookup itself fails.
    """
    if not isinstance(category_name, str) or not category_name:
        return None

    rows = await gateway.query(
        select(Category.id, Category.name)
        .where(func.lower(Category.name) == func.lower(category_name))
        .order_by(Category.id.asc())
        .limit(1)
    )
    if not rows:
        return None

    return ResolvedCategory(id=rows[0]["id"], display_name=rows[0]["name"])
