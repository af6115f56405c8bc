"""Category model.

A named grouping of products. Lookups from the API are case-insensitive
on ``name``; the stored value is the canonical display string.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.stores.postgres import Base


class Category(Base):
    """Product category (e.g. "Mobiles", "Laptops")."""

    __tablename__ = "category"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), index=True)

    def __repr__(self) -> str:
        return f"<Category {self.name}>"
