"""Product model.

A sellable item as shown in listings. Read-only from the API's point of view.
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.stores.postgres import Base


class Product(Base):
    """Catalog product."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(String(200))
    price: Mapped[int] = mapped_column(Integer)  # whole currency units, shown as-is
    image: Mapped[str | None] = mapped_column(Text)  # image URL, optional

    # At most one category per product
    parent_category_id: Mapped[int | None] = mapped_column(
        ForeignKey("category.id"),
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Product {self.id} {self.name}>"
