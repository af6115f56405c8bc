"""Rail models.

A rail is a named, ranked shelf of products shown on a page. Rails live in the
generic ``entity`` table (``entity_type = 'RAIL'``) and are linked to products
through ``entity_product_mapping``, independently of product categories.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.stores.postgres import Base

ENTITY_TYPE_RAIL = "RAIL"
PAGE_HOME = "HOME"


class Rail(Base):
    """Page entity; rails are the rows with entity_type RAIL."""

    __tablename__ = "entity"

    id: Mapped[int] = mapped_column(primary_key=True)

    header: Mapped[str] = mapped_column(String(200))  # display title
    page: Mapped[str] = mapped_column(String(50), index=True)  # HOME, ...
    entity_type: Mapped[str] = mapped_column(String(50), default=ENTITY_TYPE_RAIL)
    rank: Mapped[int] = mapped_column(default=0)  # ascending display order

    def __repr__(self) -> str:
        return f"<Rail {self.page}#{self.rank} {self.header}>"


class RailProduct(Base):
    """Rail <-> product mapping. ``id`` order is the order products show in a rail."""

    __tablename__ = "entity_product_mapping"

    id: Mapped[int] = mapped_column(primary_key=True)

    entity_id: Mapped[int] = mapped_column(ForeignKey("entity.id"), index=True)
    product_id: Mapped[int] = mapped_column(ForeignKey("products.id"), index=True)

    def __repr__(self) -> str:
        return f"<RailProduct rail={self.entity_id} product={self.product_id}>"
