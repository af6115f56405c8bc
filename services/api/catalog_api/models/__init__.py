"""SQLAlchemy ORM models.

Models represent database tables:
- category: Product categories
- products: Catalog products (optional category reference)
- entity: Page entities; rails are entity_type RAIL
- entity_product_mapping: Rail <-> product membership
"""

from catalog_api.models.category import Category
from catalog_api.models.product import Product
from catalog_api.models.rail import ENTITY_TYPE_RAIL, PAGE_HOME, Rail, RailProduct

__all__ = ["Category", "Product", "Rail", "RailProduct", "ENTITY_TYPE_RAIL", "PAGE_HOME"]
