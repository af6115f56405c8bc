"""create_catalog_tables

Revision ID: 1a6d0c2e9f41
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "1a6d0c2e9f41"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "category",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_category_name"), "category", ["name"], unique=False)
    # Case-insensitive lookups filter on lower(name)
    op.create_index("ix_category_name_lower", "category", [sa.text("lower(name)")], unique=False)

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("parent_category_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["parent_category_id"], ["category.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_products_parent_category_id"), "products", ["parent_category_id"], unique=False
    )

    op.create_table(
        "entity",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("header", sa.String(length=200), nullable=False),
        sa.Column("page", sa.String(length=50), nullable=False),
        sa.Column("entity_type", sa.String(length=50), nullable=False),
        sa.Column("rank", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_entity_page"), "entity", ["page"], unique=False)

    op.create_table(
        "entity_product_mapping",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("entity_id", sa.Integer(), nullable=False),
        sa.Column("product_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["entity_id"], ["entity.id"]),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_entity_product_mapping_entity_id"), "entity_product_mapping", ["entity_id"], unique=False
    )
    op.create_index(
        op.f("ix_entity_product_mapping_product_id"), "entity_product_mapping", ["product_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_entity_product_mapping_product_id"), table_name="entity_product_mapping")
    op.drop_index(op.f("ix_entity_product_mapping_entity_id"), table_name="entity_product_mapping")
    op.drop_table("entity_product_mapping")
    op.drop_index(op.f("ix_entity_page"), table_name="entity")
    op.drop_table("entity")
    op.drop_index(op.f("ix_products_parent_category_id"), table_name="products")
    op.drop_table("products")
    op.drop_index("ix_category_name_lower", table_name="category")
    op.drop_index(op.f("ix_category_name"), table_name="category")
    op.drop_table("category")
