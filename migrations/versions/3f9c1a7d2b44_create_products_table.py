"""create products table (uuid pk, unique sku, positive price)

Revision ID: 3f9c1a7d2b44
Revises:
Create Date: 2026-10-19 10:12:40.118203
"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# --- Alembic identifiers ---
revision: str = "3f9c1a7d2b44"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TABLE = "products"
IDX_SKU = "ix_products_sku"


def upgrade() -> None:
    op.create_table(
        TABLE,
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("sku", sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_products"),
        sa.CheckConstraint("price > 0", name="ck_products_price_positive"),
        sa.CheckConstraint("length(trim(name)) > 0", name="ck_products_name_not_blank"),
    )
    # unicitatea SKU stă în index (un singur obiect de întreținut)
    op.create_index(IDX_SKU, TABLE, ["sku"], unique=True)


def downgrade() -> None:
    op.drop_index(IDX_SKU, table_name=TABLE)
    op.drop_table(TABLE)
