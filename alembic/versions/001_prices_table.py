"""Prices table — price-list records with product/brand lookup index.

Revision ID: 001_prices_table
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_prices_table"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "prices",
        sa.Column("id", sa.Integer, autoincrement=True, nullable=False),
        sa.Column("brand_id", sa.Integer, nullable=False),
        sa.Column("start_date", sa.DateTime, nullable=False),
        sa.Column("end_date", sa.DateTime, nullable=False),
        sa.Column("price_list", sa.Integer, nullable=False),
        sa.Column("product_id", sa.Integer, nullable=False),
        sa.Column("priority", sa.Integer, nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("curr", sa.String(3), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_prices"),
    )
    op.create_index(
        "ix_prices_product_brand", "prices", ["product_id", "brand_id"],
    )


def downgrade() -> None:
    op.drop_index("ix_prices_product_brand", table_name="prices")
    op.drop_table("prices")
