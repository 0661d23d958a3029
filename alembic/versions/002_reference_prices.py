"""Reference prices — the four PRICES rows for brand 1, product 35455.

Revision ID: 002_reference_prices
Revises: 001_prices_table
Create Date: 2026-10-19

"""
from datetime import datetime
from decimal import Decimal
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_reference_prices"
down_revision: Union[str, None] = "001_prices_table"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

prices = sa.table(
    "prices",
    sa.column("brand_id", sa.Integer),
    sa.column("start_date", sa.DateTime),
    sa.column("end_date", sa.DateTime),
    sa.column("price_list", sa.Integer),
    sa.column("product_id", sa.Integer),
    sa.column("priority", sa.Integer),
    sa.column("price", sa.Numeric(10, 2)),
    sa.column("curr", sa.String(3)),
)

# Frozen copy: migrations must not change when application code does
ROWS = [
    ("2020-06-14T00:00:00", "2020-12-31T23:59:59", 1, 0, "35.50"),
    ("2020-06-14T15:00:00", "2020-06-14T18:30:00", 2, 1, "25.45"),
    ("2020-06-15T00:00:00", "2020-06-15T11:00:00", 3, 1, "30.50"),
    ("2020-06-15T16:00:00", "2020-12-31T23:59:59", 4, 1, "38.95"),
]


def upgrade() -> None:
    op.bulk_insert(prices, [
        {
            "brand_id": 1,
            "start_date": datetime.fromisoformat(start),
            "end_date": datetime.fromisoformat(end),
            "price_list": price_list,
            "product_id": 35455,
            "priority": priority,
            "price": Decimal(amount),
            "curr": "EUR",
        }
        for start, end, price_list, priority, amount in ROWS
    ])


def downgrade() -> None:
    op.execute(
        prices.delete().where(
            sa.and_(
                prices.c.brand_id == 1,
                prices.c.product_id == 35455,
                prices.c.price_list.in_([row[2] for row in ROWS]),
            ),
        ),
    )
