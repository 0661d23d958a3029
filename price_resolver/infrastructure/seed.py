"""Reference Prices — the four canonical PRICES rows and an idempotent seeder.

Invariants:
    - REFERENCE_PRICES are validated core Price objects (construction enforces invariants)
    - seed_reference_prices only inserts into an empty prices table

Design Decisions:
    - Same rows as alembic/versions/002_reference_prices.py, so local
      create_schema + seed runs behave like a migrated database
"""

import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from price_resolver.core.domain_types import (
    BrandId, CurrencyCode, PriceListId, Priority, ProductId,
)
from price_resolver.core.price import Price
from price_resolver.models.price import PriceRow

logger = logging.getLogger(__name__)

_BRAND = BrandId(1)
_PRODUCT = ProductId(35455)
_EUR = CurrencyCode("EUR")


def _reference(
    start: str, end: str, price_list: int, priority: int, amount: str,
) -> Price:
    return Price(
        brand_id=_BRAND,
        product_id=_PRODUCT,
        price_list=PriceListId(price_list),
        start_date=datetime.fromisoformat(start),
        end_date=datetime.fromisoformat(end),
        priority=Priority(priority),
        amount=Decimal(amount),
        currency=_EUR,
    )


REFERENCE_PRICES: tuple[Price, ...] = (
    _reference("2020-06-14T00:00:00", "2020-12-31T23:59:59", 1, 0, "35.50"),
    _reference("2020-06-14T15:00:00", "2020-06-14T18:30:00", 2, 1, "25.45"),
    _reference("2020-06-15T00:00:00", "2020-06-15T11:00:00", 3, 1, "30.50"),
    _reference("2020-06-15T16:00:00", "2020-12-31T23:59:59", 4, 1, "38.95"),
)


async def seed_reference_prices(db: AsyncSession) -> int:
    """Insert REFERENCE_PRICES into an empty table. Returns rows inserted."""
    existing = await db.scalar(select(func.count()).select_from(PriceRow))
    if existing:
        logger.info(f"Skipping reference price seed: {existing} row(s) present")
        return 0
    db.add_all(PriceRow.from_domain(p) for p in REFERENCE_PRICES)
    await db.commit()
    logger.info(f"Seeded {len(REFERENCE_PRICES)} reference price(s)")
    return len(REFERENCE_PRICES)
