"""SQL Price Repository — PriceRepository backed by an AsyncSession.

Invariants:
    - One SELECT per find_applicable call (single logical read)
    - Filters product_id, brand_id and start_date <= t <= end_date in SQL
    - Returns core Price objects only; ORM rows never leak out

Design Decisions:
    - Explicit <=/>= instead of BETWEEN: same inclusive semantics, reads as the invariant
    - Session injected per request: transaction scope belongs to the caller
"""

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from price_resolver.core.price import Price
from price_resolver.models.price import PriceRow


class SqlPriceRepository:
    """Reads price-list rows from the prices table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_applicable(
        self, product_id: int, brand_id: int, application_date: datetime,
    ) -> Sequence[Price]:
        result = await self._db.execute(
            select(PriceRow).where(
                PriceRow.product_id == product_id,
                PriceRow.brand_id == brand_id,
                PriceRow.start_date <= application_date,
                PriceRow.end_date >= application_date,
            ),
        )
        return [row.to_domain() for row in result.scalars().all()]
