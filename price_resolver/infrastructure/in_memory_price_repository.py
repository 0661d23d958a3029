"""In-Memory Price Repository — PriceRepository over a fixed snapshot of prices.

Invariants:
    - Snapshot is an immutable tuple taken at construction
    - Filtering delegated to core filter_applicable (same rule as the SQL query)

Design Decisions:
    - Used for tests and for embedding the resolver without a database
"""

from collections.abc import Iterable, Sequence
from datetime import datetime

from price_resolver.core.price import Price
from price_resolver.core.price_selection import filter_applicable


class InMemoryPriceRepository:
    """Serves find_applicable from prices held in memory."""

    def __init__(self, prices: Iterable[Price] = ()):
        self._prices: tuple[Price, ...] = tuple(prices)

    @property
    def prices(self) -> tuple[Price, ...]:
        return self._prices

    async def find_applicable(
        self, product_id: int, brand_id: int, application_date: datetime,
    ) -> Sequence[Price]:
        return filter_applicable(self._prices, product_id, brand_id, application_date)
