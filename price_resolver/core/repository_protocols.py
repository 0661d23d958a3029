"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE the results are never async themselves;
      the service orchestrates the async call around the pure selection
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from price_resolver.core.price import Price


class PriceRepository(Protocol):
    """Contract for price lookup, implemented by shell.

    find_applicable must return every price whose product_id and brand_id
    match exactly and whose [start_date, end_date] contains application_date
    inclusively. Order is irrelevant. The call is a single logical read.
    """
    async def find_applicable(
        self, product_id: int, brand_id: int, application_date: datetime,
    ) -> Sequence[Price]: ...
