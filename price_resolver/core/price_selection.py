"""Price Selection — pure rules for picking the applicable price among candidates.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Input sequences are never mutated; order of input is irrelevant to the result
    - select_highest_priority never returns a price with lower priority than another candidate
    - Equal priority: lowest id wins; prices without id rank after identified ones,
      and among those the first in input order wins

Design Decisions:
    - Single min() over a composite key instead of pairwise has_higher_priority_than:
      correct for n candidates in one pass
    - filter_applicable lives in core so every non-SQL repository shares the
      exact matching rule (product, brand, inclusive date range)
"""

from collections.abc import Iterable, Sequence
from datetime import datetime

from price_resolver.core.price import Price


def _selection_key(price: Price) -> tuple[int, bool, int]:
    return (-price.priority, price.id is None, price.id or 0)


def select_highest_priority(candidates: Sequence[Price]) -> Price | None:
    """Return the highest-priority candidate, or None for an empty sequence."""
    if not candidates:
        return None
    return min(candidates, key=_selection_key)


def filter_applicable(
    prices: Iterable[Price],
    product_id: int,
    brand_id: int,
    application_date: datetime,
) -> list[Price]:
    """Candidates for (product, brand) whose range contains application_date."""
    return [
        p for p in prices
        if p.product_id == product_id
        and p.brand_id == brand_id
        and p.is_applicable_at(application_date)
    ]
