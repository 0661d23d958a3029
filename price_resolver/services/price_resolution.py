"""Price Resolution — answers "which price applies to product P, brand B at instant T?".

Invariants:
    - Inputs validated before any IO: missing/mistyped argument -> InvalidQueryError
    - application_date is a naive local datetime; timezone-aware instants are rejected
    - Exactly one repository read per resolve() call; no retries, no caching
    - Candidates are trusted as already filtered; never re-filtered, never mutated
    - No match returns None (not an error); repository errors propagate unchanged

Design Decisions:
    - Thin shell around pure select_highest_priority (impureim sandwich):
      IO in, pure selection, value out
    - Repository injected via constructor: SQL in the API, in-memory in tests
"""

import logging
from datetime import datetime

from price_resolver.core.errors import ErrorContext, InvalidQueryError
from price_resolver.core.price import Price
from price_resolver.core.price_selection import select_highest_priority
from price_resolver.core.repository_protocols import PriceRepository

logger = logging.getLogger(__name__)


class PriceResolver:
    """Resolves the applicable price through a PriceRepository."""

    def __init__(self, repository: PriceRepository):
        if repository is None:
            raise ValueError("repository is required")
        self._repository = repository

    async def resolve(
        self, product_id: int, brand_id: int, application_date: datetime,
    ) -> Price | None:
        """Highest-priority applicable price, or None when nothing applies."""
        validate_query(product_id, brand_id, application_date)

        candidates = await self._repository.find_applicable(
            product_id, brand_id, application_date,
        )
        selected = select_highest_priority(candidates)

        log_extra = {
            "product_id": product_id,
            "brand_id": brand_id,
            "application_date": application_date.isoformat(),
        }
        if selected is None:
            logger.info("No applicable price", extra=log_extra)
        else:
            logger.debug(
                f"Resolved price list {selected.price_list} "
                f"from {len(candidates)} candidate(s)",
                extra={**log_extra, "price_id": selected.id},
            )
        return selected


def validate_query(
    product_id: object, brand_id: object, application_date: object,
) -> None:
    """Reject absent or mistyped resolve() arguments. Pure, raises on first error."""
    ctx = ErrorContext(debug_info={
        "product_id": repr(product_id),
        "brand_id": repr(brand_id),
        "application_date": repr(application_date),
    })
    for name, value in (("product_id", product_id), ("brand_id", brand_id)):
        if value is None:
            raise InvalidQueryError(f"{name} is required", name, ctx)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidQueryError(
                f"{name} must be an integer (got {type(value).__name__})", name, ctx,
            )
    if application_date is None:
        raise InvalidQueryError("application_date is required", "application_date", ctx)
    if not isinstance(application_date, datetime):
        raise InvalidQueryError(
            f"application_date must be a datetime "
            f"(got {type(application_date).__name__})",
            "application_date", ctx,
        )
    # Stored ranges are local wall-clock times; an offset has no meaning against them
    if application_date.tzinfo is not None:
        raise InvalidQueryError(
            "application_date must be a naive local datetime", "application_date", ctx,
        )
