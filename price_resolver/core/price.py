"""Price Entity — immutable price-list record valid over a closed date range.

Invariants:
    - Every required field present (None rejected, no implicit defaults)
    - start_date <= end_date, both with the same timezone awareness
    - priority >= 0, amount >= 0 with exactly AMOUNT_SCALE decimal places
    - currency is a 3-letter code, kept verbatim (no conversion)
    - Violations raise InvalidPriceError; no half-built instance ever escapes
    - Equality and hash by id only; a Price without id equals only itself

Design Decisions:
    - Frozen dataclass over getters: immutability replaces defensive copying
    - kw_only: nine same-typed-looking fields are too easy to swap positionally
    - Validation in __post_init__ so ORM rows, tests and seeds share one gate
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from decimal import Decimal, InvalidOperation

from price_resolver.core.domain_types import (
    AMOUNT_PRECISION, AMOUNT_QUANTUM, AMOUNT_SCALE, CURRENCY_CODE_LENGTH,
    BrandId, CurrencyCode, PriceId, PriceListId, Priority, ProductId,
)
from price_resolver.core.errors import InvalidPriceError

_INT_FIELDS = ("brand_id", "product_id", "price_list", "priority")
_DATE_FIELDS = ("start_date", "end_date")


@dataclass(frozen=True, eq=False, kw_only=True)
class Price:
    """A single price-list record for one product of one brand."""

    brand_id: BrandId
    product_id: ProductId
    price_list: PriceListId
    start_date: datetime
    end_date: datetime
    priority: Priority
    amount: Decimal
    currency: CurrencyCode
    id: PriceId | None = field(default=None)

    def __post_init__(self) -> None:
        _check_required(self)
        _check_types(self)
        if self.start_date > self.end_date:
            raise InvalidPriceError(
                f"start_date {self.start_date.isoformat()} is after "
                f"end_date {self.end_date.isoformat()}",
                "start_date",
            )
        if self.priority < 0:
            raise InvalidPriceError(
                f"priority cannot be negative (got {self.priority})", "priority",
            )
        object.__setattr__(self, "amount", _normalize_amount(self.amount))
        _check_currency(self.currency)

    def is_applicable_at(self, instant: datetime) -> bool:
        """True iff start_date <= instant <= end_date (both bounds inclusive)."""
        return self.start_date <= instant <= self.end_date

    def has_higher_priority_than(self, other: "Price") -> bool:
        """True iff this price strictly outranks other (equal priority is not higher)."""
        return self.priority > other.priority

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return object.__hash__(self)
        return hash(self.id)


# ─── Validation helpers ─────────────────────────────────────────

def _check_required(price: Price) -> None:
    for f in fields(price):
        if f.name != "id" and getattr(price, f.name) is None:
            raise InvalidPriceError(f"{f.name} is required", f.name)


def _check_types(price: Price) -> None:
    for name in _INT_FIELDS:
        value = getattr(price, name)
        # bool is an int subclass; True as a brand id is always a bug
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidPriceError(
                f"{name} must be an integer (got {type(value).__name__})", name,
            )
    for name in _DATE_FIELDS:
        value = getattr(price, name)
        if not isinstance(value, datetime):
            raise InvalidPriceError(
                f"{name} must be a datetime (got {type(value).__name__})", name,
            )
    if (price.start_date.tzinfo is None) != (price.end_date.tzinfo is None):
        raise InvalidPriceError(
            "start_date and end_date must both be naive or both be timezone-aware",
            "end_date",
        )


def _normalize_amount(value: object) -> Decimal:
    """Coerce to a non-negative Decimal with exactly AMOUNT_SCALE places."""
    if isinstance(value, (bool, float)) or not isinstance(value, (Decimal, int, str)):
        raise InvalidPriceError(
            f"amount must be a Decimal, int or numeric string "
            f"(got {type(value).__name__})",
            "amount",
        )
    try:
        amount = Decimal(value)
        if not amount.is_finite():
            raise InvalidOperation
        quantized = amount.quantize(AMOUNT_QUANTUM)
    except InvalidOperation:
        raise InvalidPriceError(f"amount {value!r} is not a valid number", "amount")
    if amount < 0:
        raise InvalidPriceError(f"amount cannot be negative (got {amount})", "amount")
    if quantized != amount:
        raise InvalidPriceError(
            f"amount {amount} has more than {AMOUNT_SCALE} decimal places", "amount",
        )
    if quantized.adjusted() >= AMOUNT_PRECISION - AMOUNT_SCALE:
        raise InvalidPriceError(
            f"amount {amount} exceeds {AMOUNT_PRECISION} significant digits", "amount",
        )
    return quantized.copy_abs()


def _check_currency(currency: object) -> None:
    if not (
        isinstance(currency, str)
        and len(currency) == CURRENCY_CODE_LENGTH
        and currency.isascii()
        and currency.isalpha()
    ):
        raise InvalidPriceError(
            f"currency must be a {CURRENCY_CODE_LENGTH}-letter code (got {currency!r})",
            "currency",
        )
