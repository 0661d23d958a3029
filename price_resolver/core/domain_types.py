"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PriceId, BrandId, ProductId, PriceListId wrap ints; never use bare int ids in domain logic
    - Priority is non-negative; higher wins
    - CurrencyCode is a 3-letter code, stored verbatim

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Constants for fixed-scale money live here so ORM and core agree on the scale
"""

from decimal import Decimal
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PriceId = NewType("PriceId", int)
BrandId = NewType("BrandId", int)
ProductId = NewType("ProductId", int)
PriceListId = NewType("PriceListId", int)


# ─── Value Types ─────────────────────────────────────────────────

Priority = NewType("Priority", int)            # >= 0
CurrencyCode = NewType("CurrencyCode", str)    # e.g. "EUR"


# ─── Money ───────────────────────────────────────────────────────

AMOUNT_SCALE = 2
AMOUNT_PRECISION = 10
AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_SCALE)   # Decimal("0.01")
CURRENCY_CODE_LENGTH = 3
