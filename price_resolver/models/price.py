"""Price ORM — persists price-list records in the PRICES table.

Invariants:
    - id is an autoincrement integer primary key
    - All business columns are non-nullable
    - price is NUMERIC(10, 2); curr is the 3-letter currency code
    - Rows leave the persistence layer only as validated core Price objects (to_domain)

Design Decisions:
    - Column names follow the legacy PRICES layout (price_list, price, curr)
      while the domain uses price_list/amount/currency
    - Composite index on (product_id, brand_id): every lookup filters on both
    - Naive DateTime: ranges are local wall-clock times, like the reference data
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from price_resolver.core.domain_types import AMOUNT_PRECISION, AMOUNT_SCALE, CURRENCY_CODE_LENGTH
from price_resolver.core.errors import InvalidPriceError
from price_resolver.core.price import Price
from price_resolver.db.base import Base


class PriceRow(Base):
    """Price-list row: one rate plan entry for a product of a brand."""
    __tablename__ = "prices"
    __table_args__ = (
        Index("ix_prices_product_brand", "product_id", "brand_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    brand_id: Mapped[int] = mapped_column(Integer, nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    price_list: Mapped[int] = mapped_column(Integer, nullable=False)
    product_id: Mapped[int] = mapped_column(Integer, nullable=False)
    priority: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(AMOUNT_PRECISION, AMOUNT_SCALE), nullable=False,
    )
    curr: Mapped[str] = mapped_column(String(CURRENCY_CODE_LENGTH), nullable=False)

    def to_domain(self) -> Price:
        """Map to the core entity. Raises InvalidPriceError on a corrupt row."""
        try:
            return self._build_price()
        except InvalidPriceError as e:
            e.context.product_id = self.product_id
            e.context.brand_id = self.brand_id
            e.context.debug_info = {"row_id": self.id}
            raise

    def _build_price(self) -> Price:
        return Price(
            id=self.id,
            brand_id=self.brand_id,
            product_id=self.product_id,
            price_list=self.price_list,
            start_date=self.start_date,
            end_date=self.end_date,
            priority=self.priority,
            amount=self.price,
            currency=self.curr,
        )

    @classmethod
    def from_domain(cls, price: Price) -> "PriceRow":
        """Build an unsaved row from a Price. id is left to the database."""
        return cls(
            brand_id=price.brand_id,
            product_id=price.product_id,
            price_list=price.price_list,
            start_date=price.start_date,
            end_date=price.end_date,
            priority=price.priority,
            price=price.amount,
            curr=price.currency,
        )
