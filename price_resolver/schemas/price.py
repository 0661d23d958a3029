"""Price Schemas — Pydantic response model for the price query endpoint.

Invariants:
    - JSON keys are camelCase (productId, priceList, ...); Python attributes snake_case
    - price serializes as a JSON number, dates as ISO-8601 local datetimes
    - Internal fields (id, priority) are not exposed

Design Decisions:
    - alias_generator over per-field aliases: one rule for every field
    - from_domain classmethod keeps the route free of field-by-field mapping
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from price_resolver.core.price import Price


class PriceResponse(BaseModel):
    """Applicable price for a product of a brand at the requested date."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: int
    brand_id: int
    price_list: int
    start_date: datetime
    end_date: datetime
    price: Decimal
    currency: str

    @field_serializer("price")
    def serialize_price(self, v: Decimal) -> float:
        return float(v)

    @classmethod
    def from_domain(cls, price: Price) -> "PriceResponse":
        return cls(
            product_id=price.product_id,
            brand_id=price.brand_id,
            price_list=price.price_list,
            start_date=price.start_date,
            end_date=price.end_date,
            price=price.amount,
            currency=price.currency,
        )
