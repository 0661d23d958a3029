"""Price Response Schema — camelCase JSON, numeric price, no internal fields."""

from datetime import datetime
from decimal import Decimal

from price_resolver.core.price import Price
from price_resolver.schemas.price import PriceResponse


def _price():
    return Price(
        id=2, brand_id=1, product_id=35455, price_list=2,
        start_date=datetime(2020, 6, 14, 15, 0), end_date=datetime(2020, 6, 14, 18, 30),
        priority=1, amount=Decimal("25.45"), currency="EUR",
    )


def test_from_domain_serializes_camel_case():
    body = PriceResponse.from_domain(_price()).model_dump(mode="json", by_alias=True)
    assert body == {
        "productId": 35455,
        "brandId": 1,
        "priceList": 2,
        "startDate": "2020-06-14T15:00:00",
        "endDate": "2020-06-14T18:30:00",
        "price": 25.45,
        "currency": "EUR",
    }


def test_internal_fields_not_exposed():
    body = PriceResponse.from_domain(_price()).model_dump(by_alias=True)
    assert "id" not in body
    assert "priority" not in body


def test_accepts_camel_case_input():
    response = PriceResponse.model_validate({
        "productId": 35455, "brandId": 1, "priceList": 1,
        "startDate": "2020-06-14T00:00:00", "endDate": "2020-12-31T23:59:59",
        "price": "35.50", "currency": "EUR",
    })
    assert response.price == Decimal("35.50")
    assert response.product_id == 35455
