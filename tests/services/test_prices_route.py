"""Price Query Route — GET /api/v1/prices end to end over the reference data.

Invariants:
    - Five reference timestamps resolve to the expected price list
    - Unknown product/brand and dates before all ranges return 404
    - Missing or malformed parameters return 400 with VALIDATION_ERROR
    - Timezone-aware dates return 400 INVALID_QUERY
    - A corrupt stored row returns 422 INVALID_PRICE; a storage failure returns 503
"""

from datetime import datetime
from decimal import Decimal

import pytest

import price_resolver.infrastructure.database as db_module
from price_resolver.infrastructure.database import DatabaseSessionManager, get_db
from price_resolver.main import app
from price_resolver.models.price import PriceRow


URL = "/api/v1/prices"


def _params(application_date, product_id="35455", brand_id="1"):
    return {
        "applicationDate": application_date,
        "productId": product_id,
        "brandId": brand_id,
    }


@pytest.mark.parametrize("application_date, price_list, price, start, end", [
    ("2020-06-14T10:00:00", 1, 35.50, "2020-06-14T00:00:00", "2020-12-31T23:59:59"),
    ("2020-06-14T16:00:00", 2, 25.45, "2020-06-14T15:00:00", "2020-06-14T18:30:00"),
    ("2020-06-14T21:00:00", 1, 35.50, "2020-06-14T00:00:00", "2020-12-31T23:59:59"),
    ("2020-06-15T10:00:00", 3, 30.50, "2020-06-15T00:00:00", "2020-06-15T11:00:00"),
    ("2020-06-16T21:00:00", 4, 38.95, "2020-06-15T16:00:00", "2020-12-31T23:59:59"),
])
async def test_reference_scenarios(
    client, seeded_db, application_date, price_list, price, start, end,
):
    res = await client.get(URL, params=_params(application_date))
    assert res.status_code == 200
    assert res.json() == {
        "productId": 35455,
        "brandId": 1,
        "priceList": price_list,
        "startDate": start,
        "endDate": end,
        "price": price,
        "currency": "EUR",
    }


async def test_unknown_product_returns_404(client, seeded_db):
    res = await client.get(URL, params=_params("2020-06-14T10:00:00", product_id="99999"))
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "PRICE_NOT_FOUND"
    assert error["context"]["product_id"] == 99999


async def test_unknown_brand_returns_404(client, seeded_db):
    res = await client.get(URL, params=_params("2020-06-14T10:00:00", brand_id="99"))
    assert res.status_code == 404


async def test_date_outside_all_ranges_returns_404(client, seeded_db):
    res = await client.get(URL, params=_params("2019-01-01T10:00:00"))
    assert res.status_code == 404


async def test_missing_parameters_return_400(client, seeded_db):
    res = await client.get(URL, params={"applicationDate": "2020-06-14T10:00:00"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in error["details"]}
    assert fields == {"query.productId", "query.brandId"}


async def test_invalid_date_returns_400(client, seeded_db):
    res = await client.get(URL, params=_params("invalid-date"))
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "query.applicationDate"


async def test_non_integer_product_returns_400(client, seeded_db):
    res = await client.get(URL, params=_params("2020-06-14T10:00:00", product_id="abc"))
    assert res.status_code == 400


async def test_timezone_aware_date_returns_400(client, seeded_db):
    res = await client.get(URL, params=_params("2020-06-14T10:00:00+05:00"))
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_QUERY"
    assert error["category"] == "validation"


async def test_corrupt_row_returns_422(client, test_db, caplog):
    test_db.add(PriceRow(
        brand_id=1, product_id=35455, price_list=1,
        start_date=datetime(2020, 6, 14, 0, 0, 0),
        end_date=datetime(2020, 12, 31, 23, 59, 59),
        priority=-1, price=Decimal("35.50"), curr="EUR",
    ))
    await test_db.commit()

    res = await client.get(URL, params=_params("2020-06-14T10:00:00"))
    assert res.status_code == 422
    error = res.json()["error"]
    assert error["code"] == "INVALID_PRICE"
    assert error["category"] == "validation"
    assert error["context"]["product_id"] == 35455
    assert error["context"]["brand_id"] == 1
    assert any(
        "field priority" in r.getMessage() and r.levelname == "ERROR"
        for r in caplog.records
    )


async def test_storage_failure_returns_503(client):
    # Real get_db over a database with no prices table
    app.dependency_overrides.pop(get_db)
    broken = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    db_module.db_manager = broken
    try:
        res = await client.get(URL, params=_params("2020-06-14T10:00:00"))
    finally:
        await broken.dispose()
    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["category"] == "database"
    assert error["severity"] == "critical"
