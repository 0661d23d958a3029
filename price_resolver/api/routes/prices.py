"""Price Query Route — GET the applicable price for a product, brand and date.

Invariants:
    - All three query parameters required; missing/malformed -> 400 via validation handler
    - No applicable price -> 404 PRICE_NOT_FOUND envelope
    - Route holds no selection logic: PriceResolver decides

Design Decisions:
    - camelCase query parameters (applicationDate, productId, brandId) to match the response body
    - Resolver built per request from the request-scoped session (Depends chain)
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from price_resolver.core.errors import PriceNotFoundError
from price_resolver.infrastructure.database import get_db
from price_resolver.infrastructure.price_repository import SqlPriceRepository
from price_resolver.schemas.price import PriceResponse
from price_resolver.services.price_resolution import PriceResolver

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/prices", tags=["prices"])


def get_price_resolver(db: AsyncSession = Depends(get_db)) -> PriceResolver:
    """FastAPI dependency: resolver over the request's DB session."""
    return PriceResolver(SqlPriceRepository(db))


@router.get(
    "", response_model=PriceResponse,
    responses={
        400: {"description": "Missing or malformed parameters"},
        404: {"description": "No price applies"},
    },
)
async def get_applicable_price(
    application_date: datetime = Query(
        ..., alias="applicationDate", examples=["2020-06-14T10:00:00"],
    ),
    product_id: int = Query(..., alias="productId", examples=[35455]),
    brand_id: int = Query(..., alias="brandId", examples=[1]),
    resolver: PriceResolver = Depends(get_price_resolver),
):
    """Highest-priority price applicable at applicationDate."""
    price = await resolver.resolve(product_id, brand_id, application_date)
    if price is None:
        raise PriceNotFoundError(product_id, brand_id, application_date)
    return PriceResponse.from_domain(price)
