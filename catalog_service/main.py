"""FastAPI application exposing the product catalog query endpoint."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import AsyncIterator, List, Optional

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .catalog import load_catalog
from .config import settings
from .models import Product, ProductQuery
from .product_service import search_products

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL = logging.getLevelName(settings.log_level.upper())

# ``force=True`` replaces uvicorn's default handlers so every logger shares one format.
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, force=True)
for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
    logging.getLogger(name).setLevel(LOG_LEVEL)

logger = logging.getLogger(__name__)
logger.info("Logging configured at %s", settings.log_level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    app.state.catalog = load_catalog(settings.catalog_path or None)
    yield


app = FastAPI(title=settings.api_title, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allow_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health(request: Request) -> dict:
    return {"status": "ok", "products": len(request.app.state.catalog)}


@app.get(
    "/product",
    response_model=List[Product],
    responses={400: {"description": "Validation error", "content": {"text/plain": {}}}},
)
async def get_products(
    request: Request,
    brand_id: Optional[int] = Query(None, alias="brandId", description="Restrict to one brand"),
    product_id: Optional[int] = Query(None, alias="productId", description="Restrict to one product"),
    min_price: Optional[Decimal] = Query(None, alias="minPrice", description="Exclusive lower price bound"),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice", description="Exclusive upper price bound"),
    search: Optional[str] = Query(None, description="Text matched against name and description"),
):
    query = ProductQuery(
        brand_id=brand_id,
        product_id=product_id,
        min_price=min_price,
        max_price=max_price,
        search=search,
    )
    outcome = search_products(query, request.app.state.catalog)
    if not outcome.accepted:
        logger.info("(Get) validation error: %s", outcome.message)
        return PlainTextResponse(outcome.message, status_code=400)
    return list(outcome.products)
