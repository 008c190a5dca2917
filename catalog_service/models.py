"""Pydantic models for catalog entries and query payloads."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class Brand(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., ge=0)
    name: str
    logo_url: str = Field(..., alias="logoUrl")


class Product(BaseModel):
    """A single catalog entry as served by ``GET /product``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., ge=0)
    name: str
    description: str
    price: Decimal = Field(..., ge=0)
    sku: str
    image_urls: tuple[str, ...] = Field(default_factory=tuple, alias="imageUrls")
    brand: Brand

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)


class ProductQuery(BaseModel):
    """Optional filter criteria for one catalog request.

    ``None`` means the filter is absent, which is not the same as zero.
    Sign and ordering rules are enforced by ``validation.validate`` rather
    than here so that rejections carry their fixed messages.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    brand_id: int | None = Field(default=None, alias="brandId")
    product_id: int | None = Field(default=None, alias="productId")
    min_price: Decimal | None = Field(default=None, alias="minPrice")
    max_price: Decimal | None = Field(default=None, alias="maxPrice")
    search: str | None = None
