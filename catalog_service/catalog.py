"""Catalog provider: the read-only product list the service queries.

The catalog is built once at startup, either from the bundled sample data
or from a JSON file containing an array of product records, and is handed
to request handlers as an immutable tuple.
"""
from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Tuple

from pydantic import ValidationError

from .models import Brand, Product

logger = logging.getLogger(__name__)

Catalog = Tuple[Product, ...]

PLACEHOLDER_IMAGE = "https://media.bunnings.com/image-guid.png"

GARDMAN = Brand(id=0, name="Gardman", logo_url="https://media.bunnings.com/gardman.png")
EARTHWOOL = Brand(id=1, name="EARTHWOOl", logo_url="https://media.bunnings.com/earthwool.png")

SAMPLE_PRODUCTS: Catalog = (
    Product(
        id=0,
        name="Wall basket",
        description=(
            "This Gardman Wall Basket features an elegant, period-style design and is presented "
            'in a rustic "limed" finish. It is both strong and durable and comes complete with liner.'
        ),
        price=Decimal("12.98"),
        sku="GAR01",
        image_urls=(PLACEHOLDER_IMAGE,),
        brand=GARDMAN,
    ),
    Product(
        id=1,
        name="Coco roll basket liner",
        description="Line any size hanging basket, window box or planter Gardman Coco Roll Basket liner rolls",
        price=Decimal("17.98"),
        sku="GAR02",
        image_urls=(PLACEHOLDER_IMAGE,),
        brand=GARDMAN,
    ),
    Product(
        id=2,
        name="Earthwool R-4.0",
        description=(
            "Earthwool® R-4.0 Ceiling batt offers great performance, with excellent energy saving "
            "properties, enabling you to keep your home cool in summer and warm in winter."
        ),
        price=Decimal("71.50"),
        sku="EAR01",
        image_urls=(PLACEHOLDER_IMAGE,),
        brand=EARTHWOOL,
    ),
    Product(
        id=3,
        name="Earthwool Space Blanket R-1.8",
        description=(
            "Space Blanket® is a specialist under-metal roof insulation designed for use in "
            "residential buildings."
        ),
        price=Decimal("80.0"),
        sku="EAR02",
        image_urls=(PLACEHOLDER_IMAGE,),
        brand=EARTHWOOL,
    ),
)


class CatalogLoadError(ValueError):
    """Raised when a catalog file cannot be turned into a valid catalog."""


def _check_unique(products: Iterable[Product], source: str) -> None:
    seen_ids: set[int] = set()
    seen_skus: set[str] = set()
    for product in products:
        if product.id in seen_ids:
            raise CatalogLoadError(f"{source}: duplicate product id {product.id}")
        if product.sku in seen_skus:
            raise CatalogLoadError(f"{source}: duplicate sku {product.sku!r}")
        seen_ids.add(product.id)
        seen_skus.add(product.sku)


def _read_records(path: Path) -> list[dict]:
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        try:
            # Decimal keeps prices exact for the exclusive range comparison.
            records = json.load(fh, parse_float=Decimal)
        except json.JSONDecodeError as exc:
            raise CatalogLoadError(f"{path}: invalid JSON ({exc})") from exc
    if not isinstance(records, list):
        raise CatalogLoadError(f"{path}: expected a JSON array of products")
    return records


def load_catalog(path: str | Path | None = None) -> Catalog:
    """Build the catalog from ``path``, or return the sample catalog when unset."""
    if not path:
        logger.info("Using built-in sample catalog with %s products", len(SAMPLE_PRODUCTS))
        return SAMPLE_PRODUCTS

    catalog_path = Path(path)
    records = _read_records(catalog_path)
    try:
        products = tuple(Product.model_validate(record) for record in records)
    except ValidationError as exc:
        raise CatalogLoadError(f"{catalog_path}: invalid product record\n{exc}") from exc
    _check_unique(products, str(catalog_path))
    logger.info("Loaded %s products from %s", len(products), catalog_path)
    return products
