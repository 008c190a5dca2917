"""Query entry point combining validation and catalog filtering."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from time import perf_counter
from typing import Optional, Tuple

from .catalog import Catalog
from .filtering import filter_catalog
from .models import Product, ProductQuery
from .validation import Rejected, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterOutcome:
    """Result of one catalog query.

    ``products`` is ``None`` when the query was rejected and a (possibly
    empty) tuple in catalog order when it was accepted.
    """

    accepted: bool
    message: str = ""
    products: Optional[Tuple[Product, ...]] = None

    @classmethod
    def rejected(cls, message: str) -> "FilterOutcome":
        return cls(accepted=False, message=message)

    @classmethod
    def found(cls, products: Tuple[Product, ...]) -> "FilterOutcome":
        return cls(accepted=True, products=products)


def search_products(query: ProductQuery, catalog: Catalog) -> FilterOutcome:
    t0 = perf_counter()
    result = validate(query)
    if isinstance(result, Rejected):
        logger.debug("rejected q=%r reason=%s", query.search, result.reason)
        return FilterOutcome.rejected(result.reason)

    products = filter_catalog(query, catalog)
    total_ms = (perf_counter() - t0) * 1000
    logger.info(
        "timing: total=%.2fms q=%r brand=%s product=%s price=%s..%s matches=%s/%s",
        total_ms,
        query.search,
        query.brand_id,
        query.product_id,
        query.min_price,
        query.max_price,
        len(products),
        len(catalog),
    )
    return FilterOutcome.found(products)
