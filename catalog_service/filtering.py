"""Boolean filtering of the catalog against a validated query."""
from __future__ import annotations

from typing import Iterable, Tuple

from .models import Product, ProductQuery
from .validation import is_blank


def _brand_matches(query: ProductQuery, product: Product) -> bool:
    return query.brand_id is None or product.brand.id == query.brand_id


def _price_matches(query: ProductQuery, product: Product) -> bool:
    # Only a complete range constrains; bounds are exclusive.
    if query.min_price is None or query.max_price is None:
        return True
    return query.min_price < product.price < query.max_price


def _product_id_matches(query: ProductQuery, product: Product) -> bool:
    return query.product_id is None or product.id == query.product_id


def _contains(haystack: str, needle: str) -> bool:
    return needle.casefold() in haystack.casefold()


def _search_matches(query: ProductQuery, product: Product) -> bool:
    if is_blank(query.search):
        return True
    return _contains(product.name, query.search) or _contains(product.description, query.search)


PREDICATES = (_brand_matches, _price_matches, _product_id_matches, _search_matches)


def matches(query: ProductQuery, product: Product) -> bool:
    """Return True when ``product`` satisfies every criterion present in ``query``."""
    return all(predicate(query, product) for predicate in PREDICATES)


def filter_catalog(query: ProductQuery, catalog: Iterable[Product]) -> Tuple[Product, ...]:
    """Select matching entries, preserving catalog order.

    Assumes ``query`` has already passed ``validation.validate``.
    """
    return tuple(product for product in catalog if matches(query, product))
