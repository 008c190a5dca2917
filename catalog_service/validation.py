"""Precondition checks applied to a catalog query before filtering.

Rules run in a fixed order and stop at the first failure, so numeric
problems are reported before a missing search term. The messages are part
of the public contract and are returned to clients verbatim.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple, Union

from .models import ProductQuery

BRAND_ID_NEGATIVE = "BrandId must not be negative"
PRODUCT_ID_NEGATIVE = "ProductId must not be negative"
PRICE_NEGATIVE = "Price range must be positive"
PRICE_RANGE_INVERTED = "MaxPrice must be more than MinPrice"
SEARCH_EMPTY = "Search must not be empty"


@dataclass(frozen=True)
class Accepted:
    accepted = True


@dataclass(frozen=True)
class Rejected:
    reason: str
    accepted = False


ValidationResult = Union[Accepted, Rejected]

ACCEPTED = Accepted()


def _is_negative(value) -> bool:
    return value is not None and value < 0


def _price_range_inverted(query: ProductQuery) -> bool:
    if query.min_price is None or query.max_price is None:
        return False
    return query.max_price < query.min_price


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


# Predicates return True when the query violates the rule.
RULES: Tuple[Tuple[Callable[[ProductQuery], bool], str], ...] = (
    (lambda q: _is_negative(q.brand_id), BRAND_ID_NEGATIVE),
    (lambda q: _is_negative(q.product_id), PRODUCT_ID_NEGATIVE),
    (lambda q: _is_negative(q.min_price) or _is_negative(q.max_price), PRICE_NEGATIVE),
    (_price_range_inverted, PRICE_RANGE_INVERTED),
    (lambda q: is_blank(q.search), SEARCH_EMPTY),
)


def validate(query: ProductQuery) -> ValidationResult:
    for violated, message in RULES:
        if violated(query):
            return Rejected(message)
    return ACCEPTED
