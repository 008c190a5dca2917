"""End-to-end query outcomes through the product service."""

from catalog_service.catalog import EARTHWOOL, SAMPLE_PRODUCTS
from catalog_service.models import ProductQuery
from catalog_service.product_service import FilterOutcome, search_products


def test_rejected_query_has_no_result_set():
    outcome = search_products(ProductQuery(brand_id=-1), SAMPLE_PRODUCTS)

    assert outcome == FilterOutcome(accepted=False, message="BrandId must not be negative")
    assert outcome.products is None


def test_valid_brand_does_not_excuse_empty_search():
    outcome = search_products(ProductQuery(search="", brand_id=0), SAMPLE_PRODUCTS)

    assert not outcome.accepted
    assert outcome.message == "Search must not be empty"
    assert outcome.products is None


def test_accepted_query_returns_matches():
    outcome = search_products(ProductQuery(search="insulation"), SAMPLE_PRODUCTS)

    assert outcome.accepted
    assert outcome.message == ""
    assert outcome.products
    for product in outcome.products:
        text = f"{product.name} {product.description}".casefold()
        assert "insulation" in text
        assert product.brand == EARTHWOOL


def test_accepted_query_may_return_empty_tuple():
    """A zero-width range is valid but matches nothing."""

    outcome = search_products(ProductQuery(search="insulation", min_price=0, max_price=0), SAMPLE_PRODUCTS)

    assert outcome.accepted
    assert outcome.products == ()
