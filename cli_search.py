"""Terminal client that reuses the in-process catalog query logic."""
from __future__ import annotations

import argparse
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable

from catalog_service.catalog import load_catalog
from catalog_service.config import settings
from catalog_service.models import ProductQuery
from catalog_service.product_service import FilterOutcome, search_products

GREEN = "\033[92m"
RED = "\033[91m"
RESET = "\033[0m"

EXIT_REJECTED = 2


def pretty_print_outcome(query: ProductQuery, outcome: FilterOutcome) -> None:
    if not outcome.accepted:
        print(f"{RED}{outcome.message}{RESET}")
        return
    products = outcome.products or ()
    print(f"Query: {query.search} | results: {GREEN}{len(products)}{RESET}")
    for idx, product in enumerate(products, start=1):
        print(
            f"  {idx:02d}. #{product.id} | {product.brand.name} | {product.sku} | "
            f"{product.name} | {product.price}"
        )


def _price(text: str) -> Decimal:
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid price: {text!r}") from None
    if not value.is_finite():
        raise argparse.ArgumentTypeError(f"price must be a finite number: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CLI client for the product catalog")
    parser.add_argument("search", nargs="?", help="Text matched against product name and description")
    parser.add_argument("--brand-id", type=int, help="Restrict to one brand")
    parser.add_argument("--product-id", type=int, help="Restrict to one product")
    parser.add_argument("--min-price", type=_price, help="Exclusive lower price bound")
    parser.add_argument("--max-price", type=_price, help="Exclusive upper price bound")
    parser.add_argument("--catalog", type=Path, help="JSON catalog file (defaults to CATALOG_PATH or sample data)")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)
    catalog = load_catalog(args.catalog or settings.catalog_path or None)
    query = ProductQuery(
        brand_id=args.brand_id,
        product_id=args.product_id,
        min_price=args.min_price,
        max_price=args.max_price,
        search=args.search,
    )
    outcome = search_products(query, catalog)
    pretty_print_outcome(query, outcome)
    return 0 if outcome.accepted else EXIT_REJECTED


if __name__ == "__main__":
    raise SystemExit(main())
