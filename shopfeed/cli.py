"""Command-line interface for browsing the product catalog."""

import argparse
import json
import logging
from typing import List, Optional, Sequence

from shopfeed.config import CURRENCY, EMPTY_RESULT_TEXT, FEED_URL, PROMO_FALLBACK_TEXT
from shopfeed.export import export_products_to_csv
from shopfeed.ingest import refresh_catalog
from shopfeed.logging_config import setup_logging
from shopfeed.models import Product
from shopfeed.query import query_products
from shopfeed.store import CatalogStore

__all__ = ["main", "parse_args", "discount_banner", "format_product_line", "show_stats"]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Browse a product catalog published as a CSV feed",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List every product from the configured feed
  python -m shopfeed.cli

  # Search by name within a price range
  python -m shopfeed.cli --search shirt --min-price 1000 --max-price 2500

  # Read a local copy of the feed and show the best discount
  python -m shopfeed.cli --source data/products.csv --highest-discount

  # Export the filtered result in feed layout
  python -m shopfeed.cli --search linen --export-csv data/linen.csv
        """,
    )

    parser.add_argument(
        "--source",
        default=FEED_URL,
        help="Feed URL or local CSV path (default: SHOPFEED_FEED_URL or the published sheet)",
    )

    # Query
    parser.add_argument("--search", default="", help="Case-insensitive name filter")
    parser.add_argument("--min-price", default=None, help="Inclusive lower price bound")
    parser.add_argument("--max-price", default=None, help="Inclusive upper price bound")

    # Output
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of a table",
    )
    parser.add_argument(
        "--export-csv",
        metavar="PATH",
        help="Write the result to a CSV file in feed layout",
    )
    parser.add_argument(
        "--highest-discount",
        action="store_true",
        help="Show the discount banner and exit",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show catalog statistics and exit",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Console log level (default: WARNING)",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Don't write the JSONL log file",
    )

    return parser.parse_args(argv)


def discount_banner(store: CatalogStore) -> str:
    """Text for the promotional banner."""
    best = store.highest_discount()
    if best is None:
        return PROMO_FALLBACK_TEXT
    return f"{best.name} - {best.discount_label}"


def format_product_line(product: Product) -> str:
    line = f"  [{product.id}] {product.name} - {CURRENCY} {product.price}"
    if product.is_discounted:
        line += f" ({product.discount_label})"
    if product.sizes:
        sizes = ", ".join(
            f"{label}: {qty}" if qty > 0 else f"{label}: out of stock"
            for label, qty in product.sizes.items()
        )
        line += f"\n      sizes: {sizes}"
    return line


def show_stats(store: CatalogStore) -> None:
    """Display catalog statistics."""
    print(f"\n{'='*50}")
    print(f"Catalog source: {store.source}")
    print(f"{'='*50}")

    print(f"\nTotal products: {len(store)}")
    bounds = store.price_bounds()
    if bounds:
        print(f"Price range: {CURRENCY} {bounds[0]} - {CURRENCY} {bounds[1]}")
    discounted = sum(1 for p in store.all() if p.is_discounted)
    print(f"Discounted products: {discounted}")
    print(f"Best offer: {discount_banner(store)}")
    print()


def _print_results(results: List[Product], as_json: bool) -> None:
    if as_json:
        print(json.dumps([p.to_dict() for p in results], indent=2, ensure_ascii=False))
        return

    print(f"\nShowing {len(results)} products")
    if not results:
        print(EMPTY_RESULT_TEXT)
        return
    for product in results:
        print(format_product_line(product))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI."""
    args = parse_args(argv)

    setup_logging(
        level=getattr(logging, args.log_level),
        log_to_file=not args.no_log_file,
    )

    store = CatalogStore()
    live = refresh_catalog(store, args.source)
    if not live and not args.json:
        print("Using sample data as the product feed is not accessible")

    if args.highest_discount:
        print(discount_banner(store))
        return 0

    if args.stats:
        show_stats(store)
        return 0

    results = query_products(store, args.search, args.min_price, args.max_price)

    if args.export_csv:
        export_products_to_csv(results, args.export_csv)
        return 0

    _print_results(results, args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
