"""In-memory catalog store.

Holds the authoritative, ordered product list for the session. The list, its
source and its load time live together in one immutable ``CatalogSnapshot``
that ``load`` / ``load_fallback`` replace with a single attribute assignment.
Each reader method reads that attribute once, so a query running while a
refresh lands sees either the old catalog or the new one, never a mix.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Iterator, Optional, Tuple

from shopfeed.fallback import FALLBACK_PRODUCTS
from shopfeed.logging_config import get_logger
from shopfeed.models import Product, validate_product

__all__ = [
    "CatalogSnapshot",
    "CatalogStore",
    "SOURCE_EMPTY",
    "SOURCE_FEED",
    "SOURCE_FALLBACK",
]

logger = get_logger("store")

SOURCE_EMPTY = "empty"
SOURCE_FEED = "feed"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class CatalogSnapshot:
    """One loaded catalog: the products plus where and when they came from."""

    products: Tuple[Product, ...]
    source: str
    loaded_at: Optional[datetime]


_EMPTY_SNAPSHOT = CatalogSnapshot(products=(), source=SOURCE_EMPTY, loaded_at=None)


class CatalogStore:
    """Ordered product catalog with an explicit load lifecycle.

    Usage:
        store = CatalogStore()
        store.load(parse_feed(text))   # or store.load_fallback()
        for product in store.all():
            ...
    """

    def __init__(self) -> None:
        self._snapshot = _EMPTY_SNAPSHOT

    def load(self, products: Iterable[Product], source: str = SOURCE_FEED) -> None:
        """Replace the whole catalog.

        Args:
            products: Products in display order
            source: Where the products came from (SOURCE_FEED, SOURCE_FALLBACK)
        """
        items = tuple(products)
        for product in items:
            problems = validate_product(product)
            if problems:
                logger.warning(f"Invalid product {product.id!r} loaded: {'; '.join(problems)}")

        self._snapshot = CatalogSnapshot(products=items, source=source, loaded_at=datetime.now())
        logger.info(f"Catalog loaded from {source}: {len(items)} products")

    def load_fallback(self) -> None:
        """Replace the catalog with the built-in sample products."""
        self.load(FALLBACK_PRODUCTS, source=SOURCE_FALLBACK)

    def snapshot(self) -> CatalogSnapshot:
        """Return products, source and load time from the same load."""
        return self._snapshot

    def all(self) -> Tuple[Product, ...]:
        """Return the current full catalog, in order."""
        return self._snapshot.products

    @property
    def source(self) -> str:
        return self._snapshot.source

    @property
    def loaded_at(self) -> Optional[datetime]:
        return self._snapshot.loaded_at

    def get(self, product_id: int) -> Optional[Product]:
        """Find a product by id (first match), or None."""
        for product in self._snapshot.products:
            if product.id == product_id:
                return product
        return None

    def highest_discount(self) -> Optional[Product]:
        """Return the product with the largest discount.

        The first product to reach the maximum wins ties. Returns None when
        the catalog is empty or nothing is discounted.
        """
        best: Optional[Product] = None
        best_value = 0
        for product in self._snapshot.products:
            if product.discount_value > best_value:
                best_value = product.discount_value
                best = product
        return best

    def price_bounds(self) -> Optional[Tuple[int, int]]:
        """Return (lowest, highest) price in the catalog, or None if empty."""
        products = self._snapshot.products
        if not products:
            return None
        prices = [p.price for p in products]
        return min(prices), max(prices)

    def __len__(self) -> int:
        return len(self._snapshot.products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._snapshot.products)

    def __repr__(self) -> str:
        snapshot = self._snapshot
        return f"CatalogStore(source={snapshot.source!r}, products={len(snapshot.products)})"
