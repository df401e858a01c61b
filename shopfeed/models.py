"""Data models for catalog products."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from shopfeed.config import (
    DEFAULT_DESCRIPTION,
    DEFAULT_DISCOUNT_LABEL,
    DEFAULT_NAME,
    PLACEHOLDER_IMAGE_URL,
)

__all__ = ["Product", "validate_product"]


@dataclass(frozen=True)
class Product:
    """A single catalog item as read from the product feed.

    Every field is always populated; the feed parser substitutes defaults
    for anything missing so downstream code never has to check for None.
    """

    id: int
    name: str = DEFAULT_NAME
    price: int = 0
    discount_label: str = DEFAULT_DISCOUNT_LABEL
    discount_value: int = 0
    image_url: str = PLACEHOLDER_IMAGE_URL
    description: str = DEFAULT_DESCRIPTION

    # Size label -> quantity in stock, in feed order (read-only view)
    sizes: Mapping[str, int] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if isinstance(self.sizes, Mapping):
            object.__setattr__(self, "sizes", MappingProxyType(dict(self.sizes)))

    @property
    def is_discounted(self) -> bool:
        return self.discount_value > 0

    @property
    def total_stock(self) -> int:
        return sum(self.sizes.values())

    def available_sizes(self) -> List[str]:
        """Size labels with at least one unit in stock."""
        return [label for label, qty in self.sizes.items() if qty > 0]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary (sizes copied)."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "discount_label": self.discount_label,
            "discount_value": self.discount_value,
            "image_url": self.image_url,
            "description": self.description,
            "sizes": dict(self.sizes),
        }


def validate_product(product: Product) -> List[str]:
    """Check a product against the catalog invariants.

    Args:
        product: Product to check

    Returns:
        List of human-readable problems; empty when the product is valid.
    """
    problems: List[str] = []

    if not isinstance(product.id, int) or isinstance(product.id, bool):
        problems.append(f"id must be an integer, got {product.id!r}")
    if not isinstance(product.name, str) or not product.name:
        problems.append("name must be a non-empty string")
    if not isinstance(product.price, int) or product.price < 0:
        problems.append(f"price must be a non-negative integer, got {product.price!r}")
    if not isinstance(product.discount_label, str) or not product.discount_label:
        problems.append("discount_label must be a non-empty string")
    if not isinstance(product.discount_value, int) or not 0 <= product.discount_value <= 100:
        problems.append(f"discount_value must be within 0-100, got {product.discount_value!r}")
    if not isinstance(product.image_url, str) or not product.image_url:
        problems.append("image_url must be a non-empty string")
    if not isinstance(product.description, str) or not product.description:
        problems.append("description must be a non-empty string")

    if not isinstance(product.sizes, Mapping):
        problems.append("sizes must be a mapping")
    else:
        for label, qty in product.sizes.items():
            if not isinstance(label, str) or not label:
                problems.append(f"size label must be a non-empty string, got {label!r}")
            if not isinstance(qty, int) or qty < 0:
                problems.append(f"quantity for size {label!r} must be a non-negative integer")

    return problems
