"""Built-in sample catalog shown when the live feed cannot be loaded."""

from typing import Tuple

from shopfeed.models import Product

__all__ = ["FALLBACK_PRODUCTS"]

_IMAGE_BASE = "https://images.unsplash.com"
_IMAGE_PARAMS = "?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&q=80"

FALLBACK_PRODUCTS: Tuple[Product, ...] = (
    Product(
        id=1,
        name="Premium Cotton Formal Shirt",
        price=2499,
        discount_label="10% off",
        discount_value=10,
        image_url=f"{_IMAGE_BASE}/photo-1598033129183-c4f50c736f10{_IMAGE_PARAMS}",
        description=(
            "Experience unparalleled comfort with our premium cotton formal shirt. "
            "Perfect for office wear and formal occasions, this shirt features a "
            "classic cut with modern detailing."
        ),
        sizes={"M": 5, "L": 8, "XL": 3, "XXL": 2},
    ),
    Product(
        id=2,
        name="Slim Fit Linen Shirt",
        price=2299,
        discount_label="5% off",
        discount_value=5,
        image_url=f"{_IMAGE_BASE}/photo-1507003211169-0a1dd7228f2d{_IMAGE_PARAMS}",
        description=(
            "Our slim fit linen shirt is perfect for summer. Made from high-quality "
            "linen, it keeps you cool while maintaining a sharp, professional appearance."
        ),
        sizes={"M": 2, "L": 4, "XL": 6, "XXL": 0},
    ),
    Product(
        id=3,
        name="Classic White Office Shirt",
        price=1999,
        discount_label="7% off",
        discount_value=7,
        image_url=f"{_IMAGE_BASE}/photo-1602810317536-5d5e8a493a55{_IMAGE_PARAMS}",
        description=(
            "The essential white office shirt every professional needs. Crisp, clean, "
            "and perfectly tailored for a polished look in any business setting."
        ),
        sizes={"M": 10, "L": 7, "XL": 5, "XXL": 4},
    ),
)
