"""Shared test fixtures for the catalog test suite."""

import logging

import pytest

from shopfeed.logging_config import ROOT_LOGGER_NAME
from shopfeed.models import Product
from shopfeed.store import CatalogStore


SAMPLE_FEED = (
    "id,name,price,discount,image,description,sizes\n"
    '101,"Basic Tee",599,"0% off",http://img,desc,"S:2;M:0"\n'
    '102,"Oxford Shirt, Blue",1899,"15% off",https://example.com/oxford.jpg,'
    '"Button-down collar, slim fit","M:3;L:1;XL:0"\n'
    "\n"
    '103,Linen Trousers,2499,"20% off",,,"30:4;32:2"\n'
    "104,Denim Jacket,4200,off,,Heavyweight denim,\n"
)


@pytest.fixture
def sample_feed():
    """Feed text with a header, four data rows and a blank line."""
    return SAMPLE_FEED


@pytest.fixture
def feed_file(tmp_path, sample_feed):
    """The sample feed written to a temporary CSV file."""
    path = tmp_path / "products.csv"
    path.write_text(sample_feed, encoding="utf-8")
    return path


def _build_product(product_id, name="Item", price=100, discount=0, **kwargs):
    return Product(
        id=product_id,
        name=name,
        price=price,
        discount_label=f"{discount}% off",
        discount_value=discount,
        **kwargs,
    )


@pytest.fixture
def make_product():
    """Factory for valid Products with a matching discount label."""
    return _build_product


@pytest.fixture
def shirts(make_product):
    """Small hand-built catalog in a known order."""
    return [
        make_product(1, "Premium Cotton Formal Shirt", 2499, 10, sizes={"M": 5, "L": 8}),
        make_product(2, "Slim Fit Linen Shirt", 2299, 5, sizes={"M": 2, "XXL": 0}),
        make_product(3, "Classic White Office Shirt", 1999, 7),
        make_product(4, "Wool Scarf", 899, 10),
        make_product(5, "LINEN Pocket Square", 350, 0),
    ]


@pytest.fixture
def store(shirts):
    """CatalogStore loaded with the shirts catalog."""
    catalog = CatalogStore()
    catalog.load(shirts)
    return catalog


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging during a test."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
