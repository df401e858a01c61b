"""Tabular export of catalog and query results."""

import os
import re
from typing import Iterable, List, Mapping

import pandas as pd

from shopfeed.models import Product

__all__ = [
    "FEED_COLUMNS",
    "format_sizes",
    "single_line",
    "products_to_dataframe",
    "export_products_to_csv",
]

# Same column order the feed uses, so an export can be fed back in
FEED_COLUMNS: List[str] = ["id", "name", "price", "discount", "image", "description", "sizes"]

# The feed is split on "\n" before quotes are considered
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def single_line(text: str) -> str:
    """Replace line breaks with spaces so a value stays on one feed row."""
    return _LINE_BREAK_RE.sub(" ", text)


def format_sizes(sizes: Mapping[str, int]) -> str:
    """Render a size mapping in feed notation ("M:5;L:8")."""
    return ";".join(f"{single_line(label)}:{qty}" for label, qty in sizes.items())


def products_to_dataframe(products: Iterable[Product]) -> pd.DataFrame:
    """Build a DataFrame with one row per product, in feed column order.

    Line breaks inside text values become spaces, since a feed row cannot
    span lines.
    """
    rows = [
        {
            "id": p.id,
            "name": single_line(p.name),
            "price": p.price,
            "discount": single_line(p.discount_label),
            "image": single_line(p.image_url),
            "description": single_line(p.description),
            "sizes": format_sizes(p.sizes),
        }
        for p in products
    ]
    return pd.DataFrame(rows, columns=FEED_COLUMNS)


def export_products_to_csv(products: Iterable[Product], path: str) -> int:
    """Write products to a CSV file in feed layout.

    Args:
        products: Products to export
        path: Output CSV path (parent directories are created)

    Returns:
        Number of products written
    """
    df = products_to_dataframe(products)

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    df.to_csv(path, index=False, encoding="utf-8", lineterminator="\n")

    print(f"Exported {len(df)} products to {path}")
    return len(df)
