"""Parsing of the CSV product feed into Product records.

The feed is published by hand from a spreadsheet, so rows are frequently
short, contain stray whitespace or carry free text in numeric columns. The
parser never rejects a row for that: each field falls back to its default
independently and only blank lines are dropped.

Column layout (header row discarded):

    0 id, 1 name, 2 price, 3 discount label, 4 image url,
    5 description, 6 sizes ("M:5;L:8;XL:3")
"""

import re
from typing import Dict, List, Optional

from shopfeed.config import (
    DEFAULT_DESCRIPTION,
    DEFAULT_DISCOUNT_LABEL,
    DEFAULT_NAME,
    MAX_DISCOUNT,
    PLACEHOLDER_IMAGE_URL,
)
from shopfeed.logging_config import get_logger
from shopfeed.models import Product

__all__ = [
    "parse_feed",
    "parse_row",
    "split_columns",
    "parse_sizes",
    "extract_discount_value",
    "parse_int",
]

logger = get_logger("feed_parser")

COL_ID = 0
COL_NAME = 1
COL_PRICE = 2
COL_DISCOUNT = 3
COL_IMAGE = 4
COL_DESCRIPTION = 5
COL_SIZES = 6

QUOTE = '"'
SEPARATOR = ","

# Optional sign + digits; anything after the digits is ignored ("599 BDT")
_LEADING_INT_RE = re.compile(r"([+-]?[0-9]+)")
_LEADING_DIGITS_RE = re.compile(r"\s*([0-9]+)")


def split_columns(line: str) -> List[str]:
    """Split one feed line into columns, honouring quoted spans.

    A comma separates columns only outside a quoted span. Quote characters
    delimit spans and are not part of the value, except that a doubled
    quote inside a span stands for one literal quote character.
    An unterminated quote swallows the rest of the line.

    Args:
        line: A single line of feed text (no newline)

    Returns:
        List of column values with delimiting quotes removed.
    """
    columns: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        ch = line[i]
        if ch == QUOTE:
            if in_quotes and i + 1 < length and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif ch == SEPARATOR and not in_quotes:
            columns.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1

    columns.append("".join(current))
    return columns


def parse_int(text: str) -> Optional[int]:
    """Parse the leading integer of a column value.

    Returns None if the trimmed text does not start with a (signed) number.
    """
    match = _LEADING_INT_RE.match(text.strip())
    if not match:
        return None
    return int(match.group(1))


def extract_discount_value(label: str) -> int:
    """Extract the percentage from a discount label ("15% off" -> 15).

    Labels without leading digits yield 0; values above 100 are clamped.
    """
    match = _LEADING_DIGITS_RE.match(label)
    if not match:
        return 0
    return min(int(match.group(1)), MAX_DISCOUNT)


def parse_sizes(spec: str) -> Dict[str, int]:
    """Parse a sizes column ("M:5;L:8") into a label -> quantity mapping.

    Quantities are read like ids and prices, so "5 pcs" counts as 5.
    Pieces without a label, or whose quantity has no leading number or is
    negative, are skipped; the remaining pairs are kept.
    """
    sizes: Dict[str, int] = {}
    for piece in spec.split(";"):
        label, sep, quantity = piece.partition(":")
        label = label.strip()
        if not sep or not label:
            continue
        qty = parse_int(quantity)
        if qty is None or qty < 0:
            continue
        sizes[label] = qty
    return sizes


def _column(columns: List[str], index: int) -> str:
    return columns[index] if index < len(columns) else ""


def parse_row(line: str, row_number: int) -> Product:
    """Build a Product from one data line.

    Args:
        line: Raw feed line
        row_number: 1-based line index in the feed, used as the id when the
            id column is missing or not a number

    Returns:
        Product with defaults substituted for every empty or bad field.
    """
    columns = split_columns(line)

    product_id = parse_int(_column(columns, COL_ID))
    if product_id is None:
        product_id = row_number

    price = parse_int(_column(columns, COL_PRICE))
    if price is None or price < 0:
        price = 0

    discount_label = _column(columns, COL_DISCOUNT) or DEFAULT_DISCOUNT_LABEL

    return Product(
        id=product_id,
        name=_column(columns, COL_NAME) or DEFAULT_NAME,
        price=price,
        discount_label=discount_label,
        discount_value=extract_discount_value(discount_label),
        image_url=_column(columns, COL_IMAGE) or PLACEHOLDER_IMAGE_URL,
        description=_column(columns, COL_DESCRIPTION) or DEFAULT_DESCRIPTION,
        sizes=parse_sizes(_column(columns, COL_SIZES)),
    )


def parse_feed(raw_text: str) -> List[Product]:
    """Parse the full feed text into products, in feed order.

    Args:
        raw_text: Feed contents including the header line

    Returns:
        List of products; empty if the feed has no data lines.

    Raises:
        TypeError: If raw_text is not a string
    """
    if not isinstance(raw_text, str):
        raise TypeError(f"Feed text must be str, got {type(raw_text).__name__}")

    products: List[Product] = []
    skipped = 0
    lines = raw_text.split("\n")

    for row_number in range(1, len(lines)):
        line = lines[row_number]
        if line.endswith("\r"):
            line = line[:-1]
        if not line.strip():
            skipped += 1
            continue
        products.append(parse_row(line, row_number))

    logger.debug(f"Parsed {len(products)} products from feed ({skipped} blank lines skipped)")
    return products
