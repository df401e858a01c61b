"""Configuration and constants for the product feed catalog."""

import os
from pathlib import Path

from dotenv import load_dotenv

__all__ = [
    "FEED_URL",
    "HEADERS",
    "REQUEST_TIMEOUT",
    "ALLOWED_FEED_SCHEMES",
    "PLACEHOLDER_IMAGE_URL",
    "DEFAULT_NAME",
    "DEFAULT_DISCOUNT_LABEL",
    "DEFAULT_DESCRIPTION",
    "MAX_DISCOUNT",
    "CURRENCY",
    "PROMO_FALLBACK_TEXT",
    "EMPTY_RESULT_TEXT",
    "LOG_DIR",
    "PROJECT_ROOT",
]

# Determine project root (parent of the package directory)
_THIS_DIR = Path(__file__).parent
PROJECT_ROOT = _THIS_DIR.parent

# Load environment variables from .env file (explicitly specify path)
load_dotenv(dotenv_path=PROJECT_ROOT / ".env")

# Published spreadsheet (CSV output) that the catalog is read from
FEED_URL = os.getenv(
    "SHOPFEED_FEED_URL",
    "https://docs.google.com/spreadsheets/d/e/2PACX-1vRMjPUnZhjqGo_x1tElyuFPK225MhFBJjrqk01VoSEPqEU0zyxhI3488q7hv_nR2FxwunItQDcP_Y6a/pub?gid=0&single=true&output=csv",
)

HEADERS = {
    "User-Agent": "shopfeed catalog reader",
    "Accept": "text/csv, text/plain;q=0.9, */*;q=0.1",
}

# Seconds before a feed fetch is abandoned and the fallback set is used
REQUEST_TIMEOUT = float(os.getenv("SHOPFEED_REQUEST_TIMEOUT", "15"))

ALLOWED_FEED_SCHEMES = frozenset({"http", "https"})

# Field defaults used when a feed column is empty or unparsable
PLACEHOLDER_IMAGE_URL = (
    "https://images.unsplash.com/photo-1598033129183-c4f50c736f10"
    "?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&q=80"
)
DEFAULT_NAME = "Unnamed Product"
DEFAULT_DISCOUNT_LABEL = "0% off"
DEFAULT_DESCRIPTION = "No description available."
MAX_DISCOUNT = 100

# Presentation text
CURRENCY = os.getenv("SHOPFEED_CURRENCY", "BDT")
PROMO_FALLBACK_TEXT = "Special Offers Available - Shop Now!"
EMPTY_RESULT_TEXT = "No products found. Try adjusting your search filters."

LOG_DIR = Path(os.getenv("SHOPFEED_LOG_DIR", str(PROJECT_ROOT / "logs")))
