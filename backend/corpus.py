"""
Paths for the JSON-backed storefront data.

Single source of truth for:
- DATA_DIR        — root data directory (DATA_DIR env var overrides)
- PRODUCTS_DIR    — one {id}.json file per catalog product
- CATEGORIES_FILE — JSON list of {slug, name}
- SEO_FILE        — JSON list of metadata override rows
"""

import os
from pathlib import Path

DATA_DIR: Path = Path(
    os.getenv("DATA_DIR") or Path(__file__).resolve().parent.parent / "data"
)
PRODUCTS_DIR: Path = DATA_DIR / "products"
CATEGORIES_FILE: Path = DATA_DIR / "categories.json"
SEO_FILE: Path = DATA_DIR / "seo_metadata.json"
