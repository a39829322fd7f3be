"""
Seed script: writes a small sample catalog, category list and SEO overrides
to the JSON data directory so the API has something to serve.

Usage:
    uv run python seed.py
"""

import asyncio
import logging
from pathlib import Path

from pydantic import TypeAdapter

from backend.corpus import CATEGORIES_FILE, PRODUCTS_DIR, SEO_FILE
from backend.store import JsonMetadataStore
from models import Category, MetadataOverride, ProductSummary

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS: list[ProductSummary] = [
    ProductSummary(
        id="blue-sapphire-3ct",
        name="Blue Sapphire 3ct",
        description="A rare cornflower-blue sapphire from Ratnapura, oval cut and unheated.",
        images=["https://cdn.serendiagems.com/products/blue-sapphire-3ct.jpg"],
    ),
    ProductSummary(
        id="padparadscha-1ct",
        name="Padparadscha Sapphire 1ct",
        description="Sunset pink-orange padparadscha, cushion cut.",
        images=[],
    ),
    ProductSummary(
        id="star-ruby-2ct",
        name="Star Ruby 2ct",
        description=None,
        images=["https://cdn.serendiagems.com/products/star-ruby-2ct.jpg"],
    ),
]

SAMPLE_CATEGORIES: list[Category] = [
    Category(slug="sapphire", name="Sapphire"),
    Category(slug="ruby", name="Ruby"),
    Category(slug="spinel", name="Spinel"),
]

SAMPLE_OVERRIDES: list[MetadataOverride] = [
    MetadataOverride(
        path="/collections",
        title="Collections | Serendia Gems",
        description="Browse sapphires, rubies and spinels sourced directly from Sri Lanka.",
    ),
    MetadataOverride(path="/about", title="Our Story | Serendia Gems"),
]


def _write_product(products_dir: Path, product: ProductSummary) -> None:
    out_path = products_dir / f"{product.id}.json"
    out_path.write_text(product.model_dump_json(indent=2, exclude={"id"}))
    logger.info("Wrote %s", out_path.name)


async def seed_all(
    products_dir: Path = PRODUCTS_DIR,
    categories_file: Path = CATEGORIES_FILE,
    seo_file: Path = SEO_FILE,
) -> dict[str, ProductSummary]:
    products_dir.mkdir(parents=True, exist_ok=True)

    logger.info("Seeding %d products...", len(SAMPLE_PRODUCTS))
    seeded: dict[str, ProductSummary] = {}
    for product in SAMPLE_PRODUCTS:
        _write_product(products_dir, product)
        seeded[product.id] = product

    categories_file.parent.mkdir(parents=True, exist_ok=True)
    categories_file.write_bytes(
        TypeAdapter(list[Category]).dump_json(SAMPLE_CATEGORIES, indent=2)
    )
    logger.info("Wrote %d categories to %s", len(SAMPLE_CATEGORIES), categories_file.name)

    store = JsonMetadataStore(seo_file)
    for override in SAMPLE_OVERRIDES:
        await store.upsert_override(override)

    logger.info("Seeded %d products, %d overrides.", len(seeded), len(SAMPLE_OVERRIDES))
    return seeded


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    asyncio.run(seed_all())
