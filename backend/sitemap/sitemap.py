"""
Sitemap enumeration: fixed storefront routes, then one URL per product and one
per category filter. Listing failures drop that group and are logged; the
static routes are always present.
"""
from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from xml.sax.saxutils import escape

from backend.seo.lookup import ProductCatalog
from models import ChangeFrequency, SitemapEntry

logger = logging.getLogger(__name__)

DEFAULT_SITE_URL = "https://serendiagems.com"

# (path, change_frequency, priority)
_STATIC_ROUTES: list[tuple[str, ChangeFrequency, float]] = [
    ("", "weekly", 1.0),
    ("/collections", "weekly", 0.8),
    ("/about", "monthly", 0.5),
    ("/contact", "yearly", 0.5),
]
_PRODUCT_PRIORITY = 0.7
_CATEGORY_PRIORITY = 0.6


def site_url_from_env() -> str:
    return (os.getenv("SITE_URL") or DEFAULT_SITE_URL).rstrip("/")


async def build_sitemap(
    catalog: ProductCatalog,
    site_url: str | None = None,
    now: datetime | None = None,
) -> list[SitemapEntry]:
    base = (site_url or site_url_from_env()).rstrip("/")
    stamp = now or datetime.now(timezone.utc)

    entries = [
        SitemapEntry(
            url=f"{base}{path}",
            last_modified=stamp,
            change_frequency=freq,
            priority=priority,
        )
        for path, freq, priority in _STATIC_ROUTES
    ]

    try:
        product_ids = await catalog.list_product_ids()
    except Exception as exc:
        logger.warning("Sitemap: product listing failed, skipping products: %s", exc)
        product_ids = []
    for product_id in product_ids:
        entries.append(
            SitemapEntry(
                url=f"{base}/product/{product_id}",
                last_modified=stamp,
                change_frequency="weekly",
                priority=_PRODUCT_PRIORITY,
            )
        )

    try:
        categories = await catalog.list_categories()
    except Exception as exc:
        logger.warning("Sitemap: category listing failed, skipping categories: %s", exc)
        categories = []
    for category in categories:
        entries.append(
            SitemapEntry(
                url=f"{base}/collections?category={category.slug}",
                last_modified=stamp,
                change_frequency="weekly",
                priority=_CATEGORY_PRIORITY,
            )
        )

    return entries


def render_sitemap_xml(entries: list[SitemapEntry]) -> str:
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
    ]
    for entry in entries:
        lines.append("<url>")
        lines.append(f"<loc>{escape(entry.url)}</loc>")
        lines.append(f"<lastmod>{entry.last_modified.isoformat()}</lastmod>")
        lines.append(f"<changefreq>{entry.change_frequency}</changefreq>")
        lines.append(f"<priority>{entry.priority:.1f}</priority>")
        lines.append("</url>")
    lines.append("</urlset>")
    return "\n".join(lines)
