"""
Page metadata resolution.

Three tiers, first usable one wins:

  1. Admin override for the exact path.
  2. Product-derived title/description/image (product-detail pages only).
  3. Static brand defaults.

On product pages an override whose title is exactly the default title is
treated as "never configured" and skipped, so catalog fields take over. An
admin who deliberately sets a product page title to the brand tagline loses
that override; this matches the storefront's established behaviour.

resolve() never raises. Store errors, timeouts and missing rows all degrade to
the next tier.
"""
from __future__ import annotations

import functools
import logging

from models import MetadataOverride, ProductSummary, ResolvedMetadata

from .config import MetadataResolverConfig, SiteDefaults
from .lookup import (
    Found,
    MetadataStore,
    NotFound,
    ProductCatalog,
    ProductLookup,
    Unavailable,
    guarded_lookup,
)

logger = logging.getLogger(__name__)


class MetadataResolver:
    """Composes the override store and an optional product lookup into page metadata."""

    def __init__(
        self,
        store: MetadataStore,
        config: MetadataResolverConfig | None = None,
    ) -> None:
        self.store = store
        self.config = config or MetadataResolverConfig.from_env()

    @property
    def defaults(self) -> SiteDefaults:
        return self.config.defaults

    async def resolve(
        self,
        path: str,
        product_lookup: ProductLookup | None = None,
    ) -> ResolvedMetadata:
        override = await self._lookup_override(path)

        if override is not None:
            if product_lookup is None or override.title != self.defaults.title:
                return self._from_override(override)
            logger.debug("Override for %s carries the default title, trying catalog", path)

        if product_lookup is not None:
            product = await self._lookup_product(path, product_lookup)
            if product is not None:
                return self._from_product(product)

        return self._static_defaults()

    async def resolve_product_page(
        self,
        product_id: str,
        catalog: ProductCatalog,
    ) -> ResolvedMetadata:
        """Resolve /product/{id}, binding the catalog lookup to that id."""
        lookup = functools.partial(catalog.find_product_by_id, product_id)
        return await self.resolve(self.defaults.product_path(product_id), lookup)

    async def _lookup_override(self, path: str) -> MetadataOverride | None:
        result = await guarded_lookup(
            f"Override lookup for {path}",
            functools.partial(self.store.find_override_by_path, path),
            timeout=self.config.lookup_timeout_seconds,
        )
        if isinstance(result, Found):
            return result.value
        if isinstance(result, (NotFound, Unavailable)):
            return None
        raise TypeError(f"Unexpected lookup result: {result!r}")

    async def _lookup_product(
        self, path: str, product_lookup: ProductLookup
    ) -> ProductSummary | None:
        result = await guarded_lookup(
            f"Product lookup for {path}",
            product_lookup,
            timeout=self.config.lookup_timeout_seconds,
        )
        if isinstance(result, Found):
            return result.value
        if isinstance(result, (NotFound, Unavailable)):
            return None
        raise TypeError(f"Unexpected lookup result: {result!r}")

    def _from_override(self, override: MetadataOverride) -> ResolvedMetadata:
        return ResolvedMetadata(
            title=override.title,
            description=override.description or self.defaults.description,
            og_image=override.og_image or self.defaults.og_image,
        )

    def _from_product(self, product: ProductSummary) -> ResolvedMetadata:
        """Title "{name} | {brand}", description capped at the configured limit, first image."""
        description = (product.description or "")[: self.defaults.product_description_limit]
        return ResolvedMetadata(
            title=f"{product.name} | {self.defaults.brand_name}",
            description=description or self.defaults.product_description_fallback,
            og_image=(product.images[0] if product.images else None) or None,
        )

    def _static_defaults(self) -> ResolvedMetadata:
        return ResolvedMetadata(
            title=self.defaults.title,
            description=self.defaults.description,
            og_image=self.defaults.og_image,
        )
