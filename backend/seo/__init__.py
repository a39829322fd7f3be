from .config import MetadataResolverConfig, SiteDefaults
from .head import render_head
from .lookup import (
    Found,
    LookupResult,
    MetadataStore,
    NotFound,
    ProductCatalog,
    ProductLookup,
    Unavailable,
    guarded_lookup,
)
from .resolver import MetadataResolver

__all__ = [
    "Found",
    "LookupResult",
    "MetadataResolver",
    "MetadataResolverConfig",
    "MetadataStore",
    "NotFound",
    "ProductCatalog",
    "ProductLookup",
    "SiteDefaults",
    "Unavailable",
    "guarded_lookup",
    "render_head",
]
