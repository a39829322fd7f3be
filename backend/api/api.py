"""
Storefront SEO API: page metadata, sitemap and admin override CRUD.
"""

import logging

from fastapi import Depends, FastAPI, HTTPException, Query, Request, Response
from fastapi.responses import JSONResponse

from backend.corpus import CATEGORIES_FILE, PRODUCTS_DIR, SEO_FILE
from backend.seo import MetadataResolver, MetadataResolverConfig, render_head
from backend.sitemap import build_sitemap, render_sitemap_xml
from backend.store import JsonMetadataStore, JsonProductCatalog, StoreError
from models import HeadMetadata, MetadataOverride

logger = logging.getLogger(__name__)

app = FastAPI(title="Serendia Gems SEO API")


@app.exception_handler(StoreError)
async def _store_error(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "SEO data store unavailable"})


def get_store() -> JsonMetadataStore:
    return JsonMetadataStore(SEO_FILE)


def get_catalog() -> JsonProductCatalog:
    return JsonProductCatalog(PRODUCTS_DIR, CATEGORIES_FILE)


def get_resolver(store: JsonMetadataStore = Depends(get_store)) -> MetadataResolver:
    return MetadataResolver(store, MetadataResolverConfig.from_env())


@app.get("/metadata", response_model=HeadMetadata)
async def page_metadata(
    path: str = Query(min_length=1),
    resolver: MetadataResolver = Depends(get_resolver),
) -> HeadMetadata:
    return render_head(await resolver.resolve(path))


@app.get("/products/{product_id}/metadata", response_model=HeadMetadata)
async def product_metadata(
    product_id: str,
    resolver: MetadataResolver = Depends(get_resolver),
    catalog: JsonProductCatalog = Depends(get_catalog),
) -> HeadMetadata:
    return render_head(await resolver.resolve_product_page(product_id, catalog))


@app.get("/sitemap.xml")
async def sitemap(catalog: JsonProductCatalog = Depends(get_catalog)) -> Response:
    entries = await build_sitemap(catalog)
    return Response(content=render_sitemap_xml(entries), media_type="application/xml")


@app.get("/admin/seo", response_model=list[MetadataOverride])
async def list_overrides(
    store: JsonMetadataStore = Depends(get_store),
) -> list[MetadataOverride]:
    return await store.list_overrides()


@app.put("/admin/seo", response_model=MetadataOverride)
async def upsert_override(
    override: MetadataOverride,
    store: JsonMetadataStore = Depends(get_store),
) -> MetadataOverride:
    return await store.upsert_override(override)


@app.delete("/admin/seo", status_code=204)
async def delete_override(
    path: str = Query(min_length=1),
    store: JsonMetadataStore = Depends(get_store),
) -> Response:
    if not await store.delete_override(path):
        raise HTTPException(status_code=404, detail=f"No SEO override for '{path}'")
    return Response(status_code=204)
